"""YAML property file source for xdenv."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from xdenv.constants import PROPERTY_KEYS, XD_CONTAINERS
from xdenv.errors import ConfigurationError
from xdenv.errors_catalog import actionable_error


class ConfigLoader:
    """Reads property keys from a flat YAML mapping, the lowest-precedence source.

    Values are handed back as strings, the same shape the artifact and the
    environment produce, so the resolver treats every source alike.
    """

    SUPPORTED_KEYS = frozenset(PROPERTY_KEYS)

    def load(self, config_path: Optional[str]) -> Dict[str, str]:
        if not config_path:
            return {}

        document = self._read(Path(config_path))
        if not document:
            return {}

        unknown = sorted(str(key) for key in document if key not in self.SUPPORTED_KEYS)
        if unknown:
            raise ConfigurationError(
                actionable_error("unknown_property_keys", path=config_path, keys=", ".join(unknown))
            )

        properties = {}
        for key, value in document.items():
            if value is not None:
                properties[key] = self._to_property(config_path, key, value)
        return properties

    def _read(self, path: Path) -> Dict[str, Any]:
        if not path.is_file():
            raise ConfigurationError(actionable_error("property_file_not_found", path=str(path)))

        try:
            with open(path, "r", encoding="utf-8") as file_obj:
                document = yaml.safe_load(file_obj)
        except (yaml.YAMLError, OSError, UnicodeDecodeError) as exc:
            raise ConfigurationError(
                actionable_error("invalid_property_file", path=str(path), reason=str(exc))
            ) from exc

        if document is not None and not isinstance(document, dict):
            raise ConfigurationError(
                actionable_error(
                    "invalid_property_file",
                    path=str(path),
                    reason="the root is not a YAML mapping",
                )
            )
        return document or {}

    def _to_property(self, config_path: str, key: str, value: Any) -> str:
        if key == XD_CONTAINERS and isinstance(value, (list, tuple)):
            return ",".join(str(item) for item in value)
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (dict, list, tuple)):
            raise ConfigurationError(
                actionable_error(
                    "invalid_property_file",
                    path=config_path,
                    reason=f"property '{key}' must be a scalar value",
                )
            )
        return str(value)
