"""Loads the SSH private key used to run commands on EC2 containers."""

from pathlib import Path

from xdenv.errors import ConfigurationError
from xdenv.errors_catalog import actionable_error


class PrivateKeyService:
    def __init__(self, logger):
        self.logger = logger

    def load(self, key_file: str) -> str:
        path = Path(key_file)
        if not path.exists():
            raise ConfigurationError(actionable_error("private_key_not_found", path=key_file))
        if not path.is_file():
            raise ConfigurationError(f"Private key path must be a file: {key_file}")

        lines = []
        try:
            with open(path, "r", encoding="utf-8") as file_obj:
                for line in file_obj:
                    lines.append(line if line.endswith("\n") else f"{line}\n")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigurationError(f"Could not read private key file '{key_file}': {exc}") from exc

        self.logger.debug("Loaded private key from %s", key_file)
        return "".join(lines)
