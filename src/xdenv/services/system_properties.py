"""Property source backed by an injected environment mapping."""

import os
from typing import Dict, Iterable, Mapping, Optional

from xdenv.constants import PROPERTY_KEYS


class SystemPropertiesService:
    """Reads known property keys from an environment mapping."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None, keys: Iterable[str] = PROPERTY_KEYS):
        self.environ = os.environ if environ is None else environ
        self.keys = tuple(keys)

    def parse(self) -> Dict[str, str]:
        return {key: self.environ[key] for key in self.keys if key in self.environ}
