"""URL parsing helpers for admin and container endpoints."""

from typing import Mapping, Optional, Tuple
from urllib.parse import urlparse

from xdenv.constants import HTTP_PREFIX, URL_SCHEMES, XD_ADMIN_HOST, XD_CONTAINERS
from xdenv.errors import ConfigurationError
from xdenv.errors_catalog import actionable_error


class UrlService:
    """Validates cluster endpoint URLs.

    Entries without a scheme (`host:port`) are read as plain HTTP, the same
    form the artifact produces.
    """

    def __init__(self, logger):
        self.logger = logger

    def normalize(self, location: str) -> str:
        location = location.strip()
        if location and "://" not in location:
            return f"{HTTP_PREFIX}{location}"
        return location

    def is_url(self, location: str) -> bool:
        if any(char.isspace() for char in location):
            return False
        try:
            parsed = urlparse(location)
            # Accessing .port validates the port component.
            parsed.port
        except ValueError:
            return False
        return parsed.scheme.lower() in URL_SCHEMES and bool(parsed.hostname)

    def parse_admin_server(self, properties: Mapping[str, str]) -> str:
        host = self.normalize(properties.get(XD_ADMIN_HOST) or "")
        if not self.is_url(host):
            raise ConfigurationError(actionable_error("invalid_admin_host", value=host or "<empty>"))
        return host

    def build_container_list(self, properties: Mapping[str, str]) -> Tuple[str, ...]:
        raw_value = properties.get(XD_CONTAINERS) or ""
        entries = dict.fromkeys(entry.strip() for entry in raw_value.split(",") if entry.strip())

        containers = []
        for entry in entries:
            container_host = self.normalize(entry)
            if not self.is_url(container_host):
                self.logger.error("Container host is invalid ==> %s", entry)
                continue
            if container_host not in containers:
                containers.append(container_host)

        if not containers:
            raise ConfigurationError(
                actionable_error("no_valid_containers", value=raw_value or "<empty>")
            )
        return tuple(containers)

    @staticmethod
    def hostname(url: str) -> Optional[str]:
        return urlparse(url).hostname
