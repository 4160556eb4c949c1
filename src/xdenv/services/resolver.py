"""Resolves the deployment snapshot from an ordered chain of property sources."""

from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from xdenv.constants import (
    DEFAULT_BASE_DIR,
    DEFAULT_CONTAINER_LOG_LOCATION,
    DEFAULT_PAUSE_TIME,
    DEFAULT_RUN_ON_EC2,
    DEPLOYMENT_KEYS,
    JDBC_DATABASE,
    JDBC_DRIVER,
    JDBC_PASSWORD,
    JDBC_URL,
    JDBC_USERNAME,
    XD_ADMIN_HOST,
    XD_BASE_DIR,
    XD_CONTAINER_LOG_DIR,
    XD_CONTAINERS,
    XD_HTTP_PORT,
    XD_JMX_PORT,
    XD_PAUSE_TIME,
    XD_PRIVATE_KEY_FILE,
    XD_RUN_ON_EC2,
)
from xdenv.errors import ConfigurationError
from xdenv.errors_catalog import actionable_error
from xdenv.models import DeploymentConfig, JdbcSettings
from xdenv.services.private_key import PrivateKeyService
from xdenv.services.urls import UrlService

PropertySource = Tuple[str, Callable[[], Dict[str, str]]]

REQUIRED_KEYS = (XD_ADMIN_HOST, XD_CONTAINERS)


class EnvironmentResolver:
    """Builds a DeploymentConfig from property sources in precedence order.

    The first source that names both the admin host and the container list
    wins outright for those keys and the ports that travel with them. Keys it
    does not carry are taken from the remaining sources, first present wins.
    """

    def __init__(
        self,
        sources: Sequence[PropertySource],
        url_service: UrlService,
        private_key_service: PrivateKeyService,
        logger,
    ):
        self.sources = list(sources)
        self.url_service = url_service
        self.private_key_service = private_key_service
        self.logger = logger

    def resolve(self) -> DeploymentConfig:
        properties = self.resolve_deployment_properties()

        containers = self.url_service.build_container_list(properties)
        admin_server = self.url_service.parse_admin_server(properties)
        container_log_location, base_dir = self.derive_defaults(properties)
        is_on_ec2 = self._on_ec2_flag(properties)

        private_key = None
        if is_on_ec2:
            private_key = self.private_key_service.load(self._private_key_file(properties))

        config = DeploymentConfig(
            admin_server=admin_server,
            containers=containers,
            jmx_port=self._optional_int(properties, XD_JMX_PORT),
            http_port=self._optional_int(properties, XD_HTTP_PORT),
            container_log_location=container_log_location,
            base_dir=base_dir,
            is_on_ec2=is_on_ec2,
            pause_time=self._pause_time(properties),
            private_key=private_key,
            jdbc=JdbcSettings(
                url=properties.get(JDBC_URL),
                username=properties.get(JDBC_USERNAME),
                password=properties.get(JDBC_PASSWORD),
                database=properties.get(JDBC_DATABASE),
                driver=properties.get(JDBC_DRIVER),
            ),
        )
        self.logger.debug(
            "Resolved XD admin %s with %d container(s)",
            config.admin_server,
            len(config.containers),
        )
        return config

    def resolve_deployment_properties(self) -> Dict[str, str]:
        mappings: List[Tuple[str, Dict[str, str]]] = []
        for name, provider in self.sources:
            mapping = provider()
            self.logger.debug("Property source '%s' supplied %d key(s)", name, len(mapping))
            mappings.append((name, mapping))

        primary_index = self._primary_source_index(mappings)
        if primary_index is None:
            raise ConfigurationError(actionable_error("missing_cluster_hosts"))

        primary_name, primary = mappings[primary_index]
        self.logger.debug("Using cluster hosts from property source '%s'", primary_name)

        result = dict(primary)
        for index, (_name, mapping) in enumerate(mappings):
            if index == primary_index:
                continue
            for key, value in mapping.items():
                # Hosts and ports are only taken together, from the primary source.
                if key in DEPLOYMENT_KEYS:
                    continue
                result.setdefault(key, value)
        return result

    def derive_defaults(self, properties: Mapping[str, str]) -> Tuple[str, str]:
        container_log_location = properties.get(XD_CONTAINER_LOG_DIR, DEFAULT_CONTAINER_LOG_LOCATION)
        base_dir = properties.get(XD_BASE_DIR, DEFAULT_BASE_DIR)
        return container_log_location, base_dir

    def _primary_source_index(self, mappings: List[Tuple[str, Dict[str, str]]]) -> Optional[int]:
        for index, (_name, mapping) in enumerate(mappings):
            if all(key in mapping for key in REQUIRED_KEYS):
                return index
        return None

    def _on_ec2_flag(self, properties: Mapping[str, str]) -> bool:
        if XD_RUN_ON_EC2 not in properties:
            return DEFAULT_RUN_ON_EC2
        return properties[XD_RUN_ON_EC2].strip().lower() == "true"

    def _pause_time(self, properties: Mapping[str, str]) -> int:
        pause_time = self._optional_int(properties, XD_PAUSE_TIME)
        if pause_time is None:
            return DEFAULT_PAUSE_TIME
        if pause_time < 0:
            raise ConfigurationError(
                actionable_error("negative_pause_time", value=str(pause_time))
            )
        return pause_time

    def _private_key_file(self, properties: Mapping[str, str]) -> str:
        key_file = (properties.get(XD_PRIVATE_KEY_FILE) or "").strip()
        if not key_file:
            raise ConfigurationError(actionable_error("private_key_file_unset"))
        return key_file

    @staticmethod
    def _optional_int(properties: Mapping[str, str], key: str) -> Optional[int]:
        value = properties.get(key)
        if value is None or not value.strip():
            return None
        try:
            return int(value.strip())
        except ValueError as exc:
            raise ConfigurationError(actionable_error("invalid_integer", key=key, value=value)) from exc
