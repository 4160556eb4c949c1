import logging
import os
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .constants import ARTIFACT_NAME
from .errors import ConfigurationError
from .models import DeploymentConfig
from .services.artifact import ArtifactService
from .services.config_loader import ConfigLoader
from .services.private_key import PrivateKeyService
from .services.resolver import EnvironmentResolver, PropertySource
from .services.system_properties import SystemPropertiesService
from .services.urls import UrlService

logger = logging.getLogger("xdenv")

MASK = "********"


class XdEnvironment:
    """Host, port and credential information for the XD instances under test.

    Properties are taken from the artifact produced by the EC2 provisioning
    tool when it names both an admin node and containers, otherwise from the
    environment mapping, and finally from an optional YAML file.
    """

    def __init__(
        self,
        artifact_path: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
        config_path: Optional[str] = None,
    ):
        self.artifact_path = artifact_path or os.path.join(os.getcwd(), ARTIFACT_NAME)
        self.config_path = config_path

        self.artifact_service = ArtifactService(logger=logger)
        self.system_properties_service = SystemPropertiesService(environ=environ)
        self.config_loader = ConfigLoader()
        self.url_service = UrlService(logger=logger)
        self.private_key_service = PrivateKeyService(logger=logger)

        self.resolver = EnvironmentResolver(
            sources=self._build_sources(),
            url_service=self.url_service,
            private_key_service=self.private_key_service,
            logger=logger,
        )
        self.config: DeploymentConfig = self.resolver.resolve()
        self._pause_time = self.config.pause_time

    def _build_sources(self) -> List[PropertySource]:
        sources: List[PropertySource] = [
            ("artifact", lambda: self.artifact_service.parse(self.artifact_path)),
            ("environment", self.system_properties_service.parse),
        ]
        if self.config_path:
            sources.append(("config", lambda: self.config_loader.load(self.config_path)))
        return sources

    @property
    def admin_server(self) -> str:
        return self.config.admin_server

    @property
    def containers(self) -> Tuple[str, ...]:
        return self.config.containers

    @property
    def container_hosts(self) -> List[Optional[str]]:
        """Host names of the containers, for SSH and JMX clients."""
        return [self.url_service.hostname(url) for url in self.config.containers]

    @property
    def jmx_port(self) -> Optional[int]:
        return self.config.jmx_port

    @property
    def http_port(self) -> Optional[int]:
        return self.config.http_port

    @property
    def container_log_location(self) -> str:
        return self.config.container_log_location

    @property
    def base_dir(self) -> str:
        return self.config.base_dir

    @property
    def is_on_ec2(self) -> bool:
        return self.config.is_on_ec2

    @property
    def private_key(self) -> Optional[str]:
        return self.config.private_key

    @property
    def pause_time(self) -> int:
        return self._pause_time

    @pause_time.setter
    def pause_time(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigurationError(f"Pause time must be a non-negative integer, got {value!r}.")
        self._pause_time = value

    @property
    def jdbc_url(self) -> Optional[str]:
        return self.config.jdbc.url

    @property
    def jdbc_username(self) -> Optional[str]:
        return self.config.jdbc.username

    @property
    def jdbc_password(self) -> Optional[str]:
        return self.config.jdbc.password

    @property
    def jdbc_database(self) -> Optional[str]:
        return self.config.jdbc.database

    @property
    def jdbc_driver(self) -> Optional[str]:
        return self.config.jdbc.driver

    def as_dict(self, mask_secrets: bool = True) -> Dict[str, Any]:
        private_key = self.private_key
        jdbc_password = self.jdbc_password
        if mask_secrets:
            if private_key is not None:
                private_key = f"<{len(private_key)} characters>"
            if jdbc_password is not None:
                jdbc_password = MASK

        return {
            "admin_server": self.admin_server,
            "containers": list(self.containers),
            "jmx_port": self.jmx_port,
            "http_port": self.http_port,
            "container_log_location": self.container_log_location,
            "base_dir": self.base_dir,
            "is_on_ec2": self.is_on_ec2,
            "pause_time": self.pause_time,
            "private_key": private_key,
            "jdbc_url": self.jdbc_url,
            "jdbc_username": self.jdbc_username,
            "jdbc_password": jdbc_password,
            "jdbc_database": self.jdbc_database,
            "jdbc_driver": self.jdbc_driver,
        }
