"""Reader for the node artifact written by the EC2 provisioning tool."""

from pathlib import Path
from typing import Dict, List, Optional

from xdenv.constants import (
    ADMIN_TOKEN,
    CONTAINER_TOKEN,
    HOST_OFFSET,
    HTTP_PORT_OFFSET,
    HTTP_PREFIX,
    JMX_PORT_OFFSET,
    MIN_ARTIFACT_TOKENS,
    SERVER_TYPE_OFFSET,
    SINGLENODE_TOKEN,
    XD_ADMIN_HOST,
    XD_CONTAINERS,
    XD_HTTP_PORT,
    XD_JMX_PORT,
    XD_PORT_OFFSET,
)


class ArtifactService:
    """Turns `role,host,xdPort,httpPort,jmxPort` lines into deployment properties.

    A missing or unreadable artifact is not an error: the caller falls back to
    the next property source.
    """

    def __init__(self, logger):
        self.logger = logger

    def parse(self, path: str) -> Dict[str, str]:
        artifact = Path(path)
        if not artifact.is_file():
            self.logger.debug("No artifact found at %s", path)
            return {}

        try:
            with open(artifact, "r", encoding="utf-8") as file_obj:
                lines = file_obj.read().splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            self.logger.debug("Ignoring unreadable artifact %s: %s", path, exc)
            return {}

        props: Dict[str, str] = {}
        container_hosts: Optional[str] = None
        for line in lines:
            tokens = [token.strip() for token in line.split(",")]
            if len(tokens) < MIN_ARTIFACT_TOKENS:
                continue

            role = tokens[SERVER_TYPE_OFFSET]
            node_url = self._node_url(tokens)

            if role in (ADMIN_TOKEN, SINGLENODE_TOKEN):
                props[XD_ADMIN_HOST] = node_url
                props[XD_HTTP_PORT] = tokens[HTTP_PORT_OFFSET]
                if len(tokens) > JMX_PORT_OFFSET:
                    props[XD_JMX_PORT] = tokens[JMX_PORT_OFFSET]

            if role == CONTAINER_TOKEN:
                if container_hosts is None:
                    container_hosts = node_url
                else:
                    container_hosts = f"{container_hosts},{node_url}"
            elif role == SINGLENODE_TOKEN:
                container_hosts = node_url
            elif role != ADMIN_TOKEN:
                self.logger.debug("Skipping artifact line with unknown role '%s'", role)

        if container_hosts is not None:
            props[XD_CONTAINERS] = container_hosts

        self.logger.debug("Artifact %s supplied keys: %s", path, ", ".join(sorted(props)) or "<none>")
        return props

    @staticmethod
    def _node_url(tokens: List[str]) -> str:
        return f"{HTTP_PREFIX}{tokens[HOST_OFFSET]}:{tokens[XD_PORT_OFFSET]}"
