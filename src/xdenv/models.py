"""Shared domain models for xdenv."""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class JdbcSettings:
    """Database coordinates used by the JDBC sink/source tests."""

    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    database: Optional[str] = None
    driver: Optional[str] = None


@dataclass(frozen=True)
class DeploymentConfig:
    """Resolved snapshot of the cluster under test."""

    admin_server: str
    containers: Tuple[str, ...]
    jmx_port: Optional[int]
    http_port: Optional[int]
    container_log_location: str
    base_dir: str
    is_on_ec2: bool
    pause_time: int
    private_key: Optional[str] = None
    jdbc: JdbcSettings = field(default_factory=JdbcSettings)
