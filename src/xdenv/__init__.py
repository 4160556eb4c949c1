"""
xdenv - Deployment environment resolver for Spring XD integration tests
"""

__version__ = "0.1.0"

from .core import XdEnvironment
from .errors import ConfigurationError
from .models import DeploymentConfig, JdbcSettings

__all__ = ["XdEnvironment", "ConfigurationError", "DeploymentConfig", "JdbcSettings"]
