"""Domain errors for xdenv."""


class ConfigurationError(RuntimeError):
    """Raised when the deployment environment cannot be resolved."""
