"""wiki-tui configuration bootstrapper."""
from .core.config import (
    ApiSettings,
    Configuration,
    LoggingSettings,
    LogLevel,
    ResidualConfiguration,
    UnloadedConfiguration,
    bootstrap,
    load_configuration,
)
from .core.errors import (
    ConfigError,
    ConfigLoadError,
    InvariantViolation,
    PathResolutionError,
    ProvisioningError,
)
from .core.provision import TEMPLATE_URL, ConfigProvisioner

__version__ = "0.3.0"

__all__ = [
    "ApiSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigProvisioner",
    "Configuration",
    "InvariantViolation",
    "LogLevel",
    "LoggingSettings",
    "PathResolutionError",
    "ProvisioningError",
    "ResidualConfiguration",
    "TEMPLATE_URL",
    "UnloadedConfiguration",
    "bootstrap",
    "load_configuration",
]
