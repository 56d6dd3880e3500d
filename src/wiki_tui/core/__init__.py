"""Core subpackage.

- paths: per-user config directory resolution
- provision: create config.ini from the upstream template when missing
- config: typed settings loaded from config.ini
- logging_setup: route logging per the [Logging] section
"""
from .errors import (
    ConfigError,
    ConfigLoadError,
    InvariantViolation,
    PathResolutionError,
    ProvisioningError,
)

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "InvariantViolation",
    "PathResolutionError",
    "ProvisioningError",
]
