"""Error types raised while bootstrapping the configuration.

Startup-fatal conditions derive from ConfigError so the entry point can catch
a single type, report it and exit. InvariantViolation marks programmer errors
and is never raised for bad user input.
"""


class ConfigError(RuntimeError):
    """Base class for every startup-fatal configuration failure."""


class PathResolutionError(ConfigError):
    """The platform provides no per-user config directory."""


class ProvisioningError(ConfigError):
    """The config directory or file could not be created, or the template fetch failed."""


class ConfigLoadError(ConfigError):
    """The config file is unreadable or not valid INI."""


class InvariantViolation(AssertionError):
    """A loading-phase contract was broken by the calling code."""
