"""core.config
Configuration core: typed settings loaded from config.ini.

The file is parsed with configparser and walked section by section. Every
field has a default and so does every section, so loading a syntactically
valid file always yields fully populated settings:

    [Logging]
    LOG_OUTPUT = wiki_tui.log
    LOG_LEVEL = OFF

    [Api]
    BASE_URL = https://en.wikipedia.org/w/api.php

Loading happens in two phases. UnloadedConfiguration only knows the file path
and exposes ensure_exists() and load(); the Configuration returned by load()
is the only object with settings accessors.
"""
from __future__ import annotations

import configparser
import logging
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Optional, Tuple

from .errors import ConfigLoadError, InvariantViolation
from .provision import ConfigProvisioner, Fetch

DEFAULT_LOG_OUTPUT = "wiki_tui.log"
DEFAULT_BASE_URL = "https://en.wikipedia.org/w/api.php"

LOGGING_SECTION = "Logging"
API_SECTION = "Api"

logger = logging.getLogger(__name__)


class LogLevel(IntEnum):
    """Log level filter, ordered from least to most verbose."""

    OFF = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @classmethod
    def from_config(cls, value: Optional[str]) -> "LogLevel":
        """Map an exact-case LOG_LEVEL string; anything else is OFF."""
        if value is None:
            return cls.OFF
        return cls.__members__.get(value, cls.OFF)


@dataclass(frozen=True, slots=True)
class ApiSettings:
    base_url: str = DEFAULT_BASE_URL


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    log_output: str = DEFAULT_LOG_OUTPUT
    log_level: LogLevel = LogLevel.OFF


# Never valid in a [header] line, so neither name can clash with a real section.
_NO_DEFAULTS_SECTION = "\x00defaults"
GENERAL_SECTION = "\x00general"


def _parser() -> configparser.ConfigParser:
    # No interpolation: values are opaque strings ("%" in URLs must survive).
    # [DEFAULT] is an ordinary section, not a fallback for the others.
    cp = configparser.ConfigParser(
        interpolation=None,
        strict=False,
        default_section=_NO_DEFAULTS_SECTION,
    )
    cp.optionxform = str  # keys are case-sensitive
    return cp


def read_ini(path: str | Path) -> configparser.ConfigParser:
    """Read and parse path; unreadable or malformed files raise ConfigLoadError.

    Keys above the first section header land in GENERAL_SECTION.
    """
    cp = _parser()
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(f"Failed to read the config file {path}: {e}") from e
    try:
        cp.read_string(f"[{GENERAL_SECTION}]\n{text}", source=str(path))
    except configparser.Error as e:
        raise ConfigLoadError(f"Malformed config file {path}: {e}") from e
    return cp


def load_logging(cp: configparser.ConfigParser) -> LoggingSettings:
    if not cp.has_section(LOGGING_SECTION):
        return LoggingSettings()
    section = cp[LOGGING_SECTION]
    return LoggingSettings(
        log_output=section.get("LOG_OUTPUT", DEFAULT_LOG_OUTPUT),
        log_level=LogLevel.from_config(section.get("LOG_LEVEL")),
    )


def load_api(cp: configparser.ConfigParser) -> ApiSettings:
    if not cp.has_section(API_SECTION):
        return ApiSettings()
    return ApiSettings(base_url=cp[API_SECTION].get("BASE_URL", DEFAULT_BASE_URL))


class Configuration:
    """Loaded configuration: both settings groups are always present.

    logging_settings may be read any number of times. The API settings are
    handed off once with take_api_settings().
    """

    def __init__(self, config_path: Path, logging_settings: LoggingSettings, api_settings: ApiSettings) -> None:
        self.config_path = Path(config_path)
        self._logging = logging_settings
        self._api: Optional[ApiSettings] = api_settings

    @property
    def logging_settings(self) -> LoggingSettings:
        return self._logging

    def take_api_settings(self) -> Tuple[ApiSettings, "ResidualConfiguration"]:
        """Move the API settings out.

        Returns the settings plus a ResidualConfiguration that still exposes
        the path and logging settings. Taking them twice from the same
        object is a programmer error.
        """
        api = self._api
        if api is None:
            raise InvariantViolation("API settings were already taken from this configuration")
        self._api = None
        return api, ResidualConfiguration(self.config_path, self._logging)

    def __repr__(self) -> str:
        return (
            f"Configuration(config_path={str(self.config_path)!r}, "
            f"logging_settings={self._logging!r}, api_settings={self._api!r})"
        )


@dataclass(frozen=True, slots=True)
class ResidualConfiguration:
    """What is left of a Configuration once its API settings were taken."""

    config_path: Path
    logging_settings: LoggingSettings


def load_configuration(path: str | Path) -> Configuration:
    """Parse path and build a fully populated Configuration."""
    cp = read_ini(path)
    logging_settings = load_logging(cp)
    api_settings = load_api(cp)
    logger.debug(
        "Loaded %s: log_output=%s log_level=%s base_url=%s",
        path,
        logging_settings.log_output,
        logging_settings.log_level.name,
        api_settings.base_url,
    )
    return Configuration(Path(path), logging_settings, api_settings)


class UnloadedConfiguration:
    """First loading phase: knows where the file lives, holds no settings."""

    def __init__(self, provisioner: ConfigProvisioner) -> None:
        self.provisioner = provisioner
        self.config_path: Optional[Path] = None

    @classmethod
    def resolve(
        cls,
        config_dir: Optional[str | Path] = None,
        fetch: Optional[Fetch] = None,
    ) -> "UnloadedConfiguration":
        return cls(ConfigProvisioner(config_dir=config_dir, fetch=fetch))

    def ensure_exists(self) -> "UnloadedConfiguration":
        self.config_path = self.provisioner.ensure_exists()
        return self

    def load(self) -> Configuration:
        if self.config_path is None:
            self.ensure_exists()
        return load_configuration(self.config_path)


def bootstrap(config_dir: Optional[str | Path] = None, fetch: Optional[Fetch] = None) -> Configuration:
    """Resolve, provision and load the configuration in one call.

    Raises a ConfigError subclass on any startup-fatal condition.
    """
    return UnloadedConfiguration.resolve(config_dir=config_dir, fetch=fetch).ensure_exists().load()
