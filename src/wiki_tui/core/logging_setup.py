"""Logging setup utilities for wiki-tui.

Provides a single setup function that routes application-wide logging
according to the [Logging] section of config.ini:
- File handler on LOG_OUTPUT (relative paths resolve against the working dir)
- Level from LOG_LEVEL, with TRACE registered as a custom level below DEBUG
- OFF disables output entirely
- Falls back to stderr when LOG_OUTPUT cannot be opened
- Optional console handler; off by default so it does not draw over the TUI

Usage:
    from wiki_tui.core.logging_setup import setup_logging
    setup_logging(config.logging_settings)
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .config import LoggingSettings, LogLevel

TRACE = 5

_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.TRACE: TRACE,
}

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def to_logging_level(level: LogLevel) -> int:
    """Return the stdlib level for level; OFF maps above CRITICAL."""
    return _LEVELS.get(level, logging.CRITICAL + 10)


def _clear_handlers(logger: logging.Logger) -> None:
    for h in logger.handlers[:]:
        logger.removeHandler(h)
        h.close()


def setup_logging(settings: LoggingSettings, console: bool = False) -> Optional[Path]:
    """Configure the root logger from settings.

    Returns the log file path, or None when logging is OFF or LOG_OUTPUT
    cannot be opened. In the latter case output goes to stderr instead.
    """
    logging.addLevelName(TRACE, "TRACE")

    logger = logging.getLogger()
    # Clear existing handlers to avoid duplicates on re-run
    _clear_handlers(logger)

    if settings.log_level == LogLevel.OFF:
        logger.setLevel(to_logging_level(LogLevel.OFF))
        logger.addHandler(logging.NullHandler())
        return None

    lvl = to_logging_level(settings.log_level)
    logger.setLevel(lvl)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    file_path: Optional[Path] = Path(settings.log_output)
    file_error: Optional[OSError] = None
    try:
        if file_path.parent != Path("."):
            file_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(file_path, encoding="utf-8")
    except OSError as e:
        file_error = e
        file_path = None
        console = True
    else:
        fh.setLevel(lvl)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    if console:
        ch = logging.StreamHandler()
        ch.setLevel(lvl)
        ch.setFormatter(fmt)
        logger.addHandler(ch)

    # Quiet down noisy libraries unless in DEBUG
    if lvl > logging.DEBUG:
        logging.getLogger("urllib3").setLevel(logging.WARNING)
        logging.getLogger("requests").setLevel(logging.WARNING)

    if file_error is not None:
        logger.warning("Cannot open log output %s (%s); logging to stderr", settings.log_output, file_error)
        return None

    logger.info("Logging initialized: level=%s, file=%s", settings.log_level.name, str(file_path))
    return file_path
