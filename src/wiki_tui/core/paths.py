"""core.paths
Per-user config directory resolution.

Windows uses %APPDATA%, macOS ~/Library/Application Support and every other
system XDG_CONFIG_HOME (absolute paths only) or ~/.config.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path

from .errors import PathResolutionError

APP_CONFIG_DIR = "wiki-tui"
CONFIG_FILE_NAME = "config.ini"


def _home() -> Path:
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise PathResolutionError("Couldn't find your config directory") from e
    if not str(home) or str(home) == ".":
        raise PathResolutionError("Couldn't find your config directory")
    return home


def user_config_dir() -> Path:
    """Return the platform user config directory.

    Raises PathResolutionError when no home or config location is available.
    """
    if os.name == "nt":
        appdata = os.getenv("APPDATA", "")
        if appdata:
            return Path(appdata)
        return _home() / "AppData" / "Roaming"

    if sys.platform == "darwin":
        return _home() / "Library" / "Application Support"

    xdg = os.getenv("XDG_CONFIG_HOME", "")
    # XDG requires an absolute path; relative values are ignored.
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    return _home() / ".config"


def app_config_dir(base: Path | None = None) -> Path:
    """Return <user-config-dir>/wiki-tui (or <base>/wiki-tui)."""
    root = Path(base) if base is not None else user_config_dir()
    return root / APP_CONFIG_DIR


def config_file_path(base: Path | None = None) -> Path:
    return app_config_dir(base) / CONFIG_FILE_NAME
