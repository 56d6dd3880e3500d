import os
import sys
from pathlib import Path

import pytest

from wiki_tui.core import paths
from wiki_tui.core.errors import PathResolutionError

posix_only = pytest.mark.skipif(
    os.name == "nt" or sys.platform == "darwin", reason="XDG layout applies to Linux/BSD"
)


@posix_only
def test_xdg_config_home_is_used_when_absolute(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert paths.user_config_dir() == tmp_path


@posix_only
def test_relative_xdg_config_home_is_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", "relative/dir")
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    assert paths.user_config_dir() == tmp_path / ".config"


@posix_only
def test_home_fallback(tmp_path, monkeypatch):
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    assert paths.user_config_dir() == tmp_path / ".config"


@posix_only
def test_no_home_raises_path_resolution_error(monkeypatch):
    def no_home(cls):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setattr(Path, "home", classmethod(no_home))
    with pytest.raises(PathResolutionError):
        paths.user_config_dir()


def test_config_file_path_with_explicit_base(tmp_path):
    assert paths.app_config_dir(tmp_path) == tmp_path / "wiki-tui"
    assert paths.config_file_path(tmp_path) == tmp_path / "wiki-tui" / "config.ini"
