"""Pytest configuration.

Ensures src/ is on sys.path so tests can import `wiki_tui.*` without an
install, and keeps root logger state from leaking between tests.
"""

import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


class StubFetch:
    """Stand-in for the HTTP fetch: records calls and returns a fixed body."""

    def __init__(self, body=b"[Api]\nBASE_URL = https://example.org/w/api.php\n"):
        self.body = body
        self.calls = []

    def __call__(self, url):
        self.calls.append(url)
        return self.body


@pytest.fixture
def stub_fetch():
    return StubFetch()


@pytest.fixture
def write_ini(tmp_path):
    def _write(text, name="config.ini"):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p

    return _write


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    # drop handlers installed by setup_logging; pytest's own are subclasses
    for h in root.handlers[:]:
        if type(h) in (logging.FileHandler, logging.StreamHandler, logging.NullHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
