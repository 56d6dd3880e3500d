"""core.provision
Make sure a config file exists before anything tries to read it.

ConfigProvisioner resolves <user-config-dir>/wiki-tui/config.ini, creates the
app directory when needed and seeds a missing file with the upstream default
template. It never overwrites an existing file.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from ..io import http
from .errors import ProvisioningError
from .paths import config_file_path

TEMPLATE_URL = "https://raw.githubusercontent.com/Builditluc/wiki-tui/stable/config.ini"

Fetch = Callable[[str], bytes]

logger = logging.getLogger(__name__)


class ConfigProvisioner:
    """Provision the config file at most once.

    Behaviour:
    - config_dir overrides the platform user config directory (tests,
      portable installs); the app subdirectory is still appended.
    - fetch is any callable url -> bytes; defaults to an HTTPS GET with a
      bounded timeout.
    """

    def __init__(
        self,
        config_dir: Optional[str | Path] = None,
        fetch: Optional[Fetch] = None,
        template_url: str = TEMPLATE_URL,
    ) -> None:
        self.config_dir = Path(config_dir) if config_dir is not None else None
        self.fetch = fetch
        self.template_url = template_url
        self.config_path: Optional[Path] = None

    def config_file_exists(self) -> bool:
        """Resolve config_path and report whether the file is already there.

        A freshly created app directory cannot contain the file, so creating
        it returns False without a further check.
        """
        self.config_path = config_file_path(self.config_dir)
        app_dir = self.config_path.parent

        if not app_dir.exists():
            try:
                app_dir.mkdir()
            except OSError as e:
                raise ProvisioningError(f"Failed to create the app config directory {app_dir}: {e}") from e
            logger.info("Created the app config directory %s", app_dir)
            return False

        return self.config_path.exists()

    def create_config_file(self) -> None:
        """Download the default template and write it verbatim to config_path."""
        if self.config_path is None:
            self.config_file_exists()
        fetch = self.fetch or http.fetch_bytes
        content = fetch(self.template_url)
        try:
            with self.config_path.open("xb") as fh:
                fh.write(content)
        except FileExistsError:
            logger.warning("Config file appeared at %s while provisioning; keeping it", self.config_path)
            return
        except OSError as e:
            raise ProvisioningError(f"Failed to create the config file {self.config_path}: {e}") from e
        logger.info("Successfully created the config file %s (%d bytes)", self.config_path, len(content))

    def ensure_exists(self) -> Path:
        """Provision the config file if it is missing and return its path."""
        if not self.config_file_exists():
            self.create_config_file()
        else:
            logger.debug("Config file present at %s", self.config_path)
        return self.config_path
