"""HTTP fetch helper used to seed a missing config file.

Usage:
  from wiki_tui.io.http import fetch_bytes
  body = fetch_bytes(TEMPLATE_URL)
"""
from __future__ import annotations

import logging

import requests

from ..core.errors import ProvisioningError

FETCH_TIMEOUT_SECONDS = 10
USER_AGENT = "wiki-tui-config/0.3 (+https://github.com/Builditluc/wiki-tui)"

logger = logging.getLogger(__name__)


def fetch_bytes(url: str, timeout: float = FETCH_TIMEOUT_SECONDS) -> bytes:
    """GET url and return the raw response body.

    Any transport error, timeout or non-2xx status is raised as
    ProvisioningError; the body is returned untouched (no decoding).
    """
    logger.debug("fetching %s (timeout=%ss)", url, timeout)
    try:
        r = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise ProvisioningError(f"Failed to fetch the default config from {url}: {e}") from e
    logger.debug("fetched %d bytes from %s", len(r.content), url)
    return r.content
