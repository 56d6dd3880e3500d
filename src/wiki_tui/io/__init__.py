"""IO subpackage.

- http: template download over HTTPS
"""
from .http import FETCH_TIMEOUT_SECONDS, fetch_bytes

__all__ = ["FETCH_TIMEOUT_SECONDS", "fetch_bytes"]
