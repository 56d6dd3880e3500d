import pytest
import requests

from wiki_tui.core.errors import ProvisioningError
from wiki_tui.io import http


class DummyResponse:
    def __init__(self, status_code=200, content=b""):
        self.status_code = status_code
        self.content = content

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


def test_fetch_returns_raw_body(monkeypatch):
    calls = []

    def fake_get(url, headers=None, timeout=None):
        calls.append((url, timeout))
        return DummyResponse(200, b"[Api]\nBASE_URL = x\n")

    monkeypatch.setattr(http.requests, "get", fake_get)
    assert http.fetch_bytes("https://example.org/config.ini") == b"[Api]\nBASE_URL = x\n"
    assert calls == [("https://example.org/config.ini", http.FETCH_TIMEOUT_SECONDS)]


def test_non_success_status_raises(monkeypatch):
    monkeypatch.setattr(http.requests, "get", lambda *a, **kw: DummyResponse(404, b"not found"))
    with pytest.raises(ProvisioningError):
        http.fetch_bytes("https://example.org/missing.ini")


@pytest.mark.parametrize("exc", [requests.Timeout("slow"), requests.ConnectionError("down")])
def test_transport_errors_raise(monkeypatch, exc):
    def fake_get(*a, **kw):
        raise exc

    monkeypatch.setattr(http.requests, "get", fake_get)
    with pytest.raises(ProvisioningError) as info:
        http.fetch_bytes("https://example.org/config.ini", timeout=0.1)
    assert info.value.__cause__ is exc
