from __future__ import annotations

import pytest
import requests

from hexxa_installer.lib import net


class _Response:
    def __init__(self, status: int, content: bytes) -> None:
        self.status_code = status
        self.content = content

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_fetch_returns_body(monkeypatch) -> None:
    seen = {}

    def fake_get(url, **kwargs):
        seen["url"] = url
        seen["kwargs"] = kwargs
        return _Response(200, b"PK")

    monkeypatch.setattr(net.requests, "get", fake_get)

    assert net.fetch_bytes("https://example.invalid/a.zip") == b"PK"
    assert seen["url"] == "https://example.invalid/a.zip"
    assert "timeout" not in seen["kwargs"]


def test_fetch_raises_on_http_error(monkeypatch) -> None:
    monkeypatch.setattr(net.requests, "get", lambda url, **kw: _Response(404, b""))

    with pytest.raises(requests.RequestException):
        net.fetch_bytes("https://example.invalid/missing.zip")
