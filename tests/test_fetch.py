"""Fetch collaborator: HTTP status handling, transport errors, local files."""

from __future__ import annotations

from typing import Any, Dict

import pytest
import requests

from cashwait.data import fetch as fetch_mod
from cashwait.data.fetch import fetch_text, make_fetcher
from cashwait.errors import FetchError
from cashwait.utils.config import DataSourceConfig


class _Resp:
    def __init__(self, status_code: int, content: bytes) -> None:
        self.status_code = status_code
        self.content = content


def test_http_success_decodes_body(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: Dict[str, Any] = {}

    def fake_get(url: str, **kwargs: Any) -> _Resp:
        seen["url"] = url
        seen.update(kwargs)
        return _Resp(200, b"Date,Close\n2024-01-02,1\n")

    monkeypatch.setattr(fetch_mod.requests, "get", fake_get)
    body = fetch_text("https://example.test/q.csv", timeout_s=3.0, user_agent="ua/1")
    assert body.startswith("Date,Close")
    assert seen["timeout"] == 3.0
    assert seen["headers"]["User-Agent"] == "ua/1"


def test_non_200_raises_fetch_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(fetch_mod.requests, "get", lambda url, **kw: _Resp(503, b""))
    with pytest.raises(FetchError, match="HTTP 503"):
        fetch_text("https://example.test/q.csv")


def test_transport_error_raises_fetch_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(url: str, **kwargs: Any) -> _Resp:
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(fetch_mod.requests, "get", boom)
    with pytest.raises(FetchError, match="connection refused"):
        fetch_text("http://example.test/q.csv")


def test_local_path_is_read(tmp_path) -> None:
    p = tmp_path / "qqq.csv"
    p.write_text("Date,Close\n2024-01-02,1\n", encoding="utf-8")
    assert fetch_text(str(p)) == "Date,Close\n2024-01-02,1\n"


def test_missing_local_path_raises(tmp_path) -> None:
    with pytest.raises(FetchError):
        fetch_text(str(tmp_path / "nope.csv"))


def test_make_fetcher_binds_config(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: Dict[str, Any] = {}

    def fake_get(url: str, **kwargs: Any) -> _Resp:
        seen.update(kwargs)
        return _Resp(200, b"ok")

    monkeypatch.setattr(fetch_mod.requests, "get", fake_get)
    fetch = make_fetcher(DataSourceConfig(timeout_s=7.5, user_agent="cw-test"))
    assert fetch("https://example.test/x") == "ok"
    assert seen["timeout"] == 7.5
    assert seen["headers"]["User-Agent"] == "cw-test"
