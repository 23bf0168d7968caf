"""cashwait.data.fetch

The fetch collaborator: ``Fetcher = Callable[[str], str]``.

:func:`fetch_text` issues a plain HTTP GET (no body, no authentication) and
returns the decoded document. Anything without an ``http``/``https`` scheme is
read as a local file path, which lets scripts replay saved CSVs offline.

Timeouts belong here, not in the engine; they come from
:class:`~cashwait.utils.config.DataSourceConfig`.
"""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path
from typing import Callable, Optional
from urllib.parse import urlparse

import requests

from cashwait.errors import FetchError
from cashwait.utils.config import DataSourceConfig

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], str]

DEFAULT_TIMEOUT_S = 20.0


def _is_http(url: str) -> bool:
    return urlparse(url).scheme.lower() in ("http", "https")


def _read_local(path: str) -> str:
    p = Path(path).expanduser()
    try:
        return p.read_bytes().decode("utf-8-sig")
    except OSError as exc:
        raise FetchError(f"cannot read {p}: {exc}") from exc


def fetch_text(
    url: str,
    *,
    timeout_s: float = DEFAULT_TIMEOUT_S,
    user_agent: Optional[str] = None,
    session: Optional[requests.Session] = None,
) -> str:
    """GET ``url`` and return its body as text.

    Raises:
        FetchError: transport failure, non-200 status, or unreadable file.
    """

    if not _is_http(url):
        logger.info("reading %s", url)
        return _read_local(url)

    headers = {"Accept": "text/csv, text/plain, */*"}
    if user_agent:
        headers["User-Agent"] = user_agent

    getter = session.get if session is not None else requests.get
    logger.info("GET %s", url)
    try:
        resp = getter(url, headers=headers, timeout=timeout_s)
    except requests.RequestException as exc:
        raise FetchError(f"request failed for {url}: {exc}") from exc

    if resp.status_code != 200:
        raise FetchError(f"HTTP {resp.status_code} for {url}")

    body = resp.content.decode("utf-8-sig", errors="replace")
    logger.info("fetched %d bytes from %s", len(resp.content), url)
    return body


def make_fetcher(cfg: Optional[DataSourceConfig] = None, *, session: Optional[requests.Session] = None) -> Fetcher:
    """Bind timeout and user agent from config into a one-argument fetcher."""

    cfg = cfg or DataSourceConfig()
    return partial(fetch_text, timeout_s=cfg.timeout_s, user_agent=cfg.user_agent, session=session)


__all__ = ["Fetcher", "DEFAULT_TIMEOUT_S", "fetch_text", "make_fetcher"]
