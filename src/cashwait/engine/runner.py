"""cashwait.engine.runner

Orchestrates one signal run:

1. fetch the reference instrument's CSV (fatal on failure)
2. parse into bars (fatal on malformed dates)
3. compute the snapshot (fatal on insufficient history)
4. fetch the display-only secondary instrument (best effort)
5. return a fresh, immutable :class:`SignalSnapshot`

Fatal errors are :class:`~cashwait.errors.CashWaitError` subclasses and no
partial snapshot is produced. The secondary side channel never raises; its
outcome is a :class:`SecondaryQuote`.

Fetches are sequential; the secondary is only attempted after the primary
computation succeeded.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from cashwait.data.bars import parse_bars
from cashwait.data.fetch import Fetcher, make_fetcher
from cashwait.engine.snapshot import SignalSnapshot, compute_snapshot
from cashwait.errors import ParseError
from cashwait.utils.config import CashWaitConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SecondaryQuote:
    """Outcome of the best-effort secondary fetch."""

    close: Optional[float] = None
    as_of: Optional[date] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.close is not None


def fetch_secondary(url: Optional[str], fetch: Fetcher) -> SecondaryQuote:
    """Latest close of the secondary instrument, or the reason it is missing."""

    if not url:
        return SecondaryQuote(error="disabled")
    try:
        bars = parse_bars(fetch(url))
    except Exception as exc:  # any failure only drops the display value
        logger.warning("secondary fetch failed (ignored): %s", exc)
        return SecondaryQuote(error=str(exc))
    if not bars:
        logger.warning("secondary document has no bars: %s", url)
        return SecondaryQuote(error="no bars")
    last = bars[-1]
    return SecondaryQuote(close=last.close, as_of=last.date)


def run_signal(cfg: Optional[CashWaitConfig] = None, *, fetch: Optional[Fetcher] = None) -> SignalSnapshot:
    """Fetch, parse and compute today's signal.

    Raises:
        FetchError: primary download failed.
        ParseError: primary document has a malformed date.
        InsufficientHistoryError: primary history too short (includes a
            document missing the date/close columns, which parses to 0 bars).
    """

    cfg = cfg or CashWaitConfig()
    fetch = fetch or make_fetcher(cfg.data)

    url = cfg.data.primary_url
    raw = fetch(url)
    try:
        bars = parse_bars(raw)
    except ParseError as exc:
        raise ParseError(f"{cfg.data.primary_symbol}: {exc}") from exc

    snap = compute_snapshot(bars, cfg=cfg.strategy)

    quote = fetch_secondary(cfg.data.secondary_url, fetch)
    if quote.ok:
        snap = dataclasses.replace(snap, secondary_close=quote.close)
    return snap


__all__ = ["SecondaryQuote", "fetch_secondary", "run_signal"]
