"""cashwait.data.bars

CSV ingestion for daily close prices.

Upstream documents look like ``Date,Open,High,Low,Close,Volume`` with one
trading day per row, in ascending or unspecified order. Only the ``date`` and
``close`` columns are used; they are located by case-insensitive header name.

Row handling:
- a header lacking either column yields an empty result (not an error);
- rows too short to reach both columns, or whose close is not a finite,
  non-negative number, are skipped;
- any row reaching both columns with an unparseable date fails the whole
  parse with :class:`~cashwait.errors.ParseError`, since ordering and
  "as of" reporting depend on every date;
- output is sorted ascending by date (stable, so duplicate dates keep their
  source order and are not collapsed).
"""

from __future__ import annotations

import csv
import io
import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, List, Optional, Sequence

import numpy as np
import pandas as pd

from cashwait.errors import ParseError

logger = logging.getLogger(__name__)

DATE_COL = "date"
CLOSE_COL = "close"


@dataclass(frozen=True)
class Bar:
    """One daily observation."""

    date: date
    close: float


def parse_float(value: Any) -> Optional[float]:
    """Finite float or None for blanks, garbage, NaN and infinities."""

    if value is None:
        return None
    s = str(value).strip()
    if not s:
        return None
    try:
        x = float(s)
    except ValueError:
        return None
    if not math.isfinite(x):
        return None
    return x


def parse_date(value: Any) -> date:
    """ISO calendar date (``YYYY-MM-DD``, optionally with a time part)."""

    s = str(value).strip()
    try:
        return datetime.fromisoformat(s).date()
    except ValueError as exc:
        raise ParseError(f"unparseable date: {s!r}") from exc


def parse_bars(raw: str | bytes) -> List[Bar]:
    """Parse a daily CSV document into date-sorted bars.

    Returns an empty list when the document is empty or the header lacks a
    date or close column.

    Raises:
        ParseError: a row reaching both columns has an unparseable date.
    """

    if isinstance(raw, bytes):
        raw = raw.decode("utf-8-sig")
    raw = raw.lstrip("\ufeff")

    reader = csv.reader(io.StringIO(raw))
    header = next(reader, None)
    if not header:
        return []

    names = [h.strip().lower() for h in header]
    if DATE_COL not in names or CLOSE_COL not in names:
        return []
    date_idx = names.index(DATE_COL)
    close_idx = names.index(CLOSE_COL)
    need = max(date_idx, close_idx) + 1

    bars: List[Bar] = []
    n_skipped = 0
    for row in reader:
        if not row or (len(row) == 1 and not row[0].strip()):
            continue
        if len(row) < need:
            n_skipped += 1
            continue
        # Date first: a bad date is fatal even when the close is also bad.
        d = parse_date(row[date_idx])
        c = parse_float(row[close_idx])
        if c is None or c < 0.0:
            n_skipped += 1
            continue
        bars.append(Bar(date=d, close=c))

    if n_skipped:
        logger.debug("skipped %d malformed rows", n_skipped)

    bars.sort(key=lambda b: b.date)
    return bars


def bars_to_series(bars: Sequence[Bar], *, name: str = "close") -> pd.Series:
    """Close prices as a Series indexed by a (timezone-naive) DatetimeIndex."""

    idx = pd.DatetimeIndex([pd.Timestamp(b.date) for b in bars], name="date")
    return pd.Series([b.close for b in bars], index=idx, name=name, dtype=float)


def closes_of(bars: Sequence[Bar]) -> np.ndarray:
    return np.asarray([b.close for b in bars], dtype=float)


__all__ = [
    "Bar",
    "DATE_COL",
    "CLOSE_COL",
    "parse_float",
    "parse_date",
    "parse_bars",
    "bars_to_series",
    "closes_of",
]
