"""cashwait.data.validation

Checks applied to parsed bars before the signal is computed.
"""

from __future__ import annotations

import math
from typing import Sequence

from cashwait.data.bars import Bar
from cashwait.errors import InsufficientHistoryError


def require_history(bars: Sequence[Bar], *, min_bars: int) -> None:
    """Reject a run whose history is shorter than ``min_bars``.

    Raises:
        InsufficientHistoryError: carries the observed count for diagnostics.
    """

    if len(bars) < int(min_bars):
        raise InsufficientHistoryError(len(bars), int(min_bars))


def validate_bars(bars: Sequence[Bar], *, name: str = "bars") -> None:
    """Validate bar invariants: finite non-negative closes, non-decreasing dates.

    Duplicate dates are allowed; the parser keeps them in source order.

    Raises:
        ValueError on violation.
    """

    prev = None
    for i, b in enumerate(bars):
        if not math.isfinite(b.close) or b.close < 0.0:
            raise ValueError(f"{name}: invalid close {b.close!r} at position {i}")
        if prev is not None and b.date < prev:
            raise ValueError(f"{name}: dates not ascending at position {i} ({b.date} < {prev})")
        prev = b.date


__all__ = ["require_history", "validate_bars"]
