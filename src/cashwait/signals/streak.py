"""Consecutive-close streaks relative to the EMA.

A streak is counted backward from the most recent bar while the close stays
strictly above (or strictly below) the EMA of the same day. Equality never
counts. Days with an undefined (NaN) EMA are passed over without ending the
streak; for EMA series produced by :func:`cashwait.signals.ema.ema_series`
the undefined days form a prefix, so reaching one means the usable history is
exhausted.
"""

from __future__ import annotations

from typing import Literal, Tuple

import numpy as np

from cashwait.signals.ema import ArrayLike

Direction = Literal["above", "below"]


def count_streak(closes: ArrayLike, ema: ArrayLike, direction: Direction) -> int:
    """Number of most-recent consecutive closes on ``direction`` side of EMA."""

    if direction not in ("above", "below"):
        raise ValueError(f"direction must be 'above' or 'below', got {direction!r}")

    c = np.asarray(closes, dtype=float)
    e = np.asarray(ema, dtype=float)
    if e.size == 0:
        return 0
    if c.shape != e.shape:
        raise ValueError(f"closes and ema must be aligned, got {c.shape} vs {e.shape}")

    above = direction == "above"
    n = 0
    for i in range(c.size - 1, -1, -1):
        ei = e[i]
        if np.isnan(ei):
            continue
        ok = c[i] > ei if above else c[i] < ei
        if not ok:
            break
        n += 1
    return n


def count_streaks(closes: ArrayLike, ema: ArrayLike) -> Tuple[int, int]:
    """(up_streak, down_streak), each evaluated independently."""

    return count_streak(closes, ema, "above"), count_streak(closes, ema, "below")


__all__ = ["Direction", "count_streak", "count_streaks"]
