"""Regime resolution from confirmation streaks.

Priority order (first match wins):

1. up_streak >= up_confirm      -> up
2. down_streak >= down_confirm  -> down
3. otherwise                    -> neutral

Both counts are evaluated independently; if both thresholds are met the up
regime wins.
"""

from __future__ import annotations

from enum import Enum

DEFAULT_UP_CONFIRM = 2
DEFAULT_DOWN_CONFIRM = 5


class Regime(str, Enum):
    UP = "up"
    DOWN = "down"
    NEUTRAL = "neutral"


def resolve_regime(
    up_streak: int,
    down_streak: int,
    *,
    up_confirm: int = DEFAULT_UP_CONFIRM,
    down_confirm: int = DEFAULT_DOWN_CONFIRM,
) -> Regime:
    if up_streak < 0 or down_streak < 0:
        raise ValueError("streak counts must be non-negative")
    if up_streak >= up_confirm:
        return Regime.UP
    if down_streak >= down_confirm:
        return Regime.DOWN
    return Regime.NEUTRAL


__all__ = ["Regime", "DEFAULT_UP_CONFIRM", "DEFAULT_DOWN_CONFIRM", "resolve_regime"]
