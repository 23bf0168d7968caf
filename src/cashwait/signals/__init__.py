"""Signal subpackage.

This package implements the close-of-day signal stack:

- SMA-seeded EMA of closes (EMA60 by default).
- Above/below streak counts versus the EMA, scanned from the latest bar.
- Regime resolution with asymmetric confirmation (up 2 / down 5).
- The next-day action policy combining regime and held position.

Everything here is a pure function of its inputs.
"""

from .action import Action, ActionKind, Position, decide_action
from .ema import ema_alpha, ema_close, ema_series
from .regime import DEFAULT_DOWN_CONFIRM, DEFAULT_UP_CONFIRM, Regime, resolve_regime
from .streak import Direction, count_streak, count_streaks

__all__ = [
    # EMA
    "ema_alpha",
    "ema_series",
    "ema_close",
    # Streaks
    "Direction",
    "count_streak",
    "count_streaks",
    # Regime
    "Regime",
    "DEFAULT_UP_CONFIRM",
    "DEFAULT_DOWN_CONFIRM",
    "resolve_regime",
    # Action
    "Position",
    "ActionKind",
    "Action",
    "decide_action",
]
