"""cashwait.engine.snapshot

The computed signal for one run and the pure computation that produces it
from parsed bars. No IO happens here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Literal, Optional, Sequence

from cashwait.data.bars import Bar, closes_of
from cashwait.data.validation import require_history, validate_bars
from cashwait.errors import CashWaitError
from cashwait.signals.ema import ema_series
from cashwait.signals.regime import Regime, resolve_regime
from cashwait.signals.streak import count_streaks
from cashwait.utils.config import StrategyConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignalSnapshot:
    """Signal state as of the most recent bar of the reference instrument."""

    as_of: date
    reference_close: float
    ema_value: float
    up_streak: int
    down_streak: int
    regime: Regime
    secondary_close: Optional[float] = None

    @property
    def close_vs_ema(self) -> Literal[">", "<", "="]:
        if self.reference_close > self.ema_value:
            return ">"
        if self.reference_close < self.ema_value:
            return "<"
        return "="

    def to_dict(self) -> Dict[str, Any]:
        return {
            "as_of": self.as_of.isoformat(),
            "reference_close": self.reference_close,
            "ema_value": self.ema_value,
            "up_streak": self.up_streak,
            "down_streak": self.down_streak,
            "regime": self.regime.value,
            "secondary_close": self.secondary_close,
        }


def compute_snapshot(
    bars: Sequence[Bar],
    *,
    cfg: Optional[StrategyConfig] = None,
    secondary_close: Optional[float] = None,
) -> SignalSnapshot:
    """History guard -> EMA -> streaks -> regime, reported at the last bar.

    Raises:
        InsufficientHistoryError: fewer than ``cfg.min_history`` bars.
        ValueError: bars out of date order or with invalid closes.
    """

    cfg = cfg or StrategyConfig()
    require_history(bars, min_bars=cfg.min_history)
    validate_bars(bars, name="reference")

    closes = closes_of(bars)
    ema = ema_series(closes, cfg.ema_len)
    if ema.size == 0:
        # Unreachable while min_history >= ema_len; kept for custom configs.
        raise CashWaitError("EMA computation failed: not enough closes")

    up, down = count_streaks(closes, ema)
    regime = resolve_regime(up, down, up_confirm=cfg.up_confirm, down_confirm=cfg.down_confirm)

    last = len(bars) - 1
    snap = SignalSnapshot(
        as_of=bars[last].date,
        reference_close=float(closes[last]),
        ema_value=float(ema[last]),
        up_streak=int(up),
        down_streak=int(down),
        regime=regime,
        secondary_close=secondary_close,
    )
    logger.info(
        "as_of=%s close=%.4f ema=%.4f up=%d down=%d regime=%s",
        snap.as_of,
        snap.reference_close,
        snap.ema_value,
        snap.up_streak,
        snap.down_streak,
        snap.regime.value,
    )
    return snap


__all__ = ["SignalSnapshot", "compute_snapshot"]
