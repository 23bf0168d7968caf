"""cashwait.reporting.summary

One-screen summary of a signal run.

Produces the same information as the app screen: data date, the held
position, tomorrow's action, the regime with its close-vs-EMA evidence,
confirmation progress and the execution rule.
"""

from __future__ import annotations

from typing import List, Optional

import pandas as pd

from cashwait.engine.snapshot import SignalSnapshot
from cashwait.signals.action import Action, ActionKind, Position, decide_action
from cashwait.signals.regime import Regime
from cashwait.utils.config import CashWaitConfig

EXECUTION_RULE = "Execution: confirmed signal -> next trading day open (D+1 Open)"

_ACTION_LABELS = {
    ActionKind.ENTER: "BUY - enter position",
    ActionKind.EXIT: "SELL - move to cash",
    ActionKind.HOLD_HELD: "HOLD - keep position",
    ActionKind.HOLD_CASH: "HOLD CASH - stay in cash",
}

_REGIME_LABELS = {
    Regime.UP: "Up confirmed",
    Regime.DOWN: "Down confirmed",
    Regime.NEUTRAL: "Neutral (waiting zone)",
}

_POSITION_LABELS = {
    Position.HELD: "Position: invested",
    Position.CASH: "Position: cash",
}


def action_label(action: Action) -> str:
    return _ACTION_LABELS[action.kind]


def regime_label(regime: Regime) -> str:
    return _REGIME_LABELS[regime]


def position_label(position: Position) -> str:
    return _POSITION_LABELS[position]


def render_summary(
    snapshot: Optional[SignalSnapshot],
    position: Position,
    *,
    cfg: Optional[CashWaitConfig] = None,
    error: Optional[str] = None,
) -> str:
    """Plain-text summary; the error, when given, precedes the last known signal."""

    cfg = cfg or CashWaitConfig()
    s = cfg.strategy
    ema_name = f"EMA{s.ema_len}"
    ref = cfg.data.primary_symbol.upper()

    lines: List[str] = [s.name, ""]
    as_of = "-" if snapshot is None else snapshot.as_of.isoformat()
    lines.append(f"Data as of: {as_of} (previous close)")
    if snapshot is not None and snapshot.secondary_close is not None:
        sec = (cfg.data.secondary_symbol or "secondary").upper()
        lines.append(f"Reference: {sec} last close {snapshot.secondary_close:.2f}")
    lines.append(position_label(position))
    lines.append("")

    if error is not None:
        lines.append(f"Error: {error}")
        lines.append("Check the network connection and refresh.")
        if snapshot is not None:
            lines.append("")
    if snapshot is not None:
        action = decide_action(position, snapshot.regime)
        lines.append(f"Tomorrow: {action_label(action)}")
        lines.append(f"Market regime: {regime_label(snapshot.regime)}")
        lines.append(
            f"Evidence: close {snapshot.close_vs_ema} {ema_name}  |  "
            f"{ref} close {snapshot.reference_close:.2f} / {ema_name} {snapshot.ema_value:.2f}"
        )
        lines.append(f"Up streak: {snapshot.up_streak} / {s.up_confirm}")
        lines.append(f"Down streak: {snapshot.down_streak} / {s.down_confirm}")

    lines.append("")
    lines.append(EXECUTION_RULE)
    return "\n".join(lines)


def snapshot_frame(snapshot: SignalSnapshot, position: Optional[Position] = None) -> pd.DataFrame:
    """One-row table indexed by the as-of date (handy for CSV logs)."""

    row = snapshot.to_dict()
    as_of = pd.Timestamp(row.pop("as_of"))
    if position is not None:
        row["position"] = position.value
        row["action"] = decide_action(position, snapshot.regime).kind.value
    df = pd.DataFrame([row], index=pd.DatetimeIndex([as_of], name="as_of"))
    return df


__all__ = [
    "EXECUTION_RULE",
    "action_label",
    "regime_label",
    "position_label",
    "render_summary",
    "snapshot_frame",
]
