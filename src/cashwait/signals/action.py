"""Next-day action policy.

Pure mapping from the user's held position and the current regime:

=========  ========  ==========
position   regime    action
=========  ========  ==========
cash       up        enter
cash       down      hold-cash
cash       neutral   hold-cash
held       down      exit
held       up        hold-held
held       neutral   hold-held
=========  ========  ==========

The position is user-owned state (the app cannot read a brokerage account);
the action is recomputed whenever either input changes and is never stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from cashwait.signals.regime import Regime


class Position(str, Enum):
    HELD = "held"
    CASH = "cash"

    @classmethod
    def from_stored(cls, value: object) -> Optional["Position"]:
        """Persisted value to Position, or None when it is not a known name."""

        s = str(value).strip().lower()
        for p in cls:
            if p.value == s:
                return p
        return None


class ActionKind(str, Enum):
    ENTER = "enter"
    EXIT = "exit"
    HOLD_HELD = "hold-held"
    HOLD_CASH = "hold-cash"


@dataclass(frozen=True)
class Action:
    kind: ActionKind

    @property
    def is_trade(self) -> bool:
        return self.kind in (ActionKind.ENTER, ActionKind.EXIT)


def decide_action(position: Position, regime: Regime) -> Action:
    if position == Position.CASH:
        if regime == Regime.UP:
            return Action(ActionKind.ENTER)
        return Action(ActionKind.HOLD_CASH)
    if regime == Regime.DOWN:
        return Action(ActionKind.EXIT)
    return Action(ActionKind.HOLD_HELD)


__all__ = ["Position", "ActionKind", "Action", "decide_action"]
