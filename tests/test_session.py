"""Host session container: load/refresh/error/position flow."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from cashwait.data.fetch import Fetcher
from cashwait.engine.snapshot import SignalSnapshot
from cashwait.errors import FetchError
from cashwait.signals.action import ActionKind, Position
from cashwait.signals.regime import Regime
from cashwait.state.position_store import MemoryPositionStore
from cashwait.state.session import SignalSession
from cashwait.utils.config import CashWaitConfig


def _snap(regime: Regime) -> SignalSnapshot:
    return SignalSnapshot(
        as_of=date(2024, 6, 3),
        reference_close=450.0,
        ema_value=440.0,
        up_streak=3 if regime is Regime.UP else 0,
        down_streak=5 if regime is Regime.DOWN else 0,
        regime=regime,
    )


class _ScriptedRunner:
    """Returns (or raises) queued outcomes in order."""

    def __init__(self, outcomes: List[object]) -> None:
        self.outcomes = list(outcomes)
        self.calls = 0

    def __call__(self, cfg: CashWaitConfig, fetch: Optional[Fetcher]) -> SignalSnapshot:
        self.calls += 1
        out = self.outcomes.pop(0)
        if isinstance(out, Exception):
            raise out
        return out  # type: ignore[return-value]


def test_start_loads_position_and_refreshes() -> None:
    store = MemoryPositionStore(Position.CASH)
    session = SignalSession(store=store, runner=_ScriptedRunner([_snap(Regime.UP)]))
    snap = session.start()
    assert snap is not None
    assert session.position is Position.CASH
    assert session.error is None
    assert not session.loading
    assert session.action is not None and session.action.kind is ActionKind.ENTER


def test_action_follows_position_changes() -> None:
    store = MemoryPositionStore(Position.CASH)
    session = SignalSession(store=store, runner=_ScriptedRunner([_snap(Regime.UP)]))
    session.start()

    session.set_position(Position.HELD)
    assert store.load() is Position.HELD
    assert session.action.kind is ActionKind.HOLD_HELD  # type: ignore[union-attr]


def test_failed_refresh_records_error_and_keeps_snapshot() -> None:
    first = _snap(Regime.DOWN)
    runner = _ScriptedRunner([first, FetchError("HTTP 500 for x"), _snap(Regime.UP)])
    session = SignalSession(store=MemoryPositionStore(), runner=runner)

    session.start()
    assert session.action.kind is ActionKind.EXIT  # type: ignore[union-attr]

    assert session.refresh() is None
    assert session.error == "HTTP 500 for x"
    assert session.snapshot is first
    assert not session.loading

    # Manual retry clears the error.
    session.refresh()
    assert session.error is None
    assert session.snapshot.regime is Regime.UP  # type: ignore[union-attr]
    assert runner.calls == 3


def test_no_action_without_snapshot() -> None:
    session = SignalSession(store=MemoryPositionStore(), runner=_ScriptedRunner([FetchError("down")]))
    session.start()
    assert session.snapshot is None
    assert session.action is None
    assert session.error == "down"
