"""cashwait.state.session

Host-side state container.

The signal engine is stateless; a host (CLI, UI) owns one
:class:`SignalSession` holding the current position, the last snapshot, the
last error and a loading flag, and updates it by invoking the orchestrator.

- ``start()`` loads the persisted position, then refreshes.
- ``refresh()`` runs the engine. On failure the error text is recorded and
  the previous snapshot is kept; no partial snapshot is stored. There is no
  automatic retry; the host calls ``refresh()`` again.
- ``set_position()`` updates and persists the user's choice.
- ``action`` is recomputed from position and regime on every access.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from cashwait.data.fetch import Fetcher
from cashwait.engine.runner import run_signal
from cashwait.engine.snapshot import SignalSnapshot
from cashwait.errors import CashWaitError
from cashwait.signals.action import Action, Position, decide_action
from cashwait.state.position_store import PositionStore
from cashwait.utils.config import CashWaitConfig

logger = logging.getLogger(__name__)

Runner = Callable[[CashWaitConfig, Optional[Fetcher]], SignalSnapshot]


def _default_runner(cfg: CashWaitConfig, fetch: Optional[Fetcher]) -> SignalSnapshot:
    return run_signal(cfg, fetch=fetch)


@dataclass
class SignalSession:
    store: PositionStore
    cfg: CashWaitConfig = field(default_factory=CashWaitConfig)
    fetch: Optional[Fetcher] = None
    runner: Runner = _default_runner

    position: Position = Position.HELD
    snapshot: Optional[SignalSnapshot] = None
    error: Optional[str] = None
    loading: bool = False

    def start(self) -> Optional[SignalSnapshot]:
        self.position = self.store.load()
        return self.refresh()

    def refresh(self) -> Optional[SignalSnapshot]:
        """Run the engine once; return the new snapshot or None on failure."""

        self.loading = True
        self.error = None
        try:
            snap = self.runner(self.cfg, self.fetch)
        except CashWaitError as exc:
            self.error = str(exc)
            logger.error("signal refresh failed: %s", exc)
            return None
        finally:
            self.loading = False
        self.snapshot = snap
        return snap

    def set_position(self, position: Position) -> None:
        self.position = Position(position)
        self.store.save(self.position)

    @property
    def action(self) -> Optional[Action]:
        if self.snapshot is None:
            return None
        return decide_action(self.position, self.snapshot.regime)


__all__ = ["Runner", "SignalSession"]
