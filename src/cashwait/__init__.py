"""Cash-wait EMA60 daily signal package (cashwait).

This repository computes the next-day action for a leveraged-ETF timing
strategy from public end-of-day CSV prices:

- cashwait.data: CSV bar parsing, fetch collaborator, history validation
- cashwait.signals: EMA60, above/below streaks, regime (U2/D5), action policy
- cashwait.engine: signal snapshot and the orchestrating runner
- cashwait.state: persisted position choice and the host session container
- cashwait.reporting: labels and the one-screen text summary
- cashwait.utils: config dataclasses, YAML/JSON IO, logging setup

Most users will interact via scripts in scripts/.
"""

from .utils.config import CashWaitConfig

__all__ = ["CashWaitConfig"]
