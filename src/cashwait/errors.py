"""cashwait.errors

Error taxonomy for a signal run.

Fatal errors (primary fetch, parse, insufficient history) propagate to the
caller of :func:`cashwait.engine.runner.run_signal`. Secondary-instrument
failures never raise; they are reported through
:class:`cashwait.engine.runner.SecondaryQuote`.
"""

from __future__ import annotations


class CashWaitError(Exception):
    """Base class for all fatal signal-run errors."""


class FetchError(CashWaitError):
    """Transport failure or non-success HTTP status."""


class ParseError(CashWaitError, ValueError):
    """CSV document could not be turned into usable bars."""


class InsufficientHistoryError(ParseError):
    """Fewer valid bars than the EMA window plus safety margin."""

    def __init__(self, count: int, required: int) -> None:
        self.count = int(count)
        self.required = int(required)
        super().__init__(f"too few rows: got {self.count} (need {self.required})")


__all__ = [
    "CashWaitError",
    "FetchError",
    "ParseError",
    "InsufficientHistoryError",
]
