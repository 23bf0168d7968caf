"""Engine subpackage: the signal snapshot and the run orchestrator."""

from .runner import SecondaryQuote, fetch_secondary, run_signal
from .snapshot import SignalSnapshot, compute_snapshot

__all__ = [
    "SignalSnapshot",
    "compute_snapshot",
    "SecondaryQuote",
    "fetch_secondary",
    "run_signal",
]
