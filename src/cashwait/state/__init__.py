"""State subpackage: persisted position choice and the host session container."""

from .position_store import JsonPositionStore, MemoryPositionStore, PositionStore
from .session import SignalSession

__all__ = [
    "PositionStore",
    "MemoryPositionStore",
    "JsonPositionStore",
    "SignalSession",
]
