"""cashwait.state.position_store

Persistence of the user's position choice (held vs cash).

The engine only consumes the current value. Stores expose ``load()`` and
``save(position)``; ``save`` is an idempotent overwrite. The JSON store keeps
a single key, ``{"position": "held" | "cash"}``, and falls back to its default
when the file is missing, unreadable or holds an unknown value.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Protocol

from cashwait.signals.action import Position
from cashwait.utils.config import StateConfig
from cashwait.utils.io import PathLike, load_json, save_json

logger = logging.getLogger(__name__)

POSITION_KEY = "position"


class PositionStore(Protocol):
    def load(self) -> Position: ...

    def save(self, position: Position) -> None: ...


class MemoryPositionStore:
    """In-process store (tests, embedding)."""

    def __init__(self, initial: Optional[Position] = None, *, default: Position = Position.HELD) -> None:
        self._value = initial
        self.default = default
        self.saves = 0

    def load(self) -> Position:
        return self.default if self._value is None else self._value

    def save(self, position: Position) -> None:
        self._value = Position(position)
        self.saves += 1


class JsonPositionStore:
    """Key-value JSON file store with atomic overwrite."""

    def __init__(self, path: PathLike, *, default: Position = Position.HELD) -> None:
        self.path = Path(path).expanduser()
        self.default = default

    @classmethod
    def from_config(cls, cfg: Optional[StateConfig] = None) -> "JsonPositionStore":
        cfg = cfg or StateConfig()
        return cls(cfg.position_path, default=Position(cfg.default_position))

    def load(self) -> Position:
        if not self.path.exists():
            return self.default
        try:
            obj = load_json(self.path)
        except (OSError, ValueError) as exc:
            logger.warning("cannot read %s, using default %s: %s", self.path, self.default.value, exc)
            return self.default
        if not isinstance(obj, dict) or POSITION_KEY not in obj:
            return self.default
        position = Position.from_stored(obj[POSITION_KEY])
        if position is None:
            logger.warning("unknown position %r in %s, using default %s", obj[POSITION_KEY], self.path, self.default.value)
            return self.default
        return position

    def save(self, position: Position) -> None:
        position = Position(position)
        save_json({POSITION_KEY: position.value}, self.path)
        logger.info("saved position=%s to %s", position.value, self.path)


__all__ = ["POSITION_KEY", "PositionStore", "MemoryPositionStore", "JsonPositionStore"]
