"""cashwait.utils.logging_utils

One-call logging setup for scripts. Library modules only create module-level
loggers via ``logging.getLogger(__name__)`` and never configure handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from cashwait.utils.io import PathLike, ensure_dir

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO, *, log_file: Optional[PathLike] = None) -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        ensure_dir(log_file)
        handlers.append(logging.FileHandler(str(log_file), encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


__all__ = ["LOG_FORMAT", "setup_logging"]
