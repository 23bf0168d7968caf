"""cashwait.utils.io

Minimal IO helpers used by scripts, config loading and the position store.

- YAML for configs
- JSON for the persisted position and machine-readable signal output

All paths are treated as local filesystem paths. Functions accept either str
or pathlib.Path, expand ``~``, and create parent directories when writing.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Union

import yaml

PathLike = Union[str, Path]


def _path(path: PathLike) -> Path:
    return Path(path).expanduser()


def ensure_dir(path: PathLike) -> Path:
    """Ensure a directory exists and return it as a Path.

    If ``path`` points to a file (has a suffix), its parent directory is
    created.
    """

    p = _path(path)
    dir_path = p if p.suffix == "" else p.parent
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def load_yaml(path: PathLike) -> Dict[str, Any]:
    p = _path(path)
    with p.open("r", encoding="utf-8") as f:
        obj = yaml.safe_load(f)
    if obj is None:
        return {}
    if not isinstance(obj, dict):
        raise ValueError(f"{p}: expected a mapping at top level, got {type(obj).__name__}")
    return obj


def save_yaml(obj: Any, path: PathLike) -> None:
    p = _path(path)
    ensure_dir(p)
    with p.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def load_json(path: PathLike) -> Any:
    p = _path(path)
    with p.open("r", encoding="utf-8") as f:
        return json.load(f)


def save_json(obj: Any, path: PathLike, *, indent: int = 2) -> None:
    """Write JSON atomically (temp file in the same directory + rename)."""

    p = _path(path)
    ensure_dir(p)
    fd, tmp = tempfile.mkstemp(prefix=f".{p.name}.", dir=str(p.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(obj, f, indent=indent, sort_keys=False)
        os.replace(tmp, p)
    except BaseException:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise


__all__ = [
    "PathLike",
    "ensure_dir",
    "load_yaml",
    "save_yaml",
    "load_json",
    "save_json",
]
