"""Compute and print tomorrow's action.

- Loads configuration YAML (configs/default.yaml)
- Loads the held position from the position store (or --position)
- Fetches the reference CSV (plus the display-only secondary), computes the
  EMA60 regime and prints the one-screen summary (or JSON)

Exit status is 1 when the run fails (fetch, parse, too little history).

Example
-------
python scripts/01_daily_signal.py --config configs/default.yaml
python scripts/01_daily_signal.py --primary-csv data/qqq.csv --no-secondary --json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict

from cashwait.reporting import render_summary
from cashwait.signals import Position
from cashwait.state import JsonPositionStore, MemoryPositionStore, SignalSession
from cashwait.utils import load_config, setup_logging


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Cash-wait EMA60 daily signal")

    p.add_argument(
        "--config",
        type=str,
        default=str(Path(__file__).resolve().parents[1] / "configs" / "default.yaml"),
        help="Path to configuration YAML",
    )
    p.add_argument(
        "--position",
        type=str,
        default=None,
        choices=[x.value for x in Position],
        help="Use this position instead of the stored one (not persisted)",
    )
    p.add_argument("--state", type=str, default=None, help="Override state.position_path")
    p.add_argument("--primary-csv", type=str, default=None, help="Read the reference CSV from a local file")
    p.add_argument("--secondary-csv", type=str, default=None, help="Read the secondary CSV from a local file")
    p.add_argument("--no-secondary", action="store_true", help="Skip the display-only secondary instrument")
    p.add_argument("--json", action="store_true", help="Print the snapshot and action as JSON")
    p.add_argument("--log-level", type=str, default="WARNING", help="Logging level")
    p.add_argument("--log-file", type=str, default=None, help="Optional log file")

    return p.parse_args()


def _overrides(args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if args.state is not None:
        overrides.setdefault("state", {})["position_path"] = args.state
    if args.primary_csv is not None:
        overrides.setdefault("data", {})["primary_override"] = args.primary_csv
    if args.secondary_csv is not None:
        overrides.setdefault("data", {})["secondary_override"] = args.secondary_csv
    if args.no_secondary:
        d = overrides.setdefault("data", {})
        d["secondary_symbol"] = None
        d["secondary_override"] = None
    return overrides


def main() -> int:
    args = _parse_args()
    setup_logging(args.log_level, log_file=args.log_file)

    cfg = load_config(args.config, overrides=_overrides(args))

    if args.position is not None:
        store = MemoryPositionStore(Position(args.position))
    else:
        store = JsonPositionStore.from_config(cfg.state)

    session = SignalSession(store=store, cfg=cfg)
    session.start()

    if args.json:
        out: Dict[str, Any] = {
            "position": session.position.value,
            "snapshot": None if session.snapshot is None else session.snapshot.to_dict(),
            "action": None if session.action is None else session.action.kind.value,
            "error": session.error,
        }
        print(json.dumps(out, indent=2))
    else:
        print(render_summary(session.snapshot, session.position, cfg=cfg, error=session.error))

    return 1 if session.error is not None else 0


if __name__ == "__main__":
    sys.exit(main())
