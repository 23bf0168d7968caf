"""Persist the currently held position (the app cannot read the brokerage).

Example
-------
python scripts/02_set_position.py cash
python scripts/02_set_position.py held --state /tmp/position.json
"""

from __future__ import annotations

import argparse
from pathlib import Path

from cashwait.reporting import position_label
from cashwait.signals import Position
from cashwait.state import JsonPositionStore
from cashwait.utils import load_config, setup_logging


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Set the held position (held / cash)")
    p.add_argument("position", choices=[x.value for x in Position], help="New position")
    p.add_argument(
        "--config",
        type=str,
        default=str(Path(__file__).resolve().parents[1] / "configs" / "default.yaml"),
        help="Path to configuration YAML",
    )
    p.add_argument("--state", type=str, default=None, help="Override state.position_path")
    p.add_argument("--log-level", type=str, default="WARNING", help="Logging level")
    return p.parse_args()


def main() -> None:
    args = _parse_args()
    setup_logging(args.log_level)

    overrides = {"state": {"position_path": args.state}} if args.state else None
    cfg = load_config(args.config, overrides=overrides)

    store = JsonPositionStore.from_config(cfg.state)
    store.save(Position(args.position))

    print("Wrote:", store.path)
    print(position_label(store.load()))


if __name__ == "__main__":
    main()
