"""Reporting subpackage: labels and the text/table summary of a run."""

from .summary import EXECUTION_RULE, action_label, position_label, regime_label, render_summary, snapshot_frame

__all__ = [
    "EXECUTION_RULE",
    "action_label",
    "regime_label",
    "position_label",
    "render_summary",
    "snapshot_frame",
]
