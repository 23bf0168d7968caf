"""Data subpackage.

This package contains utilities for:
- parsing daily CSV documents into date-sorted bars
- the fetch collaborator (HTTP GET or local file)
- history-length and bar invariant checks
"""

from .bars import Bar, bars_to_series, closes_of, parse_bars, parse_date, parse_float
from .fetch import Fetcher, fetch_text, make_fetcher
from .validation import require_history, validate_bars

__all__ = [
    # bars
    "Bar",
    "parse_bars",
    "parse_date",
    "parse_float",
    "bars_to_series",
    "closes_of",
    # fetch
    "Fetcher",
    "fetch_text",
    "make_fetcher",
    # validation
    "require_history",
    "validate_bars",
]
