"""Utility subpackage.

Public exports:
- Config dataclasses, loading and validation utilities
- YAML/JSON IO convenience helpers
- Logging setup for scripts
"""

from .config import (
    CashWaitConfig,
    DataSourceConfig,
    PositionName,
    StateConfig,
    StrategyConfig,
    config_from_dict,
    deep_update,
    load_config,
    validate_config,
)
from .io import ensure_dir, load_json, load_yaml, save_json, save_yaml
from .logging_utils import setup_logging

__all__ = [
    # config
    "CashWaitConfig",
    "StrategyConfig",
    "DataSourceConfig",
    "StateConfig",
    "PositionName",
    "deep_update",
    "validate_config",
    "config_from_dict",
    "load_config",
    # io
    "ensure_dir",
    "load_yaml",
    "save_yaml",
    "load_json",
    "save_json",
    # logging
    "setup_logging",
]
