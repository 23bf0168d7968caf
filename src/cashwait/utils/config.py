"""Configuration utilities.

This module fixes the strategy constants and data-source conventions and
provides strict, explicit configuration dataclasses.

Key conventions:
- Signal uses the reference instrument's close vs its EMA60 at the close of
  day t (the most recent bar in the downloaded history).
- Confirmation is asymmetric: 2 consecutive closes above EMA confirm an up
  regime, 5 consecutive closes below confirm a down regime.
- Execution of the resulting action is the next trading day's open (D+1);
  this package only reports it.

Config files are YAML and are applied over the defaults below.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Literal, Optional

PositionName = Literal["held", "cash"]

DEFAULT_URL_TEMPLATE = "https://stooq.com/q/d/l/?s={symbol}&i=d"


@dataclass(frozen=True)
class StrategyConfig:
    """Signal engine parameters."""

    name: str = "Cash-wait EMA60 (U2/D5)"

    # EMA window length
    ema_len: int = 60

    # Consecutive closes needed to confirm a regime
    up_confirm: int = 2
    down_confirm: int = 5

    # Extra bars required beyond ema_len before a run is accepted
    history_margin: int = 5

    @property
    def min_history(self) -> int:
        return int(self.ema_len) + int(self.history_margin)


@dataclass(frozen=True)
class DataSourceConfig:
    """Where the daily CSV documents come from."""

    url_template: str = DEFAULT_URL_TEMPLATE
    primary_symbol: str = "qqq.us"

    # Display-only instrument; None disables the side channel
    secondary_symbol: Optional[str] = "tqqq.us"

    # Explicit URLs (or local file paths) take precedence over the template
    primary_override: Optional[str] = None
    secondary_override: Optional[str] = None

    timeout_s: float = 20.0
    user_agent: str = "cashwait/0.1"

    @property
    def primary_url(self) -> str:
        if self.primary_override:
            return self.primary_override
        return self.url_template.format(symbol=self.primary_symbol)

    @property
    def secondary_url(self) -> Optional[str]:
        if self.secondary_override:
            return self.secondary_override
        if not self.secondary_symbol:
            return None
        return self.url_template.format(symbol=self.secondary_symbol)


@dataclass(frozen=True)
class StateConfig:
    """Local persistence of the user's position choice."""

    position_path: str = str(Path("~/.cashwait/position.json"))
    default_position: PositionName = "held"


@dataclass(frozen=True)
class CashWaitConfig:
    """Top-level configuration container."""

    strategy: StrategyConfig = field(default_factory=StrategyConfig)
    data: DataSourceConfig = field(default_factory=DataSourceConfig)
    state: StateConfig = field(default_factory=StateConfig)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def deep_update(base: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively update nested dictionaries."""

    out = dict(base)
    for k, v in updates.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = deep_update(out[k], v)
        else:
            out[k] = v
    return out


def validate_config(cfg: CashWaitConfig) -> None:
    """Basic sanity checks for strategy and data-source settings."""

    s = cfg.strategy
    if s.ema_len < 2:
        raise ValueError("ema_len must be >= 2")
    if s.up_confirm < 1 or s.down_confirm < 1:
        raise ValueError("up_confirm and down_confirm must be >= 1")
    if s.history_margin < 0:
        raise ValueError("history_margin must be >= 0")
    if cfg.data.timeout_s <= 0:
        raise ValueError("timeout_s must be positive")
    if not cfg.data.primary_override and "{symbol}" not in cfg.data.url_template:
        raise ValueError("url_template must contain '{symbol}'")
    if cfg.state.default_position not in ("held", "cash"):
        raise ValueError("default_position must be 'held' or 'cash'")


def config_from_dict(d: Dict[str, Any]) -> CashWaitConfig:
    """Build a validated config from a nested dict (e.g. parsed YAML)."""

    unknown = set(d) - {"strategy", "data", "state"}
    if unknown:
        raise ValueError(f"Unknown config sections: {sorted(unknown)}")

    cfg = CashWaitConfig(
        strategy=StrategyConfig(**(d.get("strategy") or {})),
        data=DataSourceConfig(**(d.get("data") or {})),
        state=StateConfig(**(d.get("state") or {})),
    )
    validate_config(cfg)
    return cfg


def load_config(path: Optional[str | Path] = None, *, overrides: Optional[Dict[str, Any]] = None) -> CashWaitConfig:
    """Load a YAML config file over the defaults, then apply overrides."""

    # Late import keeps config importable without touching IO helpers.
    from cashwait.utils.io import load_yaml

    base = CashWaitConfig().to_dict()
    if path is not None:
        base = deep_update(base, load_yaml(path))
    if overrides:
        base = deep_update(base, overrides)
    return config_from_dict(base)


__all__ = [
    "PositionName",
    "DEFAULT_URL_TEMPLATE",
    "StrategyConfig",
    "DataSourceConfig",
    "StateConfig",
    "CashWaitConfig",
    "deep_update",
    "validate_config",
    "config_from_dict",
    "load_config",
]
