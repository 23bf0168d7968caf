"""Config defaults, YAML loading and validation."""

from __future__ import annotations

import pytest

from cashwait.utils.config import (
    CashWaitConfig,
    DataSourceConfig,
    StrategyConfig,
    config_from_dict,
    deep_update,
    load_config,
    validate_config,
)
from cashwait.utils.io import save_yaml


def test_defaults_match_strategy() -> None:
    cfg = CashWaitConfig()
    assert cfg.strategy.ema_len == 60
    assert (cfg.strategy.up_confirm, cfg.strategy.down_confirm) == (2, 5)
    assert cfg.strategy.min_history == 65
    assert cfg.data.primary_url == "https://stooq.com/q/d/l/?s=qqq.us&i=d"
    assert cfg.data.secondary_url == "https://stooq.com/q/d/l/?s=tqqq.us&i=d"
    assert cfg.state.default_position == "held"
    validate_config(cfg)


def test_overrides_take_precedence() -> None:
    d = DataSourceConfig(primary_override="/tmp/qqq.csv", secondary_symbol=None)
    assert d.primary_url == "/tmp/qqq.csv"
    assert d.secondary_url is None


def test_load_yaml_over_defaults(tmp_path) -> None:
    p = tmp_path / "cfg.yaml"
    save_yaml({"strategy": {"down_confirm": 3}, "data": {"primary_symbol": "spy.us"}}, p)
    cfg = load_config(p, overrides={"data": {"timeout_s": 5.0}})
    assert cfg.strategy.down_confirm == 3
    assert cfg.strategy.ema_len == 60
    assert cfg.data.primary_url.endswith("s=spy.us&i=d")
    assert cfg.data.timeout_s == 5.0


def test_round_trip_through_dict() -> None:
    cfg = CashWaitConfig(strategy=StrategyConfig(ema_len=20))
    assert config_from_dict(cfg.to_dict()) == cfg


@pytest.mark.parametrize(
    "d",
    [
        {"strategy": {"ema_len": 1}},
        {"strategy": {"up_confirm": 0}},
        {"strategy": {"history_margin": -1}},
        {"data": {"timeout_s": 0}},
        {"data": {"url_template": "https://example.test/no-symbol"}},
        {"state": {"default_position": "short"}},
        {"bogus": {}},
    ],
)
def test_invalid_configs_rejected(d) -> None:
    with pytest.raises((ValueError, TypeError)):
        config_from_dict(d)


def test_deep_update_is_nested() -> None:
    base = {"a": {"x": 1, "y": 2}, "b": 1}
    out = deep_update(base, {"a": {"y": 3}})
    assert out == {"a": {"x": 1, "y": 3}, "b": 1}
    assert base["a"]["y"] == 2
