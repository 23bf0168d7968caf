"""EMA engine properties: insufficient history, seeding, recursion, determinism."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from cashwait.signals.ema import ema_alpha, ema_close, ema_series


def test_short_input_returns_empty() -> None:
    for n in (0, 1, 59):
        assert ema_series([100.0] * n, 60).size == 0


def test_exactly_window_length_gives_seed_only() -> None:
    closes = np.arange(1.0, 61.0)
    out = ema_series(closes, 60)
    assert out.size == 60
    assert np.isnan(out[:59]).all()
    assert out[59] == pytest.approx(closes.mean())


def test_constant_series_is_fixed_point() -> None:
    out = ema_series([42.0] * 120, 60)
    defined = out[59:]
    assert np.isfinite(defined).all()
    assert defined == pytest.approx(np.full(defined.size, 42.0))


def test_undefined_prefix_then_all_finite() -> None:
    rng = np.random.default_rng(0)
    closes = 100.0 * np.cumprod(1.0 + rng.normal(0.0, 0.01, size=200))
    out = ema_series(closes, 60)
    assert np.isnan(out[:59]).all()
    assert np.isfinite(out[59:]).all()


def test_recursion_matches_definition() -> None:
    closes = [float(x) for x in range(1, 11)]
    n = 3
    a = ema_alpha(n)
    assert a == pytest.approx(0.5)

    out = ema_series(closes, n)
    expected = [2.0]  # mean(1, 2, 3)
    for c in closes[n:]:
        expected.append(a * c + (1.0 - a) * expected[-1])
    assert out[n - 1 :] == pytest.approx(expected)


def test_deterministic_bit_identical() -> None:
    rng = np.random.default_rng(7)
    closes = rng.uniform(50.0, 150.0, size=300)
    a = ema_series(closes, 60)
    b = ema_series(closes.copy(), 60)
    assert np.array_equal(a, b, equal_nan=True)


def test_invalid_length_raises() -> None:
    with pytest.raises(ValueError):
        ema_series([1.0, 2.0], 0)


def test_series_wrapper_keeps_index() -> None:
    idx = pd.bdate_range("2024-01-01", periods=70)
    close = pd.Series(np.linspace(100.0, 110.0, 70), index=idx)
    ema = ema_close(close, length=60)
    assert ema.index.equals(idx)
    assert ema.name == "ema60"
    assert ema.iloc[:59].isna().all()

    short = ema_close(close.iloc[:10], length=60)
    assert len(short) == 10 and short.isna().all()
