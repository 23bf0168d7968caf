"""EMA computation on closes.

Implements a trailing EMA seeded by a simple average:

- seed: ema[N-1] = mean(close[0:N])
- recursion for i >= N: ema[i] = α·close[i] + (1-α)·ema[i-1], α = 2/(N+1)
- ema[i] for i < N-1 is NaN (undefined) and must not be read as a value.

If fewer than N closes are supplied the result is empty (insufficient
history), not an error.

We use a manual recursion (instead of pandas ewm) so the seeding convention is
explicit and the output is bit-reproducible for a given input.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np
import pandas as pd

ArrayLike = Union[Sequence[float], np.ndarray]


def ema_alpha(length: int) -> float:
    return 2.0 / (float(length) + 1.0)


def ema_series(closes: ArrayLike, length: int) -> np.ndarray:
    """SMA-seeded EMA aligned index-for-index with ``closes``.

    Returns an empty array when ``len(closes) < length``.
    """

    n = int(length)
    if n < 1:
        raise ValueError("length must be >= 1")

    x = np.asarray(closes, dtype=float)
    if x.ndim != 1:
        raise ValueError("closes must be one-dimensional")
    if x.size < n:
        return np.empty(0, dtype=float)

    alpha = ema_alpha(n)
    out = np.full(x.size, np.nan, dtype=float)

    seed = 0.0
    for i in range(n):
        seed += float(x[i])
    prev = seed / n
    out[n - 1] = prev

    for i in range(n, x.size):
        prev = alpha * float(x[i]) + (1.0 - alpha) * prev
        out[i] = prev

    return out


def ema_close(close: pd.Series, *, length: int) -> pd.Series:
    """Series wrapper around :func:`ema_series` keeping the close index.

    Insufficient history yields an all-NaN Series on the same index.
    """

    vals = ema_series(close.to_numpy(dtype=float), length)
    if vals.size == 0:
        vals = np.full(len(close), np.nan, dtype=float)
    return pd.Series(vals, index=close.index, name=f"ema{int(length)}")


__all__ = ["ema_alpha", "ema_series", "ema_close"]
