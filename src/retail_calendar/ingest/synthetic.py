"""Synthetic daily sales series.

`generate_daily_sales` produces one row per day with three metrics that follow
different, recognisable patterns so every zoom level of the trend chart has
something to show:

- `gmv`: yearly growth, Q4-heavy seasonality, weekend boost, mid-month peak
- `net_sales`: slower growth, Q2/Q4 peaks, stronger weekdays
- `transaction`: tracks `gmv`

Noise comes from a seeded numpy generator, so the same arguments always give
the same table.
"""

from __future__ import annotations

from datetime import date
import logging

import numpy as np
import pandas as pd

log = logging.getLogger(__name__)

BASE_GMV = 400
BASE_TRANSACTIONS = 28
BASE_NET_SALES = 340


def _round_half_up(values: np.ndarray) -> np.ndarray:
    return np.floor(values + 0.5).astype("int64")


def generate_daily_sales(
    start: date,
    end: date,
    seed: int = 42,
    base_year: int | None = None,
) -> pd.DataFrame:
    """Generate a daily sales table between `start` and `end` (inclusive).

    Args:
        start: First day of the series.
        end: Last day of the series.
        seed: Seed for the noise generator.
        base_year: Year with no growth applied (defaults to `start.year`).

    Returns:
        pandas.DataFrame with columns `date`, `gmv`, `transaction`,
        `net_sales`, one row per day in ascending order.
    """
    days = pd.date_range(start, end, freq="D")
    rng = np.random.default_rng(seed)
    base_year = start.year if base_year is None else base_year

    years_in = (days.year - base_year).to_numpy()
    month0 = (days.month - 1).to_numpy()
    dom = days.day.to_numpy()
    # pandas dayofweek: Monday=0 .. Sunday=6
    weekend = days.dayofweek.to_numpy() >= 5

    gmv_mult = (
        (1 + years_in * 0.15)
        * (1 + (month0 / 12) * 0.5)
        * np.where(weekend, 1.3, 1.0)
        * (1 + np.sin((dom / 30) * np.pi) * 0.15)
        * (0.85 + rng.random(len(days)) * 0.3)
    )
    net_mult = (
        (1 + years_in * 0.12)
        * (1 + np.sin((month0 / 12) * np.pi * 2) * 0.3)
        * np.where(weekend, 0.8, 1.2)
        * (1 + np.sin((dom / 15) * np.pi) * 0.2)
        * (0.8 + rng.random(len(days)) * 0.4)
    )

    gmv = _round_half_up(BASE_GMV * gmv_mult)
    pdf = pd.DataFrame({
        "date": days,
        "gmv": gmv,
        "transaction": _round_half_up(BASE_TRANSACTIONS * (gmv / BASE_GMV)),
        "net_sales": _round_half_up(BASE_NET_SALES * net_mult),
    })
    log.info("Generated %d synthetic daily rows (%s..%s, seed=%d)", len(pdf), start, end, seed)
    return pdf
