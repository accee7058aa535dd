from __future__ import annotations

from datetime import date

import pandas as pd

from retail_calendar.ingest.synthetic import generate_daily_sales


def test_one_row_per_day() -> None:
    pdf = generate_daily_sales(date(2024, 2, 1), date(2024, 2, 29))
    assert len(pdf) == 29
    assert list(pdf.columns) == ["date", "gmv", "transaction", "net_sales"]
    assert pdf["date"].is_monotonic_increasing
    assert (pdf[["gmv", "transaction", "net_sales"]] > 0).all().all()


def test_same_seed_same_series() -> None:
    a = generate_daily_sales(date(2025, 1, 1), date(2025, 3, 31), seed=3)
    b = generate_daily_sales(date(2025, 1, 1), date(2025, 3, 31), seed=3)
    c = generate_daily_sales(date(2025, 1, 1), date(2025, 3, 31), seed=4)
    pd.testing.assert_frame_equal(a, b)
    assert not a["gmv"].equals(c["gmv"])


def test_inverted_range_is_empty() -> None:
    assert generate_daily_sales(date(2025, 2, 1), date(2025, 1, 1)).empty
