from __future__ import annotations

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from retail_calendar.models import AggregateBucket, DailyRecord, DateInterval, DayCell, FiscalYearConfig


def test_interval_accepts_datetimes_and_strips_time() -> None:
    iv = DateInterval(start=datetime(2025, 1, 13, 9, 30), end="2025-01-19", label="FF")
    assert iv.start == date(2025, 1, 13)
    assert iv.end == date(2025, 1, 19)


def test_inverted_interval_is_allowed() -> None:
    iv = DateInterval(start=date(2025, 2, 1), end=date(2025, 1, 1))
    assert iv.start > iv.end


def test_interval_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        DateInterval(start=date(2025, 1, 1), end=date(2025, 1, 2), colour="red")


def test_fiscal_config_range() -> None:
    assert FiscalYearConfig().start_month == 1
    with pytest.raises(ValidationError):
        FiscalYearConfig(start_month=12)


def test_day_cell_range() -> None:
    with pytest.raises(ValidationError):
        DayCell(day=0, is_current_month=True)


def test_daily_record_tolerates_non_numeric_metrics() -> None:
    rec = DailyRecord(date=datetime(2025, 1, 1, 12), metrics={"sales": "n/a"})
    assert rec.date == date(2025, 1, 1)


def test_bucket_chart_record_shape() -> None:
    b = AggregateBucket(bucket_id="2025-Q3", label="2025-Q3", anchor_date=date(2025, 8, 15), metrics={"gmv": 10})
    assert b.to_chart_record() == {"id": "2025-Q3", "name": "2025-Q3", "date": date(2025, 8, 15), "gmv": 10}
