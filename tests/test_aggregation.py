from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest

from retail_calendar.aggregate.periods import iso_week, iso_week_monday, week_start
from retail_calendar.aggregate.rollup import aggregate, aggregate_mapping, round_half_up, sum_metrics
from retail_calendar.models import DailyRecord, Granularity


def _daily(start: date, days: int, **metrics: float) -> list[DailyRecord]:
    return [
        DailyRecord(date=start + timedelta(days=i), metrics=dict(metrics))
        for i in range(days)
    ]


def test_day_granularity_is_identity() -> None:
    daily = [
        DailyRecord(date=date(2025, 1, 9), metrics={"sales": 10.4, "units": 3}),
        DailyRecord(date=date(2025, 1, 10), metrics={"sales": 7.6, "units": None}),
    ]
    buckets = aggregate(daily, "day")

    assert [b.bucket_id for b in buckets] == ["2025-01-09", "2025-01-10"]
    assert [b.label for b in buckets] == ["25/1/9", "25/1/10"]
    assert [b.anchor_date for b in buckets] == [r.date for r in daily]
    assert [b.metrics for b in buckets] == [r.metrics for r in daily]


def test_day_label_is_caller_defined() -> None:
    daily = _daily(date(2025, 3, 4), 1, sales=1)
    buckets = aggregate(daily, Granularity.DAY, day_label=lambda d: d.strftime("%b %d"))
    assert buckets[0].label == "Mar 04"


def test_full_week_sums_to_one_bucket() -> None:
    # Monday 2025-01-06 .. Sunday 2025-01-12
    buckets = aggregate(_daily(date(2025, 1, 6), 7, sales=10), "week")

    assert len(buckets) == 1
    assert buckets[0].metrics == {"sales": 70}
    assert buckets[0].bucket_id == "2025-W02"
    assert buckets[0].anchor_date == date(2025, 1, 6)
    assert buckets[0].label == "25/1/6"


def test_week_spanning_new_year_uses_iso_year() -> None:
    # Monday 2025-12-29 .. Sunday 2026-01-04 is ISO week 1 of 2026
    buckets = aggregate(_daily(date(2025, 12, 29), 7, sales=1), "week")

    assert [b.bucket_id for b in buckets] == ["2026-W01"]
    assert buckets[0].anchor_date == date(2025, 12, 29)
    assert buckets[0].metrics == {"sales": 7}


def test_partial_weeks_split_on_monday() -> None:
    # Saturday 2025-01-04 .. Tuesday 2025-01-07
    buckets = aggregate(_daily(date(2025, 1, 4), 4, sales=1), "week")
    assert [(b.bucket_id, b.metrics["sales"]) for b in buckets] == [("2025-W01", 2), ("2025-W02", 2)]
    assert buckets[0].anchor_date == date(2024, 12, 30)


def test_iso_week_matches_isocalendar() -> None:
    day = date(2019, 12, 20)
    while day <= date(2027, 1, 10):
        iso = day.isocalendar()
        assert iso_week(day) == (iso[0], iso[1])
        assert iso_week_monday(iso[0], iso[1]) == week_start(day)
        day += timedelta(days=1)


def test_month_buckets() -> None:
    daily = _daily(date(2025, 1, 30), 4, sales=2)
    buckets = aggregate(daily, "month")

    assert [b.bucket_id for b in buckets] == ["2025-01", "2025-02"]
    assert [b.label for b in buckets] == ["25/Jan", "25/Feb"]
    assert [b.anchor_date for b in buckets] == [date(2025, 1, 15), date(2025, 2, 15)]
    assert [b.metrics["sales"] for b in buckets] == [4, 4]


@pytest.mark.parametrize("day", [date(2025, 7, 1), date(2025, 8, 20), date(2025, 9, 30)])
def test_quarter_anchor_is_middle_month_15th(day: date) -> None:
    buckets = aggregate([DailyRecord(date=day, metrics={"sales": 1})], "quarter")
    assert buckets[0].bucket_id == "2025-Q3"
    assert buckets[0].label == "2025-Q3"
    assert buckets[0].anchor_date == date(2025, 8, 15)


def test_year_buckets_anchor_on_july_first() -> None:
    daily = _daily(date(2024, 12, 30), 4, sales=5)
    buckets = aggregate(daily, "year")

    assert [(b.bucket_id, b.label) for b in buckets] == [("2024", "2024"), ("2025", "2025")]
    assert [b.anchor_date for b in buckets] == [date(2024, 7, 1), date(2025, 7, 1)]
    assert [b.metrics["sales"] for b in buckets] == [10, 10]


def test_buckets_are_ordered_by_anchor_date() -> None:
    buckets = aggregate(_daily(date(2024, 11, 1), 200, sales=1), "quarter")
    anchors = [b.anchor_date for b in buckets]
    assert anchors == sorted(anchors)
    assert [b.bucket_id for b in buckets] == ["2024-Q4", "2025-Q1", "2025-Q2"]


def test_sums_round_half_up() -> None:
    daily = [
        DailyRecord(date=date(2025, 1, 1), metrics={"sales": 1.5, "fee": 0.2}),
        DailyRecord(date=date(2025, 1, 2), metrics={"sales": 1.0, "fee": 0.2}),
    ]
    assert aggregate(daily, "month")[0].metrics == {"sales": 3, "fee": 0}
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2


def test_integer_totals_are_exact() -> None:
    big = 10**17 + 1
    buckets = aggregate([DailyRecord(date=date(2025, 3, 4), metrics={"gmv": big})], "month")
    assert buckets[0].metrics == {"gmv": big}
    assert round_half_up(0.49999999999999994) == 0
    assert round_half_up(-0.5) == 0
    assert round_half_up(2.0**60 + 0.0) == 2**60


def test_decimal_values_are_summed() -> None:
    daily = [
        DailyRecord(date=date(2025, 1, 1), metrics={"sales": Decimal("1.25"), "fee": Decimal("0.5")}),
        DailyRecord(date=date(2025, 1, 2), metrics={"sales": Decimal("1.25"), "fee": 0.25}),
        DailyRecord(date=date(2025, 1, 3), metrics={"sales": Decimal("NaN"), "fee": 1}),
    ]
    assert sum_metrics(daily) == {"sales": 3, "fee": 2}


def test_non_numeric_values_are_skipped() -> None:
    daily = [
        DailyRecord(date=date(2025, 1, 1), metrics={"sales": 10, "units": None}),
        DailyRecord(date=date(2025, 1, 2), metrics={"sales": "n/a", "units": 2}),
        DailyRecord(date=date(2025, 1, 3), metrics={"sales": float("nan"), "units": True}),
        DailyRecord(date=date(2025, 1, 4), metrics={"sales": 5, "units": 3}),
    ]
    assert sum_metrics(daily) == {"sales": 15, "units": 5}


def test_metric_without_values_is_omitted() -> None:
    daily = [
        DailyRecord(date=date(2025, 1, 1), metrics={"sales": 1, "returns": None}),
        DailyRecord(date=date(2025, 1, 2), metrics={"sales": 1, "returns": None, "late": 4}),
    ]
    # only metrics of the first record are rolled up
    assert aggregate(daily, "year")[0].metrics == {"sales": 2}


@pytest.mark.parametrize("granularity", [g.value for g in Granularity])
def test_empty_input_gives_no_buckets(granularity: str) -> None:
    assert aggregate([], granularity) == []


def test_unknown_granularity_is_rejected() -> None:
    with pytest.raises(ValueError):
        aggregate(_daily(date(2025, 1, 1), 1, sales=1), "fortnight")


def test_aggregate_chart_shaped_rows() -> None:
    rows = [
        {"id": "2025-01-01", "name": "25/1/1", "date": date(2025, 1, 1), "gmv": 100, "transaction": 7},
        {"id": "2025-01-02", "name": "25/1/2", "date": date(2025, 1, 2), "gmv": 50, "transaction": 3},
    ]
    out = aggregate_mapping(rows, "month")
    assert out == [{"id": "2025-01", "name": "25/Jan", "date": date(2025, 1, 15), "gmv": 150, "transaction": 10}]
