"""Aggregation of daily records into chart buckets.

Functions in this module group a daily series by period key and sum every
metric within each group.

Expectations:
- Input: `DailyRecord`s ordered ascending by date, one per day.
- Output: `AggregateBucket`s ordered ascending by anchor date.
- Always aggregate from the raw daily series; aggregating an already
  aggregated series is not equivalent.
"""
from __future__ import annotations

import logging
import math
from datetime import date
from decimal import Decimal
from numbers import Integral, Real
from typing import Any, Callable, Mapping, Sequence

from retail_calendar.aggregate.periods import (
    PeriodKey,
    anchor_date,
    bucket_id,
    bucket_label,
    period_key,
    short_date_label,
)
from retail_calendar.models import AggregateBucket, DailyRecord, Granularity

log = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return not value.is_nan()
    return isinstance(value, Real) and not math.isnan(value)


def _total(values: list[Any]) -> Any:
    # Decimal does not add to float
    if any(isinstance(v, Decimal) for v in values) and any(isinstance(v, float) for v in values):
        values = [float(v) if isinstance(v, Decimal) else v for v in values]
    return sum(values)


def round_half_up(value: Any) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2).

    Integers pass through unchanged. The fractional part is compared exactly,
    so large totals and values just below .5 are not pushed over by float
    addition.
    """
    if isinstance(value, Integral):
        return int(value)
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def sum_metrics(records: Sequence[DailyRecord]) -> dict[str, int]:
    """Sum each metric of the first record across `records`.

    Non-numeric or missing values are skipped; metrics with no numeric
    value at all are left out of the result. Sums are rounded half-up.
    """
    if not records:
        return {}

    result: dict[str, int] = {}
    for name in records[0].metrics:
        values = [r.metrics[name] for r in records
                  if name in r.metrics and _is_number(r.metrics[name])]
        if not values:
            continue
        result[name] = round_half_up(_total(values))
    return result


def _day_buckets(
    daily: Sequence[DailyRecord],
    day_label: Callable[[date], str],
) -> list[AggregateBucket]:
    return [
        AggregateBucket(
            bucket_id=r.date.isoformat(),
            label=day_label(r.date),
            anchor_date=r.date,
            metrics=dict(r.metrics),
        )
        for r in daily
    ]


def group_by_period(
    daily: Sequence[DailyRecord],
    granularity: Granularity,
) -> dict[PeriodKey, list[DailyRecord]]:
    """Group records by period key, keeping first-seen key order."""
    groups: dict[PeriodKey, list[DailyRecord]] = {}
    for record in daily:
        groups.setdefault(period_key(record.date, granularity), []).append(record)
    return groups


def aggregate(
    daily: Sequence[DailyRecord],
    granularity: Granularity | str,
    day_label: Callable[[date], str] | None = None,
) -> list[AggregateBucket]:
    """Re-bucket a daily series at the requested granularity.

    Args:
        daily: Daily records, ascending by date.
        granularity: One of day/week/month/quarter/year.
        day_label: Label formatter for day buckets (default `yy/M/D`).

    Returns:
        Buckets ordered by ascending anchor date. `day` granularity returns
        one bucket per record with metrics unchanged.

    Raises:
        ValueError: if `granularity` is not a known zoom level.
    """
    granularity = Granularity(granularity)
    if not daily:
        return []

    if granularity is Granularity.DAY:
        return _day_buckets(daily, day_label or short_date_label)

    groups = group_by_period(daily, granularity)
    buckets = [
        AggregateBucket(
            bucket_id=bucket_id(key, granularity),
            label=bucket_label(key, granularity),
            anchor_date=anchor_date(key, granularity),
            metrics=sum_metrics(records),
        )
        for key, records in groups.items()
    ]
    buckets.sort(key=lambda b: b.anchor_date)

    log.debug(
        "Aggregated %d daily records into %d %s buckets",
        len(daily), len(buckets), granularity.value,
    )
    return buckets


def aggregate_mapping(
    daily: Sequence[Mapping[str, Any]],
    granularity: Granularity | str,
    date_field: str = "date",
) -> list[dict[str, Any]]:
    """Aggregate chart-shaped dicts (`{date, **metrics}`) into chart-shaped dicts.

    Keys `id` and `name` of the input rows are ignored; every other key
    besides `date_field` is treated as a metric.
    """
    records = [
        DailyRecord(
            date=row[date_field],
            metrics={k: v for k, v in row.items() if k not in (date_field, "id", "name")},
        )
        for row in daily
    ]
    return [b.to_chart_record() for b in aggregate(records, granularity)]
