"""pandas adapters around the aggregator.

The chart layer consumes tables shaped `id, name, date, <metric columns>`;
these helpers convert a daily DataFrame into records, aggregate them, and
materialize the buckets back into that shape.
"""
from __future__ import annotations

import logging

import pandas as pd

from retail_calendar.aggregate.rollup import aggregate
from retail_calendar.clean.transform import clean_daily_partition
from retail_calendar.clean.validate import validate_partition
from retail_calendar.models import AggregateBucket, DailyRecord, Granularity

log = logging.getLogger(__name__)

CHART_COLUMNS = ["id", "name", "date"]


def records_from_frame(pdf: pd.DataFrame, date_column: str = "date") -> list[DailyRecord]:
    """Clean and validate a daily DataFrame into ascending `DailyRecord`s."""
    records, bad = validate_partition(clean_daily_partition(pdf, date_column), date_column)
    log.info("Validated %d daily records (bad=%d)", len(records), bad)
    return records


def buckets_to_frame(buckets: list[AggregateBucket]) -> pd.DataFrame:
    """Materialize buckets as a chart-shaped DataFrame.

    Returns:
        DataFrame with columns `id`, `name`, `date` followed by one column per
        metric (first-seen order). `date` holds `datetime.date` values.
    """
    if not buckets:
        return pd.DataFrame(columns=CHART_COLUMNS)
    return pd.DataFrame([b.to_chart_record() for b in buckets])


def aggregate_frame(
    pdf: pd.DataFrame,
    granularity: Granularity | str,
    date_column: str = "date",
) -> pd.DataFrame:
    """Aggregate a raw daily DataFrame into a chart-shaped DataFrame."""
    return buckets_to_frame(aggregate(records_from_frame(pdf, date_column), granularity))
