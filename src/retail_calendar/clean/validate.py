"""Validation utilities for cleaned daily tables.

This module validates rows against the Pydantic `DailyRecord` model and
converts pandas timestamps and NaN markers into native Python values prior to
validation.
"""
from __future__ import annotations

import logging
import math
from typing import Any

import pandas as pd
from pydantic import ValidationError

from retail_calendar.clean.transform import metric_columns
from retail_calendar.models import DailyRecord

log = logging.getLogger(__name__)


def _native(value: Any) -> Any:
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def validate_partition(
    pdf: pd.DataFrame,
    date_column: str = "date",
) -> tuple[list[DailyRecord], int]:
    """Validate a pandas partition of daily rows using Pydantic.

    Rows are sorted by date and duplicate dates keep their first row. Missing
    metric values are kept as None so every record carries the same metric
    names.

    Args:
        pdf: Pandas DataFrame for the partition.
        date_column: Name of the date column.

    Returns:
        A tuple of (list_of_validated_records, bad_count).
    """
    good: list[DailyRecord] = []
    bad = 0

    if pdf.empty:
        return good, bad

    pdf = pdf.sort_values(date_column, kind="stable")
    dupes = int(pdf[date_column].duplicated().sum())
    if dupes:
        log.warning("Dropping %d rows with duplicate dates", dupes)
        pdf = pdf.drop_duplicates(subset=[date_column], keep="first")

    metrics = metric_columns(pdf.columns, date_column)
    for rec in pdf.to_dict(orient="records"):
        day = rec[date_column]
        if isinstance(day, pd.Timestamp):
            day = day.to_pydatetime()
        try:
            good.append(DailyRecord.model_validate({
                "date": day,
                "metrics": {name: _native(rec[name]) for name in metrics},
            }))
        except ValidationError:
            bad += 1

    if bad:
        log.warning("Rejected %d invalid daily rows", bad)
    return good, bad
