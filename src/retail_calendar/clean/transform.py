"""Cleaning and normalization of raw daily tables.

Transformations here are applied partition-wise using Dask. The output is a
Dask DataFrame with a midnight-normalized datetime column and numeric metric
columns, suitable for validation into `DailyRecord`s.
"""
from __future__ import annotations

import logging
from typing import Any

import pandas as pd

log = logging.getLogger(__name__)

# Columns carried by chart-shaped exports that are not metrics
NON_METRIC_COLUMNS = ("id", "name")


def metric_columns(columns: Any, date_column: str = "date") -> list[str]:
    """Return the metric columns of a daily table, in column order."""
    return [c for c in columns if c != date_column and c not in NON_METRIC_COLUMNS]


def clean_daily_partition(pdf: pd.DataFrame, date_column: str = "date") -> pd.DataFrame:
    """Clean one partition of a raw daily table.

    Parses the date column (dropping unparseable rows), strips the time of
    day, drops chart-only columns and coerces metric columns to numbers
    (unparseable values become NaN and are skipped later by the rollup).

    Args:
        pdf: Pandas DataFrame for the partition.
        date_column: Name of the column holding the record date.

    Returns:
        Cleaned Pandas DataFrame.
    """
    pdf = pdf.copy()

    # -----------------------------
    # Standardize date
    # -----------------------------
    pdf[date_column] = pd.to_datetime(pdf[date_column], errors="coerce", format="ISO8601").dt.normalize()
    pdf = pdf[pdf[date_column].notna()]

    # -----------------------------
    # Drop chart-only columns
    # -----------------------------
    pdf = pdf.drop(columns=[c for c in NON_METRIC_COLUMNS if c in pdf.columns])

    # -----------------------------
    # Coerce metrics
    # -----------------------------
    for col in metric_columns(pdf.columns, date_column):
        pdf[col] = pd.to_numeric(pdf[col], errors="coerce").astype("float64")

    return pdf


def clean_daily_ddf(ddf: Any, date_column: str = "date") -> Any:
    """Clean a raw daily Dask DataFrame.

    Returns:
        Transformed Dask DataFrame with a stable schema for validation.
    """
    log.info("Starting clean_daily_ddf transformation")
    if date_column not in ddf.columns:
        raise ValueError(f"daily table has no {date_column!r} column")

    meta = clean_daily_partition(ddf._meta, date_column)
    return ddf.map_partitions(clean_daily_partition, date_column, meta=meta)
