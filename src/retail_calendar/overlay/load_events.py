"""Load event intervals from a CSV file.

Expected columns: `start`, `end` and any of the optional metadata columns
`label`, `color`, `background_color`, `background_opacity`, `channel`,
`duration`, `link`. A `name` column is accepted as an alias for `label`.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pandas as pd
from pydantic import ValidationError

from retail_calendar.models import DateInterval

log = logging.getLogger(__name__)

OPTIONAL_COLUMNS = [
    "label", "color", "background_color", "background_opacity",
    "channel", "duration", "link",
]


def intervals_from_frame(pdf: pd.DataFrame) -> tuple[list[DateInterval], int]:
    """Validate event rows into `DateInterval`s.

    Args:
        pdf: DataFrame with `start`/`end` columns plus optional metadata.

    Returns:
        A tuple of (intervals_in_row_order, bad_count).
    """
    if "label" not in pdf.columns and "name" in pdf.columns:
        pdf = pdf.rename(columns={"name": "label"})
    missing = {"start", "end"} - set(pdf.columns)
    if missing:
        raise ValueError(f"event table is missing columns: {sorted(missing)}")

    pdf = pdf.copy()
    pdf["start"] = pd.to_datetime(pdf["start"], errors="coerce", format="ISO8601").dt.date
    pdf["end"] = pd.to_datetime(pdf["end"], errors="coerce", format="ISO8601").dt.date
    cols = ["start", "end"] + [c for c in OPTIONAL_COLUMNS if c in pdf.columns]

    good: list[DateInterval] = []
    bad = 0
    for row in pdf[cols].to_dict(orient="records"):
        # NaN/NaT from empty CSV cells mean "not set"
        rec: dict[str, Any] = {k: (None if pd.isna(v) else v) for k, v in row.items()}
        try:
            good.append(DateInterval.model_validate(rec))
        except ValidationError as e:
            log.warning("Skipping invalid event row %s: %s", rec, e.errors()[0]["msg"])
            bad += 1
    return good, bad


def load_intervals(path: Path) -> list[DateInterval]:
    """Read an events CSV and return its valid intervals in file order."""
    pdf = pd.read_csv(path)
    intervals, bad = intervals_from_frame(pdf)
    log.info("Loaded %d event intervals from %s (bad=%d)", len(intervals), path, bad)
    return intervals
