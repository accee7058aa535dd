"""Pydantic models shared by the grid, overlay and aggregation layers.

All models are frozen: grids, intervals and buckets are created fresh on every
call and never mutated afterwards.
"""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def to_day(value: dt.date | dt.datetime) -> dt.date:
    """Strip the time component, returning the calendar date of `value`."""
    if isinstance(value, dt.datetime):
        return value.date()
    return value


# Last usable start day per 0-based month; February excludes the leap day.
FISCAL_START_DAY_LIMITS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class Granularity(str, Enum):
    """Zoom levels understood by the aggregator."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"


class MonthRef(NamedTuple):
    """A (0-based month, year) pair."""
    month: int
    year: int


class DayCell(BaseModel):
    """One of the 42 positions of a month grid.

    Attributes:
        day: Day-of-month in whichever month the cell belongs to.
        is_current_month: False for leading/trailing days of adjacent months.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)
    day: int = Field(..., ge=1, le=31)
    is_current_month: bool


class FiscalYearConfig(BaseModel):
    """Fiscal year start; `start_month` is 0-based (1 = February).

    `start_day` must exist in every year, so February is capped at the 28th.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)
    start_month: int = Field(1, ge=0, le=11)
    start_day: int = Field(1, ge=1, le=31)

    @model_validator(mode="after")
    def _day_fits_month(self) -> "FiscalYearConfig":
        limit = FISCAL_START_DAY_LIMITS[self.start_month]
        if self.start_day > limit:
            raise ValueError(
                f"start_day {self.start_day} does not exist in month {self.start_month} (max {limit})"
            )
        return self


class DateInterval(BaseModel):
    """An inclusive date range with caller-owned presentation metadata.

    `start <= end` is not enforced; an inverted interval simply never
    matches any date.

    Attributes:
        start: First day of the interval.
        end: Last day of the interval (inclusive).
        label: Display name, e.g. the event name.
        color: Text colour for highlighted cells.
        background_color: Background colour for highlighted cells.
        background_opacity: Optional background opacity in [0, 1].
        channel: Optional sales channel tag (e.g. 'Retail', 'EC').
        duration: Explicit duration in days, overriding the computed one.
        link: Optional URL with details about the event.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)
    start: dt.date
    end: dt.date
    label: str | None = None
    color: str | None = None
    background_color: str | None = None
    background_opacity: float | None = Field(None, ge=0.0, le=1.0)
    channel: str | None = None
    duration: int | None = Field(None, ge=0)
    link: str | None = None

    @field_validator("start", "end", mode="before")
    @classmethod
    def _normalize_to_midnight(cls, value: Any) -> Any:
        if isinstance(value, dt.datetime):
            return value.date()
        return value


class DailyRecord(BaseModel):
    """One day of a time series.

    Metric values are expected to be numbers; anything else is tolerated
    here and skipped by the rollup.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)
    date: dt.date
    metrics: dict[str, Any] = Field(default_factory=dict)

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_to_midnight(cls, value: Any) -> Any:
        if isinstance(value, dt.datetime):
            return value.date()
        return value


class AggregateBucket(BaseModel):
    """One aggregated point of a time series.

    Attributes:
        bucket_id: Stable identifier, e.g. '2025-W03' or '2025-Q3'.
        label: Short display label for chart axes.
        anchor_date: Representative date inside the bucket used for
            date-range filtering (not necessarily the first day).
        metrics: Summed metric values.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)
    bucket_id: str
    label: str
    anchor_date: dt.date
    metrics: dict[str, Any] = Field(default_factory=dict)

    def to_chart_record(self) -> dict[str, Any]:
        """Return the `{id, name, date, **metrics}` shape used by the charts."""
        return {
            "id": self.bucket_id,
            "name": self.label,
            "date": self.anchor_date,
            **self.metrics,
        }
