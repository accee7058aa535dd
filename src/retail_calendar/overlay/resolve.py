"""Interval overlay resolution.

All comparisons are on calendar dates: the query date and both interval
bounds are normalized to midnight, and an interval matches when
`start <= day <= end`.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Sequence

from retail_calendar.grid.month_grid import grid_dates
from retail_calendar.models import DateInterval, DayCell, to_day


@dataclass(frozen=True)
class CellOverlay:
    """A grid cell, the date behind it, and the intervals covering it."""
    date: date
    cell: DayCell
    intervals: tuple[DateInterval, ...]


def _covers(interval: DateInterval, day: date) -> bool:
    return to_day(interval.start) <= day <= to_day(interval.end)


def resolve_intervals_for_date(
    day: date | datetime,
    intervals: Sequence[DateInterval],
) -> list[DateInterval]:
    """Return every interval containing `day`, in input order.

    No sorting or de-duplication is applied, so the first-declared interval
    is always first. Inverted intervals (start > end) never match.

    Args:
        day: Query date; a datetime is reduced to its calendar date.
        intervals: Candidate intervals.

    Returns:
        The matching intervals (possibly empty).
    """
    day = to_day(day)
    return [interval for interval in intervals if _covers(interval, day)]


def first_match(
    day: date | datetime,
    intervals: Sequence[DateInterval],
) -> DateInterval | None:
    """Return the first-declared interval containing `day`, if any."""
    day = to_day(day)
    return next((interval for interval in intervals if _covers(interval, day)), None)


def resolve_month_overlays(
    month: int,
    year: int,
    intervals: Sequence[DateInterval],
    include_other_months: bool = False,
) -> list[CellOverlay]:
    """Resolve overlays for all 42 cells of a month grid.

    Args:
        month: 0-based month.
        year: Calendar year.
        intervals: Candidate intervals.
        include_other_months: When False (default) leading/trailing cells of
            adjacent months never receive overlays, so faded days stay plain.

    Returns:
        One `CellOverlay` per grid cell, in grid order.
    """
    overlays: list[CellOverlay] = []
    for day, cell in grid_dates(month, year):
        if cell.is_current_month or include_other_months:
            matched = tuple(resolve_intervals_for_date(day, intervals))
        else:
            matched = ()
        overlays.append(CellOverlay(date=day, cell=cell, intervals=matched))
    return overlays


def interval_duration_days(interval: DateInterval) -> int:
    """Return the event length in days, counting both ends.

    An explicit `duration` on the interval wins over the computed span.
    """
    if interval.duration is not None:
        return interval.duration
    return abs((to_day(interval.end) - to_day(interval.start)).days) + 1


def filter_intervals_by_channel(
    intervals: Sequence[DateInterval],
    channels: Iterable[str],
) -> list[DateInterval]:
    """Keep intervals whose channel is selected.

    Intervals without a channel (e.g. public holidays) are always kept.
    Channel names compare case-insensitively.
    """
    selected = {c.lower() for c in channels}
    return [
        interval for interval in intervals
        if interval.channel is None or interval.channel.lower() in selected
    ]
