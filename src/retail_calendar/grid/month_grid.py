"""Month grid builder.

A month grid is always 42 cells (6 Sunday-first weeks) so that every month
card in the calendar view has the same height:

    [previous month tail] + [current month] + [next month head]

Months are 0-based (0 = January, 11 = December) to match the dashboard's
date handling.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Sequence, TypeVar

from retail_calendar.models import DayCell, MonthRef

T = TypeVar("T")

GRID_CELLS = 42
WEEK_DAYS = 7

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def _check_month(month: int) -> None:
    if not 0 <= month <= 11:
        raise ValueError(f"month must be in 0..11, got {month!r}")


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in a 0-based month."""
    _check_month(month)
    if month == 1:
        return 29 if is_leap_year(year) else 28
    if month in (3, 5, 8, 10):
        return 30
    return 31


def first_weekday(month: int, year: int) -> int:
    """Return the weekday of the 1st of the month, 0 = Sunday ... 6 = Saturday."""
    _check_month(month)
    # date.weekday() is Monday-based
    return (date(year, month + 1, 1).weekday() + 1) % WEEK_DAYS


def previous_month(month: int, year: int) -> MonthRef:
    """Return the month before (`month`, `year`), wrapping into the prior year."""
    _check_month(month)
    if month == 0:
        return MonthRef(11, year - 1)
    return MonthRef(month - 1, year)


def next_month(month: int, year: int) -> MonthRef:
    """Return the month after (`month`, `year`), wrapping into the next year."""
    _check_month(month)
    if month == 11:
        return MonthRef(0, year + 1)
    return MonthRef(month + 1, year)


def build_month_grid(month: int, year: int) -> list[DayCell]:
    """Return the 42 day cells of a Sunday-first month view.

    The first `first_weekday` cells are the last days of the previous month,
    followed by every day of the month, padded with the first days of the
    next month.

    Args:
        month: 0-based month (0 = January).
        year: Calendar year.

    Raises:
        ValueError: if `month` is outside 0..11.
    """
    leading = first_weekday(month, year)
    current = days_in_month(month, year)
    prev = previous_month(month, year)
    prev_days = days_in_month(prev.month, prev.year)

    cells = [
        DayCell(day=prev_days - leading + i + 1, is_current_month=False)
        for i in range(leading)
    ]
    cells.extend(DayCell(day=d, is_current_month=True) for d in range(1, current + 1))
    trailing = GRID_CELLS - len(cells)
    cells.extend(DayCell(day=d, is_current_month=False) for d in range(1, trailing + 1))
    return cells


def grid_dates(month: int, year: int) -> list[tuple[date, DayCell]]:
    """Pair each cell of `build_month_grid` with the calendar date it shows."""
    cells = build_month_grid(month, year)
    origin = date(year, month + 1, 1) - timedelta(days=first_weekday(month, year))
    return [(origin + timedelta(days=i), cell) for i, cell in enumerate(cells)]


def grid_rows(cells: Sequence[T]) -> list[list[T]]:
    """Split a flat 42-item grid (cells, overlays, ...) into its six week rows."""
    return [list(cells[i:i + WEEK_DAYS]) for i in range(0, len(cells), WEEK_DAYS)]
