"""Fiscal year helpers.

The calendar view can lay out a year either January-first or starting at the
fiscal start month. The default fiscal year starts on February 1st.
"""
from __future__ import annotations

from datetime import date, timedelta

from retail_calendar.models import FiscalYearConfig, MonthRef, to_day


def calendar_year_sequence(year: int) -> list[MonthRef]:
    """Return January..December of `year`."""
    return [MonthRef(month, year) for month in range(12)]


def build_fiscal_year_sequence(config: FiscalYearConfig, anchor_year: int) -> list[MonthRef]:
    """Return the 12 months of a fiscal year in display order.

    Starts at (`config.start_month`, `anchor_year`); months that wrap past
    December belong to `anchor_year + 1`.

    Example:
        >>> seq = build_fiscal_year_sequence(FiscalYearConfig(start_month=1), 2025)
        >>> seq[0], seq[-1]
        (MonthRef(month=1, year=2025), MonthRef(month=0, year=2026))
    """
    sequence: list[MonthRef] = []
    for offset in range(12):
        month = (config.start_month + offset) % 12
        year = anchor_year + 1 if month < config.start_month else anchor_year
        sequence.append(MonthRef(month, year))
    return sequence


def fiscal_year_of(day: date, config: FiscalYearConfig) -> int:
    """Return the fiscal year `day` belongs to.

    Dates before the fiscal start (month/day) belong to the previous
    fiscal year.
    """
    day = to_day(day)
    month = day.month - 1
    if month < config.start_month or (
        month == config.start_month and day.day < config.start_day
    ):
        return day.year - 1
    return day.year


def fiscal_year_start_date(fiscal_year: int, config: FiscalYearConfig) -> date:
    """Return the first day of `fiscal_year`."""
    return date(fiscal_year, config.start_month + 1, config.start_day)


def fiscal_year_end_date(fiscal_year: int, config: FiscalYearConfig) -> date:
    """Return the last day of `fiscal_year` (the day before the next one starts)."""
    return fiscal_year_start_date(fiscal_year + 1, config) - timedelta(days=1)
