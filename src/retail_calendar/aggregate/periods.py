"""Bucket keys, identifiers, labels and anchor dates per granularity.

Each granularity maps a date to a structured period key (a tuple of ints).
The key determines the bucket's id, label and anchor date:

| granularity | key                  | bucket_id    | anchor_date               |
|-------------|----------------------|--------------|---------------------------|
| day         | (year, month, day)   | 2025-01-09   | the day itself            |
| week        | (iso_year, iso_week) | 2026-W01     | Monday of the ISO week    |
| month       | (year, month)        | 2025-01      | 15th of the month         |
| quarter     | (year, quarter)      | 2025-Q3      | 15th of the middle month  |
| year        | (year,)              | 2025         | July 1st                  |
"""
from __future__ import annotations

import math
from datetime import date, timedelta
from typing import Callable

from retail_calendar.models import Granularity

PeriodKey = tuple[int, ...]

MONTH_ABBREVS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                 "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def short_date_label(day: date) -> str:
    """Return the compact axis label `yy/M/D`, e.g. '25/1/9'."""
    return f"{day.year % 100:02d}/{day.month}/{day.day}"


# =========================================================
# ISO WEEKS
# =========================================================

def week_start(day: date) -> date:
    """Return the Monday of the week containing `day`."""
    return day - timedelta(days=day.isoweekday() - 1)


def iso_week(day: date) -> tuple[int, int]:
    """Return (iso_year, iso_week_number) for `day`.

    The date is moved to the Thursday of its Monday-based week; the week
    number is that Thursday's day-of-year divided by seven, rounded up, and
    the ISO year is the Thursday's calendar year.
    """
    thursday = day + timedelta(days=4 - day.isoweekday())
    day_of_year = thursday.timetuple().tm_yday
    return thursday.year, math.ceil(day_of_year / 7)


def iso_week_monday(iso_year: int, week: int) -> date:
    """Return the Monday that starts ISO week `week` of `iso_year`."""
    # Jan 4th is always in week 1
    return week_start(date(iso_year, 1, 4)) + timedelta(weeks=week - 1)


# =========================================================
# PERIOD KEYS
# =========================================================

def period_key(day: date, granularity: Granularity) -> PeriodKey:
    """Return the structured bucket key of `day` at `granularity`."""
    granularity = Granularity(granularity)
    if granularity is Granularity.DAY:
        return (day.year, day.month, day.day)
    if granularity is Granularity.WEEK:
        return iso_week(day)
    if granularity is Granularity.MONTH:
        return (day.year, day.month)
    if granularity is Granularity.QUARTER:
        return (day.year, (day.month - 1) // 3 + 1)
    return (day.year,)


def bucket_id(key: PeriodKey, granularity: Granularity) -> str:
    """Return the string identifier of a bucket key."""
    granularity = Granularity(granularity)
    if granularity is Granularity.DAY:
        return date(*key).isoformat()
    if granularity is Granularity.WEEK:
        return f"{key[0]}-W{key[1]:02d}"
    if granularity is Granularity.MONTH:
        return f"{key[0]}-{key[1]:02d}"
    if granularity is Granularity.QUARTER:
        return f"{key[0]}-Q{key[1]}"
    return f"{key[0]}"


def anchor_date(key: PeriodKey, granularity: Granularity) -> date:
    """Return the representative date of a bucket key."""
    granularity = Granularity(granularity)
    if granularity is Granularity.DAY:
        return date(*key)
    if granularity is Granularity.WEEK:
        return iso_week_monday(key[0], key[1])
    if granularity is Granularity.MONTH:
        return date(key[0], key[1], 15)
    if granularity is Granularity.QUARTER:
        first_month = (key[1] - 1) * 3 + 1
        return date(key[0], first_month + 1, 15)
    return date(key[0], 7, 1)


def bucket_label(
    key: PeriodKey,
    granularity: Granularity,
    day_label: Callable[[date], str] = short_date_label,
) -> str:
    """Return the display label of a bucket key.

    Day buckets use `day_label`; week buckets are labelled by their Monday
    in the `yy/M/D` format.
    """
    granularity = Granularity(granularity)
    if granularity is Granularity.DAY:
        return day_label(date(*key))
    if granularity is Granularity.WEEK:
        return short_date_label(iso_week_monday(key[0], key[1]))
    if granularity is Granularity.MONTH:
        return f"{key[0] % 100:02d}/{MONTH_ABBREVS[key[1] - 1]}"
    return bucket_id(key, granularity)
