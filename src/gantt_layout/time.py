# SPDX-License-Identifier: MIT

import datetime
import math
from typing import Optional, cast

import pendulum

from gantt_layout.model.view_mode import ViewMode

DAYS_PER_WEEK = 7


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def start_of_today(now: Optional[pendulum.DateTime] = None) -> pendulum.DateTime:
    if now is None:
        now = now_local()
    return now.start_of("day")


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_from_value(value: object) -> pendulum.DateTime:
    """
    Coerce a loaded value into a pendulum.DateTime.

    YAML loaders already turn ISO timestamps into python date/datetime
    objects, so strings are only one of the accepted shapes. Values without
    a timezone are read as UTC wall-clock, so a snapshot lays out the same
    on every machine.
    """
    if isinstance(value, pendulum.DateTime):
        return value
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value, tz="UTC")
    if isinstance(value, datetime.date):
        return pendulum.datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        return datetime_from_str(value)
    raise ValueError(f"Cannot interpret {value!r} as a date")


def start_of(unit: str, date: pendulum.DateTime) -> pendulum.DateTime:
    """
    Return the start of the hour/day/week/month/year containing `date`.

    Weeks start on Monday. Unknown units return `date` unchanged.
    """
    if unit in ("hour", "day", "week", "month", "year"):
        return date.start_of(unit)
    return date


def days_diff(start: pendulum.DateTime, end: pendulum.DateTime) -> int:
    # Whole calendar days between the two midnights, time of day ignored
    return end.date().toordinal() - start.date().toordinal()


def hours_diff(start: pendulum.DateTime, end: pendulum.DateTime) -> int:
    hours = (end - start).total_seconds() / 3600
    return math.floor(hours + 0.5)


def months_diff(start: pendulum.DateTime, end: pendulum.DateTime) -> int:
    return (end.year - start.year) * 12 + (end.month - start.month)


def years_diff(start: pendulum.DateTime, end: pendulum.DateTime) -> int:
    return end.year - start.year


def diff(unit: str, start: pendulum.DateTime, end: pendulum.DateTime) -> int:
    """
    Signed difference between two instants in calendar units.

    Month and year differences ignore the smaller components, so
    Jan 31 -> Feb 1 is one month. Week differences count whole weeks of
    calendar days, truncated toward zero.
    """
    if unit == "hour":
        return hours_diff(start, end)
    if unit == "day":
        return days_diff(start, end)
    if unit == "week":
        return int(days_diff(start, end) / DAYS_PER_WEEK)
    if unit == "month":
        return months_diff(start, end)
    if unit == "year":
        return years_diff(start, end)
    return 0


def add(unit: str, date: pendulum.DateTime, amount: int) -> pendulum.DateTime:
    if unit == "hour":
        return date.add(hours=amount)
    if unit == "day":
        return date.add(days=amount)
    if unit == "week":
        return date.add(days=amount * DAYS_PER_WEEK)
    if unit == "month":
        return date.add(months=amount)
    if unit == "year":
        return date.add(years=amount)
    return date


def is_same_day(first: pendulum.DateTime, second: pendulum.DateTime) -> bool:
    return (
        first.year == second.year
        and first.month == second.month
        and first.day == second.day
    )


def week_number(date: pendulum.DateTime) -> int:
    """ISO 8601 week number; 2024-01-01 (a Monday) is week 1."""
    return date.week_of_year


def format_label(
    date: pendulum.DateTime, view_mode: ViewMode, locale: str = "en"
) -> str:
    """Single-row column label, e.g. "14", "Mar 15", "W11", "Mar", "2024"."""
    if view_mode == "hour":
        return date.format("H", locale=locale)
    if view_mode == "day":
        return date.format("MMM D", locale=locale)
    if view_mode == "week":
        return f"W{week_number(date)}"
    if view_mode == "month":
        return date.format("MMM", locale=locale)
    if view_mode == "year":
        return date.format("YYYY", locale=locale)
    return date.format("M/D/YYYY", locale=locale)


def format_primary_label(
    date: pendulum.DateTime, view_mode: ViewMode, locale: str = "en"
) -> str:
    """Top header row: the larger enclosing unit."""
    if view_mode == "hour":
        return date.format("MMM D", locale=locale)
    if view_mode == "day":
        return date.format("MMMM YYYY", locale=locale)
    if view_mode in ("week", "month"):
        return date.format("YYYY", locale=locale)
    return ""


def format_secondary_label(
    date: pendulum.DateTime, view_mode: ViewMode, locale: str = "en"
) -> str:
    """Bottom header row: the column's own unit."""
    if view_mode == "hour":
        return date.format("H", locale=locale)
    if view_mode == "day":
        return date.format("D", locale=locale)
    return format_label(date, view_mode, locale)
