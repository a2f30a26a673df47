# SPDX-License-Identifier: MIT

import math
from typing import Iterator

import pendulum

from gantt_layout import time
from gantt_layout.model.time_column import TimeColumn
from gantt_layout.model.view_mode import ViewMode


def get_column_count(
    start: pendulum.DateTime, end: pendulum.DateTime, view_mode: ViewMode
) -> int:
    """
    Number of time columns needed to cover `start`..`end`.

    Hour, day, month and year spans are inclusive of both ends. A partial
    trailing week counts as a full column. Every span yields at least one
    column so an empty or inverted range still has an axis.
    """
    if view_mode == "hour":
        hours = (end - start).total_seconds() / 3600
        count = math.ceil(hours) + 1
    elif view_mode == "day":
        count = time.days_diff(start, end) + 1
    elif view_mode == "week":
        count = math.ceil(time.days_diff(start, end) / time.DAYS_PER_WEEK)
    elif view_mode == "month":
        count = time.months_diff(start, end) + 1
    elif view_mode == "year":
        count = time.years_diff(start, end) + 1
    else:
        count = 1

    return max(1, count)


def get_column_date(
    start: pendulum.DateTime, index: int, view_mode: ViewMode
) -> pendulum.DateTime:
    return time.add(view_mode, start, index)


def is_primary_period_start(date: pendulum.DateTime, view_mode: ViewMode) -> bool:
    """
    Whether `date` opens the next-larger calendar unit.

    hour -> midnight, day -> first of the month, week -> first week of
    January, month -> January. Year has no larger unit.
    """
    if view_mode == "hour":
        return date.hour == 0
    if view_mode == "day":
        return date.day == 1
    if view_mode == "week":
        return date.month == 1 and date.day <= 7
    if view_mode == "month":
        return date.month == 1
    return False


def generate_time_columns(
    start: pendulum.DateTime,
    end: pendulum.DateTime,
    view_mode: ViewMode,
    column_width: float,
    locale: str = "en",
) -> Iterator[TimeColumn]:
    column_count = get_column_count(start, end, view_mode)

    for index in range(column_count):
        date = get_column_date(start, index, view_mode)
        yield {
            "date": date,
            "label": time.format_label(date, view_mode, locale),
            "x": index * column_width,
            "width": column_width,
            "primary_label": time.format_primary_label(date, view_mode, locale),
            "secondary_label": time.format_secondary_label(date, view_mode, locale),
            "is_primary_start": is_primary_period_start(date, view_mode),
        }
