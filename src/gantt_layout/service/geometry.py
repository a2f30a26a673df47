# SPDX-License-Identifier: MIT

import pendulum

from gantt_layout import time
from gantt_layout.model.view_mode import ViewMode


def _scaled_offset(
    start: pendulum.DateTime, end: pendulum.DateTime, view_mode: ViewMode
) -> float:
    """
    Distance from `start` to `end` measured in columns of `view_mode`.

    Week mode keeps fractional columns. Unknown modes map everything to 0.
    """
    if view_mode == "hour":
        return time.hours_diff(start, end)
    if view_mode == "day":
        return time.days_diff(start, end)
    if view_mode == "week":
        return time.days_diff(start, end) / time.DAYS_PER_WEEK
    if view_mode == "month":
        return time.months_diff(start, end)
    if view_mode == "year":
        return time.years_diff(start, end)
    return 0


def map_point_geometry(
    chart_start: pendulum.DateTime,
    view_mode: ViewMode,
    column_width: float,
    date: pendulum.DateTime,
) -> float:
    x = _scaled_offset(chart_start, date, view_mode) * column_width
    return max(0, x)


def map_task_geometry(
    chart_start: pendulum.DateTime,
    view_mode: ViewMode,
    column_width: float,
    start: pendulum.DateTime,
    end: pendulum.DateTime,
) -> tuple[float, float]:
    """
    Horizontal position and width of a bar spanning `start`..`end`.

    Width never drops below half a column so zero-length and inverted
    ranges still render as a visible bar.
    """
    x = map_point_geometry(chart_start, view_mode, column_width, start)
    width = _scaled_offset(start, end, view_mode) * column_width
    return x, max(column_width / 2, width)
