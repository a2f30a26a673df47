# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from gantt_layout.model.milestone import RenderedMilestone
from gantt_layout.model.project import RenderedProject
from gantt_layout.model.swimlane import RenderedSwimlane
from gantt_layout.model.task import RenderedTask
from gantt_layout.model.time_column import TimeColumn


class GanttLayout(TypedDict):
    chart_start: pendulum.DateTime
    chart_end: pendulum.DateTime
    time_columns: list[TimeColumn]
    tasks: list[RenderedTask]
    milestones: list[RenderedMilestone]
    projects: list[RenderedProject]
    swimlanes: list[RenderedSwimlane]
    chart_width: float
    chart_height: float
