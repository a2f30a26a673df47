# SPDX-License-Identifier: MIT

from typing import TypedDict

from gantt_layout.configuration import Options
from gantt_layout.model.milestone import Milestone
from gantt_layout.model.project import Project
from gantt_layout.model.swimlane import Swimlane
from gantt_layout.model.task import Task


class ChartSnapshot(TypedDict):
    tasks: list[Task]
    milestones: list[Milestone]
    projects: list[Project]
    swimlanes: list[Swimlane]
    options: Options
