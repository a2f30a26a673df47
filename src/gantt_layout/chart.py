# SPDX-License-Identifier: MIT

from typing import Optional, Sequence, cast

import pendulum

from gantt_layout.configuration import GanttOptions, Options, merge_options
from gantt_layout.model.connector import Connector
from gantt_layout.model.entity_id import EntityId
from gantt_layout.model.layout import GanttLayout
from gantt_layout.model.milestone import Milestone
from gantt_layout.model.project import Project
from gantt_layout.model.swimlane import Swimlane
from gantt_layout.model.task import Task
from gantt_layout.service.connector import dependency_connectors
from gantt_layout.service.layout import compute_layout
from gantt_layout.state import ProjectState


class GanttChart:
    """
    One chart instance: its inputs, options and project expand state.

    The layout is computed on first access and recomputed in full after
    any input or state change.
    """

    def __init__(
        self,
        tasks: Sequence[Task],
        milestones: Sequence[Milestone] = (),
        projects: Sequence[Project] = (),
        swimlanes: Sequence[Swimlane] = (),
        options: Optional[Options] = None,
        now: Optional[pendulum.DateTime] = None,
    ) -> None:
        self._tasks = list(tasks)
        self._milestones = list(milestones)
        self._projects = list(projects)
        self._swimlanes = list(swimlanes)
        self._overrides: Options = cast(Options, dict(options or {}))
        self._now = now
        self.project_state = ProjectState()
        self._layout: Optional[GanttLayout] = None

    @property
    def options(self) -> GanttOptions:
        return merge_options(self._overrides)

    @property
    def layout(self) -> GanttLayout:
        if self._layout is None:
            self._layout = compute_layout(
                self._tasks,
                self._milestones,
                self._projects,
                self._swimlanes,
                self._overrides,
                self.project_state,
                self._now,
            )
        return self._layout

    def invalidate(self) -> None:
        self._layout = None

    def update(
        self,
        tasks: Optional[Sequence[Task]] = None,
        milestones: Optional[Sequence[Milestone]] = None,
        projects: Optional[Sequence[Project]] = None,
        swimlanes: Optional[Sequence[Swimlane]] = None,
        options: Optional[Options] = None,
    ) -> None:
        if tasks is not None:
            self._tasks = list(tasks)
        if milestones is not None:
            self._milestones = list(milestones)
        if projects is not None:
            self._projects = list(projects)
        if swimlanes is not None:
            self._swimlanes = list(swimlanes)
        if options is not None:
            self._overrides = cast(Options, dict(options))
        self.invalidate()

    def toggle_project(self, project_id: EntityId) -> bool:
        expanded = self.project_state.toggle(project_id)
        self.invalidate()
        return expanded

    def is_project_expanded(self, project_id: EntityId) -> bool:
        return self.project_state.is_expanded(project_id)

    def connectors(self) -> list[Connector]:
        return dependency_connectors(self.layout, self.options)
