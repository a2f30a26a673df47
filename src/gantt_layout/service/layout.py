# SPDX-License-Identifier: MIT

import logging
from typing import Optional, Sequence, cast

import pendulum

from gantt_layout import time
from gantt_layout.configuration import GanttOptions, Options, merge_options
from gantt_layout.model.entity_id import EntityId
from gantt_layout.model.layout import GanttLayout
from gantt_layout.model.milestone import Milestone, RenderedMilestone
from gantt_layout.model.project import Project, RenderedProject
from gantt_layout.model.swimlane import DEFAULT_SWIMLANE, RenderedSwimlane, Swimlane
from gantt_layout.model.task import RenderedTask, Task
from gantt_layout.model.view_mode import ViewMode
from gantt_layout.service.axis import generate_time_columns
from gantt_layout.service.geometry import map_point_geometry, map_task_geometry
from gantt_layout.service.packing import PackItem, count_rows, pack_tasks_into_rows
from gantt_layout.state import ProjectState

logger = logging.getLogger(__name__)


def get_chart_span(
    tasks: Sequence[Task],
    milestones: Sequence[Milestone],
    view_mode: ViewMode,
    now: Optional[pendulum.DateTime] = None,
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """
    Timeline range covering every task and milestone.

    The start is snapped to the view mode's unit, the end is the latest
    instant as-is. With nothing to show both collapse to the start of today.
    """
    starts = [task["start"] for task in tasks] + [m["date"] for m in milestones]
    ends = [task["end"] for task in tasks] + [m["date"] for m in milestones]

    if not starts:
        today = time.start_of_today(now)
        return today, today

    return time.start_of(view_mode, min(starts)), max(ends)


def group_tasks_by_swimlane(
    tasks: Sequence[Task], swimlanes: Sequence[Swimlane]
) -> list[tuple[Swimlane, list[Task]]]:
    """
    Partition tasks into the declared swimlanes, in swimlane order.

    Tasks without a swimlane, or pointing at an unknown one, land in a
    trailing default lane that only exists when it has members.
    """
    lane_tasks: dict[EntityId, list[Task]] = {lane["id"]: [] for lane in swimlanes}
    unassigned: list[Task] = []

    for task in tasks:
        swimlane_id = task.get("swimlane_id")
        if swimlane_id is not None and swimlane_id in lane_tasks:
            lane_tasks[swimlane_id].append(task)
        else:
            unassigned.append(task)

    groups = [(lane, lane_tasks[lane["id"]]) for lane in swimlanes]
    if unassigned:
        groups.append((DEFAULT_SWIMLANE, unassigned))
    return groups


class _LayoutPass:
    """Vertical cursor plus the rendered entities emitted so far."""

    def __init__(
        self,
        chart_start: pendulum.DateTime,
        options: GanttOptions,
        swimlanes: Sequence[Swimlane],
    ) -> None:
        self.chart_start = chart_start
        self.options = options
        self.swimlanes = swimlanes
        self.row_height = options["bar_height"] + options["bar_padding"]
        self.cursor: float = 0
        self.tasks: list[RenderedTask] = []
        self.milestones: list[RenderedMilestone] = []
        self.lanes: list[RenderedSwimlane] = []

    def task_geometry(self, task: Task) -> tuple[float, float]:
        return map_task_geometry(
            self.chart_start,
            self.options["view_mode"],
            self.options["column_width"],
            task["start"],
            task["end"],
        )

    def milestone_x(self, milestone: Milestone) -> float:
        return map_point_geometry(
            self.chart_start,
            self.options["view_mode"],
            self.options["column_width"],
            milestone["date"],
        )

    def emit_task(
        self,
        task: Task,
        y: float,
        is_visible: bool = True,
        row: Optional[int] = None,
        geometry: Optional[tuple[float, float]] = None,
    ) -> None:
        x, width = geometry if geometry is not None else self.task_geometry(task)
        rendered = {
            **task,
            "x": x,
            "y": y,
            "width": width,
            "is_visible": is_visible,
            "row": row,
        }
        self.tasks.append(cast(RenderedTask, rendered))

    def emit_milestone(
        self, milestone: Milestone, y: float, is_visible: bool = True
    ) -> None:
        rendered = {
            **milestone,
            "x": self.milestone_x(milestone),
            "y": y,
            "is_visible": is_visible,
        }
        self.milestones.append(cast(RenderedMilestone, rendered))

    def place_flat(
        self, tasks: Sequence[Task], milestones: Sequence[Milestone]
    ) -> None:
        # Milestones keep their own index, sharing rows with the tasks
        for index, task in enumerate(tasks):
            self.emit_task(task, index * self.row_height)
        for index, milestone in enumerate(milestones):
            self.emit_milestone(milestone, index * self.row_height)
        self.cursor = max(len(tasks), len(milestones)) * self.row_height

    def place_content(
        self,
        tasks: Sequence[Task],
        milestones: Sequence[Milestone],
        project_id: Optional[EntityId] = None,
        keep_empty_lanes: bool = False,
    ) -> None:
        """Stack tasks (packed per lane when lanes are on) then milestones."""
        if self.options["enable_swimlanes"]:
            lane_groups = group_tasks_by_swimlane(tasks, self.swimlanes)
            for swimlane, lane_tasks in lane_groups:
                if lane_tasks or keep_empty_lanes:
                    self.place_lane(swimlane, lane_tasks, project_id)
        else:
            for task in tasks:
                self.emit_task(task, self.cursor)
                self.cursor += self.row_height

        for milestone in milestones:
            self.emit_milestone(milestone, self.cursor)
            self.cursor += self.row_height

    def place_lane(
        self,
        swimlane: Swimlane,
        lane_tasks: Sequence[Task],
        project_id: Optional[EntityId],
    ) -> None:
        geometries = [self.task_geometry(task) for task in lane_tasks]
        pack_items: list[PackItem] = [
            {"id": task["id"], "x": x, "width": width}
            for task, (x, width) in zip(lane_tasks, geometries)
        ]
        task_rows = pack_tasks_into_rows(pack_items, self.options["bar_padding"])
        row_count = count_rows(task_rows)
        lane_y = self.cursor

        for task, geometry in zip(lane_tasks, geometries):
            row = task_rows[task["id"]]
            self.emit_task(
                task, lane_y + row * self.row_height, row=row, geometry=geometry
            )

        lane_id = swimlane["id"]
        if project_id is not None:
            lane_id = f"{project_id}:{swimlane['id']}"

        height = row_count * self.row_height
        rendered = {
            **swimlane,
            "id": lane_id,
            "y": lane_y,
            "height": height,
            "row_count": row_count,
            "project_id": project_id,
            "swimlane_id": swimlane["id"],
        }
        self.lanes.append(cast(RenderedSwimlane, rendered))
        self.cursor += height

    def hide(self, tasks: Sequence[Task], milestones: Sequence[Milestone]) -> None:
        # Hidden members keep their identity for dependency lookups but take no space
        for task in tasks:
            self.emit_task(task, self.cursor, is_visible=False)
        for milestone in milestones:
            self.emit_milestone(milestone, self.cursor, is_visible=False)


def _project_summary(
    layout_pass: _LayoutPass,
    tasks: Sequence[Task],
    milestones: Sequence[Milestone],
) -> tuple[
    Optional[pendulum.DateTime],
    Optional[pendulum.DateTime],
    Optional[float],
    Optional[float],
]:
    starts = [task["start"] for task in tasks] + [m["date"] for m in milestones]
    ends = [task["end"] for task in tasks] + [m["date"] for m in milestones]
    if not starts:
        return None, None, None, None

    start, end = min(starts), max(ends)
    x, width = map_task_geometry(
        layout_pass.chart_start,
        layout_pass.options["view_mode"],
        layout_pass.options["column_width"],
        start,
        end,
    )
    return start, end, x, width


def _place_projects(
    layout_pass: _LayoutPass,
    tasks: Sequence[Task],
    milestones: Sequence[Milestone],
    projects: Sequence[Project],
    project_state: ProjectState,
) -> list[RenderedProject]:
    header_height = layout_pass.options["project_header_height"]
    rendered_projects: list[RenderedProject] = []

    for project in projects:
        project_tasks = [t for t in tasks if t.get("project_id") == project["id"]]
        project_milestones = [
            m for m in milestones if m.get("project_id") == project["id"]
        ]
        is_expanded = project_state.is_expanded(project["id"])

        project_y = layout_pass.cursor
        layout_pass.cursor += header_height
        if is_expanded:
            layout_pass.place_content(
                project_tasks, project_milestones, project_id=project["id"]
            )
        else:
            layout_pass.hide(project_tasks, project_milestones)

        start, end, x, width = _project_summary(
            layout_pass, project_tasks, project_milestones
        )
        rendered = {
            **project,
            "is_expanded": is_expanded,
            "task_count": len(project_tasks),
            "y": project_y,
            "height": layout_pass.cursor - project_y,
            "start": start,
            "end": end,
            "x": x,
            "width": width,
        }
        rendered_projects.append(cast(RenderedProject, rendered))

    project_ids = {project["id"] for project in projects}
    orphan_tasks = [t for t in tasks if t.get("project_id") not in project_ids]
    orphan_milestones = [
        m for m in milestones if m.get("project_id") not in project_ids
    ]
    layout_pass.place_content(orphan_tasks, orphan_milestones)

    return rendered_projects


def compute_layout(
    tasks: Sequence[Task],
    milestones: Sequence[Milestone] = (),
    projects: Sequence[Project] = (),
    swimlanes: Sequence[Swimlane] = (),
    options: Optional[Options] = None,
    project_state: Optional[ProjectState] = None,
    now: Optional[pendulum.DateTime] = None,
) -> GanttLayout:
    """
    Compute the complete chart geometry for one snapshot of the inputs.

    The display mode follows `enable_project_grouping` and
    `enable_swimlanes`:

    - flat: one row per task in input order
    - grouped: project headers, members stacked under expanded projects,
      orphans appended at the end
    - lanes: tasks packed into rows per swimlane, lanes stacked in order
    - grouped + lanes: lanes nested per project, skipping empty pairs

    Milestones follow their group's tasks, one row each. In flat mode they
    are indexed on their own and share rows with the tasks.

    Args:
        tasks: Tasks to lay out
        milestones: Milestones to lay out
        projects: Projects in display order
        swimlanes: Swimlanes in display order
        options: Option overrides merged over the defaults
        project_state: Expand/collapse flags, observed and left otherwise untouched
        now: Reference instant for empty charts (defaults to the local now)

    Returns:
        Time columns, rendered entities and the chart extents
    """
    merged_options = merge_options(options)
    if project_state is None:
        project_state = ProjectState()

    view_mode = merged_options["view_mode"]
    column_width = merged_options["column_width"]
    grouping = merged_options["enable_project_grouping"]

    chart_start, chart_end = get_chart_span(tasks, milestones, view_mode, now)
    time_columns = list(
        generate_time_columns(
            chart_start, chart_end, view_mode, column_width, merged_options["locale"]
        )
    )

    layout_pass = _LayoutPass(chart_start, merged_options, swimlanes)
    rendered_projects: list[RenderedProject] = []

    if grouping:
        project_state.observe(project["id"] for project in projects)
        rendered_projects = _place_projects(
            layout_pass, tasks, milestones, projects, project_state
        )
    elif merged_options["enable_swimlanes"]:
        layout_pass.place_content(tasks, milestones, keep_empty_lanes=True)
    else:
        layout_pass.place_flat(tasks, milestones)

    logger.debug(
        "Laid out %d tasks, %d milestones, %d projects, %d lanes (%s view)",
        len(layout_pass.tasks),
        len(layout_pass.milestones),
        len(rendered_projects),
        len(layout_pass.lanes),
        view_mode,
    )

    return {
        "chart_start": chart_start,
        "chart_end": chart_end,
        "time_columns": time_columns,
        "tasks": layout_pass.tasks,
        "milestones": layout_pass.milestones,
        "projects": rendered_projects,
        "swimlanes": layout_pass.lanes,
        "chart_width": len(time_columns) * column_width,
        "chart_height": layout_pass.cursor,
    }
