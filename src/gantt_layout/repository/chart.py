# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional, cast

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from gantt_layout import time
from gantt_layout.configuration import Options
from gantt_layout.model.milestone import Milestone
from gantt_layout.model.project import Project
from gantt_layout.model.snapshot import ChartSnapshot
from gantt_layout.model.swimlane import Swimlane
from gantt_layout.model.task import Task


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _convert_task_for_deserialization(raw_task: dict[str, Any]) -> Task:
    task = cast(Task, dict(raw_task))
    task["id"] = str(raw_task["id"])
    task["name"] = str(raw_task.get("name", raw_task["id"]))
    task["start"] = time.datetime_from_value(raw_task["start"])
    task["end"] = time.datetime_from_value(raw_task["end"])
    task["progress"] = raw_task.get("progress", 0)
    task["project_id"] = _optional_str(raw_task.get("project_id"))
    task["swimlane_id"] = _optional_str(raw_task.get("swimlane_id"))
    task["dependencies"] = [str(d) for d in raw_task.get("dependencies") or []]
    return task


def _convert_milestone_for_deserialization(
    raw_milestone: dict[str, Any],
) -> Milestone:
    milestone = cast(Milestone, dict(raw_milestone))
    milestone["id"] = str(raw_milestone["id"])
    milestone["name"] = str(raw_milestone.get("name", raw_milestone["id"]))
    milestone["date"] = time.datetime_from_value(raw_milestone["date"])
    milestone["project_id"] = _optional_str(raw_milestone.get("project_id"))
    milestone["dependencies"] = [
        str(d) for d in raw_milestone.get("dependencies") or []
    ]
    return milestone


def _convert_group_for_deserialization(raw_group: dict[str, Any]) -> dict[str, Any]:
    group = dict(raw_group)
    group["id"] = str(raw_group["id"])
    group["name"] = str(raw_group.get("name", raw_group["id"]))
    return group


def load_chart(path: Path) -> ChartSnapshot:
    """
    Read a chart snapshot from a YAML file.

    The file holds optional top-level `tasks`, `milestones`, `projects`,
    `swimlanes` and `options` keys; missing collections are empty.

    Raises:
        ValueError: If the file is not valid YAML, is not a mapping, or an
            entity or the options are malformed
    """
    try:
        raw_chart = load(path.read_text(), Loader=Loader)
    except YAMLError as e:
        raise ValueError(f"Invalid YAML in chart file {path}: {e}") from e
    if raw_chart is None:
        raw_chart = {}
    if not isinstance(raw_chart, dict):
        raise ValueError(f"Chart file {path} must contain a mapping")

    raw_options = raw_chart.get("options")
    if raw_options is None:
        raw_options = {}
    if not isinstance(raw_options, dict):
        raise ValueError(f"Chart file {path} has options that are not a mapping")

    try:
        tasks = [
            _convert_task_for_deserialization(raw_task)
            for raw_task in raw_chart.get("tasks") or []
        ]
        milestones = [
            _convert_milestone_for_deserialization(raw_milestone)
            for raw_milestone in raw_chart.get("milestones") or []
        ]
        projects = [
            cast(Project, _convert_group_for_deserialization(raw_project))
            for raw_project in raw_chart.get("projects") or []
        ]
        swimlanes = [
            cast(Swimlane, _convert_group_for_deserialization(raw_swimlane))
            for raw_swimlane in raw_chart.get("swimlanes") or []
        ]
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed entity in {path}: {e}") from e

    return {
        "tasks": tasks,
        "milestones": milestones,
        "projects": projects,
        "swimlanes": swimlanes,
        "options": cast(Options, raw_options),
    }
