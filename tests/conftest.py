from typing import Any, Callable, Optional

import pendulum
import pytest

from gantt_layout.model.milestone import Milestone
from gantt_layout.model.task import Task


@pytest.fixture
def make_task() -> Callable[..., Task]:
    """Build a task spanning two YYYY-MM-DD dates."""

    def _make_task(
        task_id: str,
        start: str,
        end: str,
        project_id: Optional[str] = None,
        swimlane_id: Optional[str] = None,
        **extra: Any,
    ) -> Task:
        task: dict[str, Any] = {
            "id": task_id,
            "name": task_id.title(),
            "start": pendulum.parse(start),
            "end": pendulum.parse(end),
            "progress": 0,
            **extra,
        }
        if project_id is not None:
            task["project_id"] = project_id
        if swimlane_id is not None:
            task["swimlane_id"] = swimlane_id
        return task  # type: ignore[return-value]

    return _make_task


@pytest.fixture
def make_milestone() -> Callable[..., Milestone]:
    def _make_milestone(
        milestone_id: str,
        date: str,
        project_id: Optional[str] = None,
        **extra: Any,
    ) -> Milestone:
        milestone: dict[str, Any] = {
            "id": milestone_id,
            "name": milestone_id.title(),
            "date": pendulum.parse(date),
            **extra,
        }
        if project_id is not None:
            milestone["project_id"] = project_id
        return milestone  # type: ignore[return-value]

    return _make_milestone
