# SPDX-License-Identifier: MIT

from typing import Any, NotRequired, Optional, TypedDict

import pendulum

from gantt_layout.model.entity_id import EntityId


class Project(TypedDict):
    id: EntityId
    name: str
    metadata: NotRequired[Optional[dict[str, Any]]]


class RenderedProject(Project):
    is_expanded: bool
    task_count: int
    y: float
    height: float
    # Summary span over member tasks and milestones, None for empty projects
    start: Optional[pendulum.DateTime]
    end: Optional[pendulum.DateTime]
    x: Optional[float]
    width: Optional[float]
