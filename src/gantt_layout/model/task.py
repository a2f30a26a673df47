# SPDX-License-Identifier: MIT

from typing import Any, NotRequired, Optional, TypedDict

import pendulum

from gantt_layout.model.entity_id import EntityId


class Task(TypedDict):
    id: EntityId
    name: str
    start: pendulum.DateTime
    end: pendulum.DateTime
    progress: float
    color: NotRequired[Optional[str]]
    dependencies: NotRequired[Optional[list[EntityId]]]
    project_id: NotRequired[Optional[EntityId]]
    swimlane_id: NotRequired[Optional[EntityId]]
    metadata: NotRequired[Optional[dict[str, Any]]]


class RenderedTask(Task):
    x: float
    y: float
    width: float
    is_visible: bool
    row: Optional[int]
