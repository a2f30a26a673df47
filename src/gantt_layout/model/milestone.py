# SPDX-License-Identifier: MIT

from typing import Any, NotRequired, Optional, TypedDict

import pendulum

from gantt_layout.model.entity_id import EntityId


class Milestone(TypedDict):
    id: EntityId
    name: str
    date: pendulum.DateTime
    color: NotRequired[Optional[str]]
    project_id: NotRequired[Optional[EntityId]]
    dependencies: NotRequired[Optional[list[EntityId]]]
    metadata: NotRequired[Optional[dict[str, Any]]]


class RenderedMilestone(Milestone):
    x: float
    y: float
    is_visible: bool
