# SPDX-License-Identifier: MIT

from typing import Any, NotRequired, Optional, TypedDict

from gantt_layout.model.entity_id import EntityId

DEFAULT_SWIMLANE_ID: EntityId = "default"


class Swimlane(TypedDict):
    id: EntityId
    name: str
    color: NotRequired[Optional[str]]
    metadata: NotRequired[Optional[dict[str, Any]]]


class RenderedSwimlane(Swimlane):
    y: float
    height: float
    row_count: int
    project_id: Optional[EntityId]
    swimlane_id: EntityId


DEFAULT_SWIMLANE: Swimlane = {"id": DEFAULT_SWIMLANE_ID, "name": "Default"}
