# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

from gantt_layout.model.entity_id import EntityId

PathCommand = Literal["M", "L"]


class PathSegment(TypedDict):
    command: PathCommand
    x: float
    y: float


class Connector(TypedDict):
    source_id: EntityId
    target_id: EntityId
    segments: list[PathSegment]
    path: str
