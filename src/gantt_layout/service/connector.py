# SPDX-License-Identifier: MIT

import math
from typing import Optional, Sequence

from gantt_layout.configuration import GanttOptions
from gantt_layout.model.connector import Connector, PathSegment
from gantt_layout.model.entity_id import EntityId
from gantt_layout.model.layout import GanttLayout
from gantt_layout.model.milestone import RenderedMilestone
from gantt_layout.model.task import RenderedTask

DEFAULT_OFFSET = 20
MIN_LATERAL_OFFSET = 20
MAX_TRANSITION_HEIGHT = 30


def create_rectangular_path(
    start_x: float,
    start_y: float,
    end_x: float,
    end_y: float,
    offset: float = DEFAULT_OFFSET,
) -> list[PathSegment]:
    """
    Route an orthogonal connector from (start_x, start_y) to (end_x, end_y).

    With more than two offsets of horizontal room the path bends twice at
    the midpoint column. Closer or overlapping endpoints step out to the
    right of the source, cross over at a transition row between the two
    endpoints, and come back in from the left of the target.

    Raises:
        ValueError: If any coordinate or the offset is not finite
    """
    for value in (start_x, start_y, end_x, end_y, offset):
        if not math.isfinite(value):
            raise ValueError(f"Connector coordinates must be finite, got {value}")

    horizontal_distance = end_x - start_x
    vertical_distance = abs(end_y - start_y)

    waypoints: list[tuple[float, float]] = [(start_x, start_y)]

    if horizontal_distance > offset * 2:
        mid_x = start_x + horizontal_distance / 2
        waypoints.append((mid_x, start_y))
        waypoints.append((mid_x, end_y))
    else:
        lateral = max(offset, MIN_LATERAL_OFFSET)
        direction = 1 if end_y > start_y else -1
        transition_y = start_y + direction * min(
            vertical_distance / 2, MAX_TRANSITION_HEIGHT
        )
        waypoints.append((start_x + lateral, start_y))
        waypoints.append((start_x + lateral, transition_y))
        waypoints.append((end_x - lateral, transition_y))
        waypoints.append((end_x - lateral, end_y))

    waypoints.append((end_x, end_y))

    segments: list[PathSegment] = [
        {"command": "M", "x": waypoints[0][0], "y": waypoints[0][1]}
    ]
    for x, y in waypoints[1:]:
        segments.append({"command": "L", "x": x, "y": y})
    return segments


def _format_coordinate(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def to_svg_path(segments: Sequence[PathSegment]) -> str:
    if len(segments) < 2:
        return ""
    return " ".join(
        f"{segment['command']} {_format_coordinate(segment['x'])} "
        f"{_format_coordinate(segment['y'])}"
        for segment in segments
    )


def _right_anchor(
    entity: RenderedTask | RenderedMilestone, options: GanttOptions
) -> tuple[float, float]:
    mid_y = entity["y"] + options["bar_height"] / 2
    if "width" in entity:
        return entity["x"] + entity["width"], mid_y
    return entity["x"] + options["milestone_size"] / 2, mid_y


def _left_anchor(
    entity: RenderedTask | RenderedMilestone, options: GanttOptions
) -> tuple[float, float]:
    mid_y = entity["y"] + options["bar_height"] / 2
    if "width" in entity:
        return entity["x"], mid_y
    return entity["x"] - options["milestone_size"] / 2, mid_y


def dependency_connectors(
    layout: GanttLayout, options: GanttOptions
) -> list[Connector]:
    """
    Route one connector per dependency edge of the laid-out entities.

    Edges run from the dependency's right edge to the dependent's left
    edge. Ids that match nothing in the layout are skipped, as are edges
    touching a hidden entity when `hide_orphan_dependencies` is set.
    """
    if not options["show_dependencies"]:
        return []

    entities: dict[EntityId, RenderedTask | RenderedMilestone] = {}
    for task in layout["tasks"]:
        entities[task["id"]] = task
    for milestone in layout["milestones"]:
        entities.setdefault(milestone["id"], milestone)

    dependents: list[RenderedTask | RenderedMilestone] = [
        *layout["tasks"],
        *layout["milestones"],
    ]

    connectors: list[Connector] = []
    for target in dependents:
        dependencies: Optional[list[EntityId]] = target.get("dependencies")
        for source_id in dependencies or []:
            source = entities.get(source_id)
            if source is None:
                continue
            if options["hide_orphan_dependencies"] and not (
                source["is_visible"] and target["is_visible"]
            ):
                continue

            start_x, start_y = _right_anchor(source, options)
            end_x, end_y = _left_anchor(target, options)
            segments = create_rectangular_path(
                start_x, start_y, end_x, end_y, options["connector_offset"]
            )
            connectors.append(
                {
                    "source_id": source_id,
                    "target_id": target["id"],
                    "segments": segments,
                    "path": to_svg_path(segments),
                }
            )

    return connectors
