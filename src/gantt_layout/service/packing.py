# SPDX-License-Identifier: MIT

import logging
from typing import Iterable, TypedDict

from gantt_layout.model.entity_id import EntityId

logger = logging.getLogger(__name__)


class PackItem(TypedDict):
    id: EntityId
    x: float
    width: float


def pack_tasks_into_rows(
    items: Iterable[PackItem], padding: float
) -> dict[EntityId, int]:
    """
    Assign every item in a lane to a row so that items sharing a row never
    overlap once `padding` is added to each item's right edge.

    Items are visited by increasing `x` (input order breaks ties) and each
    one takes the first row that is already free at its left edge. This
    uses exactly as many rows as the deepest overlap in the lane.

    Args:
        items: Rectangles with `id`, `x` and `width`
        padding: Horizontal gap required between neighbours in one row

    Returns:
        Mapping from item id to its zero-based row
    """
    item_rows: dict[EntityId, int] = {}
    # Next free x position for each row
    row_ends: list[float] = []

    for item in sorted(items, key=lambda item: item["x"]):
        item_end = item["x"] + item["width"] + padding

        for row, row_end in enumerate(row_ends):
            if row_end <= item["x"]:
                row_ends[row] = item_end
                item_rows[item["id"]] = row
                break
        else:
            item_rows[item["id"]] = len(row_ends)
            row_ends.append(item_end)

    logger.debug("Packed %d items into %d rows", len(item_rows), len(row_ends))
    return item_rows


def count_rows(item_rows: dict[EntityId, int]) -> int:
    if not item_rows:
        return 0
    return max(item_rows.values()) + 1


def tasks_overlap(first: PackItem, second: PackItem) -> bool:
    first_end = first["x"] + first["width"]
    second_end = second["x"] + second["width"]
    return first["x"] < second_end and second["x"] < first_end
