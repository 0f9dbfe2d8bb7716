"""Bounding boxes, overlap checks and bounds clamping.

Coordinate convention:
    - Room pixel space, origin at the top-left corner of the room image
    - An item's box spans [x, x + width*scale] x [y, y + height*scale]
    - Rotation is ignored for collision and bounds purposes

Overlap is strict: boxes that only touch along an edge do not overlap.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from layout_gen.placement import PlacedItem


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle (x0, y0) -> (x1, y1)."""

    x0: float
    y0: float
    x1: float
    y1: float


def effective_box(item: PlacedItem) -> Box:
    """The scaled footprint of a placed item."""
    return Box(
        item.x,
        item.y,
        item.x + item.effective_width,
        item.y + item.effective_height,
    )


def boxes_overlap(a: Box, b: Box) -> bool:
    """True when the interiors of two boxes intersect on both axes."""
    return a.x0 < b.x1 and b.x0 < a.x1 and a.y0 < b.y1 and b.y0 < a.y1


def has_overlap(items: Sequence[PlacedItem]) -> bool:
    """Pairwise check over all items. O(n^2)."""
    boxes = [effective_box(it) for it in items]
    for i in range(len(boxes)):
        for j in range(i + 1, len(boxes)):
            if boxes_overlap(boxes[i], boxes[j]):
                return True
    return False


def overlapping_pairs(items: Sequence[PlacedItem]) -> list[tuple[str, str]]:
    """Ids of every overlapping pair, in input order."""
    boxes = [effective_box(it) for it in items]
    pairs = []
    for i in range(len(boxes)):
        for j in range(i + 1, len(boxes)):
            if boxes_overlap(boxes[i], boxes[j]):
                pairs.append((items[i].id, items[j].id))
    return pairs


# ---------------------------------------------------------------------------
# Clamping
# ---------------------------------------------------------------------------


def clamp(value: float, lo: float, hi: float) -> float:
    """np.clip, except NaN maps to ``lo`` instead of propagating."""
    if np.isnan(value):
        return float(lo)
    return float(np.clip(value, lo, hi))


def clamp_position(value: float, size: float, room_dim: float) -> float:
    """Clamp a top-left coordinate so [value, value + size] fits in the room.

    When the item is larger than the room the valid range is empty and the
    item is pinned to 0.
    """
    upper = max(0.0, room_dim - size)
    return clamp(value, 0.0, upper)


def clamp_item(item: PlacedItem, room_width: float, room_height: float) -> None:
    """Pull an item back inside the room, in place."""
    item.x = clamp_position(item.x, item.effective_width, room_width)
    item.y = clamp_position(item.y, item.effective_height, room_height)


def in_bounds(
    item: PlacedItem,
    room_width: float,
    room_height: float,
    tol: float = 1e-9,
) -> bool:
    """Check the placement invariant for one item."""
    max_x = max(0.0, room_width - item.effective_width)
    max_y = max(0.0, room_height - item.effective_height)
    return -tol <= item.x <= max_x + tol and -tol <= item.y <= max_y + tol
