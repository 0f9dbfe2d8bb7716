"""Placed furniture and its plain-data form.

A PlacedItem references its FurnitureKind (shared, never copied). The
serialised form stores only ``kind_id``, so persistence collaborators
re-resolve kinds against a catalog when loading.
"""

from __future__ import annotations

from dataclasses import dataclass

from layout_gen.catalog import Catalog, FurnitureKind


@dataclass
class PlacedItem:
    """One piece of furniture positioned in the room.

    Attributes:
        id: Unique per placement instance (distinct from kind.id)
        kind: Catalog entry this item instantiates
        x, y: Top-left corner in room pixel space
        rotation: Degrees, unconstrained
        scale: Size factor applied to the kind's footprint
    """

    id: str
    kind: FurnitureKind
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0
    scale: float = 1.0

    @property
    def effective_width(self) -> float:
        return self.kind.width * self.scale

    @property
    def effective_height(self) -> float:
        return self.kind.height * self.scale


def item_to_dict(item: PlacedItem) -> dict:
    return {
        "id": item.id,
        "kind_id": item.kind.id,
        "x": item.x,
        "y": item.y,
        "rotation": item.rotation,
        "scale": item.scale,
    }


def item_from_dict(data: dict, catalog: Catalog) -> PlacedItem | None:
    """Rebuild an item from ``item_to_dict`` output.

    Returns None when the kind is no longer in the catalog.
    """
    kind = catalog.lookup(data.get("kind_id", ""))
    if kind is None:
        return None
    return PlacedItem(
        id=str(data["id"]),
        kind=kind,
        x=float(data.get("x", 0.0)),
        y=float(data.get("y", 0.0)),
        rotation=float(data.get("rotation", 0.0)),
        scale=float(data.get("scale", 1.0)),
    )
