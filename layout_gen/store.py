"""Live furniture collection for one room.

The store owns a single list of PlacedItem and is the only thing that
mutates it. Every mutation keeps each item inside the room:

    0 <= x <= room_width  - width  * scale
    0 <= y <= room_height - height * scale

Overlap is never corrected here; it only feeds scoring and highlighting.

Mutations that change the collection return a tuple snapshot of the new
contents, so callers never hold on to the live list.

Usage:
    store = PlacementStore(800, 600)
    sofa = store.add(catalog.get("sofa"), 790, 10)   # clamped to x=680
    store.update(sofa.id, scale=1.5)
    store.remove(sofa.id)
"""

from __future__ import annotations

import copy
import itertools
import logging
from typing import Iterable

import numpy as np

from layout_gen.catalog import Catalog, FurnitureKind, default_catalog
from layout_gen.config import StoreConfig
from layout_gen.geometry import clamp, clamp_item, has_overlap
from layout_gen.placement import PlacedItem

log = logging.getLogger(__name__)


def _given(value: float | None) -> bool:
    return value is not None and not np.isnan(value)


class PlacementStore:
    """Single-writer collection of placed furniture."""

    def __init__(
        self,
        room_width: float,
        room_height: float,
        catalog: Catalog | None = None,
        config: StoreConfig | None = None,
    ):
        self.room_width = max(0.0, float(room_width))
        self.room_height = max(0.0, float(room_height))
        self.catalog = catalog or default_catalog()
        self.config = config or StoreConfig()
        self._items: list[PlacedItem] = []
        self._ids = itertools.count(1)

    # -------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------

    @property
    def items(self) -> tuple[PlacedItem, ...]:
        return tuple(self._items)

    def get(self, item_id: str) -> PlacedItem | None:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def has_overlap(self) -> bool:
        return has_overlap(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return any(item.id == item_id for item in self._items)

    # -------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------

    def add(
        self, kind: FurnitureKind, proposed_x: float, proposed_y: float
    ) -> PlacedItem:
        """Place a new item at (proposed_x, proposed_y), clamped into the room."""
        item = PlacedItem(
            id=f"{kind.id}-placed-{next(self._ids)}",
            kind=kind,
            x=float(proposed_x),
            y=float(proposed_y),
            rotation=0.0,
            scale=1.0,
        )
        self._clamp(item)
        self._items.append(item)
        return item

    def drop(self, kind_id: str, screen_x: float, screen_y: float) -> PlacedItem | None:
        """Drag-and-drop entry point: centre the kind on the drop point.

        Returns None for a kind the catalog does not know.
        """
        kind = self.catalog.lookup(kind_id)
        if kind is None:
            log.debug("Ignoring drop of unknown kind %r", kind_id)
            return None
        return self.add(kind, screen_x - kind.width / 2, screen_y - kind.height / 2)

    def update(
        self,
        item_id: str,
        *,
        x: float | None = None,
        y: float | None = None,
        rotation: float | None = None,
        scale: float | None = None,
    ) -> PlacedItem | None:
        """Apply the supplied fields to one item.

        Scale is clamped to [scale_min, scale_max] and position re-clamped
        for the resulting size. Rotation is stored as given. NaN fields are
        ignored like omitted ones. Returns None, leaving the store untouched,
        when the id is not present.
        """
        item = self.get(item_id)
        if item is None:
            return None

        if _given(scale):
            item.scale = clamp(scale, self.config.scale_min, self.config.scale_max)
        if _given(rotation):
            item.rotation = float(rotation)
        if _given(x):
            item.x = float(x)
        if _given(y):
            item.y = float(y)
        self._clamp(item)
        return item

    def scale_by(self, item_id: str, step: float | None = None) -> PlacedItem | None:
        """Grow (or shrink, with a negative step) an item by one step."""
        item = self.get(item_id)
        if item is None:
            return None
        if step is None:
            step = self.config.scale_step
        return self.update(item_id, scale=item.scale + step)

    def rotate_by(
        self, item_id: str, degrees: float | None = None
    ) -> PlacedItem | None:
        item = self.get(item_id)
        if item is None:
            return None
        if degrees is None:
            degrees = self.config.rotate_step
        return self.update(item_id, rotation=item.rotation + degrees)

    def remove(self, item_id: str) -> tuple[PlacedItem, ...]:
        """Remove an item if present. Absent ids are a no-op."""
        self._items = [item for item in self._items if item.id != item_id]
        return self.items

    def replace_all(self, items: Iterable[PlacedItem]) -> tuple[PlacedItem, ...]:
        """Swap the whole collection (e.g. when a suggestion is accepted).

        Items are copied, so the store never shares mutable state with a
        suggestion, and clamped into the current room.
        """
        fresh = [copy.copy(item) for item in items]
        for item in fresh:
            item.scale = clamp(item.scale, self.config.scale_min, self.config.scale_max)
            self._clamp(item)
        self._items = fresh
        return self.items

    def clear(self) -> tuple[PlacedItem, ...]:
        self._items = []
        return self.items

    def resize(self, room_width: float, room_height: float) -> tuple[PlacedItem, ...]:
        """New room bounds (the displayed image changed); re-clamp everything."""
        self.room_width = max(0.0, float(room_width))
        self.room_height = max(0.0, float(room_height))
        for item in self._items:
            self._clamp(item)
        return self.items

    def _clamp(self, item: PlacedItem) -> None:
        clamp_item(item, self.room_width, self.room_height)
