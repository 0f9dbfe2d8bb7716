"""Heuristic layout scoring (0-100).

    score = base
          + per_category * (distinct categories)
          + no_overlap                       if nothing overlaps
          + room-type bonuses                (seating/table, storage, fridge/table)
          + goal bonuses                     (per storage item, per decor item)
    clamped to [0, 100]

An empty arrangement scores the base alone. Style is never consulted.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from layout_gen.catalog import Category
from layout_gen.config import ScoringWeights
from layout_gen.geometry import has_overlap
from layout_gen.placement import PlacedItem


def score(
    items: Sequence[PlacedItem],
    room_type: str,
    goals: Iterable[str],
    weights: ScoringWeights | None = None,
) -> int:
    w = weights or ScoringWeights()
    goals = set(goals)
    if not items:
        return int(np.clip(w.base, 0, 100))

    categories = [it.kind.category for it in items]
    present = set(categories)

    total = w.base
    total += w.per_category * len(present)
    if not has_overlap(items):
        total += w.no_overlap

    if room_type == "room":
        if Category.SEATING in present:
            total += w.room_seating
        if Category.TABLE in present:
            total += w.room_table
    elif room_type == "closet":
        if Category.STORAGE in present:
            total += w.closet_storage
    elif room_type == "kitchen":
        if any(it.kind.id == w.refrigerator_kind for it in items):
            total += w.kitchen_refrigerator
        if Category.TABLE in present:
            total += w.kitchen_table

    if "maximize-storage" in goals:
        total += w.storage_item * categories.count(Category.STORAGE)
    if "showcase" in goals:
        total += w.decor_item * categories.count(Category.DECOR)

    return int(np.clip(total, 0, 100))


def quality_band(value: int) -> str:
    """Qualitative label for a score."""
    if value > 80:
        return "Excellent"
    if value > 60:
        return "Good"
    return "Basic"
