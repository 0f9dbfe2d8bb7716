"""Furniture kinds available for placement.

A catalog is an explicitly constructed, read-only registry of
FurnitureKind records. Nothing in the engine reaches for a global table:
callers build a Catalog (or take ``default_catalog()``) and pass it in,
so tests can substitute their own fixtures.

Usage:
    catalog = default_catalog()
    sofa = catalog.lookup("sofa")       # FurnitureKind or None
    storage = catalog.by_category(Category.STORAGE)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Iterable, Iterator


class Category(Enum):
    """Broad furniture category, used by scoring."""

    SEATING = "seating"
    STORAGE = "storage"
    TABLE = "table"
    BED = "bed"
    DECOR = "decor"
    APPLIANCE = "appliance"


@dataclass(frozen=True)
class FurnitureKind:
    """A catalog entry.

    Attributes:
        id: Unique kind identifier (e.g., "sofa", "coffee-table")
        name: Human-readable name
        width: Base footprint width (catalog units / pixels)
        height: Base footprint height
        category: Furniture category
        emoji: Label glyph for collaborators that draw items
    """

    id: str
    name: str
    width: float
    height: float
    category: Category
    emoji: str = ""


class Catalog:
    """Read-only lookup of furniture kinds by id."""

    def __init__(self, kinds: Iterable[FurnitureKind]):
        self._kinds: dict[str, FurnitureKind] = {}
        for kind in kinds:
            if kind.id in self._kinds:
                raise ValueError(f"Duplicate furniture kind id: {kind.id!r}")
            self._kinds[kind.id] = kind

    def lookup(self, kind_id: str) -> FurnitureKind | None:
        """Return the kind with this id, or None if the catalog has none."""
        return self._kinds.get(kind_id)

    def get(self, kind_id: str) -> FurnitureKind:
        """Get a kind by id. Raises KeyError if not found."""
        return self._kinds[kind_id]

    def list_kinds(self) -> list[str]:
        """List available kind ids."""
        return sorted(self._kinds.keys())

    def by_category(self, category: Category) -> list[FurnitureKind]:
        return [k for k in self._kinds.values() if k.category == category]

    def __contains__(self, kind_id: object) -> bool:
        return kind_id in self._kinds

    def __len__(self) -> int:
        return len(self._kinds)

    def __iter__(self) -> Iterator[FurnitureKind]:
        return iter(self._kinds.values())


# ---------------------------------------------------------------------------
# Standard furniture
# ---------------------------------------------------------------------------

STANDARD_KINDS: tuple[FurnitureKind, ...] = (
    # Seating
    FurnitureKind("sofa", "Sofa", 120, 60, Category.SEATING, "\U0001f6cb\ufe0f"),
    FurnitureKind("chair", "Chair", 40, 40, Category.SEATING, "\U0001fa91"),
    FurnitureKind("armchair", "Armchair", 50, 50, Category.SEATING, "\U0001fa91"),
    FurnitureKind("stool", "Stool", 30, 30, Category.SEATING, "\U0001fa91"),
    # Storage
    FurnitureKind("wardrobe", "Wardrobe", 60, 100, Category.STORAGE, "\U0001f6aa"),
    FurnitureKind("bookshelf", "Bookshelf", 80, 120, Category.STORAGE, "\U0001f4da"),
    FurnitureKind("dresser", "Dresser", 80, 60, Category.STORAGE, "\U0001f5c4\ufe0f"),
    FurnitureKind("cabinet", "Cabinet", 60, 80, Category.STORAGE, "\U0001f5c3\ufe0f"),
    # Tables
    FurnitureKind(
        "dining-table", "Dining Table", 100, 60, Category.TABLE, "\U0001fa91"
    ),
    FurnitureKind("coffee-table", "Coffee Table", 80, 40, Category.TABLE, "\U0001fa91"),
    FurnitureKind("desk", "Desk", 100, 50, Category.TABLE, "\U0001fa91"),
    FurnitureKind("side-table", "Side Table", 40, 40, Category.TABLE, "\U0001fa91"),
    # Beds
    FurnitureKind("bed", "Bed", 100, 80, Category.BED, "\U0001f6cf\ufe0f"),
    FurnitureKind("bunk-bed", "Bunk Bed", 80, 100, Category.BED, "\U0001f6cf\ufe0f"),
    # Appliances
    FurnitureKind("tv", "TV", 60, 40, Category.APPLIANCE, "\U0001f4fa"),
    FurnitureKind(
        "refrigerator", "Refrigerator", 50, 80, Category.APPLIANCE, "\U0001f9ca"
    ),
    FurnitureKind(
        "washing-machine", "Washing Machine", 50, 60, Category.APPLIANCE, "\U0001f9fa"
    ),
    # Decor
    FurnitureKind("lamp", "Lamp", 20, 30, Category.DECOR, "\U0001f4a1"),
    FurnitureKind("plant", "Plant", 25, 25, Category.DECOR, "\U0001fab4"),
    FurnitureKind("mirror", "Mirror", 40, 60, Category.DECOR, "\U0001fa9e"),
)


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    """The standard catalog, built once."""
    return Catalog(STANDARD_KINDS)
