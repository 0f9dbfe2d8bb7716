"""Layout templates — skeleton arrangements per room type and goal.

Each template lists furniture kinds with a fractional room position and a
base rotation. Templates are grouped into *families* (minimal, storage,
showcase, workflow); the user's goals pick the family and the room type
picks the table.

Resolution rule:
    1. family = first of maximize-storage -> storage, showcase -> showcase,
       workflow -> workflow, otherwise minimal
    2. look up (room_type, family); if missing use ("room", family);
       if that is missing too use ("room", "minimal")

Usage:
    registry = default_registry()
    template = registry.resolve("closet", {"maximize-storage"})
    for entry in template.entries:
        ...
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable

FALLBACK_ROOM_TYPE = "room"
FALLBACK_FAMILY = "minimal"

# Checked in order; first goal present wins.
GOAL_PRIORITY: tuple[tuple[str, str], ...] = (
    ("maximize-storage", "storage"),
    ("showcase", "showcase"),
    ("workflow", "workflow"),
)

FAMILY_DESCRIPTIONS: dict[str, str] = {
    "minimal": "Clean and spacious with essential furniture only",
    "storage": "Optimized for maximum storage capacity",
    "showcase": "Designed to highlight and display items beautifully",
    "workflow": "Arranged for efficient daily activities",
}


@dataclass(frozen=True)
class TemplateEntry:
    """One furniture slot in a template.

    Attributes:
        kind_id: Catalog id (unknown ids are skipped at generation time)
        rel_x, rel_y: Top-left position as a fraction of room size, in [0, 1]
        rotation: Base rotation in degrees
    """

    kind_id: str
    rel_x: float
    rel_y: float
    rotation: float = 0.0


@dataclass(frozen=True)
class LayoutTemplate:
    """An ordered furniture skeleton for one (room type, family)."""

    room_type: str
    family: str
    entries: tuple[TemplateEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)


def family_for_goals(goals: Iterable[str]) -> str:
    """Pick the template family for a set of goals."""
    goal_set = set(goals)
    for goal, family in GOAL_PRIORITY:
        if goal in goal_set:
            return family
    return FALLBACK_FAMILY


class TemplateRegistry:
    """Static templates keyed by (room_type, family)."""

    def __init__(self, templates: Iterable[LayoutTemplate]):
        self._templates: dict[tuple[str, str], LayoutTemplate] = {
            (t.room_type, t.family): t for t in templates
        }

    def get(self, room_type: str, family: str) -> LayoutTemplate | None:
        return self._templates.get((room_type, family))

    def resolve(self, room_type: str, goals: Iterable[str]) -> LayoutTemplate:
        """Template for a room type and goal set, applying the fallback rule.

        Never fails: an empty registry resolves to an empty template.
        """
        family = family_for_goals(goals)
        for key in (
            (room_type, family),
            (FALLBACK_ROOM_TYPE, family),
            (FALLBACK_ROOM_TYPE, FALLBACK_FAMILY),
        ):
            template = self._templates.get(key)
            if template is not None:
                return template
        return LayoutTemplate(room_type=room_type, family=family)

    def list_room_types(self) -> list[str]:
        return sorted({rt for rt, _ in self._templates})

    def list_families(self, room_type: str) -> list[str]:
        return sorted(f for rt, f in self._templates if rt == room_type)


# ---------------------------------------------------------------------------
# Standard templates
# ---------------------------------------------------------------------------


def _t(room_type: str, family: str, *entries: tuple) -> LayoutTemplate:
    return LayoutTemplate(
        room_type=room_type,
        family=family,
        entries=tuple(TemplateEntry(*e) for e in entries),
    )


STANDARD_TEMPLATES: tuple[LayoutTemplate, ...] = (
    # Living room
    _t(
        "room",
        "minimal",
        ("sofa", 0.1, 0.3, 0),
        ("coffee-table", 0.3, 0.5, 0),
        ("tv", 0.7, 0.2, 0),
    ),
    _t(
        "room",
        "storage",
        ("bookshelf", 0.05, 0.1, 0),
        ("cabinet", 0.8, 0.1, 0),
        ("sofa", 0.2, 0.4, 0),
        ("coffee-table", 0.4, 0.6, 0),
    ),
    _t(
        "room",
        "showcase",
        ("sofa", 0.15, 0.3, 0),
        ("armchair", 0.6, 0.2, 45),
        ("coffee-table", 0.35, 0.5, 0),
        ("lamp", 0.1, 0.1, 0),
        ("plant", 0.8, 0.8, 0),
    ),
    _t(
        "room",
        "workflow",
        ("desk", 0.1, 0.2, 0),
        ("chair", 0.2, 0.4, 0),
        ("bookshelf", 0.7, 0.1, 0),
        ("lamp", 0.15, 0.15, 0),
    ),
    # Closet
    _t(
        "closet",
        "minimal",
        ("wardrobe", 0.1, 0.1, 0),
        ("dresser", 0.6, 0.2, 0),
    ),
    _t(
        "closet",
        "storage",
        ("wardrobe", 0.05, 0.05, 0),
        ("dresser", 0.4, 0.1, 0),
        ("cabinet", 0.7, 0.1, 0),
        ("mirror", 0.2, 0.6, 0),
    ),
    _t(
        "closet",
        "showcase",
        ("wardrobe", 0.1, 0.1, 0),
        ("dresser", 0.5, 0.2, 0),
        ("mirror", 0.3, 0.6, 0),
        ("lamp", 0.8, 0.3, 0),
    ),
    _t(
        "closet",
        "workflow",
        ("wardrobe", 0.05, 0.05, 0),
        ("dresser", 0.4, 0.1, 0),
        ("mirror", 0.2, 0.5, 0),
    ),
    # Kitchen
    _t(
        "kitchen",
        "minimal",
        ("refrigerator", 0.1, 0.1, 0),
        ("dining-table", 0.4, 0.3, 0),
        ("chair", 0.5, 0.5, 0),
    ),
    _t(
        "kitchen",
        "storage",
        ("refrigerator", 0.05, 0.05, 0),
        ("cabinet", 0.3, 0.1, 0),
        ("dining-table", 0.5, 0.4, 0),
        ("chair", 0.6, 0.6, 0),
        ("chair", 0.4, 0.6, 0),
    ),
    _t(
        "kitchen",
        "showcase",
        ("refrigerator", 0.1, 0.1, 0),
        ("dining-table", 0.3, 0.3, 0),
        ("chair", 0.4, 0.5, 0),
        ("chair", 0.2, 0.5, 0),
        ("lamp", 0.8, 0.2, 0),
    ),
    _t(
        "kitchen",
        "workflow",
        ("refrigerator", 0.05, 0.05, 0),
        ("dining-table", 0.3, 0.2, 0),
        ("chair", 0.4, 0.4, 0),
        ("cabinet", 0.6, 0.1, 0),
    ),
)


@lru_cache(maxsize=1)
def default_registry() -> TemplateRegistry:
    """The standard room/closet/kitchen templates, built once."""
    return TemplateRegistry(STANDARD_TEMPLATES)
