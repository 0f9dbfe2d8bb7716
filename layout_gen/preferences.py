"""User preferences that drive suggestion generation.

Values arrive as plain strings from a filter form; ``Preferences.from_values``
normalises them. Room type is kept as given (the template registry falls
back for unknown types), unknown goals are dropped and density is clamped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

ROOM_TYPES = ("room", "closet", "kitchen")
GOALS = ("declutter", "maximize-storage", "showcase", "workflow")
STYLES = ("minimal", "modern", "cozy")

DEFAULT_ROOM_TYPE = "room"
DEFAULT_STYLE = "minimal"
DEFAULT_DENSITY = 50.0


def clamp_density(density: float) -> float:
    """Clamp into [0, 100]. NaN falls back to the default density."""
    if np.isnan(density):
        return DEFAULT_DENSITY
    return float(np.clip(density, 0.0, 100.0))


@dataclass(frozen=True)
class Preferences:
    """Filter-form state.

    Attributes:
        room_type: "room", "closet" or "kitchen"
        goals: Subset of GOALS
        style: Advisory only, never used for scoring
        density: 0..100, how densely to pack furniture (drives scale)
    """

    room_type: str = DEFAULT_ROOM_TYPE
    goals: frozenset[str] = field(default_factory=frozenset)
    style: str = DEFAULT_STYLE
    density: float = DEFAULT_DENSITY

    @classmethod
    def from_values(
        cls,
        room_type: str = DEFAULT_ROOM_TYPE,
        goals: Iterable[str] = (),
        style: str = DEFAULT_STYLE,
        density: float = DEFAULT_DENSITY,
    ) -> Preferences:
        if isinstance(goals, str):
            goals = (goals,)
        return cls(
            room_type=room_type,
            goals=frozenset(g for g in goals if g in GOALS),
            style=style if style in STYLES else DEFAULT_STYLE,
            density=clamp_density(density),
        )
