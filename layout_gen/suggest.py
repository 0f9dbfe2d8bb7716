"""Suggestion engine — scored, named layout proposals for a room.

One request:
  1. resolve the template once from (room type, goals)
  2. draw a candidate count (3..5 by default)
  3. for each candidate generate a fresh variation and score it
  4. name it "{RoomType} Layout {n}" and describe it from the template
     family and its quality band
  5. sort best-first (stable, so ties keep generation order)

The engine is synchronous and keeps no per-request state; the latency and
supersession layer lives in ``layout_gen.session``.

Usage:
    engine = SuggestionEngine()
    prefs = Preferences.from_values("closet", ["maximize-storage"], density=50)
    suggestions = engine.suggest(800, 600, prefs, seed=42)
    print(describe_suggestions(suggestions))
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass

import numpy as np

from layout_gen.catalog import Catalog, default_catalog
from layout_gen.config import LayoutConfig
from layout_gen.placement import PlacedItem, item_to_dict
from layout_gen.preferences import Preferences
from layout_gen.scoring import quality_band, score
from layout_gen.templates import FAMILY_DESCRIPTIONS, TemplateRegistry, default_registry
from layout_gen.variations import VariationGenerator

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutSuggestion:
    """A scored arrangement offered to the user.

    Attributes:
        id: Unique suggestion id
        name: Display name, e.g. "Kitchen Layout 2"
        description: Template family blurb plus quality band
        furniture: The arrangement
        score: 0..100
        family: Template family the arrangement came from
    """

    id: str
    name: str
    description: str
    furniture: tuple[PlacedItem, ...]
    score: int
    family: str = "minimal"


class SuggestionEngine:
    """Generates and ranks layout suggestions."""

    def __init__(
        self,
        catalog: Catalog | None = None,
        registry: TemplateRegistry | None = None,
        config: LayoutConfig | None = None,
    ):
        self.catalog = catalog or default_catalog()
        self.registry = registry or default_registry()
        self.config = config or LayoutConfig()
        self.generator = VariationGenerator(self.catalog, self.config.variation)
        self._requests = itertools.count(1)

    def suggest(
        self,
        room_width: float,
        room_height: float,
        preferences: Preferences,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> list[LayoutSuggestion]:
        """Generate a best-first list of suggestions.

        Args:
            room_width, room_height: Room size in pixels. A non-positive
                dimension yields no suggestions.
            preferences: Room type, goals and density.
            rng: Numpy random generator (for reproducibility).
            seed: Integer seed. Overrides rng if both given.
        """
        if seed is not None:
            rng = np.random.default_rng(seed)
        elif rng is None:
            rng = np.random.default_rng()

        if room_width <= 0 or room_height <= 0:
            log.debug("No suggestions for empty room %sx%s", room_width, room_height)
            return []

        cfg = self.config.suggestion
        template = self.registry.resolve(preferences.room_type, preferences.goals)
        count = int(rng.integers(cfg.min_count, cfg.max_count + 1))
        request = next(self._requests)

        description = FAMILY_DESCRIPTIONS.get(template.family, template.family)
        title = preferences.room_type[:1].upper() + preferences.room_type[1:]

        suggestions: list[LayoutSuggestion] = []
        for n in range(1, count + 1):
            furniture = self.generator.generate(
                template, room_width, room_height, preferences.density, rng
            )
            value = score(
                furniture,
                preferences.room_type,
                preferences.goals,
                self.config.scoring,
            )
            suggestions.append(
                LayoutSuggestion(
                    id=f"suggestion-{request}-{n}",
                    name=f"{title} Layout {n}",
                    description=f"{description}. {quality_band(value)} layout score.",
                    furniture=tuple(furniture),
                    score=value,
                    family=template.family,
                )
            )

        # sorted() is stable: ties keep generation order
        suggestions = sorted(suggestions, key=lambda s: s.score, reverse=True)
        log.info(
            "Generated %d %s/%s suggestions",
            len(suggestions),
            template.room_type,
            template.family,
        )
        return suggestions


# ---------------------------------------------------------------------------
# Plain data & description
# ---------------------------------------------------------------------------


def suggestion_to_dict(suggestion: LayoutSuggestion) -> dict:
    return {
        "id": suggestion.id,
        "name": suggestion.name,
        "description": suggestion.description,
        "family": suggestion.family,
        "score": suggestion.score,
        "furniture": [item_to_dict(it) for it in suggestion.furniture],
    }


def describe_item(item: PlacedItem) -> str:
    """One-line description of a placed item."""
    return (
        f"{item.kind.id} at ({item.x:.0f}, {item.y:.0f}) "
        f"rot {item.rotation:.0f}°  scale {item.scale:.2f}"
    )


def describe_suggestion(suggestion: LayoutSuggestion) -> str:
    """Multi-line description of one suggestion.

    Example output:
        Closet Layout 2  score 100  (storage)
          Optimized for maximum storage capacity. Excellent layout score.
          [0] wardrobe at (43, 27) rot 7°  scale 1.00
          [1] dresser at (301, 61) rot -12°  scale 1.00
    """
    lines = [
        f"{suggestion.name}  score {suggestion.score}  ({suggestion.family})",
        f"  {suggestion.description}",
    ]
    for i, item in enumerate(suggestion.furniture):
        lines.append(f"  [{i}] {describe_item(item)}")
    return "\n".join(lines)


def describe_suggestions(suggestions: list[LayoutSuggestion]) -> str:
    if not suggestions:
        return "No suggestions available"
    return "\n\n".join(describe_suggestion(s) for s in suggestions)
