"""Variation generator — turns a template into a concrete arrangement.

For every template entry whose kind is in the catalog:
    scale    = scale_min + density/100 * (scale_max - scale_min)   (0.8 .. 1.2)
    fraction = rel + U(-position_jitter, +position_jitter)
    x, y     = fraction * room dimension, clamped so the scaled box fits
    rotation = template rotation + U(-rotation_jitter, +rotation_jitter)

All randomness comes from the numpy Generator passed in, so a fixed seed
reproduces the same arrangement.
"""

from __future__ import annotations

import itertools
import logging

import numpy as np

from layout_gen.catalog import Catalog
from layout_gen.config import VariationConfig
from layout_gen.geometry import clamp_position
from layout_gen.placement import PlacedItem
from layout_gen.preferences import clamp_density
from layout_gen.templates import LayoutTemplate

log = logging.getLogger(__name__)


def scale_for_density(density: float, config: VariationConfig | None = None) -> float:
    """Density 0..100 -> uniform furniture scale. Monotonic non-decreasing."""
    config = config or VariationConfig()
    lo, hi = config.scale_min, config.scale_max
    # lo + t*(hi - lo) can land one ulp outside [lo, hi]
    scale = lo + (clamp_density(density) / 100.0) * (hi - lo)
    return float(np.clip(scale, lo, hi))


class VariationGenerator:
    """Instantiates templates into PlacedItem lists.

    Item ids are ``{kind_id}-{n}`` with n drawn from a counter owned by the
    generator, so ids stay unique across calls, including when the same kind
    appears twice in one template.
    """

    def __init__(self, catalog: Catalog, config: VariationConfig | None = None):
        self.catalog = catalog
        self.config = config or VariationConfig()
        self._ids = itertools.count(1)

    def generate(
        self,
        template: LayoutTemplate,
        room_width: float,
        room_height: float,
        density: float,
        rng: np.random.Generator,
    ) -> list[PlacedItem]:
        cfg = self.config
        scale = scale_for_density(density, cfg)
        room_width = max(0.0, float(room_width))
        room_height = max(0.0, float(room_height))

        items: list[PlacedItem] = []
        for entry in template.entries:
            kind = self.catalog.lookup(entry.kind_id)
            if kind is None:
                log.debug(
                    "Skipping unknown kind %r in %s/%s template",
                    entry.kind_id,
                    template.room_type,
                    template.family,
                )
                continue

            jx = float(rng.uniform(-cfg.position_jitter, cfg.position_jitter))
            jy = float(rng.uniform(-cfg.position_jitter, cfg.position_jitter))
            x = clamp_position(
                (entry.rel_x + jx) * room_width, kind.width * scale, room_width
            )
            y = clamp_position(
                (entry.rel_y + jy) * room_height, kind.height * scale, room_height
            )
            rotation = entry.rotation + float(
                rng.uniform(-cfg.rotation_jitter, cfg.rotation_jitter)
            )

            items.append(
                PlacedItem(
                    id=f"{kind.id}-{next(self._ids)}",
                    kind=kind,
                    x=x,
                    y=y,
                    rotation=rotation,
                    scale=scale,
                )
            )
        return items
