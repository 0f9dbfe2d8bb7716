"""Zone presets: labelled percentage boxes overlaid on the room photo.

A lighter-weight alternative to furniture suggestions: each preset marks
functional areas ("Prep Zone", "Shelving Wall", ...) as boxes in percent
of the room image. The minimal and storage presets jitter x/y by a few
percent; the others are fixed.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ZoneBox:
    """A labelled box in percent of room width/height (0..100)."""

    id: str
    x_pct: float
    y_pct: float
    w_pct: float
    h_pct: float
    label: str


@dataclass(frozen=True)
class ZonePreset:
    key: str
    name: str
    description: str
    boxes: tuple[tuple[float, float, float, float, str], ...]
    jitter: float = 0.0  # ± percent applied to x/y


PRESETS: dict[str, ZonePreset] = {
    "minimal": ZonePreset(
        key="minimal",
        name="Minimalist",
        description="Few focal zones, lots of breathing room",
        boxes=(
            (10, 20, 28, 30, "Feature Area"),
            (60, 55, 25, 28, "Storage"),
        ),
        jitter=2.0,
    ),
    "storage": ZonePreset(
        key="storage",
        name="Storage Max",
        description="Optimized bins, shelves, and racks",
        boxes=(
            (8, 10, 30, 35, "Shelving Wall"),
            (42, 12, 25, 25, "Stackable Bins"),
            (70, 55, 22, 30, "Drawer Unit"),
        ),
        jitter=3.0,
    ),
    "balanced": ZonePreset(
        key="balanced",
        name="Aesthetic Balance",
        description="Symmetry and visual rhythm",
        boxes=(
            (18, 20, 24, 28, "Left Zone"),
            (58, 20, 24, 28, "Right Zone"),
            (38, 58, 24, 28, "Center Storage"),
        ),
    ),
    "closet": ZonePreset(
        key="closet",
        name="Closet Assist",
        description="Hanging, folded, accessories",
        boxes=(
            (10, 15, 32, 30, "Hanging (Tops)"),
            (52, 15, 32, 30, "Hanging (Bottoms)"),
            (10, 55, 32, 30, "Folded Shelves"),
            (52, 55, 32, 30, "Shoes/Accessories"),
        ),
    ),
    "kitchen": ZonePreset(
        key="kitchen",
        name="Kitchen Zones",
        description="Prep, cook, clean, store",
        boxes=(
            (8, 18, 28, 30, "Prep Zone"),
            (38, 12, 24, 24, "Cook Zone"),
            (68, 18, 24, 28, "Clean Zone"),
            (38, 52, 24, 30, "Pantry/Storage"),
        ),
    ),
}


def list_presets() -> list[tuple[str, str, str]]:
    """(key, name, description) for every preset, in display order."""
    return [(p.key, p.name, p.description) for p in PRESETS.values()]


def generate_zones(key: str, rng: np.random.Generator | None = None) -> list[ZoneBox]:
    """Zone boxes for a preset. Unknown keys give an empty list."""
    preset = PRESETS.get(key)
    if preset is None:
        return []
    if rng is None:
        rng = np.random.default_rng()

    zones = []
    for n, (x, y, w, h, label) in enumerate(preset.boxes, start=1):
        if preset.jitter > 0:
            x = float(np.clip(x + rng.uniform(-preset.jitter, preset.jitter), 0, 100))
            y = float(np.clip(y + rng.uniform(-preset.jitter, preset.jitter), 0, 100))
        zones.append(ZoneBox(f"{preset.key}-zone-{n}", x, y, w, h, label))
    return zones
