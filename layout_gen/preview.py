"""Print generated layout suggestions for a room.

Usage:
    uv run python -m layout_gen.preview                              # 800x600 room
    uv run python -m layout_gen.preview --room-type closet --goals maximize-storage
    uv run python -m layout_gen.preview --width 1024 --height 768 --seed 42
    uv run python -m layout_gen.preview --zones kitchen              # zone preset
"""

from __future__ import annotations

import argparse
import json
import logging

import numpy as np

from layout_gen.preferences import GOALS, ROOM_TYPES, STYLES, Preferences
from layout_gen.suggest import (
    SuggestionEngine,
    describe_suggestions,
    suggestion_to_dict,
)
from layout_gen.zones import PRESETS, generate_zones


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Preview layout suggestions")
    parser.add_argument("--width", type=float, default=800, help="Room width (px)")
    parser.add_argument("--height", type=float, default=600, help="Room height (px)")
    parser.add_argument("--room-type", choices=ROOM_TYPES, default="room")
    parser.add_argument("--goals", nargs="*", choices=GOALS, default=[])
    parser.add_argument("--style", choices=STYLES, default="minimal")
    parser.add_argument(
        "--density", type=float, default=50, help="Packing density 0-100 (default: 50)"
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducibility")
    parser.add_argument("--json", action="store_true", help="Print JSON instead")
    parser.add_argument("--zones", choices=sorted(PRESETS), help="Show a zone preset")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rng = np.random.default_rng(args.seed)

    if args.zones:
        for zone in generate_zones(args.zones, rng):
            print(
                f"{zone.label:<20} x={zone.x_pct:5.1f}% y={zone.y_pct:5.1f}% "
                f"w={zone.w_pct:.0f}% h={zone.h_pct:.0f}%"
            )
        return

    prefs = Preferences.from_values(
        room_type=args.room_type,
        goals=args.goals,
        style=args.style,
        density=args.density,
    )
    suggestions = SuggestionEngine().suggest(args.width, args.height, prefs, rng=rng)

    if args.json:
        print(json.dumps([suggestion_to_dict(s) for s in suggestions], indent=2))
    else:
        print(describe_suggestions(suggestions))


if __name__ == "__main__":
    main()
