"""
Centralized configuration for layout generation.

All tunable constants in one place: jitter magnitudes, scoring weights,
suggestion counts and placement limits.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field


@dataclass
class VariationConfig:
    """Template -> concrete arrangement."""

    position_jitter: float = 0.05  # ± fraction of room dimension
    rotation_jitter: float = 15.0  # ± degrees
    scale_min: float = 0.8  # scale at density 0
    scale_max: float = 1.2  # scale at density 100


@dataclass
class ScoringWeights:
    """Heuristic layout score weights (score is clamped to [0, 100])."""

    base: int = 50
    per_category: int = 5
    no_overlap: int = 20

    # Room-type bonuses
    room_seating: int = 15
    room_table: int = 10
    closet_storage: int = 20
    kitchen_refrigerator: int = 15
    kitchen_table: int = 15
    refrigerator_kind: str = "refrigerator"

    # Goal bonuses (per matching item)
    storage_item: int = 8
    decor_item: int = 5


@dataclass
class SuggestionConfig:
    """Suggestion batches and simulated latency."""

    min_count: int = 3
    max_count: int = 5  # inclusive
    latency_min: float = 1.0  # seconds
    latency_max: float = 3.0


@dataclass
class StoreConfig:
    """Manual placement limits."""

    scale_min: float = 0.5
    scale_max: float = 2.0
    scale_step: float = 0.1
    rotate_step: float = 15.0  # degrees


@dataclass
class LayoutConfig:
    """Complete engine configuration."""

    variation: VariationConfig = field(default_factory=VariationConfig)
    scoring: ScoringWeights = field(default_factory=ScoringWeights)
    suggestion: SuggestionConfig = field(default_factory=SuggestionConfig)
    store: StoreConfig = field(default_factory=StoreConfig)

    def to_flat_dict(self) -> dict:
        """
        Convert to a flat dict for logging.

        Prefixes each section's keys with section name.
        Example: variation.position_jitter -> "variation/position_jitter"
        """
        flat = {}
        for section, values in asdict(self).items():
            for key, value in values.items():
                flat[f"{section}/{key}"] = value
        return flat
