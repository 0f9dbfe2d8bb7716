"""Furniture layout generation for room photos.

Turns a room's pixel size and the user's preferences into scored furniture
arrangements, and keeps the live set of placed furniture inside the room.
Catalog and templates are injectable registries; randomness comes from a
numpy Generator passed to each call.

Usage:
    from layout_gen import PlacementStore, Preferences, SuggestionEngine

    engine = SuggestionEngine()
    prefs = Preferences.from_values("kitchen", ["workflow"], density=60)
    suggestions = engine.suggest(800, 600, prefs, seed=7)   # best first

    store = PlacementStore(800, 600)
    store.replace_all(suggestions[0].furniture)
    store.drop("plant", 400, 300)                          # manual placement
"""

from layout_gen.catalog import Catalog, Category, FurnitureKind, default_catalog
from layout_gen.geometry import has_overlap
from layout_gen.placement import PlacedItem
from layout_gen.preferences import Preferences
from layout_gen.scoring import score
from layout_gen.session import SuggestionSession
from layout_gen.store import PlacementStore
from layout_gen.suggest import LayoutSuggestion, SuggestionEngine
from layout_gen.templates import LayoutTemplate, TemplateRegistry, default_registry
from layout_gen.variations import VariationGenerator

__all__ = [
    "Catalog",
    "Category",
    "FurnitureKind",
    "default_catalog",
    "has_overlap",
    "PlacedItem",
    "Preferences",
    "score",
    "SuggestionSession",
    "PlacementStore",
    "LayoutSuggestion",
    "SuggestionEngine",
    "LayoutTemplate",
    "TemplateRegistry",
    "default_registry",
    "VariationGenerator",
]
