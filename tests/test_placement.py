"""Tests for the placement store and the suggestion session.

Validates that:
- Every store mutation keeps items inside the room
- Missing ids are reported (None) or ignored, never raised
- Accepting a suggestion swaps the whole collection
- Superseded suggestion requests never publish their results
"""

import asyncio

import numpy as np
import pytest

from layout_gen.catalog import default_catalog
from layout_gen.geometry import in_bounds
from layout_gen.placement import PlacedItem
from layout_gen.preferences import Preferences
from layout_gen.session import SuggestionSession
from layout_gen.store import PlacementStore
from layout_gen.suggest import SuggestionEngine

ROOM_W, ROOM_H = 800, 600


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def store():
    return PlacementStore(ROOM_W, ROOM_H)


def assert_all_in_bounds(store):
    for item in store.items:
        assert in_bounds(item, store.room_width, store.room_height), (
            f"{item.id} at ({item.x}, {item.y}) scale {item.scale} "
            f"outside {store.room_width}x{store.room_height}"
        )


# ---------------------------------------------------------------------------
# Placement store
# ---------------------------------------------------------------------------


class TestPlacementStore:
    def test_add_clamps_sofa_to_right_edge(self, store, catalog):
        item = store.add(catalog.get("sofa"), 790, 10)
        assert item.x == pytest.approx(680)
        assert item.y == pytest.approx(10)
        assert item.rotation == 0
        assert item.scale == 1
        assert store.items == (item,)

    def test_add_assigns_fresh_ids(self, store, catalog):
        a = store.add(catalog.get("chair"), 0, 0)
        b = store.add(catalog.get("chair"), 0, 0)
        assert a.id != b.id
        assert a.id != "chair"

    def test_add_negative_position(self, store, catalog):
        item = store.add(catalog.get("lamp"), -50, -1)
        assert (item.x, item.y) == (0, 0)

    def test_drop_centres_on_cursor(self, store):
        item = store.drop("chair", 100, 100)  # chair is 40x40
        assert (item.x, item.y) == (80, 80)

    def test_drop_near_edge_is_clamped(self, store):
        item = store.drop("bookshelf", 795, 595)
        assert item.x == pytest.approx(ROOM_W - 80)
        assert item.y == pytest.approx(ROOM_H - 120)

    def test_drop_unknown_kind(self, store):
        assert store.drop("hot-tub", 100, 100) is None
        assert len(store) == 0

    def test_update_missing_id_leaves_store_unchanged(self, store, catalog):
        store.add(catalog.get("desk"), 10, 10)
        before = [(i.id, i.x, i.y, i.rotation, i.scale) for i in store.items]
        assert store.update("nope", x=5, scale=2) is None
        after = [(i.id, i.x, i.y, i.rotation, i.scale) for i in store.items]
        assert before == after

    def test_update_applies_only_given_fields(self, store, catalog):
        item = store.add(catalog.get("desk"), 10, 20)
        store.update(item.id, rotation=30)
        assert (item.x, item.y, item.rotation, item.scale) == (10, 20, 30, 1)

    @pytest.mark.parametrize("scale, expected", [(0.1, 0.5), (5.0, 2.0), (1.3, 1.3)])
    def test_update_clamps_scale(self, store, catalog, scale, expected):
        item = store.add(catalog.get("chair"), 0, 0)
        store.update(item.id, scale=scale)
        assert item.scale == pytest.approx(expected)

    def test_nan_fields_are_ignored(self, store, catalog):
        item = store.add(catalog.get("chair"), 100, 50)
        store.update(item.id, x=float("nan"), scale=float("nan"))
        assert (item.x, item.y, item.scale) == (100, 50, 1)
        store.update(item.id, y=float("nan"), rotation=float("nan"), scale=1.5)
        assert (item.y, item.rotation, item.scale) == (50, 0, 1.5)

    def test_nan_position_on_add_is_pinned(self, store, catalog):
        item = store.add(catalog.get("chair"), float("nan"), 20)
        assert (item.x, item.y) == (0, 20)
        assert_all_in_bounds(store)

    def test_growing_item_is_pulled_back_inside(self, store, catalog):
        item = store.add(catalog.get("sofa"), 790, 590)  # x=680, y=540
        store.update(item.id, scale=2.0)
        assert item.x == pytest.approx(ROOM_W - 240)
        assert item.y == pytest.approx(ROOM_H - 120)
        assert_all_in_bounds(store)

    def test_rotation_is_not_clamped(self, store, catalog):
        item = store.add(catalog.get("chair"), 0, 0)
        store.update(item.id, rotation=725)
        assert item.rotation == 725

    def test_step_helpers(self, store, catalog):
        item = store.add(catalog.get("chair"), 0, 0)
        store.rotate_by(item.id)
        store.scale_by(item.id)
        assert item.rotation == 15
        assert item.scale == pytest.approx(1.1)
        for _ in range(20):
            store.scale_by(item.id, -0.1)
        assert item.scale == pytest.approx(0.5)
        assert store.scale_by("nope") is None
        assert store.rotate_by("nope") is None

    def test_remove(self, store, catalog):
        a = store.add(catalog.get("chair"), 0, 0)
        b = store.add(catalog.get("lamp"), 100, 100)
        assert store.remove(a.id) == (b,)
        assert store.remove(a.id) == (b,)  # already gone: no-op
        assert a.id not in store and b.id in store

    def test_replace_all_copies_and_clamps(self, store, catalog):
        outside = PlacedItem("sofa-x", catalog.get("sofa"), x=2000, y=-40, scale=3.0)
        items = store.replace_all([outside])
        assert len(items) == 1
        assert items[0] is not outside
        assert items[0].scale == 2.0
        assert items[0].x == pytest.approx(ROOM_W - 240)
        assert items[0].y == 0
        assert outside.x == 2000

    def test_items_is_a_snapshot(self, store, catalog):
        snapshot = store.items
        store.add(catalog.get("plant"), 0, 0)
        assert snapshot == ()
        assert len(store.items) == 1

    def test_resize_reclamps(self, store, catalog):
        item = store.add(catalog.get("sofa"), 600, 500)
        store.resize(400, 300)
        assert item.x == pytest.approx(280)
        assert item.y == pytest.approx(240)
        store.resize(50, 50)  # smaller than the sofa
        assert (item.x, item.y) == (0, 0)

    def test_overlap_is_advisory(self, store, catalog):
        a = store.add(catalog.get("chair"), 100, 100)
        b = store.add(catalog.get("chair"), 110, 110)
        assert store.has_overlap()
        assert (a.x, b.x) == (100, 110)

    def test_invariant_under_random_mutations(self, store, catalog):
        rng = np.random.default_rng(7)
        kinds = catalog.list_kinds()
        for _ in range(300):
            op = rng.integers(4)
            if op == 0 or len(store) == 0:
                kind = catalog.get(kinds[rng.integers(len(kinds))])
                store.add(kind, *rng.uniform(-200, 1000, 2))
            elif op == 1:
                item = store.items[rng.integers(len(store))]
                store.update(
                    item.id,
                    x=float(rng.uniform(-500, 1500)),
                    scale=float(rng.uniform(0, 3)),
                )
            elif op == 2:
                item = store.items[rng.integers(len(store))]
                store.update(item.id, y=float(rng.uniform(-500, 1500)))
            else:
                store.resize(*rng.uniform(50, 1200, 2))
            assert_all_in_bounds(store)


# ---------------------------------------------------------------------------
# Suggestion session
# ---------------------------------------------------------------------------


class TestSuggestionSession:
    @pytest.fixture
    def session(self, store):
        return SuggestionSession(
            SuggestionEngine(), store, rng=np.random.default_rng(42)
        )

    @pytest.fixture
    def prefs(self):
        return Preferences.from_values("kitchen", ["showcase"], density=40)

    @pytest.mark.asyncio
    async def test_request_publishes(self, session, prefs):
        result = await session.request(ROOM_W, ROOM_H, prefs, delay=0)
        assert result
        assert session.suggestions == result
        assert not session.is_generating

    @pytest.mark.asyncio
    async def test_later_request_wins_even_if_earlier_finishes_last(
        self, session, prefs
    ):
        closet = Preferences.from_values("closet", ["maximize-storage"])
        first, second = await asyncio.gather(
            session.request(ROOM_W, ROOM_H, prefs, delay=0.05),
            session.request(ROOM_W, ROOM_H, closet, delay=0),
        )
        assert first is None
        assert second
        assert session.suggestions == second
        assert all(s.name.startswith("Closet") for s in session.suggestions)
        assert len(session.store) == 0

    @pytest.mark.asyncio
    async def test_start_cancels_in_flight_request(self, session, prefs):
        first = session.start(ROOM_W, ROOM_H, prefs, delay=0.05)
        await asyncio.sleep(0.01)
        assert session.is_generating
        session.start(ROOM_W, ROOM_H, Preferences(), delay=0)
        result = await session.wait()
        assert result
        assert first.done() and first.result() is None
        assert all(s.name.startswith("Room") for s in session.suggestions)

    @pytest.mark.asyncio
    async def test_regenerate_reuses_last_request(self, session, prefs):
        assert session.regenerate() is None
        await session.request(ROOM_W, ROOM_H, prefs, delay=0)
        first_ids = {s.id for s in session.suggestions}
        session.regenerate(delay=0)
        result = await session.wait()
        assert all(s.name.startswith("Kitchen") for s in result)
        assert first_ids.isdisjoint(s.id for s in result)

    @pytest.mark.asyncio
    async def test_accept_replaces_store(self, session, prefs):
        session.store.add(default_catalog().get("bed"), 0, 0)
        suggestions = await session.request(ROOM_W, ROOM_H, prefs, delay=0)
        chosen = suggestions[-1]
        items = session.accept(chosen.id)
        assert [i.kind.id for i in items] == [i.kind.id for i in chosen.furniture]
        assert "bed" not in {i.kind.id for i in session.store.items}
        assert_all_in_bounds(session.store)

    @pytest.mark.asyncio
    async def test_accept_from_superseded_batch_is_ignored(self, session, prefs):
        old = await session.request(ROOM_W, ROOM_H, prefs, delay=0)
        await session.request(ROOM_W, ROOM_H, prefs, delay=0)
        assert session.accept(old[0].id) is None
        assert len(session.store) == 0

    @pytest.mark.asyncio
    async def test_earlier_batch_cannot_be_accepted_while_newer_pending(
        self, session, prefs
    ):
        old = await session.request(ROOM_W, ROOM_H, prefs, delay=0)
        closet = Preferences.from_values("closet", ["maximize-storage"])
        session.start(ROOM_W, ROOM_H, closet, delay=0.05)
        assert session.suggestions == []
        assert session.accept(old[0].id) is None
        await asyncio.sleep(0.01)
        assert session.is_generating
        assert session.accept(old[0].id) is None
        assert len(session.store) == 0
        result = await session.wait()
        assert all(s.name.startswith("Closet") for s in result)

    @pytest.mark.asyncio
    async def test_store_edits_do_not_touch_suggestion(self, session, prefs):
        suggestions = await session.request(ROOM_W, ROOM_H, prefs, delay=0)
        chosen = suggestions[0]
        original = [(i.x, i.y) for i in chosen.furniture]
        items = session.accept(chosen.id)
        session.store.update(items[0].id, x=0, y=0)
        assert [(i.x, i.y) for i in chosen.furniture] == original

    @pytest.mark.asyncio
    async def test_wait_without_request(self, session):
        assert await session.wait() is None
