"""Suggestion session — simulated latency with last-call-wins supersession.

The engine itself is synchronous. A session wraps it the way the UI uses
it: every filter change (or "regenerate" click) starts a new request that
waits a random 1-3 s before producing suggestions. Whenever a newer
request has started, the older one's results are thrown away: they never
replace ``suggestions`` and never reach the placement store. Starting a
request also empties ``suggestions``, so an earlier batch cannot be
accepted while the newer one is pending.

Two mechanisms guarantee that:
  - each request captures a generation number and re-checks it after the
    simulated latency, before publishing
  - ``start()`` cancels the previous in-flight task

Usage:
    session = SuggestionSession(engine, store)
    session.start(800, 600, prefs)          # supersedes any earlier request
    suggestions = await session.wait()
    session.accept(suggestions[0].id)       # store now holds that layout
"""

from __future__ import annotations

import asyncio
import logging

import numpy as np

from layout_gen.config import SuggestionConfig
from layout_gen.placement import PlacedItem
from layout_gen.preferences import Preferences
from layout_gen.store import PlacementStore
from layout_gen.suggest import LayoutSuggestion, SuggestionEngine

log = logging.getLogger(__name__)


class SuggestionSession:
    """Owns the current suggestion list for one room."""

    def __init__(
        self,
        engine: SuggestionEngine,
        store: PlacementStore,
        config: SuggestionConfig | None = None,
        rng: np.random.Generator | None = None,
    ):
        self.engine = engine
        self.store = store
        self.config = config or engine.config.suggestion
        self.rng = rng if rng is not None else np.random.default_rng()
        self.suggestions: list[LayoutSuggestion] = []
        self._generation = 0
        self._pending = 0
        self._task: asyncio.Task | None = None
        self._last_request: tuple[float, float, Preferences] | None = None

    @property
    def generation(self) -> int:
        """Number of requests started so far."""
        return self._generation

    @property
    def is_generating(self) -> bool:
        return self._pending > 0

    async def request(
        self,
        room_width: float,
        room_height: float,
        preferences: Preferences,
        delay: float | None = None,
    ) -> list[LayoutSuggestion] | None:
        """Generate suggestions after simulated latency.

        Returns the new suggestion list, or None when a newer request
        started before this one finished (its results are discarded).
        """
        self._generation += 1
        token = self._generation
        self._last_request = (room_width, room_height, preferences)
        self.suggestions = []

        if delay is None:
            cfg = self.config
            delay = float(self.rng.uniform(cfg.latency_min, cfg.latency_max))

        self._pending += 1
        try:
            await asyncio.sleep(delay)
            if token != self._generation:
                log.debug(
                    "Discarding superseded request %d (latest %d)",
                    token,
                    self._generation,
                )
                return None
            suggestions = self.engine.suggest(
                room_width, room_height, preferences, rng=self.rng
            )
        finally:
            self._pending -= 1

        self.suggestions = suggestions
        return suggestions

    def start(
        self,
        room_width: float,
        room_height: float,
        preferences: Preferences,
        delay: float | None = None,
    ) -> asyncio.Task:
        """Schedule a request, cancelling whichever one is in flight.

        Must be called from a running event loop.
        """
        self._last_request = (room_width, room_height, preferences)
        self.suggestions = []
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = asyncio.create_task(
            self._run(room_width, room_height, preferences, delay)
        )
        return self._task

    async def _run(
        self,
        room_width: float,
        room_height: float,
        preferences: Preferences,
        delay: float | None,
    ) -> list[LayoutSuggestion] | None:
        try:
            return await self.request(room_width, room_height, preferences, delay)
        except asyncio.CancelledError:
            log.debug("Suggestion request cancelled")
            return None

    async def wait(self) -> list[LayoutSuggestion] | None:
        """Await the most recently started request."""
        if self._task is None:
            return None
        return await self._task

    def regenerate(self, delay: float | None = None) -> asyncio.Task | None:
        """Start a new request with the last request's parameters."""
        if self._last_request is None:
            return None
        room_width, room_height, preferences = self._last_request
        return self.start(room_width, room_height, preferences, delay)

    def find(self, suggestion_id: str) -> LayoutSuggestion | None:
        for suggestion in self.suggestions:
            if suggestion.id == suggestion_id:
                return suggestion
        return None

    def accept(self, suggestion_id: str) -> tuple[PlacedItem, ...] | None:
        """Replace the store contents with one of the current suggestions.

        Returns the new store contents, or None while a request is pending
        or when the id is not in the current suggestion list (e.g. it came
        from a superseded request).
        """
        if self.is_generating:
            log.debug("Ignoring accept of %r during generation", suggestion_id)
            return None
        suggestion = self.find(suggestion_id)
        if suggestion is None:
            log.debug("Ignoring accept of unknown suggestion %r", suggestion_id)
            return None
        log.info("Accepted %s (score %d)", suggestion.name, suggestion.score)
        return self.store.replace_all(suggestion.furniture)
