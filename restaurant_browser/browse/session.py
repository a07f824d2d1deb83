from __future__ import annotations

import logging
import time
from typing import Any, Sequence

from ..analytics.store import EventStore
from ..catalog.models import Restaurant
from ..filters.config import DEFAULT_PRICING_CONFIG, PricingConfig
from ..filters.pipeline import apply_filters
from ..filters.state import QueryState
from .config import DEFAULT_BROWSE_CONFIG, BrowseConfig
from .debounce import Scheduler, SearchDebouncer
from .renderer import Renderer, build_view

logger = logging.getLogger(__name__)


class BrowseSession:
    """
    Sole owner of the query state for one browsing session.

    Every mutator changes one field and recomputes synchronously, except
    free-text search, which goes through the debouncer and recomputes when
    the debounce window elapses. Handlers must all run on the same event
    loop as the scheduler; nothing here is thread-safe.
    """

    def __init__(
        self,
        dataset: Sequence[Restaurant],
        renderer: Renderer | None = None,
        config: BrowseConfig = DEFAULT_BROWSE_CONFIG,
        pricing: PricingConfig = DEFAULT_PRICING_CONFIG,
        scheduler: Scheduler | None = None,
    ) -> None:
        self._dataset = tuple(dataset)
        self._renderer = renderer
        self._config = config
        self._pricing = pricing
        self._state = QueryState.default()
        self._results: list[Restaurant] = []
        self._recompute_count = 0
        self._events = EventStore()
        self._debouncer = SearchDebouncer(
            self._apply_search,
            wait_seconds=config.debounce_seconds,
            scheduler=scheduler,
        )

    # ── Read accessors ───────────────────────────────────────────────────

    @property
    def state(self) -> QueryState:
        return self._state.model_copy()

    @property
    def results(self) -> list[Restaurant]:
        return list(self._results)

    @property
    def recompute_count(self) -> int:
        return self._recompute_count

    @property
    def search_pending(self) -> bool:
        return self._debouncer.pending

    @property
    def events(self) -> EventStore:
        return self._events

    # ── Mutators ─────────────────────────────────────────────────────────

    def set_category(self, value: Any) -> list[Restaurant]:
        self._state.active_category = value
        return self._recompute("category")

    def set_price_tier(self, value: Any) -> list[Restaurant]:
        self._state.price_tier = value
        return self._recompute("price")

    def set_sort_key(self, value: Any) -> list[Restaurant]:
        self._state.sort_key = value
        return self._recompute("sort")

    def set_search_text(self, value: str) -> None:
        """Debounced: returns immediately, recomputes once typing pauses."""
        self._debouncer.push(value)

    def set_search_now(self, value: str) -> list[Restaurant]:
        self._debouncer.cancel()
        return self._apply_search(value)

    def reset(self) -> list[Restaurant]:
        """Restore every field to its default with a single recompute."""
        self._debouncer.cancel()
        self._state = QueryState.default()
        return self._recompute("reset")

    def refresh(self) -> list[Restaurant]:
        return self._recompute("refresh")

    def close(self) -> None:
        """Apply any pending search, then discard the session's event log."""
        self._debouncer.flush()
        self._events.clear_events()

    # ── Internals ────────────────────────────────────────────────────────

    def _apply_search(self, value: str) -> list[Restaurant]:
        self._state.search_query = value
        return self._recompute("search")

    def _recompute(self, trigger: str) -> list[Restaurant]:
        start_time = time.time()
        self._results = apply_filters(self._dataset, self._state, self._pricing)
        self._recompute_count += 1

        logger.debug(
            "Recompute #%d (%s): %d of %d restaurants",
            self._recompute_count, trigger, len(self._results), len(self._dataset),
        )

        # recorded before rendering so a failing renderer cannot skip it
        if self._config.record_events:
            elapsed_ms = round((time.time() - start_time) * 1000, 1)
            self._events.record_event("recompute", {
                "trigger": trigger,
                "category": self._state.active_category.value,
                "search_query": self._state.search_query,
                "price_tier": self._state.price_tier.value,
                "sort_key": self._state.sort_key.value,
                "results_returned": len(self._results),
                "response_time_ms": elapsed_ms,
            })

        if self._renderer is not None:
            self._renderer.render(
                build_view(self._results, self._state, self._config, self._pricing)
            )

        return self.results
