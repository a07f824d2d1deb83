import asyncio
from unittest.mock import MagicMock

import pytest

from restaurant_browser.browse.config import BrowseConfig
from restaurant_browser.browse.renderer import RecordingRenderer
from restaurant_browser.browse.session import BrowseSession
from restaurant_browser.catalog.data_store import get_dataset
from restaurant_browser.catalog.models import CategoryFilter, PriceTierFilter, SortKey
from restaurant_browser.filters.pipeline import apply_filters
from restaurant_browser.filters.state import QueryState


def _session(fake_loop, renderer=None, **config):
    return BrowseSession(
        get_dataset(),
        renderer=renderer,
        config=BrowseConfig(**config),
        scheduler=fake_loop,
    )


def test_initial_refresh_shows_full_dataset(fake_loop):
    renderer = RecordingRenderer()
    session = _session(fake_loop, renderer)
    results = session.refresh()
    assert len(results) == len(get_dataset())
    assert session.recompute_count == 1
    assert renderer.last.total == len(get_dataset())


def test_direct_mutators_recompute_immediately(fake_loop):
    session = _session(fake_loop)
    session.set_category("nightlife")
    assert session.recompute_count == 1
    assert all(r.category.value == "nightlife" for r in session.results)

    session.set_price_tier("premium")
    assert session.recompute_count == 2
    session.set_sort_key("cost_desc")
    assert session.recompute_count == 3

    prices = [r.price for r in session.results]
    assert prices == sorted(prices, reverse=True)
    assert session.state == QueryState(
        active_category="nightlife", price_tier="premium", sort_key="cost_desc",
    )


def test_search_is_debounced(fake_loop):
    session = _session(fake_loop)
    session.set_search_text("n")
    fake_loop.advance(0.1)
    session.set_search_text("no")
    fake_loop.advance(0.1)
    session.set_search_text("nor")
    assert session.recompute_count == 0
    assert session.search_pending

    fake_loop.advance(0.3)
    assert session.recompute_count == 1
    assert session.state.search_query == "nor"
    names = {r.name for r in session.results}
    assert {"Norte Taqueria", "Cafe Nordic"} <= names


def test_debounce_window_comes_from_config(fake_loop):
    session = _session(fake_loop, debounce_ms=1000)
    session.set_search_text("sushi")
    fake_loop.advance(0.5)
    assert session.recompute_count == 0
    fake_loop.advance(0.5)
    assert session.recompute_count == 1


def test_set_search_now_skips_debounce(fake_loop):
    session = _session(fake_loop)
    session.set_search_text("pizz")
    results = session.set_search_now("pizza")
    assert session.recompute_count == 1
    assert [r.name for r in results] == ["Pasta Street"]
    fake_loop.advance(1.0)
    assert session.recompute_count == 1


def test_reset_restores_defaults_with_one_recompute(fake_loop):
    renderer = RecordingRenderer()
    session = _session(fake_loop, renderer)
    initial = session.refresh()

    session.set_category("delivery")
    session.set_price_tier("budget")
    session.set_sort_key("cost_asc")
    before = session.recompute_count

    results = session.reset()
    assert session.recompute_count == before + 1
    assert session.state.is_default()
    assert results == initial
    assert results == apply_filters(get_dataset(), QueryState())
    assert renderer.last.state.is_default()


def test_reset_drops_pending_search(fake_loop):
    session = _session(fake_loop)
    session.set_search_text("sushi")
    session.reset()
    fake_loop.advance(1.0)
    assert session.recompute_count == 1
    assert session.state.search_query == ""


def test_invalid_values_fall_back_and_still_render(fake_loop):
    session = _session(fake_loop)
    session.set_category("brunch")
    session.set_price_tier(None)
    session.set_sort_key("by_vibes")
    state = session.state
    assert state.active_category == CategoryFilter.all
    assert state.price_tier == PriceTierFilter.all
    assert state.sort_key == SortKey.trending
    assert len(session.results) == len(get_dataset())


def test_state_accessor_returns_a_copy(fake_loop):
    session = _session(fake_loop)
    snapshot = session.state
    snapshot.sort_key = "cost_asc"
    assert session.state.sort_key == SortKey.trending


def test_empty_result_renders_empty_state(fake_loop):
    renderer = RecordingRenderer()
    session = _session(fake_loop, renderer)
    results = session.set_search_now("zzz-no-such-place")
    assert results == []
    view = renderer.last
    assert view.is_empty
    assert view.cards == []
    assert view.empty_message


def test_renderer_called_once_per_recompute(fake_loop):
    renderer = MagicMock()
    session = _session(fake_loop, renderer)
    session.set_category("dining")
    session.set_search_text("indian")
    fake_loop.advance(0.3)
    session.reset()
    assert renderer.render.call_count == 3


def test_close_flushes_pending_search(fake_loop):
    session = _session(fake_loop)
    session.set_search_text("biryani")
    session.close()
    assert session.recompute_count == 1
    assert [r.name for r in session.results] == ["Biryani Blues"]


def test_recompute_events_recorded(fake_loop):
    session = _session(fake_loop)
    session.set_category("delivery")
    session.set_search_now("dosa")
    events = session.events.get_events("recompute")
    assert [e["trigger"] for e in events] == ["category", "search"]
    assert events[-1]["category"] == "delivery"
    assert events[-1]["search_query"] == "dosa"
    assert events[-1]["results_returned"] == 1


def test_event_recording_can_be_disabled(fake_loop):
    session = _session(fake_loop, record_events=False)
    session.refresh()
    assert session.events.get_events() == []


def test_each_session_has_its_own_event_log(fake_loop):
    first = _session(fake_loop)
    first.refresh()
    first.set_category("dining")
    second = _session(fake_loop)
    assert second.events.get_events() == []
    second.refresh()
    assert len(second.events.get_events("recompute")) == 1
    assert len(first.events.get_events("recompute")) == 2


def test_close_discards_event_log(fake_loop):
    session = _session(fake_loop)
    session.refresh()
    session.set_search_text("sushi")
    session.close()
    assert session.recompute_count == 2
    assert session.events.get_events() == []


def test_event_recorded_even_when_renderer_fails(fake_loop):
    renderer = MagicMock()
    renderer.render.side_effect = RuntimeError("surface gone")
    session = _session(fake_loop, renderer)
    with pytest.raises(RuntimeError):
        session.set_category("delivery")
    assert session.recompute_count == 1
    events = session.events.get_events("recompute")
    assert len(events) == session.recompute_count
    assert events[0]["category"] == "delivery"


def test_search_without_event_loop_applies_immediately(caplog):
    session = BrowseSession(get_dataset())
    session.set_search_text("pizza")
    assert not session.search_pending
    assert session.recompute_count == 1
    assert [r.name for r in session.results] == ["Pasta Street"]
    assert "No running event loop" in caplog.text


def test_search_across_separate_event_loops():
    session = BrowseSession(get_dataset(), config=BrowseConfig(debounce_ms=20))

    async def type_and_wait(text):
        session.set_search_text(text)
        await asyncio.sleep(0.2)

    asyncio.run(type_and_wait("pizza"))
    assert session.state.search_query == "pizza"
    asyncio.run(type_and_wait("sushi"))
    assert session.state.search_query == "sushi"
    assert session.recompute_count == 2
    assert [r.name for r in session.results] == ["Sushi Zen"]
