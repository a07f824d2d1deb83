"""
Category → search → price → sort.

Every stage takes the previous stage's output, so category (the coarsest
and cheapest check) runs first. All functions are pure: the dataset is
never mutated and nothing is remembered between calls.
"""
from __future__ import annotations

from typing import Callable, Iterable, Sequence

from ..catalog.models import CategoryFilter, PriceTierFilter, Restaurant, SortKey
from .config import DEFAULT_PRICING_CONFIG, PricingConfig
from .pricing import price_tier_of
from .state import QueryState

# sort key -> (record key, descending)
_SORT_SPECS: dict[SortKey, tuple[Callable[[Restaurant], float], bool]] = {
    SortKey.trending: (lambda r: r.rating, True),
    SortKey.rating_desc: (lambda r: r.rating, True),
    SortKey.rating_asc: (lambda r: r.rating, False),
    SortKey.distance_asc: (lambda r: r.distance, False),
    SortKey.cost_asc: (lambda r: r.price, False),
    SortKey.cost_desc: (lambda r: r.price, True),
}


def filter_by_category(
    restaurants: Iterable[Restaurant], category: CategoryFilter
) -> list[Restaurant]:
    if category == CategoryFilter.all:
        return list(restaurants)
    return [r for r in restaurants if r.category.value == category.value]


def matches_search(restaurant: Restaurant, query_lower: str) -> bool:
    if query_lower in restaurant.name.lower():
        return True
    return any(query_lower in c.lower() for c in restaurant.cuisines)


def filter_by_search(restaurants: Iterable[Restaurant], query: str) -> list[Restaurant]:
    query_lower = query.strip().lower()
    if not query_lower:
        return list(restaurants)
    return [r for r in restaurants if matches_search(r, query_lower)]


def filter_by_price(
    restaurants: Iterable[Restaurant],
    tier: PriceTierFilter,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> list[Restaurant]:
    if tier == PriceTierFilter.all:
        return list(restaurants)
    return [r for r in restaurants if price_tier_of(r.price, config).value == tier.value]


def sort_restaurants(restaurants: Iterable[Restaurant], sort_key: SortKey) -> list[Restaurant]:
    """Stable sort; equal keys keep their input order in either direction."""
    key, descending = _SORT_SPECS.get(sort_key, _SORT_SPECS[SortKey.trending])
    # sorted() with reverse=True is still stable
    return sorted(restaurants, key=key, reverse=descending)


def apply_filters(
    dataset: Sequence[Restaurant],
    state: QueryState,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> list[Restaurant]:
    """Return the ordered subset of ``dataset`` selected by ``state``. May be empty."""
    working = filter_by_category(dataset, state.active_category)
    working = filter_by_search(working, state.search_query)
    working = filter_by_price(working, state.price_tier, config)
    return sort_restaurants(working, state.sort_key)
