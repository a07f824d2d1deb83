from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, Field

from ..catalog.models import PriceTier, Restaurant
from ..filters.config import DEFAULT_PRICING_CONFIG, PricingConfig
from ..filters.pricing import format_cost_for_two, price_tier_label, price_tier_of
from ..filters.state import QueryState
from .config import DEFAULT_BROWSE_CONFIG, BrowseConfig


class RestaurantCard(BaseModel):
    id: int
    name: str
    cuisines: str
    rating: float
    location: str
    distance_label: str
    cost_label: str
    price_tier: PriceTier
    price_tier_label: str
    discount_label: str | None = None
    category: str


class RenderedView(BaseModel):
    cards: list[RestaurantCard] = Field(default_factory=list)
    total: int = 0
    is_empty: bool = True
    empty_message: str | None = None
    state: QueryState


class Renderer(Protocol):
    def render(self, view: RenderedView) -> None: ...


def to_card(restaurant: Restaurant, pricing: PricingConfig = DEFAULT_PRICING_CONFIG) -> RestaurantCard:
    return RestaurantCard(
        id=restaurant.id,
        name=restaurant.name,
        cuisines=", ".join(restaurant.cuisines),
        rating=restaurant.rating,
        location=restaurant.location,
        distance_label=f"{restaurant.distance:.1f} km",
        cost_label=format_cost_for_two(restaurant.price, pricing),
        price_tier=price_tier_of(restaurant.price, pricing),
        price_tier_label=price_tier_label(restaurant.price, pricing),
        discount_label=f"{restaurant.discount}% OFF" if restaurant.discount > 0 else None,
        category=restaurant.category.value,
    )


def build_view(
    results: list[Restaurant],
    state: QueryState,
    config: BrowseConfig = DEFAULT_BROWSE_CONFIG,
    pricing: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> RenderedView:
    """Project pipeline output into cards; an empty result carries the empty-state message."""
    cards = [to_card(r, pricing) for r in results]
    return RenderedView(
        cards=cards,
        total=len(cards),
        is_empty=not cards,
        empty_message=None if cards else config.empty_message,
        state=state.model_copy(),
    )


class RecordingRenderer:
    """Keeps every view it is handed. Useful headless and in tests."""

    def __init__(self) -> None:
        self.views: list[RenderedView] = []

    def render(self, view: RenderedView) -> None:
        self.views.append(view)

    @property
    def last(self) -> RenderedView | None:
        return self.views[-1] if self.views else None
