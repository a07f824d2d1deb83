from __future__ import annotations

from ..catalog.models import PriceTier
from .config import DEFAULT_PRICING_CONFIG, PricingConfig

_TIER_LABELS: dict[PriceTier, str] = {
    PriceTier.budget: "Budget",
    PriceTier.moderate: "Moderate",
    PriceTier.premium: "Premium",
}


def price_tier_of(price: float, config: PricingConfig = DEFAULT_PRICING_CONFIG) -> PriceTier:
    """Map a cost for two onto its price tier. Negative prices count as budget."""
    if price <= config.budget_max:
        return PriceTier.budget
    if price <= config.moderate_max:
        return PriceTier.moderate
    return PriceTier.premium


def price_tier_label(price: float, config: PricingConfig = DEFAULT_PRICING_CONFIG) -> str:
    return _TIER_LABELS[price_tier_of(price, config)]


def format_cost_for_two(price: int, config: PricingConfig = DEFAULT_PRICING_CONFIG) -> str:
    return f"{config.currency_symbol}{price:,} for two"
