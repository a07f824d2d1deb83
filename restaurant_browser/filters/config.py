from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PricingConfig:
    """
    Price tier thresholds, applied to the cost for two.

    ``price <= budget_max`` is budget, ``price <= moderate_max`` is moderate,
    anything above is premium.
    """

    budget_max: int = 500
    moderate_max: int = 1500
    currency_symbol: str = "₹"


DEFAULT_PRICING_CONFIG = PricingConfig()
