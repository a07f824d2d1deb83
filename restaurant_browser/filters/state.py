from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from ..catalog.models import CategoryFilter, PriceTierFilter, SortKey

logger = logging.getLogger(__name__)


def coerce_choice(value: Any, choices: type[Enum], default: Enum) -> Enum:
    """
    Return ``value`` as a member of ``choices``.

    Unrecognised values fall back to ``default`` so the UI always stays in
    a renderable state.
    """
    if isinstance(value, choices):
        return value
    if isinstance(value, str):
        try:
            return choices(value.strip().lower())
        except ValueError:
            pass
    logger.warning(
        "Unrecognised %s value %r, falling back to %r",
        choices.__name__, value, default.value,
    )
    return default


class QueryState(BaseModel):
    """The one active combination of filters driving the displayed list."""

    model_config = ConfigDict(validate_assignment=True)

    active_category: CategoryFilter = CategoryFilter.all
    search_query: str = ""
    price_tier: PriceTierFilter = PriceTierFilter.all
    sort_key: SortKey = SortKey.trending

    @field_validator("active_category", mode="before")
    @classmethod
    def _coerce_category(cls, v: Any) -> CategoryFilter:
        return coerce_choice(v, CategoryFilter, CategoryFilter.all)

    @field_validator("price_tier", mode="before")
    @classmethod
    def _coerce_price_tier(cls, v: Any) -> PriceTierFilter:
        return coerce_choice(v, PriceTierFilter, PriceTierFilter.all)

    @field_validator("sort_key", mode="before")
    @classmethod
    def _coerce_sort_key(cls, v: Any) -> SortKey:
        return coerce_choice(v, SortKey, SortKey.trending)

    @field_validator("search_query", mode="before")
    @classmethod
    def _coerce_search(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @classmethod
    def default(cls) -> QueryState:
        return cls()

    def is_default(self) -> bool:
        return self == QueryState.default()
