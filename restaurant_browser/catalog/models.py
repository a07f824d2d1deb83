from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    dining = "dining"
    delivery = "delivery"
    nightlife = "nightlife"


class CategoryFilter(str, Enum):
    all = "all"
    dining = "dining"
    delivery = "delivery"
    nightlife = "nightlife"


class PriceTier(str, Enum):
    budget = "budget"
    moderate = "moderate"
    premium = "premium"


class PriceTierFilter(str, Enum):
    all = "all"
    budget = "budget"
    moderate = "moderate"
    premium = "premium"


class SortKey(str, Enum):
    trending = "trending"
    rating_desc = "rating_desc"
    rating_asc = "rating_asc"
    distance_asc = "distance_asc"
    cost_asc = "cost_asc"
    cost_desc = "cost_desc"


class Restaurant(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(..., min_length=1)
    cuisines: tuple[str, ...] = Field(..., min_length=1)
    rating: float = Field(..., ge=0.0, le=5.0)
    price: int = Field(..., ge=0, description="Cost for two")
    location: str
    distance: float = Field(..., ge=0.0, description="Kilometres from the user")
    discount: int = Field(default=0, ge=0, le=100, description="Percentage, 0 for none")
    category: Category


class CatalogMetadata(BaseModel):
    total: int
    category_counts: dict[str, int]
    cuisines: list[str]
