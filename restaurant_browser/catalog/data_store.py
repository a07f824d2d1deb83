from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

import pandas as pd

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import Category, CatalogMetadata, Restaurant

logger = logging.getLogger(__name__)

CATALOG_COLUMNS: list[str] = [
    "id",
    "name",
    "cuisines",
    "rating",
    "price",
    "location",
    "distance",
    "discount",
    "category",
]

_dataset: tuple[Restaurant, ...] | None = None


class DatasetError(ValueError):
    """Raised when the catalog file cannot be turned into a valid dataset."""


def _split_cuisines(raw: object, separator: str) -> list[str]:
    if raw is None or pd.isna(raw):
        return []
    return [c.strip() for c in str(raw).split(separator) if c.strip()]


def load_dataset(
    path: Path | None = None,
    config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
) -> tuple[Restaurant, ...]:
    """
    Read the catalog CSV into an immutable tuple of restaurants.

    Row order in the file is the dataset order used for tie-breaking.
    Malformed rows raise pydantic's ``ValidationError``; duplicate ids and
    missing columns raise ``DatasetError``.
    """
    csv_path = path or config.dataset_path
    df = pd.read_csv(csv_path)

    missing = [col for col in CATALOG_COLUMNS if col not in df.columns]
    if missing:
        raise DatasetError(f"{csv_path}: missing columns {missing}")

    df["discount"] = df["discount"].fillna(0).astype(int)

    duplicated = df.loc[df["id"].duplicated(), "id"].tolist()
    if duplicated:
        raise DatasetError(f"{csv_path}: duplicate restaurant ids {duplicated}")

    restaurants: list[Restaurant] = []
    for row in df.to_dict(orient="records"):
        row["cuisines"] = _split_cuisines(row["cuisines"], config.cuisine_separator)
        restaurants.append(Restaurant.model_validate(row))

    logger.info("Loaded %d restaurants from %s", len(restaurants), csv_path)
    return tuple(restaurants)


def get_dataset() -> tuple[Restaurant, ...]:
    """Return the bundled restaurant dataset, loading it on first call."""
    global _dataset
    if _dataset is None:
        _dataset = load_dataset()
    return _dataset


def catalog_metadata(dataset: tuple[Restaurant, ...]) -> CatalogMetadata:
    counts: Counter[str] = Counter(r.category.value for r in dataset)
    cuisines: set[str] = set()
    for r in dataset:
        cuisines.update(r.cuisines)
    return CatalogMetadata(
        total=len(dataset),
        category_counts={c.value: counts.get(c.value, 0) for c in Category},
        cuisines=sorted(cuisines, key=str.lower),
    )
