from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_CSV = Path(__file__).resolve().parent.parent / "data" / "restaurants.csv"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Location of the static restaurant catalog loaded at startup.
    """

    dataset_path: Path = Path(os.getenv("RESTAURANT_CATALOG_PATH", str(_BUNDLED_CSV)))
    cuisine_separator: str = ","


DEFAULT_CATALOG_CONFIG = CatalogConfig()
