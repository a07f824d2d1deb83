from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class BrowseConfig:
    debounce_ms: int = int(os.getenv("BROWSE_DEBOUNCE_MS", "300"))
    empty_message: str = "No restaurants match your filters. Try a different search or reset the filters."
    record_events: bool = True

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0


DEFAULT_BROWSE_CONFIG = BrowseConfig()
