from __future__ import annotations

import time
from typing import Any


class EventStore:
    """Interaction log owned by one browsing session and discarded with it."""

    def __init__(self) -> None:
        self._events: list[dict[str, Any]] = []

    def __len__(self) -> int:
        return len(self._events)

    def record_event(self, event_type: str, data: dict[str, Any]) -> dict[str, Any]:
        event = {
            "type": event_type,
            "timestamp": time.time(),
            **data,
        }
        self._events.append(event)
        return event

    def get_events(self, event_type: str | None = None) -> list[dict[str, Any]]:
        if event_type is None:
            return list(self._events)
        return [e for e in self._events if e["type"] == event_type]

    def clear_events(self) -> None:
        self._events.clear()
