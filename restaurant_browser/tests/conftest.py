from __future__ import annotations

from typing import Any, Callable

import pytest


class _FakeTimer:
    def __init__(self, when: float, callback: Callable[..., Any], args: tuple) -> None:
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeLoop:
    """Deterministic stand-in for the asyncio loop's time()/call_later()."""

    def __init__(self) -> None:
        self.now = 0.0
        self._timers: list[_FakeTimer] = []

    def time(self) -> float:
        return self.now

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> _FakeTimer:
        timer = _FakeTimer(self.now + delay, callback, args)
        self._timers.append(timer)
        return timer

    @property
    def armed(self) -> int:
        return sum(1 for t in self._timers if not t.cancelled)

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            due = [t for t in self._timers if not t.cancelled and t.when <= target + 1e-9]
            if not due:
                break
            timer = min(due, key=lambda t: t.when)
            self._timers.remove(timer)
            self.now = timer.when
            timer.callback(*timer.args)
        self.now = target


@pytest.fixture
def fake_loop() -> FakeLoop:
    return FakeLoop()
