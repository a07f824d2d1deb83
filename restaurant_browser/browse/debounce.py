"""
Debounced search input.

A burst of keystrokes collapses into one emission carrying the last value,
fired once the input has been quiet for the wait window.

The adapter is a two-state machine:

* ``Idle`` -- nothing scheduled.
* ``Pending(deadline, value)`` -- one timer armed on the scheduler.

``push`` always (re)arms the timer with the newest value; the timer firing
moves back to ``Idle`` and hands the value to the consumer. Scheduling uses
the asyncio event loop interface (``time()`` and ``call_later()``), so the
deferred callback runs on the same single-threaded loop as the handlers
that pushed the input.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def time(self) -> float: ...

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle: ...


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Pending:
    deadline: float
    value: str


DebounceState = Idle | Pending

IDLE = Idle()


class SearchDebouncer:
    def __init__(
        self,
        on_emit: Callable[[str], None],
        wait_seconds: float = 0.3,
        scheduler: Scheduler | None = None,
    ) -> None:
        self._on_emit = on_emit
        self._wait = wait_seconds
        self._scheduler = scheduler
        self._state: DebounceState = IDLE
        self._handle: TimerHandle | None = None

    @property
    def state(self) -> DebounceState:
        return self._state

    @property
    def pending(self) -> bool:
        return isinstance(self._state, Pending)

    def _get_scheduler(self) -> Scheduler | None:
        if self._scheduler is not None:
            return self._scheduler
        # looked up per push; a session may outlive the loop it first ran on
        try:
            return asyncio.get_running_loop()
        except RuntimeError:
            return None

    def push(self, value: str) -> None:
        """
        Record a raw input event; supersedes any pending emission.

        Without an injected scheduler or a running event loop there is
        nothing to defer to, so the value is emitted straight away.
        """
        scheduler = self._get_scheduler()
        self._disarm()
        if scheduler is None:
            logger.warning("No running event loop, applying search %r immediately", value)
            self._state = IDLE
            self._on_emit(value)
            return
        self._state = Pending(deadline=scheduler.time() + self._wait, value=value)
        self._handle = scheduler.call_later(self._wait, self._fire)

    def flush(self) -> None:
        """Emit a pending value now instead of waiting for the timer."""
        if isinstance(self._state, Pending):
            value = self._state.value
            self._disarm()
            self._state = IDLE
            self._on_emit(value)

    def cancel(self) -> None:
        """Drop a pending value without emitting it."""
        if isinstance(self._state, Pending):
            logger.debug("Dropping pending search %r", self._state.value)
        self._disarm()
        self._state = IDLE

    def _disarm(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        if not isinstance(self._state, Pending):
            return
        value = self._state.value
        self._handle = None
        self._state = IDLE
        self._on_emit(value)
