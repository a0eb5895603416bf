"""Condition-guarded event queue shared by the decoder thread and the loop."""

from __future__ import annotations

import threading
from collections import deque

from ..errors import TerminalReadError
from ..events import Event


class EventQueue:
    """Ordered, drain-once queue of input events.

    The decoder thread holds ``condition`` only to append and notify; the
    application loop holds it while checking for events and waiting. The
    condition wraps a re-entrant lock so callers already holding it may call
    any method here.
    """

    def __init__(self) -> None:
        self.condition = threading.Condition()
        self._events: deque[Event] = deque()
        self._failure: BaseException | None = None

    def put(self, event: Event) -> None:
        with self.condition:
            self._events.append(event)
            self.condition.notify_all()

    def fail(self, exc: BaseException) -> None:
        """Record a fatal device error and wake any waiter."""
        with self.condition:
            self._failure = exc
            self.condition.notify_all()

    def has_pending(self) -> bool:
        """Return whether a drain would yield events or raise a failure."""
        with self.condition:
            return bool(self._events) or self._failure is not None

    def drain(self) -> list[Event]:
        """Remove and return every queued event in arrival order.

        Queued events are always delivered before a recorded failure is
        raised as ``TerminalReadError``.
        """
        with self.condition:
            if self._events:
                out = list(self._events)
                self._events.clear()
                return out
            if self._failure is not None:
                raise TerminalReadError(f"terminal input failed: {self._failure}") from self._failure
            return []

    def __len__(self) -> int:
        with self.condition:
            return len(self._events)


__all__ = ["EventQueue"]
