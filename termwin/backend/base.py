"""Backend interfaces between the terminal collaborators and the app loop.

``Decoder`` and ``Renderer`` describe what a backend consumes; ``Backend`` is
what the application loop calls.
"""

from __future__ import annotations

import abc
import threading
from typing import Protocol

from ..events import Event


class Decoder(Protocol):
    """Background input decoder feeding a condition-guarded queue."""

    @property
    def condition(self) -> threading.Condition: ...

    def has_pending_events(self) -> bool: ...

    def drain_events(self) -> list[Event]: ...

    def drain_idle_events(self) -> list[Event]: ...

    def shutdown(self) -> None: ...


class Renderer(Protocol):
    def flush_physical(self) -> None: ...


class Backend(abc.ABC):
    """Screen, keyboard, and mouse provider for an ``Application``."""

    @abc.abstractmethod
    def get_events(self, timeout_ms: int) -> list[Event]:
        """Return new input events, waiting at most ``timeout_ms``.

        ``0`` performs a non-blocking poll.
        """

    @abc.abstractmethod
    def flush_screen(self) -> None:
        """Sync the logical screen to the physical device."""

    @abc.abstractmethod
    def shutdown(self) -> None:
        """Close the I/O and restore the device."""

    def __enter__(self) -> Backend:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()


__all__ = ["Backend", "Decoder", "Renderer"]
