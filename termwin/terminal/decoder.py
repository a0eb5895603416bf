"""Background input decoder for ECMA-48 terminals.

A daemon thread reads the tty, decodes keystrokes and mouse reports, and
queues them; the backend drains the queue from the application loop.
"""

from __future__ import annotations

import logging
import threading

from ..backend.queue import EventQueue
from ..events import Event, Resize, ResizeKind
from .controller import TerminalController
from .reader import InputReader

logger = logging.getLogger(__name__)

READ_POLL_MS = 100
SHUTDOWN_JOIN_SECONDS = 1.0


class ECMA48Terminal:
    """Decoder thread plus the event queue it feeds."""

    def __init__(
        self,
        controller: TerminalController,
        *,
        mouse: bool = True,
        read_poll_ms: int = READ_POLL_MS,
    ) -> None:
        self._controller = controller
        self._reader = InputReader(controller.stdin_fd)
        self._queue = EventQueue()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._mouse = mouse
        self._read_poll_ms = read_poll_ms
        self.width, self.height = controller.terminal_size()

    @property
    def condition(self) -> threading.Condition:
        return self._queue.condition

    def start(self) -> None:
        """Enter raw mode and start the reader thread."""
        self._controller.enable_tui_mode()
        self._controller.set_mouse_reporting(self._mouse)
        self._thread = threading.Thread(
            target=self._run,
            name="termwin-input-decoder",
            daemon=True,
        )
        self._thread.start()

    def _run(self) -> None:
        while not self._stop.is_set():
            try:
                event = self._reader.read_event(timeout_ms=self._read_poll_ms)
            except (OSError, EOFError) as exc:
                if self._stop.is_set():
                    return
                logger.error("terminal read failed: %s", exc)
                self._queue.fail(exc)
                return
            if event is not None:
                self._queue.put(event)

    def has_pending_events(self) -> bool:
        return self._queue.has_pending()

    def drain_events(self) -> list[Event]:
        return self._queue.drain()

    def drain_idle_events(self) -> list[Event]:
        """Report a screen resize detected by polling the tty size."""
        width, height = self._controller.terminal_size()
        if (width, height) == (self.width, self.height):
            return []
        logger.debug("terminal resized %dx%d -> %dx%d", self.width, self.height, width, height)
        self.width, self.height = width, height
        return [Resize(ResizeKind.SCREEN, width, height)]

    def shutdown(self) -> None:
        """Stop the reader thread and restore the terminal."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join(SHUTDOWN_JOIN_SECONDS)
            self._thread = None
        if self._controller.in_tui_mode:
            self._controller.disable_tui_mode()


__all__ = ["ECMA48Terminal"]
