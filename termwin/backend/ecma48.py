"""Backend for xterm/ANSI X3.64/ECMA-48 style terminals.

Coordinates the decoder thread and the application loop: the loop blocks in
``get_events`` for at most its timeout, and every wake that finds no real
input asks the decoder for idle events (terminal-size polling) instead.
"""

from __future__ import annotations

import logging

from ..events import Event
from .base import Backend, Decoder, Renderer

logger = logging.getLogger(__name__)


class ECMA48Backend(Backend):
    """Event-delivery facade over a ``Decoder`` and a ``Renderer``."""

    def __init__(self, decoder: Decoder, renderer: Renderer) -> None:
        self._decoder = decoder
        self._renderer = renderer
        self._shut_down = False

    @classmethod
    def open(cls, stdin_fd: int, stdout_fd: int, *, mouse: bool = True) -> ECMA48Backend:
        """Put the tty on ``stdin_fd`` into raw mode and start decoding it.

        The alternate screen is cleared before returning. ``shutdown()``
        restores the terminal to the mode it was in before this call.
        """
        from ..terminal import ECMA48Screen, ECMA48Terminal, TerminalController

        controller = TerminalController(stdin_fd, stdout_fd)
        terminal = ECMA48Terminal(controller, mouse=mouse)
        screen = ECMA48Screen(stdout_fd, terminal.width, terminal.height)
        terminal.start()
        try:
            # Clear only once the alternate screen is active.
            screen.clear_physical()
        except BaseException:
            terminal.shutdown()
            raise
        logger.info("backend opened %dx%d", terminal.width, terminal.height)
        return cls(terminal, screen)

    @property
    def decoder(self) -> Decoder:
        return self._decoder

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    def get_events(self, timeout_ms: int) -> list[Event]:
        """Get keyboard, mouse, and screen resize events.

        With ``timeout_ms > 0`` queued events are returned at once; otherwise
        the call sleeps until the decoder thread notifies or the timeout
        elapses. A wake without queued events (timeout, spurious wake, or a
        notify carrying no data) drains the decoder's idle events so that
        conditions without an explicit protocol signal, like a bare resize,
        still surface.
        """
        if timeout_ms < 0:
            raise ValueError(f"timeout_ms must be >= 0, got {timeout_ms}")
        decoder = self._decoder
        if timeout_ms == 0:
            return decoder.drain_events()

        condition = decoder.condition
        with condition:
            if decoder.has_pending_events():
                return decoder.drain_events()
            condition.wait(timeout_ms / 1000.0)
            if decoder.has_pending_events():
                return decoder.drain_events()
            events = decoder.drain_idle_events()
        if events:
            logger.debug("idle wake produced %d event(s)", len(events))
        return events

    def flush_screen(self) -> None:
        self._renderer.flush_physical()

    def shutdown(self) -> None:
        if self._shut_down:
            logger.debug("backend shutdown requested again; ignoring")
            return
        self._shut_down = True
        logger.info("backend shutting down")
        self._decoder.shutdown()


__all__ = ["ECMA48Backend"]
