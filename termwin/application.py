"""Application shell: window stack, focus, command state, and main loop.

The loop is the only code that touches widget state. Each iteration blocks in
``Backend.get_events`` for at most ``timeout_ms``, dispatches what arrived,
redraws, and flushes the screen before waiting again.
"""

from __future__ import annotations

import logging

from .backend import Backend
from .commands import Command
from .errors import TerminalReadError
from .events import Event, KeyPress, MouseAction, MouseKind, Resize, ResizeKind
from .terminal.screen import ECMA48Screen
from .theme import DEFAULT_THEME, Theme
from .widgets.window import Window

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 50
QUIT_KEY = "CTRL_Q"
NEXT_WINDOW_KEY = "F6"

# Keyboard shortcuts for commands; a key whose command is disabled does nothing.
COMMAND_KEYS: dict[str, Command] = {
    "F2": Command.TABLE_VIEW_ROW_LABELS,
    "F3": Command.TABLE_VIEW_COLUMN_LABELS,
    "F4": Command.TABLE_VIEW_HIGHLIGHT_ROW,
    "F5": Command.TABLE_VIEW_HIGHLIGHT_COLUMN,
    "ALT_LEFT": Command.TABLE_COLUMN_NARROW,
    "ALT_RIGHT": Command.TABLE_COLUMN_WIDEN,
}


class Application:
    """Owns the windows of one terminal session."""

    def __init__(
        self,
        backend: Backend,
        screen: ECMA48Screen,
        *,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        theme: Theme = DEFAULT_THEME,
    ) -> None:
        self.backend = backend
        self.screen = screen
        self.timeout_ms = timeout_ms
        self.theme = theme
        self.windows: list[Window] = []
        self.active_window: Window | None = None
        self._enabled_commands: set[Command] = set()
        self._quit = False

    @property
    def screen_width(self) -> int:
        return self.screen.width

    @property
    def screen_height(self) -> int:
        return self.screen.height

    # Commands --------------------------------------------------------------

    def enable_command(self, command: Command) -> None:
        self._enabled_commands.add(command)

    def disable_command(self, command: Command) -> None:
        self._enabled_commands.discard(command)

    def is_command_enabled(self, command: Command) -> bool:
        return command in self._enabled_commands

    @property
    def enabled_commands(self) -> frozenset[Command]:
        return frozenset(self._enabled_commands)

    def execute_command(self, command: Command) -> bool:
        """Send an enabled command to the active window.

        Commands arrive through ``COMMAND_KEYS``; returns whether the window
        handled it.
        """
        if command not in self._enabled_commands or self.active_window is None:
            return False
        handler = getattr(self.active_window, "on_command", None)
        if handler is None:
            return False
        return bool(handler(command))

    # Windows ---------------------------------------------------------------

    def add_window(self, window: Window) -> None:
        """Put ``window`` on top of the stack and give it the focus."""
        self.windows.append(window)
        self.switch_window(window)

    def switch_window(self, window: Window) -> None:
        """Move the focus to ``window``; the old window is unfocused first."""
        if window not in self.windows:
            raise ValueError(f"window {window.title!r} is not part of this application")
        if window is self.active_window:
            return
        previous = self.active_window
        if previous is not None:
            previous.on_unfocus()
        self.windows.remove(window)
        self.windows.append(window)
        self.active_window = window
        window.on_focus()
        logger.debug("focus moved to window %r", window.title)

    def close_window(self, window: Window) -> None:
        if window not in self.windows:
            return
        if window is self.active_window:
            window.on_unfocus()
            self.active_window = None
        self.windows.remove(window)
        if self.active_window is None and self.windows:
            self.switch_window(self.windows[-1])

    def next_window(self) -> None:
        if len(self.windows) > 1:
            self.switch_window(self.windows[0])

    def window_at(self, mouse: MouseAction) -> Window | None:
        """Return the topmost window under the pointer."""
        for window in reversed(self.windows):
            if window.mouse_would_hit(mouse):
                return window
        return None

    # Dispatch --------------------------------------------------------------

    def dispatch(self, event: Event) -> None:
        if isinstance(event, Resize):
            self._dispatch_resize(event)
        elif isinstance(event, KeyPress):
            self._dispatch_key(event)
        elif isinstance(event, MouseAction):
            self._dispatch_mouse(event)

    def _dispatch_resize(self, event: Resize) -> None:
        if event.kind is not ResizeKind.SCREEN:
            return
        logger.info("screen resized to %dx%d", event.width, event.height)
        self.screen.resize(event.width, event.height)
        for window in list(self.windows):
            window.on_resize(event)

    def _dispatch_key(self, event: KeyPress) -> None:
        if event.key == QUIT_KEY:
            self.quit()
        elif event.key == NEXT_WINDOW_KEY:
            self.next_window()
        elif event.key in COMMAND_KEYS:
            self.execute_command(COMMAND_KEYS[event.key])
        elif self.active_window is not None:
            self.active_window.on_keypress(event)

    def _dispatch_mouse(self, event: MouseAction) -> None:
        if event.kind is MouseKind.DOWN:
            target = self.window_at(event)
            if target is None:
                return
            self.switch_window(target)
            target.on_mouse_down(event.relative_to(target))
            return
        window = self.active_window
        if window is None:
            return
        if event.kind is MouseKind.UP:
            window.on_mouse_up(event.relative_to(window))
        else:
            window.on_mouse_motion(event.relative_to(window))

    # Loop ------------------------------------------------------------------

    def quit(self) -> None:
        self._quit = True

    @property
    def quitting(self) -> bool:
        return self._quit

    def draw(self) -> None:
        self.screen.clear(self.theme.desktop)
        for window in self.windows:
            window.draw(self.screen, self.theme)

    def run(self) -> None:
        """Run until quit; the backend is always shut down on the way out.

        A failed input device ends the session with ``TerminalReadError``.
        """
        logger.info("session started with %d window(s)", len(self.windows))
        try:
            self.draw()
            self.backend.flush_screen()
            while not self._quit:
                for event in self.backend.get_events(self.timeout_ms):
                    self.dispatch(event)
                    if self._quit:
                        break
                self.draw()
                self.backend.flush_screen()
        except TerminalReadError:
            logger.exception("terminal input failed; ending session")
            raise
        finally:
            self.backend.shutdown()
        logger.info("session ended")


__all__ = ["Application", "COMMAND_KEYS", "DEFAULT_TIMEOUT_MS", "NEXT_WINDOW_KEY", "QUIT_KEY"]
