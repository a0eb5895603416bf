"""Command-line front door for termwin.

Parses options, configures logging, and runs a demo session of table windows
on the controlling terminal.
"""

from __future__ import annotations

import argparse
import sys

from .application import Application
from .backend import ECMA48Backend
from .config import (
    load_event_timeout_ms,
    load_log_level,
    load_theme_name,
    save_event_timeout_ms,
    save_theme_name,
)
from .logging_setup import configure_logging
from .theme import available_theme_names, resolve_theme
from .widgets import TableWindow


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _nonnegative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Open table windows in a text-mode desktop.")
    parser.add_argument("--rows", type=_positive_int, default=50, help="Rows per table.")
    parser.add_argument("--columns", type=_positive_int, default=26, help="Columns per table.")
    parser.add_argument("--windows", type=_positive_int, default=2, help="Number of table windows.")
    parser.add_argument(
        "--timeout-ms",
        type=_nonnegative_int,
        default=None,
        help="Maximum wait for input per loop iteration (default: from config).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Color theme ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--log-level", default=None, help="Log level for the session log file.")
    parser.add_argument("--no-mouse", action="store_true", help="Disable mouse reporting.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Store the given --timeout-ms and --theme in the config file and exit.",
    )
    return parser


def populate_demo_table(window: TableWindow, index: int) -> None:
    """Fill a table with recognizable sample values."""
    table = window.table
    for row in range(table.row_count):
        for column in range(table.column_count):
            table.set_cell_text(row, column, str((row + 1) * (column + 1) * (index + 1)))


def save_defaults(args: argparse.Namespace) -> None:
    """Persist the options given on the command line as future defaults."""
    if args.timeout_ms is not None:
        save_event_timeout_ms(args.timeout_ms)
    if args.theme:
        save_theme_name(resolve_theme(args.theme).name)


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    if args.save_defaults:
        save_defaults(args)
        return

    if not sys.stdin.isatty() or not sys.stdout.isatty():
        raise SystemExit("termwin needs an interactive terminal on stdin and stdout.")

    configure_logging(args.log_level or load_log_level())
    timeout_ms = args.timeout_ms if args.timeout_ms is not None else load_event_timeout_ms()
    theme = resolve_theme(args.theme or load_theme_name())

    with ECMA48Backend.open(sys.stdin.fileno(), sys.stdout.fileno(), mouse=not args.no_mouse) as backend:
        app = Application(backend, backend.renderer, timeout_ms=timeout_ms, theme=theme)
        for index in range(args.windows):
            window = TableWindow(app, f"Table {index + 1}", rows=args.rows, columns=args.columns)
            window.x += index * 2
            window.y += index
            populate_demo_table(window, index)
            app.add_window(window)
        app.run()


if __name__ == "__main__":
    main()
