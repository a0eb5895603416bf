"""Exception types raised by the toolkit."""

from __future__ import annotations


class TermwinError(Exception):
    """Base class for toolkit errors."""


class TerminalReadError(TermwinError):
    """The input device failed; the session cannot continue."""
