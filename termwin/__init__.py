"""Text-mode windowing toolkit core.

Provides the backend event-delivery protocol between a background terminal
decoder and the application loop, plus the window/widget consumers.
"""

from __future__ import annotations

__version__ = "0.1.0"
