"""File logging for terminal sessions.

The terminal is owned by the screen while a session runs, so records go to a
rotating JSON-lines file under the user log directory and never to a stream.
"""

from __future__ import annotations

import json
import logging
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from platformdirs import user_log_dir

LOGGER_NAME = "termwin"
LOG_FILENAME = "termwin.log"
MAX_LOG_BYTES = 1_000_000
BACKUP_COUNT = 3


def log_dir() -> Path:
    path = Path(user_log_dir(LOGGER_NAME, appauthor=False))
    path.mkdir(parents=True, exist_ok=True)
    return path


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "thread": record.threadName,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def configure_logging(level: str = "INFO", path: Path | None = None) -> logging.Logger:
    """Attach the rotating file handler to the package logger once."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return logger

    target = path if path is not None else log_dir() / LOG_FILENAME
    handler = logging.handlers.RotatingFileHandler(
        filename=str(target),
        maxBytes=MAX_LOG_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    logger.debug("logging configured at %s", target)
    return logger


__all__ = ["JsonFormatter", "LOGGER_NAME", "configure_logging", "log_dir"]
