"""Structured JSON logging for the mapping engine.

The library installs no handlers on import. Call :func:`configure_logging`
from an application (or the CLI) to emit one JSON object per line.
"""

from __future__ import annotations

import json
import logging
import sys
import threading
from datetime import UTC, datetime
from typing import Any, TextIO


__all__ = ["StructuredFormatter", "configure_logging", "get_logger", "reset_logging"]


_STDLIB_KEYS: frozenset[str] = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()) | {
    "message",
    "taskName",
}


class StructuredFormatter(logging.Formatter):
    """Formats each log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, val in vars(record).items():
            if key not in _STDLIB_KEYS and key not in payload:
                payload[key] = val

        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            payload["exc_type"] = type(exc).__name__
            payload["exc_message"] = str(exc)
            code = getattr(exc, "code", None)
            if code is not None:
                payload["exc_code"] = code
            payload["traceback"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


_LOGGER_PREFIX = "rec_map"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the rec_map namespace."""
    return logging.getLogger(f"{_LOGGER_PREFIX}.{name}")


_configured = False
_lock = threading.Lock()


def configure_logging(
    *,
    level: int | str = logging.INFO,
    stream: TextIO | None = None,
    handler: logging.Handler | None = None,
) -> None:
    """Configure the rec_map logger hierarchy (idempotent)."""
    global _configured  # noqa: PLW0603
    with _lock:
        if _configured:
            return
        _configured = True

        root_logger = logging.getLogger(_LOGGER_PREFIX)
        root_logger.setLevel(level)
        root_logger.propagate = False

        active = handler if handler is not None else logging.StreamHandler(stream or sys.stderr)
        active.setFormatter(StructuredFormatter())
        root_logger.addHandler(active)


def reset_logging() -> None:
    """Undo :func:`configure_logging`. Intended for tests."""
    global _configured  # noqa: PLW0603
    with _lock:
        _configured = False
        logger = logging.getLogger(_LOGGER_PREFIX)
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
