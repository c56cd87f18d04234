"""Structured JSON logging for the signer package."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any

_DEFAULT_LEVEL = logging.INFO

_RESERVED_ATTRS = {
    "args",
    "exc_info",
    "exc_text",
    "message",
    "msg",
    "levelno",
    "levelname",
    "name",
    "pathname",
    "filename",
    "module",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "stack_info",
    "taskName",
}


class JsonFormatter(logging.Formatter):
    """Render log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Fields passed through ``extra=`` land on the record itself
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS:
                continue
            try:
                json.dumps(value)
                payload[key] = value
            except (TypeError, ValueError):
                payload[key] = repr(value)

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False)


def configure_logging(level: str | int | None = None) -> None:
    """Install the JSON handler on the package logger once.

    A later call with an explicit ``level`` only adjusts the level.
    """

    root = logging.getLogger("l2signer")
    if level is not None:
        root.setLevel(level if isinstance(level, int) else level.upper())
    if getattr(root, "_structured_configured", False):  # type: ignore[attr-defined]
        return

    if level is None:
        root.setLevel(_DEFAULT_LEVEL)
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root.handlers.clear()
    root.addHandler(handler)

    root._structured_configured = True  # type: ignore[attr-defined]


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)
