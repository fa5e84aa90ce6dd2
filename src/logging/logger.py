# src/logging/logger.py — v2
"""JSON and text formatters plus setup for the ``altdecision`` logger tree.

Modules log through ``logging.getLogger(__name__)``; both formatters stamp
each record with the request id and stage from logging.context.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from altdecision.logging.context import get_context

ROOT_LOGGER = "altdecision"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class JsonFormatter(logging.Formatter):
    """One JSON object per line; non-ASCII text is written as-is."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": _utc_now().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = get_context().as_dict()
        if context:
            entry["context"] = context
        data = getattr(record, "data", None)
        if data:
            entry["data"] = data
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """``<time> [LEVEL] logger [request] (stage) - message`` lines."""

    def format(self, record: logging.LogRecord) -> str:
        context = get_context()
        tags = [f"[{context.request_id}]"] if context.request_id else []
        if context.stage:
            tags.append(f"({context.stage})")
        line = " ".join([
            _utc_now().strftime("%Y-%m-%d %H:%M:%S"),
            f"[{record.levelname:8s}]",
            record.name,
            *tags,
            f"- {record.getMessage()}",
        ])
        if record.exc_info and record.exc_info[1] is not None:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(
    level: str = "INFO",
    log_format: str = "json",
    log_file: str | Path | None = None,
    rotation: str = "10MB",
    retention: int = 30,
) -> None:
    """(Re)configure the ``altdecision`` logger.

    Console output goes to stderr so the CLI's JSON on stdout stays
    parseable. With ``log_file`` set, records are also written to a
    size-rotated file.
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    formatter = JsonFormatter() if log_format == "json" else TextFormatter()
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        from altdecision.logging.handlers import create_rotating_handler

        handlers.append(create_rotating_handler(log_file, rotation, retention))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
