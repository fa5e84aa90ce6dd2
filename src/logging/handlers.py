# src/logging/handlers.py — v2
"""Size-based log file rotation, configured by strings like ``"10MB"``."""

from __future__ import annotations

import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

_SIZE = re.compile(r"(\d+)\s*([KMG])B", re.IGNORECASE)
_UNIT_POWER = {"K": 1, "M": 2, "G": 3}


def parse_size(size_str: str) -> int:
    """Bytes for ``<n>KB``, ``<n>MB`` or ``<n>GB`` (any case, 1024-based)."""
    match = _SIZE.fullmatch(size_str.strip())
    if match is None:
        raise ValueError(f"Invalid size format: {size_str!r}. Use e.g. '10MB'.")
    count, unit = match.groups()
    return int(count) * 1024 ** _UNIT_POWER[unit.upper()]


def create_rotating_handler(
    log_file: str | Path,
    rotation: str = "10MB",
    retention: int = 30,
) -> RotatingFileHandler:
    """UTF-8 rotating handler keeping ``retention`` backups; creates parent dirs."""
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        path, maxBytes=parse_size(rotation), backupCount=retention, encoding="utf-8",
    )
