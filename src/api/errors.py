# src/api/errors.py — v1
"""Analysis error taxonomy.

All of these are caught at the facade boundary and turned into a degraded
response; callers of analyze_image() never see them.
"""

from __future__ import annotations

from typing import Literal

ErrorKind = Literal["missing_input", "invalid_format", "internal"]


class AnalysisError(Exception):
    """Base class for expected analysis failures."""

    kind: ErrorKind = "internal"


class MissingInputError(AnalysisError):
    """Raised when no image data was supplied."""

    kind: ErrorKind = "missing_input"


class InvalidFormatError(AnalysisError, ValueError):
    """Raised when image data is not a ``data:image/<fmt>;base64,<payload>`` URL."""

    kind: ErrorKind = "invalid_format"
