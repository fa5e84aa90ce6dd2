# src/extraction/image_metadata.py — v2
"""Heuristic image summarizer for base64 data URLs.

No decoding happens here: format comes from the data-URL header, size is
estimated from the payload length, and the description is assembled from
format/size rules plus a magic-byte sniff of the payload prefix. A vision
model can replace describe_image() without touching the decision tree.
"""

from __future__ import annotations

import logging
import re

from altdecision.api.errors import InvalidFormatError
from altdecision.core.models import Dimensions, ImageMetadata

logger = logging.getLogger(__name__)

_DATA_URL = re.compile(r"data:image/([^;]+);base64,(.+)")

CLAUSE_SEPARATOR = "、"
FALLBACK_DESCRIPTION = "image file"

SMALL_PNG_BYTES = 5000
LARGE_IMAGE_BYTES = 100_000
SMALL_IMAGE_BYTES = 10_000
SNIFF_CHARS = 100

# Base64 prefixes of the PNG and JPEG file signatures.
_SIGNATURES: tuple[tuple[str, str], ...] = (
    ("iVBORw0KGgo", "PNG format image"),
    ("/9j/", "JPEG format image"),
)


def parse_image_metadata(image_data: str) -> ImageMetadata:
    """Extract format and approximate decoded size from a data URL.

    Args:
        image_data: ``data:image/<fmt>;base64,<payload>`` string.

    Returns:
        ImageMetadata with unknown (zero) dimensions.

    Raises:
        InvalidFormatError: If the string is not an image data URL.
    """
    match = _DATA_URL.fullmatch(image_data)
    if not match:
        raise InvalidFormatError("Invalid base64 image data format")

    image_format, payload = match.group(1), match.group(2)
    return ImageMetadata(
        format=image_format,
        approximate_byte_size=_decoded_size(payload),
        dimensions=Dimensions(width=0, height=0),
    )


def _decoded_size(payload: str) -> int:
    """len * 3/4 rounded half-up (round() would round half to even)."""
    return (len(payload) * 3 + 2) // 4


def describe_image(image_data: str, metadata: ImageMetadata) -> str:
    """Build the free-text description consumed by the decision tree."""
    clauses: list[str] = []
    size = metadata.approximate_byte_size
    fmt = metadata.format

    if fmt == "png" and size < SMALL_PNG_BYTES:
        clauses.append("small icon or decorative image")
    elif fmt in ("jpg", "jpeg"):
        clauses.append("photo or illustration")
    elif fmt in ("svg", "svg+xml"):
        clauses.append("vector diagram or icon")

    if size > LARGE_IMAGE_BYTES:
        clauses.append("high-resolution detailed image")
    elif size < SMALL_IMAGE_BYTES:
        clauses.append("small icon or thumbnail")

    head = image_data[:SNIFF_CHARS]
    for signature, clause in _SIGNATURES:
        if signature in head:
            clauses.append(clause)
            break

    if not clauses:
        clauses.append(FALLBACK_DESCRIPTION)

    return CLAUSE_SEPARATOR.join(clauses)


def summarize(image_data: str) -> tuple[ImageMetadata, str]:
    """Parse metadata and describe the image in one step."""
    metadata = parse_image_metadata(image_data)
    description = describe_image(image_data, metadata)
    logger.debug(
        "Image summarized: format=%s, size~%d bytes, description=%r",
        metadata.format, metadata.approximate_byte_size, description,
    )
    return metadata, description
