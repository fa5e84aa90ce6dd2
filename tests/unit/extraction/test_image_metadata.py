# tests/unit/extraction/test_image_metadata.py — v2
"""Tests for extraction/image_metadata.py: data-URL parsing and descriptions."""

from __future__ import annotations

import pytest

from altdecision.api.errors import InvalidFormatError
from altdecision.core.models import Dimensions
from altdecision.extraction.image_metadata import (
    FALLBACK_DESCRIPTION,
    describe_image,
    parse_image_metadata,
    summarize,
)


def _data_url(fmt: str, payload: str) -> str:
    return f"data:image/{fmt};base64,{payload}"


class TestParseImageMetadata:
    def test_png_fixture(self, png_data_url):
        metadata = parse_image_metadata(png_data_url)
        assert metadata.format == "png"
        assert metadata.approximate_byte_size == 72
        assert metadata.dimensions == Dimensions(width=0, height=0)

    def test_size_rounds_half_up(self, jpeg_data_url):
        # 378 base64 chars -> 283.5 bytes
        assert parse_image_metadata(jpeg_data_url).approximate_byte_size == 284

    @pytest.mark.parametrize("value", [
        "not a data url",
        "data:text/plain;base64,aGVsbG8=",
        "data:image/png;base64,",
        "data:image/png,iVBORw0KGgo",
        "data:image/png;base64,abc\ndef",
    ])
    def test_invalid(self, value):
        with pytest.raises(InvalidFormatError, match="Invalid base64 image data"):
            parse_image_metadata(value)

    def test_invalid_is_value_error(self):
        with pytest.raises(ValueError):
            parse_image_metadata("nope")


class TestDescribeImage:
    def test_png_fixture(self, png_data_url):
        metadata = parse_image_metadata(png_data_url)
        description = describe_image(png_data_url, metadata)
        assert description == (
            "small icon or decorative image、small icon or thumbnail、PNG format image"
        )

    def test_jpeg_fixture(self, jpeg_data_url):
        metadata = parse_image_metadata(jpeg_data_url)
        description = describe_image(jpeg_data_url, metadata)
        assert description == (
            "photo or illustration、small icon or thumbnail、JPEG format image"
        )

    def test_svg(self):
        data_url = _data_url("svg+xml", "PHN2ZyB4bWxucz0iaHR0cDovL3d3dy53My5vcmcvMjAwMC9zdmciLz4=")
        description = describe_image(data_url, parse_image_metadata(data_url))
        assert description.startswith("vector diagram or icon")

    def test_large_image(self):
        data_url = _data_url("gif", "A" * 140_000)
        description = describe_image(data_url, parse_image_metadata(data_url))
        assert description == "high-resolution detailed image"

    def test_mid_size_png_has_only_size_clause(self):
        data_url = _data_url("png", "A" * 8000)
        description = describe_image(data_url, parse_image_metadata(data_url))
        assert description == "small icon or thumbnail"

    @pytest.mark.parametrize("fmt", ["PNG", "JPEG", "JPG", "SVG"])
    def test_format_match_is_case_sensitive(self, fmt):
        data_url = _data_url(fmt, "A" * 100)
        description = describe_image(data_url, parse_image_metadata(data_url))
        assert description == "small icon or thumbnail"

    def test_fallback(self):
        data_url = _data_url("webp", "A" * 20_000)
        description = describe_image(data_url, parse_image_metadata(data_url))
        assert description == FALLBACK_DESCRIPTION

    def test_signature_sniff_limited_to_prefix(self):
        data_url = _data_url("webp", "A" * 20_000 + "iVBORw0KGgo")
        description = describe_image(data_url, parse_image_metadata(data_url))
        assert "PNG format image" not in description


class TestSummarize:
    def test_returns_both(self, png_data_url):
        metadata, description = summarize(png_data_url)
        assert metadata.format == "png"
        assert "PNG format image" in description
