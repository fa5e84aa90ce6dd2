# tests/unit/api/test_api_models.py — v1
"""Tests for api.models: request/response models and wire format."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from altdecision.api.facade import failure_response
from altdecision.api.models import AnalysisFailure, AnalysisRequest, default_facets


class TestAnalysisRequest:
    def test_camel_case_input(self):
        request = AnalysisRequest.model_validate(
            {"imageData": "data:image/png;base64,AAAA", "context": "c", "imageFormat": "png"}
        )
        assert request.image_data.startswith("data:image/png")
        assert request.image_format == "png"

    def test_snake_case_input(self):
        request = AnalysisRequest(image_data="x", context=None)
        assert request.image_data == "x"

    def test_empty_allowed(self):
        assert AnalysisRequest().image_data == ""

    def test_unknown_format_rejected(self):
        with pytest.raises(ValidationError):
            AnalysisRequest(image_data="x", image_format="bmp")


class TestAnalysisResponse:
    def test_to_wire(self):
        wire = failure_response("boom").to_wire()
        assert set(wire) == {"altText", "reasoning", "decision", "confidence", "analysis"}
        assert wire["decision"]["facets"]["isInformative"] is True
        assert wire["analysis"] == wire["decision"]["facets"]
        assert wire["decision"]["outcome"] == "informative"

    def test_confidence_bounds(self):
        response = failure_response("boom")
        with pytest.raises(ValidationError):
            response.model_validate({**response.model_dump(), "confidence": 1.5})


class TestAnalysisFailure:
    def test_status(self):
        failure = AnalysisFailure(error_kind="missing_input", message="m")
        assert failure.status == "failure"

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            AnalysisFailure(error_kind="other", message="m")


def test_default_facets():
    facets = default_facets()
    assert facets.is_informative is True
    assert not (facets.is_decorative or facets.has_text or facets.is_complex)
