# src/api/facade.py — v2
"""Public API facade: single entry point for image alt-text analysis.

Usage:
    from altdecision.api.facade import analyze_image
    response = analyze_image(AnalysisRequest(image_data=data_url, context="..."))

analyze_image() never raises: failures come back as a degraded response
with confidence 0.0. run_analysis() exposes the same work as an explicit
success/failure result.
"""

from __future__ import annotations

import logging
import uuid

from altdecision.api.errors import AnalysisError, InvalidFormatError, MissingInputError
from altdecision.api.models import (
    AnalysisFailure,
    AnalysisOutcome,
    AnalysisRequest,
    AnalysisResponse,
    AnalysisSuccess,
    default_facets,
)
from altdecision.config.settings import Settings, load_settings
from altdecision.core.models import Decision, Outcome
from altdecision.decision.confidence import score
from altdecision.decision.tree import decide
from altdecision.extraction.image_metadata import summarize
from altdecision.logging.context import clear_context, set_request_context, set_stage

logger = logging.getLogger(__name__)

FAILURE_ALT_TEXT = "Image analysis failed"


def run_analysis(
    request: AnalysisRequest,
    settings: Settings | None = None,
) -> AnalysisOutcome:
    """Run metadata -> description -> decision -> confidence.

    Args:
        request: Image data URL plus optional context and format hint.
        settings: Global settings. Loaded from .env if None.

    Returns:
        AnalysisSuccess, or AnalysisFailure describing what went wrong.
    """
    set_request_context(uuid.uuid4().hex[:12])
    try:
        return _run(request, settings or load_settings())
    except AnalysisError as exc:
        logger.warning("Image analysis rejected (%s): %s", exc.kind, exc)
        return AnalysisFailure(error_kind=exc.kind, message=str(exc))
    except Exception as exc:
        logger.exception("Unexpected error during image analysis")
        return AnalysisFailure(error_kind="internal", message=str(exc) or type(exc).__name__)
    finally:
        clear_context()


def analyze_image(
    request: AnalysisRequest,
    settings: Settings | None = None,
) -> AnalysisResponse:
    """Analyze an image and return alt text, rationale and confidence.

    Failures are mapped to a fixed fallback response here and nowhere else.
    """
    outcome = run_analysis(request, settings)
    if isinstance(outcome, AnalysisFailure):
        return failure_response(outcome.message)

    return AnalysisResponse(
        alt_text=outcome.decision.alt_text,
        reasoning=outcome.decision.reasoning,
        decision=outcome.decision,
        confidence=outcome.confidence,
    )


def failure_response(message: str) -> AnalysisResponse:
    """Degraded response: fallback alt text, default facets, zero confidence."""
    reasoning = f"An error occurred: {message}"
    decision = Decision(
        facets=default_facets(),
        outcome=Outcome.INFORMATIVE,
        alt_text=FAILURE_ALT_TEXT,
        reasoning=reasoning,
    )
    return AnalysisResponse(
        alt_text=FAILURE_ALT_TEXT,
        reasoning=reasoning,
        decision=decision,
        confidence=0.0,
    )


def _run(request: AnalysisRequest, settings: Settings) -> AnalysisSuccess:
    if not request.image_data:
        raise MissingInputError("No image data provided")
    if len(request.image_data) > settings.max_image_data_chars:
        raise InvalidFormatError(
            f"Image data exceeds {settings.max_image_data_chars} characters"
        )

    set_stage("metadata")
    metadata, description = summarize(request.image_data)
    if request.image_format and request.image_format != metadata.format:
        logger.debug(
            "Format hint %r differs from data URL format %r; using data URL",
            request.image_format, metadata.format,
        )

    set_stage("decision")
    decision = decide(description, request.context)

    set_stage("confidence")
    confidence = score(decision.facets, description)

    logger.info(
        "Image analyzed: format=%s, outcome=%s, confidence=%.2f",
        metadata.format, decision.outcome.value, confidence,
        extra={"data": {
            "approximate_byte_size": metadata.approximate_byte_size,
            "facets": decision.facets.model_dump(),
        }},
    )
    return AnalysisSuccess(
        metadata=metadata,
        description=description,
        decision=decision,
        confidence=confidence,
    )
