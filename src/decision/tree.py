# src/decision/tree.py — v1
"""Alt-text decision tree.

Facets are independent, but the tree is a strict priority chain:
decorative > text+informative > complex > informative > functional.
Exactly one outcome wins and is dispatched to its generator.
"""

from __future__ import annotations

import logging
from typing import Callable

from altdecision.core.models import Decision, FacetSet, Outcome
from altdecision.decision.facets import classify
from altdecision.decision.generators import (
    complex_alt,
    extract_text,
    functional_alt,
    informative_alt,
)

logger = logging.getLogger(__name__)

REASONING: dict[Outcome, str] = {
    Outcome.DECORATIVE: (
        "The image serves a decorative purpose, so the alternative text is left empty."
    ),
    Outcome.TEXT_AND_INFORMATIVE: (
        "The text shown in the image is used as the alternative text."
    ),
    Outcome.COMPLEX: (
        "The image is complex, so the alternative text summarizes its key "
        "information and points to a detailed description."
    ),
    Outcome.INFORMATIVE: (
        "As an informative image, the alternative text conveys its content and purpose."
    ),
    Outcome.FUNCTIONAL: (
        "As a functional image, the alternative text conveys its function or purpose."
    ),
}


def _decorative_alt(description: str, context: str | None) -> str:
    return ""


def _text_alt(description: str, context: str | None) -> str:
    return extract_text(description)


_GENERATORS: dict[Outcome, Callable[[str, str | None], str]] = {
    Outcome.DECORATIVE: _decorative_alt,
    Outcome.TEXT_AND_INFORMATIVE: _text_alt,
    Outcome.COMPLEX: complex_alt,
    Outcome.INFORMATIVE: informative_alt,
    Outcome.FUNCTIONAL: functional_alt,
}


def select_outcome(facets: FacetSet) -> Outcome:
    """Pick the single winning branch for a facet combination."""
    if facets.is_decorative:
        return Outcome.DECORATIVE
    if facets.has_text and facets.is_informative:
        return Outcome.TEXT_AND_INFORMATIVE
    if facets.is_complex:
        return Outcome.COMPLEX
    if facets.is_informative:
        return Outcome.INFORMATIVE
    return Outcome.FUNCTIONAL


def decide(description: str, context: str | None = None) -> Decision:
    """Apply the decision tree to a description.

    Pure: identical inputs always produce identical decisions.

    Args:
        description: Free-text image description.
        context: Optional usage context (page purpose, surrounding UI, etc.).

    Returns:
        Decision with facets, winning outcome, alt text and rationale.
    """
    facets = classify(description, context)
    outcome = select_outcome(facets)
    alt_text = _GENERATORS[outcome](description, context)

    logger.debug("Decision tree outcome=%s facets=%s", outcome.value, facets.model_dump())

    return Decision(
        facets=facets,
        outcome=outcome,
        alt_text=alt_text,
        reasoning=REASONING[outcome],
    )
