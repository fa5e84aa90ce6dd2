# src/decision/confidence.py — v1
"""Additive confidence score over facets and description length.

Heuristic signal strength, not a calibrated probability. Informative
images get no bonus of their own.
"""

from __future__ import annotations

from altdecision.core.models import FacetSet

BASELINE = 0.5
DECORATIVE_BONUS = 0.3
TEXT_BONUS = 0.2
COMPLEX_BONUS = 0.1
LENGTH_BONUS = 0.1
LENGTH_THRESHOLDS = (50, 100)


def score(facets: FacetSet, description: str) -> float:
    """Score a decision in [0.0, 1.0].

    Args:
        facets: Facets computed for the description.
        description: Description the facets were computed from.

    Returns:
        Baseline plus bonuses, clamped (not rescaled) to [0.0, 1.0].
    """
    confidence = BASELINE

    if facets.is_decorative:
        confidence += DECORATIVE_BONUS
    if facets.has_text:
        confidence += TEXT_BONUS
    if facets.is_complex:
        confidence += COMPLEX_BONUS

    for threshold in LENGTH_THRESHOLDS:
        if len(description) > threshold:
            confidence += LENGTH_BONUS

    return min(1.0, max(0.0, confidence))
