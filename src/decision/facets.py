# src/decision/facets.py — v1
"""Facet classifier: four independent predicates over description + context.

Description matching is case-insensitive substring search. Context
indicators are matched as given.
"""

from __future__ import annotations

from altdecision.core.models import FacetSet
from altdecision.decision.keywords import (
    DECORATIVE_CONTEXT,
    FACET_TERMS,
    INFORMATIVE_CONTEXT,
    contains_any,
)


def is_decorative(description: str, context: str | None = None) -> bool:
    if context and contains_any(context, DECORATIVE_CONTEXT):
        return True
    return contains_any(description.lower(), FACET_TERMS["decorative"])


def has_text(description: str) -> bool:
    return contains_any(description.lower(), FACET_TERMS["text"])


def is_informative(description: str, context: str | None = None) -> bool:
    if context and contains_any(context, INFORMATIVE_CONTEXT):
        return True
    return contains_any(description.lower(), FACET_TERMS["informative"])


def is_complex(description: str) -> bool:
    return contains_any(description.lower(), FACET_TERMS["complex"])


def classify(description: str, context: str | None = None) -> FacetSet:
    """Evaluate all four facets.

    Args:
        description: Free-text image description.
        context: Optional usage context supplied by the caller.

    Returns:
        FacetSet with every predicate evaluated (they are not exclusive).
    """
    return FacetSet(
        is_decorative=is_decorative(description, context),
        has_text=has_text(description),
        is_informative=is_informative(description, context),
        is_complex=is_complex(description),
    )
