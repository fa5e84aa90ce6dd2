# src/decision/generators.py — v1
"""Alt-text generators, one per decision-tree branch.

Truncation is plain character slicing, not word-aware.
"""

from __future__ import annotations

import re

from altdecision.decision.keywords import BUTTON_CONTEXT, COMPLEX_LABELS, LINK_CONTEXT, contains_any

ELLIPSIS = "..."

TEXT_FALLBACK_LIMIT = 100
COMPLEX_LIMIT = 150
INFORMATIVE_LIMIT = 125
FUNCTIONAL_LIMIT = 100

# Tried in order; the first pattern with any match supplies every match.
_TEXT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"「[^」]+」"),
    re.compile(r'"[^"]+"'),
    re.compile(r"(?:テキスト|text)[：:]\s*[^\n,.。]+"),
    re.compile(r"(?:文字|character)[：:]\s*[^\n,.。]+"),
)
_DELIMITERS = re.compile(r'[「」"：:]')


def truncate(text: str, limit: int) -> str:
    """Cut to ``limit`` characters and mark the cut with an ellipsis."""
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


def extract_text(description: str) -> str:
    """Pull quoted or labelled text out of the description.

    Quoted spans (「…」 then "…") are preferred over ``text:`` and
    ``character:`` labels. Delimiters are stripped from each match and
    matches are joined with ", ". Falls back to the truncated description.
    """
    for pattern in _TEXT_PATTERNS:
        matches = pattern.findall(description)
        if matches:
            return ", ".join(_DELIMITERS.sub("", match) for match in matches)
    return truncate(description, TEXT_FALLBACK_LIMIT)


def complex_alt(description: str, context: str | None = None) -> str:
    """Label charts/tables/diagrams and keep a longer body than other branches."""
    prefix = ""
    for needles, label in COMPLEX_LABELS:
        if contains_any(description, needles):
            prefix = label
            break
    alt = prefix + description[:COMPLEX_LIMIT]

    if context:
        alt = f"{context}-related {alt}"

    # The ellipsis follows the original description length, not the body.
    if len(description) > COMPLEX_LIMIT:
        alt += ELLIPSIS
    return alt


def informative_alt(description: str, context: str | None = None) -> str:
    alt = truncate(description, INFORMATIVE_LIMIT)
    if context:
        alt = f"{context}: {alt}"
    return alt


def functional_alt(description: str, context: str | None = None) -> str:
    """Describe what the image does when it acts as a button or link."""
    if context:
        if contains_any(context, BUTTON_CONTEXT):
            return f"{description}button"
        if contains_any(context, LINK_CONTEXT):
            return f"{description}-link"
    return truncate(description, FUNCTIONAL_LIMIT)
