# src/decision/keywords.py — v1
"""Keyword catalogs driving facet classification and alt-text labelling.

Each facet maps to an ordered list of entries: an English primary plus its
synonyms (mostly Japanese, as in the catalogs the tree was first tuned on).
Matching is plain substring search, so order only matters for readability.
"""

from __future__ import annotations

from typing import NamedTuple


class KeywordEntry(NamedTuple):
    """A primary trigger word and the synonyms that count as the same hit."""

    primary: str
    synonyms: tuple[str, ...] = ()

    @property
    def terms(self) -> tuple[str, ...]:
        return (self.primary, *self.synonyms)


def _flatten(entries: tuple[KeywordEntry, ...]) -> tuple[str, ...]:
    return tuple(term for entry in entries for term in entry.terms)


# === DESCRIPTION CATALOGS (case-insensitive) ===

DECORATIVE_KEYWORDS: tuple[KeywordEntry, ...] = (
    KeywordEntry("decoration", ("装飾", "decorative")),
    KeywordEntry("background", ("背景",)),
    KeywordEntry("pattern", ("パターン",)),
    KeywordEntry("border", ("枠",)),
    KeywordEntry("line", ("線",)),
    KeywordEntry("divider", ("分割線",)),
)

TEXT_KEYWORDS: tuple[KeywordEntry, ...] = (
    KeywordEntry("text", ("テキスト",)),
    KeywordEntry("character", ("文字", "文言")),
    KeywordEntry("message", ("メッセージ",)),
    KeywordEntry("title", ("タイトル",)),
    KeywordEntry("heading", ("見出し",)),
    KeywordEntry("label", ("ラベル",)),
    KeywordEntry("button", ("ボタン",)),
    KeywordEntry("link", ("リンク",)),
)

INFORMATIVE_KEYWORDS: tuple[KeywordEntry, ...] = (
    KeywordEntry("photo", ("写真",)),
    KeywordEntry("image", ("画像",)),
    KeywordEntry("illustration", ("イラスト",)),
    KeywordEntry("figure", ("図",)),
    KeywordEntry("explanation", ("説明",)),
    KeywordEntry("display", ("表示",)),
)

COMPLEX_KEYWORDS: tuple[KeywordEntry, ...] = (
    KeywordEntry("graph", ("グラフ", "複雑なグラフ")),
    KeywordEntry("chart", ("チャート",)),
    KeywordEntry("table", ("表",)),
    KeywordEntry("diagram", ("図表",)),
    KeywordEntry("flowchart", ("フローチャート",)),
    KeywordEntry("map", ("地図",)),
    KeywordEntry("complex", ("複雑",)),
    KeywordEntry("detail", ("詳細",)),
)

# Facet name -> flattened lowercase terms, built once at import.
FACET_TERMS: dict[str, tuple[str, ...]] = {
    "decorative": tuple(t.lower() for t in _flatten(DECORATIVE_KEYWORDS)),
    "text": tuple(t.lower() for t in _flatten(TEXT_KEYWORDS)),
    "informative": tuple(t.lower() for t in _flatten(INFORMATIVE_KEYWORDS)),
    "complex": tuple(t.lower() for t in _flatten(COMPLEX_KEYWORDS)),
}


# === CONTEXT INDICATORS (case-sensitive) ===

DECORATIVE_CONTEXT: tuple[str, ...] = ("装飾", "decoration")
INFORMATIVE_CONTEXT: tuple[str, ...] = ("説明", "explanation", "情報", "information")
BUTTON_CONTEXT: tuple[str, ...] = ("ボタン", "button")
LINK_CONTEXT: tuple[str, ...] = ("リンク", "link")


# === COMPLEX-IMAGE LABELS (first match wins, case-sensitive) ===

COMPLEX_LABELS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("グラフ", "graph", "chart"), "Graph: "),
    (("表", "table"), "Table: "),
    (("図表", "diagram"), "Diagram: "),
)


def contains_any(haystack: str, needles: tuple[str, ...]) -> bool:
    """Plain substring test, no word boundaries."""
    return any(needle in haystack for needle in needles)
