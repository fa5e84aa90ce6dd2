# src/core/models.py — v1
"""Shared Pydantic domain models used across modules.

No module redefines these types: all imports come from core.models.
Wire names are camelCase aliases so dumps match the JSON clients expect.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# === IMAGE METADATA ===


class Dimensions(BaseModel):
    """Pixel dimensions. Zero means unknown (no decoding is performed)."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)


class ImageMetadata(BaseModel):
    """Format and approximate size derived from a data URL."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    format: str
    approximate_byte_size: int = Field(ge=0, alias="approximateByteSize")
    dimensions: Dimensions | None = None


# === DECISION MODELS ===


class FacetSet(BaseModel):
    """The four independent boolean classifications of an image."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_decorative: bool = Field(default=False, alias="isDecorative")
    has_text: bool = Field(default=False, alias="hasText")
    is_informative: bool = Field(default=False, alias="isInformative")
    is_complex: bool = Field(default=False, alias="isComplex")


class Outcome(str, Enum):
    """Branch of the decision tree, in priority order."""

    DECORATIVE = "decorative"
    TEXT_AND_INFORMATIVE = "text_and_informative"
    COMPLEX = "complex"
    INFORMATIVE = "informative"
    FUNCTIONAL = "functional"


class Decision(BaseModel):
    """Result of applying the decision tree to one description."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    facets: FacetSet
    outcome: Outcome
    alt_text: str = Field(alias="altText")
    reasoning: str
