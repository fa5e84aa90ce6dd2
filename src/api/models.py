# src/api/models.py — v1
"""API-level models: AnalysisRequest, AnalysisResponse, result variants, guidance.

Field aliases carry the camelCase wire names; construct with either form.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from altdecision.api.errors import ErrorKind
from altdecision.core.models import Decision, FacetSet, ImageMetadata

ImageFormat = Literal["png", "jpg", "jpeg", "gif", "webp"]


class AnalysisRequest(BaseModel):
    """Input of analyze_image(). Empty image data is reported, not rejected."""

    model_config = ConfigDict(populate_by_name=True)

    image_data: str = Field(default="", alias="imageData")
    context: str | None = None
    image_format: ImageFormat | None = Field(default=None, alias="imageFormat")


class AnalysisResponse(BaseModel):
    """Return value of analyze_image()."""

    model_config = ConfigDict(populate_by_name=True)

    alt_text: str = Field(alias="altText")
    reasoning: str
    decision: Decision
    confidence: float = Field(ge=0.0, le=1.0)

    def to_wire(self) -> dict:
        """Serialize with camelCase keys plus a flat ``analysis`` facet block."""
        payload = self.model_dump(by_alias=True, mode="json")
        payload["analysis"] = self.decision.facets.model_dump(by_alias=True)
        return payload


# === RESULT VARIANTS ===


class AnalysisSuccess(BaseModel):
    """Successful run: metadata, description and the scored decision."""

    status: Literal["success"] = "success"
    metadata: ImageMetadata
    description: str
    decision: Decision
    confidence: float = Field(ge=0.0, le=1.0)


class AnalysisFailure(BaseModel):
    """Failed run. Never carries partial results."""

    status: Literal["failure"] = "failure"
    error_kind: ErrorKind
    message: str


AnalysisOutcome = Union[AnalysisSuccess, AnalysisFailure]


# === GUIDANCE ===


class GuidanceStep(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    question: str
    yes_action: str = Field(alias="yesAction")
    no_action: str = Field(alias="noAction")


class GuidanceExample(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    description: str
    alt_text: str = Field(alias="altText")
    reasoning: str


class GuidanceDocument(BaseModel):
    """Static description of the decision tree and alt-text best practices."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    decision_tree: dict[str, GuidanceStep] = Field(alias="decisionTree")
    best_practices: tuple[str, ...] = Field(alias="bestPractices")
    examples: dict[str, GuidanceExample]


def default_facets() -> FacetSet:
    """Facets reported when analysis fails."""
    return FacetSet(
        is_decorative=False,
        has_text=False,
        is_informative=True,
        is_complex=False,
    )
