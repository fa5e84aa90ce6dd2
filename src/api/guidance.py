# src/api/guidance.py — v1
"""Alt-text decision guidance, served as a constant document."""

from __future__ import annotations

from altdecision.api.models import GuidanceDocument, GuidanceExample, GuidanceStep

GUIDANCE = GuidanceDocument(
    title="Alternative Text Decision Guide",
    decision_tree={
        "step1": GuidanceStep(
            question="Is the image used for decoration?",
            yes_action='alt="" (empty alternative text)',
            no_action="Go to step 2",
        ),
        "step2": GuidanceStep(
            question="Does the image contain text?",
            yes_action="Use that text as the alternative text",
            no_action="Go to step 3",
        ),
        "step3": GuidanceStep(
            question="Is the image complex (a graph, chart, diagram, etc.)?",
            yes_action="A short summary plus a link to, or placement of, a long description",
            no_action="Go to step 4",
        ),
        "step4": GuidanceStep(
            question="Is the image informative?",
            yes_action="Briefly describe the content and purpose of the image",
            no_action="Describe the function the image performs",
        ),
    },
    best_practices=(
        "Keep alternative text short and clear",
        "Describe the function or purpose of the image",
        'Avoid redundant phrases such as "image of" or "photo of"',
        "Choose the level of detail that fits the context",
        "Use empty alternative text for decorative images",
    ),
    examples={
        "decorative": GuidanceExample(
            description="Decorative border line",
            alt_text="",
            reasoning="Purely decorative element",
        ),
        "informative": GuidanceExample(
            description="Company logo",
            alt_text="Example Corporation",
            reasoning="Gives the company name the logo shows",
        ),
        "functional": GuidanceExample(
            description="Search button icon",
            alt_text="Search",
            reasoning="Describes what the button does",
        ),
        "complex": GuidanceExample(
            description="Sales trend graph",
            alt_text="Sales trend graph from 2020 to 2024, details in the table below",
            reasoning="Summarizes the graph and says where the details are",
        ),
    },
)


def get_guidance() -> GuidanceDocument:
    """Return the guidance document. The instance is frozen and shared."""
    return GUIDANCE
