"""Content-type enum and detection result model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ContentType(str, Enum):
    """Kinds of paste content the service knows how to preview."""

    html = "html"
    markdown = "markdown"
    svg = "svg"
    mermaid = "mermaid"
    auto = "auto"

    @property
    def is_concrete(self) -> bool:
        return self is not ContentType.auto


CONCRETE_TYPES: tuple[ContentType, ...] = (
    ContentType.html,
    ContentType.markdown,
    ContentType.svg,
    ContentType.mermaid,
)


class DetectionResult(BaseModel):
    """Outcome of running the detection cascade on a piece of content."""

    content_type: ContentType
    rule: str = Field(description="Name of the rule that fired")
    markdown_features: list[str] = Field(default_factory=list)
