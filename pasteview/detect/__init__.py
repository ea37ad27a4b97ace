"""Content-type detection: hint normalization and the heuristic classifier."""

from pasteview.detect.detector import (
    RULES,
    DetectionRule,
    detect_content_type,
    explain_detection,
    is_definitely_markdown,
    markdown_features,
)
from pasteview.detect.hints import normalize_content_type
from pasteview.detect.models import CONCRETE_TYPES, ContentType, DetectionResult
from pasteview.detect.resolve import effective_content_type, resolve_content_type

__all__ = [
    "CONCRETE_TYPES",
    "ContentType",
    "DetectionResult",
    "DetectionRule",
    "RULES",
    "detect_content_type",
    "effective_content_type",
    "explain_detection",
    "is_definitely_markdown",
    "markdown_features",
    "normalize_content_type",
    "resolve_content_type",
]
