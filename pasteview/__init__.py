"""pasteview: content-type detection and preview rendering for pasted text."""

from pasteview.detect import (
    ContentType,
    detect_content_type,
    effective_content_type,
    normalize_content_type,
    resolve_content_type,
)
from pasteview.render import render_preview

__version__ = "0.1.0"

__all__ = [
    "ContentType",
    "detect_content_type",
    "effective_content_type",
    "normalize_content_type",
    "render_preview",
    "resolve_content_type",
]
