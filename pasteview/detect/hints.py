"""Normalization of caller-declared content-type hints."""

from __future__ import annotations

from pasteview.detect.models import ContentType

_HINT_ALIASES: dict[str, ContentType] = {
    "md": ContentType.markdown,
    "markdown": ContentType.markdown,
    "svg": ContentType.svg,
    "mermaid": ContentType.mermaid,
    "html": ContentType.html,
    "xml": ContentType.html,
    "auto": ContentType.auto,
}


def normalize_content_type(value: object) -> ContentType | None:
    """Map a free-form hint to a ContentType.

    Returns None ("no opinion") for absent, empty, non-string or unknown
    hints. Never raises.
    """
    if isinstance(value, ContentType):
        return value
    if not isinstance(value, str):
        return None
    return _HINT_ALIASES.get(value.strip().lower())
