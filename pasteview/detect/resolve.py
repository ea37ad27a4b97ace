"""Resolution of the effective content type from a hint and the content."""

from __future__ import annotations

import logging

from pasteview.detect.detector import detect_content_type
from pasteview.detect.hints import normalize_content_type
from pasteview.detect.models import ContentType

logger = logging.getLogger(__name__)


def resolve_content_type(content: object, declared_hint: object = None) -> ContentType:
    """Return the concrete type to store and render content with.

    A hint that normalizes to a concrete type always wins. ``auto``, absent
    and unrecognized hints fall through to detection.
    """
    hint = normalize_content_type(declared_hint)
    if hint is not None and hint.is_concrete:
        return hint
    if declared_hint is not None and hint is None:
        logger.debug("ignoring unrecognized content type hint %r", declared_hint)
    return detect_content_type(content)


def effective_content_type(stored_type: object, content: object) -> ContentType:
    """View-time resolution for a stored record.

    Records written by older versions may lack a type or carry ``auto``;
    those are re-detected, which is idempotent for well-formed records.
    """
    return resolve_content_type(content, stored_type)
