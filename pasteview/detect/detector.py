"""Heuristic content-type detection for pasted text.

Detection is an ordered cascade of independent rules evaluated against the
trimmed content; the first rule whose predicate matches decides the type.
Rules are not mutually exclusive (a full HTML page may embed a Markdown-ish
list, a Markdown note may embed a mermaid fence), so order is significant.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from pasteview.detect.models import ContentType, DetectionResult

logger = logging.getLogger(__name__)

SVG_NAMESPACE = 'xmlns="http://www.w3.org/2000/svg"'

# Markdown content shorter than this only needs a single feature.
SHORT_CONTENT_LENGTH = 1000
MIN_FEATURES = 2
MIN_FEATURES_SHORT = 1

_HTML_TAGS = ("div", "p", "span", "h1", "body", "head", "style", "script", "link", "meta")

_MERMAID_DECLARATIONS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^\s*graph\s+[A-Za-z\s]", re.IGNORECASE),
    re.compile(r"^\s*flowchart\s+[A-Za-z\s]", re.IGNORECASE),
    re.compile(r"^\s*sequenceDiagram\b", re.IGNORECASE),
    re.compile(r"^\s*classDiagram\b", re.IGNORECASE),
    re.compile(r"^\s*gantt\b", re.IGNORECASE),
    re.compile(r"^\s*pie\b", re.IGNORECASE),
    re.compile(r"^\s*erDiagram\b", re.IGNORECASE),
    re.compile(r"^\s*journey\b", re.IGNORECASE),
    re.compile(r"^\s*stateDiagram\b", re.IGNORECASE),
    re.compile(r"^\s*gitGraph\b", re.IGNORECASE),
)

_TABLE_ROW = re.compile(r"\|.+\|")

# Feature name -> pattern. "table" is handled separately (needs two rows).
_MARKDOWN_FEATURES: dict[str, re.Pattern[str]] = {
    "heading": re.compile(r"^#{1,6}\s.+", re.MULTILINE),
    "unordered_list": re.compile(r"^[-*+]\s.+", re.MULTILINE),
    "ordered_list": re.compile(r"^\d+\.\s.+", re.MULTILINE),
    "blockquote": re.compile(r"^>\s.+", re.MULTILINE),
    "code_block": re.compile(r"^```[\s\S]*?```", re.MULTILINE),
    # Link text and target never span brackets or lines.
    "link": re.compile(r"\[[^\[\]\n]+\]\([^()\n]+\)"),
    "image": re.compile(r"!\[[^\[\]\n]+\]\([^()\n]+\)"),
}

# A fence opener on its own line, optionally inside blockquotes, indented
# list items or after a list marker. Group "info" is the info string.
_FENCE_OPENER = re.compile(
    r"^[ \t>]*(?:(?:[-*+]|\d+[.)])[ \t]+)?`{3,}(?P<info>[^`\n]*)$", re.MULTILINE
)

_LINE_BREAKS = re.compile(r"\r\n?")


def fence_language(info: str) -> str:
    """First word of a fence info string, lowercased ("" when untagged)."""
    info = info.strip()
    return info.split(maxsplit=1)[0].lower() if info else ""


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def _is_html_document(text: str) -> bool:
    return text.startswith("<!DOCTYPE html>") or text.startswith("<html")


def _starts_with_fence(tag: str) -> Callable[[str], bool]:
    def predicate(text: str) -> bool:
        match = _FENCE_OPENER.match(text)
        return match is not None and fence_language(match["info"]) == tag

    return predicate


def _contains_fence(tag: str) -> Callable[[str], bool]:
    def predicate(text: str) -> bool:
        return any(
            fence_language(match["info"]) == tag for match in _FENCE_OPENER.finditer(text)
        )

    return predicate


def _is_standalone_svg(text: str) -> bool:
    return text.startswith("<svg") and "</svg>" in text and SVG_NAMESPACE in text


def _is_mermaid_declaration(text: str) -> bool:
    return any(pattern.match(text) for pattern in _MERMAID_DECLARATIONS)


def _has_html_tags(text: str) -> bool:
    return text.startswith("<") and any(f"<{tag}" in text for tag in _HTML_TAGS)


def markdown_features(content: str) -> list[str]:
    """Return the names of the Markdown structural features present in content."""
    found = [name for name, pattern in _MARKDOWN_FEATURES.items() if pattern.search(content)]
    rows = sum(1 for line in content.splitlines() if _TABLE_ROW.search(line))
    if rows >= 2:
        found.append("table")
    return found


def is_definitely_markdown(content: str) -> bool:
    """Fuzzy majority check: enough Markdown features to call it Markdown.

    Two features are required in general; content under
    SHORT_CONTENT_LENGTH characters qualifies with one, since short snippets
    have fewer chances to accumulate signals.
    """
    count = len(markdown_features(content))
    if count >= MIN_FEATURES:
        return True
    return len(content) < SHORT_CONTENT_LENGTH and count >= MIN_FEATURES_SHORT


# ---------------------------------------------------------------------------
# Rule cascade
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DetectionRule:
    """A named predicate paired with the type it resolves to."""

    name: str
    predicate: Callable[[str], bool]
    result: ContentType


RULES: tuple[DetectionRule, ...] = (
    DetectionRule("html_document", _is_html_document, ContentType.html),
    DetectionRule("leading_html_fence", _starts_with_fence("html"), ContentType.html),
    DetectionRule("leading_mermaid_fence", _starts_with_fence("mermaid"), ContentType.mermaid),
    DetectionRule("leading_svg_fence", _starts_with_fence("svg"), ContentType.svg),
    DetectionRule("svg_document", _is_standalone_svg, ContentType.svg),
    DetectionRule("mermaid_fence", _contains_fence("mermaid"), ContentType.mermaid),
    DetectionRule("svg_fence", _contains_fence("svg"), ContentType.svg),
    DetectionRule("mermaid_declaration", _is_mermaid_declaration, ContentType.mermaid),
    DetectionRule("html_tags", _has_html_tags, ContentType.html),
    DetectionRule("markdown", is_definitely_markdown, ContentType.markdown),
)

FALLBACK_RULE = "fallback"


def explain_detection(content: object) -> DetectionResult:
    """Run the cascade and report which rule decided the type.

    Markdown features are only collected when the heuristic took part in the
    decision (the markdown rule or the fallback).
    """
    if not isinstance(content, str) or not content:
        return DetectionResult(content_type=ContentType.html, rule="empty")

    trimmed = _LINE_BREAKS.sub("\n", content).strip()
    for rule in RULES:
        if rule.predicate(trimmed):
            features = markdown_features(trimmed) if rule.name == "markdown" else []
            result = DetectionResult(
                content_type=rule.result, rule=rule.name, markdown_features=features
            )
            break
    else:
        result = DetectionResult(
            content_type=ContentType.html,
            rule=FALLBACK_RULE,
            markdown_features=markdown_features(trimmed),
        )

    logger.debug(
        "detected %s via %s (%d chars)", result.content_type.value, result.rule, len(trimmed)
    )
    return result


def detect_content_type(content: object) -> ContentType:
    """Classify content as html, markdown, svg or mermaid. Never returns auto."""
    return explain_detection(content).content_type
