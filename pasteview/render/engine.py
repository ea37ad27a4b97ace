"""Process-wide Markdown engine with diagram-aware fenced code blocks."""

from __future__ import annotations

import logging
from functools import lru_cache

from markdown_it import MarkdownIt

from pasteview.config.models import MarkdownConfig
from pasteview.detect.detector import fence_language
from pasteview.render.page import MERMAID_CLASS, escape_html

logger = logging.getLogger(__name__)


def _build_engine(options: MarkdownConfig) -> MarkdownIt:
    md = MarkdownIt(
        "js-default",
        {
            "html": options.html,
            "linkify": options.linkify,
            "typographer": options.typographer,
        },
    )
    default_fence = md.renderer.rules["fence"]

    def custom_fence(tokens, idx, opts, env):
        # Diagram fences are handed to the browser; everything else keeps
        # the stock <pre><code> rendering for highlight.js.
        token = tokens[idx]
        lang = fence_language(token.info)
        code = token.content or ""

        if lang == "mermaid":
            return f'<div class="{MERMAID_CLASS}">{escape_html(code)}</div>\n'
        if lang == "svg":
            return f'<div class="embedded-svg">{code}</div>\n'
        return default_fence(tokens, idx, opts, env)

    md.renderer.rules["fence"] = custom_fence
    return md


@lru_cache(maxsize=None)
def _cached_engine(options: MarkdownConfig) -> MarkdownIt:
    logger.debug("building markdown engine (%s)", options)
    return _build_engine(options)


def get_markdown_engine(options: MarkdownConfig | None = None) -> MarkdownIt:
    """Return the shared engine for these options, building it on first use.

    Engines are configured once and must not be mutated by callers.
    """
    if options is None:
        options = MarkdownConfig()
    return _cached_engine(options)


def render_markdown_fragment(content: str, options: MarkdownConfig | None = None) -> str:
    """Convert Markdown to an HTML fragment (no page shell)."""
    return get_markdown_engine(options).render(content)
