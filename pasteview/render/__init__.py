"""Preview rendering: shared page shell, Markdown engine, per-type variants."""

from pasteview.render.engine import get_markdown_engine, render_markdown_fragment
from pasteview.render.headers import PREVIEW_CSP, preview_headers, raw_headers
from pasteview.render.page import PageParts, base_page, escape_html
from pasteview.render.pages import (
    render_expired_page,
    render_message_page,
    render_not_found_page,
)
from pasteview.render.previews import (
    PREVIEWS,
    HtmlPreview,
    MarkdownPreview,
    MermaidPreview,
    Preview,
    SvgPreview,
    UnresolvedContentTypeError,
    render_preview,
)

__all__ = [
    "HtmlPreview",
    "MarkdownPreview",
    "MermaidPreview",
    "PREVIEWS",
    "PREVIEW_CSP",
    "PageParts",
    "Preview",
    "SvgPreview",
    "UnresolvedContentTypeError",
    "base_page",
    "escape_html",
    "get_markdown_engine",
    "preview_headers",
    "raw_headers",
    "render_expired_page",
    "render_markdown_fragment",
    "render_message_page",
    "render_not_found_page",
    "render_preview",
]
