"""Per-type preview variants and the render_preview dispatcher."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod

from pasteview.config.models import PasteviewConfig
from pasteview.detect.models import ContentType
from pasteview.render.engine import render_markdown_fragment
from pasteview.render.page import MERMAID_CLASS, PageParts, base_page, escape_html

logger = logging.getLogger(__name__)

_SVG_HEAD = """
    <style>
      .svg-container svg { max-width: 100%; height: auto; display: block; }
    </style>
"""


class UnresolvedContentTypeError(ValueError):
    """Raised when render_preview is handed auto or an unknown type."""

    def __init__(self, content_type: object) -> None:
        super().__init__(
            f"Cannot render content type {content_type!r}: resolve it to one of "
            "html, markdown, svg, mermaid first"
        )
        self.content_type = content_type


def _mermaid_init(config: PasteviewConfig) -> str:
    """Inline JS that initializes and runs Mermaid if the library loaded."""
    init = json.dumps(
        {
            "startOnLoad": config.mermaid.start_on_load,
            "securityLevel": config.mermaid.security_level,
        }
    )
    selector = json.dumps(f".{MERMAID_CLASS}")
    return f"""
        if (window.mermaid) {{
          window.mermaid.initialize({init});
          try {{
            Promise.resolve(window.mermaid.run({{ querySelector: {selector} }})).catch((e) => {{
              console.error('Mermaid render failed', e);
            }});
          }} catch (e) {{
            console.error('Mermaid render failed', e);
          }}
        }}"""


def _script_tag(src: str) -> str:
    return f'<script src="{escape_html(src)}"></script>'


def _stylesheet_tag(href: str) -> str:
    return f'<link rel="stylesheet" href="{escape_html(href)}" />'


class Preview(ABC):
    """One content type's contribution to the shared page shell."""

    content_type: ContentType
    title: str

    def passthrough(self, content: str) -> bool:
        """Whether content is already a complete page and needs no shell."""
        return False

    @abstractmethod
    def parts(self, content: str, config: PasteviewConfig) -> PageParts: ...

    def render(self, content: str, config: PasteviewConfig) -> str:
        if self.passthrough(content):
            return content
        return base_page(self.parts(content, config))


class HtmlPreview(Preview):
    content_type = ContentType.html
    title = "HTML Preview"

    def passthrough(self, content: str) -> bool:
        trimmed = content.strip()
        return trimmed.startswith("<!DOCTYPE html>") or trimmed.startswith("<html")

    def parts(self, content: str, config: PasteviewConfig) -> PageParts:
        return PageParts(title=self.title, body=f'<div class="container">{content}</div>')


class MarkdownPreview(Preview):
    content_type = ContentType.markdown
    title = "Markdown Preview"

    def parts(self, content: str, config: PasteviewConfig) -> PageParts:
        body = render_markdown_fragment(content, config.markdown)
        scripts = f"""
    {_script_tag(config.assets.highlight_js)}
    {_script_tag(config.assets.mermaid_js)}
    <script>
      document.addEventListener('DOMContentLoaded', () => {{
        document.querySelectorAll('pre code').forEach((block) => {{
          if (window.hljs) window.hljs.highlightElement(block);
        }});
{_mermaid_init(config)}
      }});
    </script>
"""
        return PageParts(
            title=self.title,
            head=_stylesheet_tag(config.assets.highlight_css),
            body=f'<article class="markdown-body">{body}</article>',
            scripts=scripts,
        )


class SvgPreview(Preview):
    content_type = ContentType.svg
    title = "SVG Preview"

    def parts(self, content: str, config: PasteviewConfig) -> PageParts:
        return PageParts(
            title=self.title,
            head=_SVG_HEAD,
            body=f'<div class="svg-container">{content}</div>',
        )


class MermaidPreview(Preview):
    content_type = ContentType.mermaid
    title = "Mermaid Preview"

    def parts(self, content: str, config: PasteviewConfig) -> PageParts:
        scripts = f"""
    {_script_tag(config.assets.mermaid_js)}
    <script>
      document.addEventListener('DOMContentLoaded', () => {{
{_mermaid_init(config)}
      }});
    </script>
"""
        return PageParts(
            title=self.title,
            body=f'<div class="{MERMAID_CLASS}">{escape_html(content)}</div>',
            scripts=scripts,
        )


PREVIEWS: dict[ContentType, Preview] = {
    preview.content_type: preview
    for preview in (HtmlPreview(), MarkdownPreview(), SvgPreview(), MermaidPreview())
}

_DEFAULT_CONFIG = PasteviewConfig()


def render_preview(
    content: str | None,
    content_type: ContentType | str,
    config: PasteviewConfig | None = None,
) -> str:
    """Render content of a resolved type as a complete HTML document.

    Markdown and Mermaid output finishes rendering in the browser
    (highlighting and diagram layout). Raises UnresolvedContentTypeError if
    content_type is auto or not a known type.
    """
    try:
        resolved = ContentType(content_type)
    except ValueError:
        raise UnresolvedContentTypeError(content_type) from None
    preview = PREVIEWS.get(resolved)
    if preview is None:
        raise UnresolvedContentTypeError(content_type)

    logger.debug("rendering %s preview", resolved.value)
    return preview.render(content or "", config or _DEFAULT_CONFIG)
