"""Response headers that accompany a rendered preview.

Pasted HTML, SVG and Markdown may carry scripts. The core does not sanitize
them; the serving layer confines them with a sandboxing CSP instead.
"""

from __future__ import annotations

PREVIEW_CSP_DIRECTIVES: tuple[str, ...] = (
    "sandbox allow-scripts allow-forms allow-modals allow-popups",
    "default-src 'self' https: data: blob:",
    "script-src 'self' https: 'unsafe-inline' 'unsafe-eval'",
    "style-src 'self' https: 'unsafe-inline'",
    "img-src 'self' https: data: blob:",
    "font-src 'self' https: data:",
)

PREVIEW_CSP = "; ".join(PREVIEW_CSP_DIRECTIVES)

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
RAW_CONTENT_TYPE = "text/plain; charset=utf-8"


def preview_headers() -> dict[str, str]:
    """Headers for serving a render_preview document."""
    return {
        "Content-Type": HTML_CONTENT_TYPE,
        "Content-Security-Policy": PREVIEW_CSP,
    }


def raw_headers() -> dict[str, str]:
    """Headers for raw passthrough, which bypasses detection and rendering."""
    return {"Content-Type": RAW_CONTENT_TYPE}
