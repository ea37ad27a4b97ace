"""Shared HTML page shell used by every preview variant."""

from __future__ import annotations

import html
from dataclasses import dataclass

_CARD = """\
        max-width: 1100px;
        margin: 24px auto;
        padding: 24px;
        background: white;
        border-radius: 12px;
        box-shadow: 0 6px 24px rgba(15, 23, 42, 0.08);"""

BASE_STYLES = f"""\
      :root {{ color-scheme: light dark; }}
      body {{
        margin: 0;
        font-family: ui-sans-serif, system-ui, -apple-system, Segoe UI, Roboto, sans-serif;
        background: #f6f7fb;
        color: #111827;
      }}
      .container, .svg-container {{
{_CARD}
      }}
      .markdown-body {{
        max-width: 980px;
        margin: 24px auto;
        padding: 24px 28px;
        background: white;
        border-radius: 12px;
        box-shadow: 0 6px 24px rgba(15, 23, 42, 0.08);
        line-height: 1.7;
      }}
      .markdown-body pre {{
        overflow: auto;
        padding: 14px 16px;
        border-radius: 8px;
        background: #0f172a;
        color: #e2e8f0;
      }}
      .mermaid {{
{_CARD}
        text-align: center;
      }}
      .embedded-svg {{
        overflow: auto;
        max-width: 100%;
      }}
      @media (prefers-color-scheme: dark) {{
        body {{ background: #0b1220; color: #e5e7eb; }}
        .container, .markdown-body, .svg-container, .mermaid {{ background: #111827; }}
      }}"""


# Class carried by every diagram container; the Mermaid init script selects it.
MERMAID_CLASS = "mermaid"


@dataclass(frozen=True)
class PageParts:
    """The pieces a preview contributes to the shared page shell."""

    title: str
    body: str
    head: str = ""
    scripts: str = ""


def escape_html(text: str) -> str:
    return html.escape(text, quote=True)


def base_page(parts: PageParts) -> str:
    """Assemble a complete HTML document from page parts.

    The title is escaped; head, body and scripts are inserted verbatim.
    """
    return f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{escape_html(parts.title)}</title>
    <style>
{BASE_STYLES}
    </style>
    {parts.head}
  </head>
  <body>
    {parts.body}
    {parts.scripts}
  </body>
</html>"""
