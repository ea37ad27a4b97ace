"""Status pages shown instead of a preview (missing or expired pastes)."""

from __future__ import annotations

from pasteview.render.page import PageParts, base_page, escape_html


def render_message_page(title: str, message: str) -> str:
    """Render a short status page. Title and message are escaped."""
    body = (
        '<div class="container">'
        f"<h1>{escape_html(title)}</h1>"
        f"<p>{escape_html(message)}</p>"
        "</div>"
    )
    return base_page(PageParts(title=title, body=body))


def render_not_found_page() -> str:
    return render_message_page("Not found", "The requested page does not exist.")


def render_expired_page() -> str:
    return render_message_page("Expired", "This page has expired.")
