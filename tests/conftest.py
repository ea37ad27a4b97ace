"""Shared test fixtures for pasteview."""

import pytest

from pasteview.config.models import PasteviewConfig

SVG_NS = 'xmlns="http://www.w3.org/2000/svg"'


@pytest.fixture
def sample_config():
    return PasteviewConfig()


@pytest.fixture
def html_document():
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head><title>Page</title></head>\n"
        "<body><p>Hello</p></body>\n"
        "</html>"
    )


@pytest.fixture
def standalone_svg():
    return f'<svg {SVG_NS} viewBox="0 0 10 10"><circle cx="5" cy="5" r="4"/></svg>'


@pytest.fixture
def markdown_note():
    """A typical Markdown paste: heading, list, link, code block."""
    return (
        "# Release notes\n"
        "\n"
        "- Faster startup\n"
        "- Fewer crashes\n"
        "\n"
        "See [the changelog](https://example.com/changelog).\n"
        "\n"
        "```python\n"
        "x = 1 < 2\n"
        "```\n"
    )


@pytest.fixture
def mermaid_source():
    return "graph TD; A-->B"


@pytest.fixture
def long_filler():
    """Plain prose with no Markdown features, well past the short-content bar."""
    return "lorem ipsum dolor sit amet " * 80
