"""Tests for render_preview and the per-type preview variants."""

import pytest

from pasteview import render_preview
from pasteview.config.models import AssetConfig, MermaidConfig, PasteviewConfig
from pasteview.detect.models import CONCRETE_TYPES, ContentType
from pasteview.render.page import PageParts, base_page
from pasteview.render.previews import PREVIEWS, Preview, UnresolvedContentTypeError


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


class TestDispatch:
    def test_registry_covers_concrete_types(self):
        assert set(PREVIEWS) == set(CONCRETE_TYPES)
        assert ContentType.auto not in PREVIEWS

    def test_variants_share_base(self):
        assert all(isinstance(p, Preview) for p in PREVIEWS.values())
        assert all(p.content_type is t for t, p in PREVIEWS.items())

    def test_auto_is_rejected(self):
        with pytest.raises(UnresolvedContentTypeError):
            render_preview("# Title", ContentType.auto)

    @pytest.mark.parametrize("bad", ["auto", "bogus", "", None])
    def test_unknown_types_are_rejected(self, bad):
        with pytest.raises(ValueError):
            render_preview("x", bad)

    def test_string_type_accepted(self):
        out = render_preview("# Title", "markdown")
        assert '<article class="markdown-body">' in out

    @pytest.mark.parametrize("content_type", CONCRETE_TYPES)
    def test_every_type_yields_document(self, content_type):
        out = render_preview("<b>x</b>", content_type)
        assert out.startswith("<!DOCTYPE html>")
        assert out.rstrip().endswith("</html>")
        assert "prefers-color-scheme: dark" in out

    @pytest.mark.parametrize("content_type", CONCRETE_TYPES)
    def test_none_content_does_not_raise(self, content_type):
        assert render_preview(None, content_type).startswith("<!DOCTYPE html>")


# ---------------------------------------------------------------------------
# html
# ---------------------------------------------------------------------------


class TestHtmlPreview:
    def test_full_document_passes_through(self, html_document):
        assert render_preview(html_document, ContentType.html) == html_document

    def test_html_tag_document_passes_through(self):
        doc = "<html><body><p>hi</p></body></html>"
        assert render_preview(doc, ContentType.html) == doc

    def test_passthrough_keeps_surrounding_whitespace(self, html_document):
        padded = "\n  " + html_document + "\n"
        assert render_preview(padded, ContentType.html) == padded

    def test_fragment_is_wrapped(self):
        out = render_preview("<b>hi</b>", ContentType.html)
        assert out.startswith("<!DOCTYPE html>")
        assert '<div class="container"><b>hi</b></div>' in out
        assert "<title>HTML Preview</title>" in out

    def test_fragment_scripts_untouched(self):
        out = render_preview("<script>console.log(1)</script>", ContentType.html)
        assert "<script>console.log(1)</script>" in out


# ---------------------------------------------------------------------------
# markdown
# ---------------------------------------------------------------------------


class TestMarkdownPreview:
    def test_article_shell(self, markdown_note):
        out = render_preview(markdown_note, ContentType.markdown)
        assert '<article class="markdown-body">' in out
        assert "<h1>Release notes</h1>" in out
        assert "<title>Markdown Preview</title>" in out

    def test_highlight_assets(self, markdown_note, sample_config):
        out = render_preview(markdown_note, ContentType.markdown)
        assert f'href="{sample_config.assets.highlight_css}"' in out
        assert f'src="{sample_config.assets.highlight_js}"' in out
        assert "window.hljs.highlightElement(block)" in out

    def test_mermaid_script_guards_and_logs(self, markdown_note, sample_config):
        out = render_preview(markdown_note, ContentType.markdown)
        assert f'src="{sample_config.assets.mermaid_js}"' in out
        assert "if (window.mermaid)" in out
        assert "console.error('Mermaid render failed', e)" in out
        assert '"securityLevel": "loose"' in out
        assert '"startOnLoad": false' in out

    def test_mermaid_fence_escaped(self, mermaid_source):
        out = render_preview(f"```mermaid\n{mermaid_source}\n```\n", ContentType.markdown)
        assert '<div class="mermaid">graph TD; A--&gt;B' in out
        assert "A-->B" not in out

    def test_svg_fence_raw(self):
        svg = '<svg xmlns="http://www.w3.org/2000/svg"><rect width="4" height="4"/></svg>'
        out = render_preview(f"# Logo\n\n```svg\n{svg}\n```\n", ContentType.markdown)
        assert f'<div class="embedded-svg">{svg}' in out

    def test_code_block_left_for_highlighting(self, markdown_note):
        out = render_preview(markdown_note, ContentType.markdown)
        assert '<pre><code class="language-python">x = 1 &lt; 2' in out

    def test_malformed_markdown_degrades(self):
        out = render_preview("# \n\n[broken](\n\n```\nno close", ContentType.markdown)
        assert '<article class="markdown-body">' in out


# ---------------------------------------------------------------------------
# svg
# ---------------------------------------------------------------------------


class TestSvgPreview:
    def test_raw_markup_in_container(self, standalone_svg):
        out = render_preview(standalone_svg, ContentType.svg)
        assert f'<div class="svg-container">{standalone_svg}</div>' in out

    def test_constrained_to_viewport(self, standalone_svg):
        out = render_preview(standalone_svg, ContentType.svg)
        assert ".svg-container svg { max-width: 100%; height: auto; display: block; }" in out

    def test_no_client_scripts(self, standalone_svg):
        out = render_preview(standalone_svg, ContentType.svg)
        assert "mermaid.min.js" not in out
        assert "highlight.min.js" not in out

    def test_empty_payload(self):
        out = render_preview("", ContentType.svg)
        assert '<div class="svg-container"></div>' in out


# ---------------------------------------------------------------------------
# mermaid
# ---------------------------------------------------------------------------


class TestMermaidPreview:
    def test_escaped_source(self, mermaid_source):
        out = render_preview(mermaid_source, ContentType.mermaid)
        assert '<div class="mermaid">graph TD; A--&gt;B</div>' in out

    def test_script_included(self, mermaid_source, sample_config):
        out = render_preview(mermaid_source, ContentType.mermaid)
        assert f'src="{sample_config.assets.mermaid_js}"' in out
        assert "window.mermaid.run" in out
        assert "console.error('Mermaid render failed', e)" in out
        assert "highlight.min.js" not in out

    def test_markup_in_source_is_escaped(self):
        out = render_preview('graph TD; A["<img src=x>"]-->B', ContentType.mermaid)
        assert "<img src=x>" not in out
        assert "&lt;img src=x&gt;" in out

    def test_empty_payload(self):
        out = render_preview("", ContentType.mermaid)
        assert '<div class="mermaid"></div>' in out


# ---------------------------------------------------------------------------
# Configuration and the shared shell
# ---------------------------------------------------------------------------


class TestConfiguredRendering:
    def test_custom_assets(self):
        cfg = PasteviewConfig(assets=AssetConfig(mermaid_js="https://cdn.local/mermaid.js"))
        out = render_preview("graph TD; A-->B", ContentType.mermaid, cfg)
        assert 'src="https://cdn.local/mermaid.js"' in out

    def test_custom_mermaid_settings(self):
        cfg = PasteviewConfig(mermaid=MermaidConfig(security_level="strict"))
        out = render_preview("graph TD; A-->B", ContentType.mermaid, cfg)
        assert '"securityLevel": "strict"' in out

    @pytest.mark.parametrize(
        "content,content_type",
        [
            ("graph TD; A-->B", ContentType.mermaid),
            ("# Flow\n\n```mermaid\ngraph TD; A-->B\n```\n", ContentType.markdown),
        ],
    )
    def test_run_selector_matches_diagram_containers(self, content, content_type):
        out = render_preview(content, content_type)
        assert 'querySelector: ".mermaid"' in out
        assert '<div class="mermaid">' in out

    def test_selector_is_not_configurable(self):
        # Stale keys from older config files are ignored.
        cfg = PasteviewConfig(mermaid={"selector": ".diagram"})
        out = render_preview("graph TD; A-->B", ContentType.mermaid, cfg)
        assert ".diagram" not in out
        assert 'querySelector: ".mermaid"' in out


class TestBasePage:
    def test_parts_are_placed(self):
        out = base_page(
            PageParts(title="T", head="<!-- head -->", body="<main>B</main>", scripts="<!-- s -->")
        )
        assert out.index("<!-- head -->") < out.index("</head>")
        assert out.index("<main>B</main>") < out.index("<!-- s -->") < out.index("</body>")

    def test_title_escaped(self):
        out = base_page(PageParts(title="<x>", body=""))
        assert "<title>&lt;x&gt;</title>" in out

    def test_color_scheme_aware(self):
        out = base_page(PageParts(title="T", body=""))
        assert "color-scheme: light dark" in out
        assert "@media (prefers-color-scheme: dark)" in out
