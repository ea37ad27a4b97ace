from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class AssetConfig(BaseModel):
    """Client-side libraries referenced by rendered previews."""

    highlight_css: str = (
        "https://cdnjs.cloudflare.com/ajax/libs/highlight.js/11.9.0/styles/github-dark.min.css"
    )
    highlight_js: str = "https://cdnjs.cloudflare.com/ajax/libs/highlight.js/11.9.0/highlight.min.js"
    mermaid_js: str = "https://cdn.jsdelivr.net/npm/mermaid@11.6.0/dist/mermaid.min.js"


class MermaidConfig(BaseModel):
    security_level: Literal["strict", "loose", "antiscript", "sandbox"] = "loose"
    start_on_load: bool = False


class MarkdownConfig(BaseModel):
    # Frozen so it can key the engine cache.
    model_config = ConfigDict(frozen=True)

    html: bool = True
    linkify: bool = True
    typographer: bool = True


class PasteviewConfig(BaseModel):
    assets: AssetConfig = Field(default_factory=AssetConfig)
    mermaid: MermaidConfig = Field(default_factory=MermaidConfig)
    markdown: MarkdownConfig = Field(default_factory=MarkdownConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
