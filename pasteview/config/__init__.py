from .loader import load_config
from .models import (
    AssetConfig,
    MarkdownConfig,
    MermaidConfig,
    PasteviewConfig,
)

__all__ = [
    "AssetConfig",
    "MarkdownConfig",
    "MermaidConfig",
    "PasteviewConfig",
    "load_config",
]
