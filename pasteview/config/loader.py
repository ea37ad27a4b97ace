"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import PasteviewConfig

_ENV_VAR = re.compile(r"\$\{(\w+)\}")


def config_paths() -> list[Path]:
    """Implicit config locations, project-local first, then user-global."""
    return [Path("pasteview.yaml"), Path.home() / ".pasteview" / "config.yaml"]


def load_config(cli_path: str | None = None) -> PasteviewConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults.

    An explicit ``cli_path`` must exist. Empty files are skipped.
    """
    if cli_path:
        path = Path(cli_path)
        if not path.is_file():
            raise ValueError(f"Config file not found: {path}")
        return _parse(path, _read_mapping(path) or {})

    for path in config_paths():
        if not path.is_file():
            continue
        raw = _read_mapping(path)
        if raw is not None:
            return _parse(path, raw)

    return PasteviewConfig()


def _read_mapping(path: Path) -> dict | None:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if raw is not None and not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping")
    return raw


def _parse(path: Path, raw: dict) -> PasteviewConfig:
    try:
        return PasteviewConfig.model_validate(_expand_env_vars(raw))
    except ValidationError as e:
        raise ValueError(f"Invalid config in {path}: {e}") from e


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings; unset vars become ""."""
    if isinstance(obj, str):
        return _ENV_VAR.sub(lambda m: os.environ.get(m.group(1), ""), obj)
    if isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `pasteview config init`
DEFAULT_CONFIG_TEMPLATE = """\
# pasteview.yaml

# Client-side libraries loaded by Markdown and Mermaid previews
assets:
  highlight_css: "https://cdnjs.cloudflare.com/ajax/libs/highlight.js/11.9.0/styles/github-dark.min.css"
  highlight_js: "https://cdnjs.cloudflare.com/ajax/libs/highlight.js/11.9.0/highlight.min.js"
  mermaid_js: "https://cdn.jsdelivr.net/npm/mermaid@11.6.0/dist/mermaid.min.js"

# Diagram rendering
mermaid:
  security_level: "loose"      # strict | loose | antiscript | sandbox
  start_on_load: false

# Markdown engine options
markdown:
  html: true                   # pass raw HTML through
  linkify: true                # autolink bare URLs
  typographer: true            # smart quotes and dashes

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
