"""CLI entry point for pasteview."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import structlog
import typer
import yaml
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

from pasteview.config import PasteviewConfig, load_config
from pasteview.config.loader import DEFAULT_CONFIG_TEMPLATE
from pasteview.detect import explain_detection, normalize_content_type, resolve_content_type
from pasteview.render import render_preview

app = typer.Typer(
    name="pasteview",
    help="Detect what a paste is and render it as a previewable HTML page.",
)

config_app = typer.Typer(help="Manage pasteview configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: PasteviewConfig | None = None

# Diagnostics go to stderr; stdout carries only the detected type or document.
err_console = Console(stderr=True)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def _json_formatter() -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
    )


def _configure_logging(cfg: PasteviewConfig) -> None:
    if cfg.log_format == "json":
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(_json_formatter())
    else:
        handler = RichHandler(console=err_console, show_path=False)
    logging.basicConfig(level=_LOG_LEVELS[cfg.log_level], handlers=[handler], force=True)


def _get_config() -> PasteviewConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to pasteview.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    _configure_logging(_config)


def _read_content(file: str) -> str:
    """Read paste content from a path, or stdin when file is '-'."""
    if file == "-":
        return sys.stdin.read()
    return Path(file).read_text(encoding="utf-8")


def _checked_hint(type_hint: str | None) -> str | None:
    if type_hint is not None and normalize_content_type(type_hint) is None:
        err_console.print(
            f"[yellow]Unrecognized type {escape(repr(type_hint))}, detecting instead.[/yellow]"
        )
    return type_hint


@app.command()
def detect(
    file: str = typer.Argument(..., help="File to classify, or - for stdin"),
    type_hint: Annotated[
        str | None, typer.Option("--type", "-t", help="Declared type (md, svg, html, ...)")
    ] = None,
    explain: bool = typer.Option(False, "--explain", help="Show which rule decided"),
) -> None:
    """Print the content type a paste resolves to."""
    try:
        content = _read_content(file)
    except OSError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    hint = normalize_content_type(_checked_hint(type_hint))
    if hint is not None and hint.is_concrete:
        rule, features, content_type = "declared", [], hint
    else:
        result = explain_detection(content)
        rule, features, content_type = result.rule, result.markdown_features, result.content_type

    if not explain:
        typer.echo(content_type.value)
        return

    rprint(
        Panel(
            f"[dim]Type:[/dim]      [bold]{content_type.value}[/bold]\n"
            f"[dim]Rule:[/dim]      {rule}\n"
            f"[dim]Markdown:[/dim]  {', '.join(features) if features else 'none'}\n"
            f"[dim]Length:[/dim]    {len(content)} chars",
            title="Detection",
            border_style="blue",
        )
    )


@app.command()
def render(
    file: str = typer.Argument(..., help="File to render, or - for stdin"),
    type_hint: Annotated[
        str | None, typer.Option("--type", "-t", help="Declared type (md, svg, html, ...)")
    ] = None,
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Write HTML to file")
    ] = None,
) -> None:
    """Render a paste as a complete HTML preview document."""
    cfg = _get_config()
    try:
        content = _read_content(file)
    except OSError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    content_type = resolve_content_type(content, _checked_hint(type_hint))
    document = render_preview(content, content_type, cfg)

    if output:
        try:
            Path(output).write_text(document, encoding="utf-8")
        except OSError as e:
            err_console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        rprint(
            Panel(
                f"[dim]File:[/dim]  {output}\n"
                f"[dim]Type:[/dim]  {content_type.value}\n"
                f"[dim]Size:[/dim]  {len(document.encode('utf-8'))} bytes",
                title="Render Complete",
                border_style="green",
            )
        )
    else:
        typer.echo(document)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default pasteview.yaml in current directory."""
    target = Path("pasteview.yaml")
    if target.exists() and not force:
        rprint("[yellow]pasteview.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")
