"""CLI entry point for crafty_novels."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from crafty_novels.config import CraftyConfig, load_config
from crafty_novels.config.loader import DEFAULT_CONFIG_TEMPLATE
from crafty_novels.converter import BookConverter
from crafty_novels.errors import CraftyNovelsError
from crafty_novels.exporter import available_formats
from crafty_novels.importer import available_importers
from crafty_novels.output import DocumentWriter
from crafty_novels.reader import load_text
from crafty_novels.syntax import Frontmatter, StyleEnd, StyleStart, Text

app = typer.Typer(
    name="crafty-novels",
    help="Convert Minecraft books exported by Stendhal into HTML.",
)

config_app = typer.Typer(help="Manage crafty_novels configuration.")
app.add_typer(config_app, name="config")

# Status and errors go to stderr so stdout carries only the document.
err_console = Console(stderr=True)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

# Global state
_config: CraftyConfig | None = None


def _get_config() -> CraftyConfig:
    if _config is None:
        return load_config()
    return _config


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS[level],
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to crafty_novels.yaml")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log at debug level")
    ] = False,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    _configure_logging("debug" if verbose else _config.log_level)


@app.command()
def convert(
    source: str = typer.Argument(..., help="Stendhal export file, or - for stdin"),
    output: str | None = typer.Option(None, "--output", "-o", help="Write the result to a file"),
    fmt: str | None = typer.Option(None, "--format", "-f", help="Output format (html, debug)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Convert but do not write the file"),
) -> None:
    """Convert a Stendhal export into HTML (or another registered format)."""
    cfg = _get_config()
    try:
        converter = BookConverter(cfg)
        result = converter.convert_file(source, fmt)
    except (CraftyNovelsError, OSError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if output is None:
        typer.echo(result.output, nl=False)
        return

    try:
        path = DocumentWriter(cfg.output).write(result.output, output, dry_run=dry_run)
    except OSError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    verb = "Would write" if dry_run else "Written to"
    err_console.print(
        Panel(
            f"[dim]Source:[/dim]  {escape(result.source_path)}\n"
            f"[dim]Title:[/dim]   {escape(result.title or '(untitled)')}\n"
            f"[dim]Author:[/dim]  {escape(result.author or '(unknown)')}\n"
            f"[dim]Pages:[/dim]   {result.page_count}\n"
            f"[dim]Format:[/dim]  {result.format}",
            title=f"{verb} {escape(str(path))}",
            border_style="yellow" if dry_run else "green",
        )
    )


@app.command()
def tokens(
    source: str = typer.Argument(..., help="Stendhal export file, or - for stdin"),
) -> None:
    """Show the token sequence a Stendhal export produces."""
    cfg = _get_config()
    try:
        token_list = BookConverter(cfg).tokenize(load_text(source))
    except (CraftyNovelsError, OSError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(title=f"Tokens ({len(token_list)})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Token", style="cyan")
    table.add_column("Value")
    for index, token in enumerate(token_list):
        if isinstance(token, Text):
            value = repr(token.content)
        elif isinstance(token, (StyleStart, StyleEnd)):
            value = token.describe().split("(", 1)[1].rstrip(")")
        elif isinstance(token, Frontmatter):
            value = ", ".join(f"{k}={v}" for k, v in token.fields.items())
        else:
            value = ""
        table.add_row(str(index), type(token).__name__, escape(value))
    rprint(table)


@app.command()
def formats() -> None:
    """List supported input and output formats."""
    table = Table(title="Formats")
    table.add_column("Direction", style="cyan")
    table.add_column("Name", style="green")
    for name in available_importers():
        table.add_row("import", name)
    for name in available_formats():
        table.add_row("export", name)
    rprint(table)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default crafty_novels.yaml in current directory."""
    target = Path("crafty_novels.yaml")
    if target.exists() and not force:
        rprint("[yellow]crafty_novels.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
