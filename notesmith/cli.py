"""CLI entry point for notesmith."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from notesmith.checks import NoteChecker
from notesmith.config import NotesmithConfig, load_config
from notesmith.config.loader import DEFAULT_CONFIG_TEMPLATE
from notesmith.errors import NotesmithError
from notesmith.site import SiteBuilder

app = typer.Typer(
    name="notesmith",
    help="Pre-commit checks and website generation for a markdown notes repository.",
)

config_app = typer.Typer(help="Manage notesmith configuration.")
app.add_typer(config_app, name="config")

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

# Global state
_config: NotesmithConfig | None = None


def _get_config() -> NotesmithConfig:
    if _config is None:
        return load_config()
    return _config


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS[level],
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to notesmith.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    _setup_logging(_config.log_level)


@app.command()
def check() -> None:
    """Validate notes and update last_modified (run as a pre-commit hook)."""
    cfg = _get_config()
    rprint("Performing custom checks and adjustments")

    try:
        report = NoteChecker(Path.cwd(), cfg).run()
    except NotesmithError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except Exception as e:
        rprint(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(title="Checks")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")
    table.add_row("Directories", str(report.directories))
    table.add_row("Notes", str(report.notes))
    table.add_row("Stamped", str(len(report.stamped)))
    table.add_row("Duration", f"{report.duration:.2f}s")
    rprint(table)

    for path in report.stamped:
        rprint(f"  [dim]last_modified:[/dim] {escape(path)}")
    rprint("Finished custom checks and adjustments")


@app.command()
def build() -> None:
    """Regenerate website docs, images and sidebars from the notes."""
    cfg = _get_config()

    try:
        report = SiteBuilder(Path.cwd(), cfg).build()
    except NotesmithError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except Exception as e:
        rprint(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(title="Website Data")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")
    table.add_row("Docs", str(report.docs))
    table.add_row("Image entries", str(report.image_entries))
    table.add_row("Sidebar items", str(report.sidebar_items))
    table.add_row("Duration", f"{report.duration:.2f}s")
    rprint(table)
    rprint("Finished writing website data")


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default notesmith.yaml in current directory."""
    target = Path("notesmith.yaml")
    if target.exists() and not force:
        rprint("[yellow]notesmith.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
