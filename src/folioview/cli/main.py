"""folioview CLI - Entry point for the fview command."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from folioview import __version__
from folioview.cli.output import print_dashboard
from folioview.core.config import get_settings, load_settings_file
from folioview.dashboard.app import build_dashboard
from folioview.dashboard.page import write_page
from folioview.models import DashboardSettings

app = typer.Typer(
    name="fview",
    help="folioview - Read-only dashboard for a managed portfolio",
    add_completion=False,
)
console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger for CLI runs."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root_logger.addHandler(console_handler)

    # Reduce noise
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def _resolve_settings(config: Optional[Path]) -> DashboardSettings:
    if config is None:
        return get_settings()
    if not config.exists():
        raise typer.BadParameter(f"Config file not found: {config}")
    return load_settings_file(config)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold green]folioview[/bold green] version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(  # noqa: ARG001
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """folioview - Read-only dashboard for a managed portfolio."""
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@app.command()
def render(
    data: Optional[str] = typer.Option(None, "--data", "-d", help="Data directory or base URL"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Output HTML file"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="TOML settings file"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Load the portfolio data and write the dashboard page."""
    setup_logging(verbose)
    settings = _resolve_settings(config)

    document, loaded = build_dashboard(settings, base=data)
    path = write_page(document, out or settings.output_path, settings)

    if loaded is None:
        console.print(f"[red]Failed to load data.[/red] Wrote error page to {path}")
        raise typer.Exit(code=1)

    if loaded.missing:
        console.print(f"[yellow]Missing: {', '.join(loaded.missing)}[/yellow]")
    console.print(f"[green]✓[/green] Dashboard written to {path}")


@app.command()
def show(
    data: Optional[str] = typer.Option(None, "--data", "-d", help="Data directory or base URL"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="TOML settings file"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Print the dashboard in the terminal."""
    setup_logging(verbose)
    settings = _resolve_settings(config)

    _, loaded = build_dashboard(settings, base=data)
    if loaded is None:
        console.print("[red]Failed to load data[/red]")
        raise typer.Exit(code=1)

    print_dashboard(loaded, console, title=settings.title)


@app.command()
def status(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="TOML settings file"),
) -> None:
    """Show version and effective settings."""
    settings = _resolve_settings(config)
    console.print("[bold]folioview Status[/bold]")
    console.print(f"Version: {__version__}")
    console.print(f"Data: {settings.data_base}")
    console.print(f"Output: {settings.output_path}")
    console.print(f"Timeout: {settings.request_timeout:g}s")


if __name__ == "__main__":
    app()
