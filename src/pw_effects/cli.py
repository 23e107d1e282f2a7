"""
Command-line interface for pw_effects.

Commands:
- crawl: Build the substance → effect map and write it to disk
- show-config: Print the effective configuration
"""

import asyncio
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from pw_effects.config import Settings
from pw_effects.errors import CrawlerError
from pw_effects.log import configure_logging
from pw_effects.log import console as log_console
from pw_effects.pipeline import run_pipeline
from pw_effects.progress import NullProgress, RichProgress

app = typer.Typer(
    name="pw-effects",
    help="Crawl PsychonautWiki effect relationships for TripSit substances",
    no_args_is_help=True,
)
console = Console()


def _load_settings(**overrides) -> Settings:
    try:
        return Settings(**{key: value for key, value in overrides.items() if value is not None})
    except ValidationError as e:
        console.print(f"[bold red]Invalid configuration:[/] {e}")
        raise typer.Exit(code=2) from e


@app.command()
def crawl(
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Output JSON file (default: elist.json)"
    ),
    limit: int | None = typer.Option(
        None, "--limit", "-l", min=1, help="Maximum number of candidate names"
    ),
    batch_size: int | None = typer.Option(
        None, "--batch-size", "-b", min=1, help="Concurrent lookups per resolution wave"
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="DEBUG, INFO, WARNING or ERROR"
    ),
    progress: bool = typer.Option(
        True, "--progress/--no-progress", help="Show progress bars"
    ),
):
    """Fetch the catalog, resolve names, extract effects and save them."""
    settings = _load_settings(
        output_path=output,
        name_limit=limit,
        batch_size=batch_size,
        log_level=log_level.upper() if log_level else None,
    )
    configure_logging(settings.log_level)

    console.print("[bold blue]Running..[/]")
    reporter = RichProgress(console=log_console) if progress else NullProgress()
    try:
        with reporter:
            path = asyncio.run(run_pipeline(settings, progress=reporter))
    except CrawlerError as e:
        console.print(f"[bold red]Error:[/] {e}")
        raise typer.Exit(code=1) from e

    console.print(f"[bold green]Done, saved to {path}![/]")


@app.command()
def show_config():
    """Print the effective configuration."""
    settings = _load_settings()
    table = Table(title="pw-effects configuration", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in settings.summary().items():
        table.add_row(key, value)
    console.print(table)


if __name__ == "__main__":
    app()
