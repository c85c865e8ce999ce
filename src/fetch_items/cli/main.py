"""CLI (Typer) de fetch-items.

Por qué Typer + Rich:
- Typer da parsing/ayuda sin boilerplate.
- Rich pinta las secciones con el color de cada grupo.
"""

from __future__ import annotations

import asyncio
import logging
import sys

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from fetch_items.adapters.json_exporter import dump_groups_json
from fetch_items.cli.doctor import run_doctor
from fetch_items.cli.ui_components import print_banner, render_state
from fetch_items.core.config import AppSettings
from fetch_items.core.domain.models import FetchStatus
from fetch_items.core.services.items_view_model import ItemsViewModel

app = typer.Typer(no_args_is_help=True, help="Fetch, group and display the hiring item list.")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def show(
    url: str | None = typer.Option(None, "--url", help="Override the configured endpoint URL."),
    as_json: bool = typer.Option(False, "--json", help="Print the grouped items as JSON."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the banner."),
) -> None:
    """Fetch the item list and show it grouped by List ID."""

    settings = AppSettings()
    view_model = ItemsViewModel(settings=settings, endpoint_url=url)

    if as_json:
        state = asyncio.run(view_model.fetch_items())
        if state.status is FetchStatus.FAILURE:
            _err_console.print(f"[red]{escape(state.error_message or '')}[/red]")
            raise typer.Exit(code=1)
        sys.stdout.write(dump_groups_json(state.groups))
        return

    if not no_banner:
        print_banner(_console)
    view_model.subscribe(lambda state: render_state(_console, state))
    state = asyncio.run(view_model.fetch_items())
    view_model.unsubscribe()
    if state.status is FetchStatus.FAILURE:
        raise typer.Exit(code=1)


@app.command()
def doctor() -> None:
    """Check configuration and endpoint connectivity."""

    if not run_doctor(AppSettings(), console=_console):
        raise typer.Exit(code=1)


def run() -> None:
    app()
