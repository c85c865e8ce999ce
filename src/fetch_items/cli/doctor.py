"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

from rich.console import Console
from rich.table import Table

from fetch_items.adapters.fetch_client import FetchClient, validate_url
from fetch_items.core.config import AppSettings
from fetch_items.core.domain.errors import FetchError

_console = Console()


async def _check_endpoint(client: FetchClient, url: str) -> tuple[bool, str]:
    try:
        items = await client.fetch_items(url)
    except FetchError as exc:
        return False, exc.message
    return True, f"{len(items)} items decoded"


def _check_url(url: str) -> tuple[bool, str]:
    try:
        validate_url(url)
    except FetchError as exc:
        return False, exc.message
    return True, "OK"


def run_doctor(
    settings: AppSettings | None = None,
    *,
    client: FetchClient | None = None,
    console: Console | None = None,
) -> bool:
    """Run baseline diagnostics; returns True when every check passed."""

    settings = settings or AppSettings()
    client = client or FetchClient(settings=settings)
    console = console or _console

    table = Table(title="fetch-items Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Log level", "OK", settings.log_level)

    ok_url, detail_url = _check_url(settings.endpoint_url)
    table.add_row("Endpoint URL", "OK" if ok_url else "FAIL", detail_url if not ok_url else settings.endpoint_url)

    ok_http = False
    if ok_url:
        ok_http, detail_http = asyncio.run(_check_endpoint(client, settings.endpoint_url))
        table.add_row("Endpoint fetch", "OK" if ok_http else "FAIL", detail_http)

    console.print(table)
    return ok_url and ok_http
