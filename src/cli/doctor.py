"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
from urllib.parse import urlsplit

import typer
from rich.console import Console
from rich.table import Table

from adapters.control_api.households import get_households
from adapters.http_client import HttpxTransport, build_async_client
from core.config import AppSettings
from core.domain.models import HouseholdList
from core.domain.outcome import Failure
from core.services.dispatcher import Dispatcher

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


async def _check_households(token: str, settings: AppSettings) -> tuple[bool, str]:
    """Round trip real por el Dispatcher: GET households."""

    async with HttpxTransport(settings=settings) as transport:
        outcome = await Dispatcher(transport).perform_request(get_households(token, settings=settings))

    if isinstance(outcome, Failure):
        api_error = outcome.api_error()
        if api_error is not None:
            return False, f"HTTP {outcome.status_code}: {api_error.error_code}"
        return False, str(outcome.cause)

    try:
        households = outcome.parse(HouseholdList).households
    except ValueError as exc:
        return False, str(exc)
    return True, f"{len(households)} household(s)"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Sonos Control Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    parts = urlsplit(settings.api_base_url)
    base_ok = parts.scheme in ("http", "https") and bool(parts.netloc)
    table.add_row("API base_url", "OK" if base_ok else "FAIL", settings.api_base_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    token = settings.access_token.get_secret_value() if settings.access_token else ""
    if token:
        table.add_row("Access token", "OK", "SONOS_CONTROL_ACCESS_TOKEN set")
    else:
        table.add_row("Access token", "OPTIONAL", "No token set -> only reachability is checked")

    # Connectivity (best-effort)
    if base_ok and token:
        ok_api, detail_api = asyncio.run(_check_households(token, settings))
        table.add_row("Control API", "OK" if ok_api else "FAIL", detail_api)
    elif base_ok:
        ok_http, detail_http = asyncio.run(_check_http(settings.api_base_url, settings))
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not base_ok:
        _console.print("\n[yellow]Note:[/yellow] SONOS_CONTROL_API_BASE_URL must be an http(s) URL.")
