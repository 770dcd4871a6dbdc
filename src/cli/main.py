"""CLI de diagnóstico (Typer).

La librería no necesita CLI; esto solo expone `doctor` para validar la
configuración y el token contra la API real.
"""

from __future__ import annotations

import typer

from cli import doctor
from core.config import AppSettings
from core.logging import setup_logging

app = typer.Typer(no_args_is_help=True, help="Sonos Control API client tooling.")
app.add_typer(doctor.app, name="doctor")


@app.callback()
def _configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every dispatched request."),
) -> None:
    settings = AppSettings()
    setup_logging("DEBUG" if verbose else settings.log_level, json_logs=settings.log_json)


def run() -> None:
    app()
