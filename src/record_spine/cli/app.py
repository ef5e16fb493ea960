"""
Root Typer application for the record-spine CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

from record_spine.cli import records
from record_spine.cli.config import app as config_app
from record_spine.cli.utils import print_error
from record_spine.core.errors import ConfigError
from record_spine.core.logging import configure_logging
from record_spine.core.settings import get_settings

app = Typer(
    name="record-spine",
    help="record-spine — process records with bounded attempts.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from importlib.metadata import PackageNotFoundError, version as pkg_version

        from record_spine import __version__

        try:
            v = pkg_version("record-spine")
        except PackageNotFoundError:
            v = __version__
        typer.echo(f"record-spine {v}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Override RECORD_SPINE_LOG_LEVEL."),
    json_logs: bool | None = typer.Option(None, "--json-logs/--console-logs", help="Log format."),
) -> None:
    """record-spine CLI — run the record demo, process input, inspect config."""
    try:
        settings = get_settings()
        configure_logging(
            level=log_level or settings.log_level,
            json_format=settings.json_logs if json_logs is None else json_logs,
            service=settings.service,
        )
    except (ConfigError, ValueError) as e:
        print_error(e, prefix="Configuration Error")
        raise typer.Exit(code=1) from e


# ── Command registration ─────────────────────────────────────────────────

app.command("demo")(records.demo)
app.command("process")(records.process)
app.command("first")(records.first)
app.add_typer(config_app, name="config", help="Configuration management.")
