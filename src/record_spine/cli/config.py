"""
CLI: ``record-spine config`` — configuration inspection.
"""

from __future__ import annotations

import typer

from record_spine.cli.utils import console, print_error, print_table
from record_spine.core.errors import ConfigError

app = typer.Typer(no_args_is_help=True)


@app.command("show")
def show_config(
    format: str = typer.Option("table", "--format", "-f", help="Output format: table, json, env"),
) -> None:
    """Show current configuration."""
    from record_spine.core.settings import get_settings

    settings = get_settings()

    if format == "json":
        console.print_json(settings.model_dump_json())
        return

    if format == "env":
        for key, value in sorted(settings.model_dump().items()):
            console.print(f"RECORD_SPINE_{key.upper()}={value}")
        return

    rows = [{"setting": key, "value": value} for key, value in settings.model_dump().items()]
    print_table(rows, title="Settings")


@app.command("validate")
def validate_config() -> None:
    """Load settings from the environment and report problems."""
    from record_spine.core.settings import get_settings, reset_settings

    reset_settings()
    try:
        get_settings()
    except ConfigError as e:
        print_error(e, prefix="Configuration Error")
        raise typer.Exit(code=1) from e
    console.print("[green]Configuration OK[/green]")
