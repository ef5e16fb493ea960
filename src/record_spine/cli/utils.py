"""
CLI utility helpers — output formatting and policy construction.
"""

from __future__ import annotations

import json
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from record_spine.core.errors import RecordSpineError
from record_spine.core.record import ProcessingPolicy
from record_spine.core.result import Err, Ok, Result
from record_spine.core.settings import get_settings
from record_spine.execution.retry import ConstantBackoff

console = Console()
err_console = Console(stderr=True)


# ── Policy helper ────────────────────────────────────────────────────────


def make_policy(
    *,
    attempts: int | None = None,
    delay: float | None = None,
    ready: bool | None = None,
) -> ProcessingPolicy:
    """Build a ``ProcessingPolicy`` from settings plus CLI overrides.

    Progress lines go through ``typer.echo`` so they land on stdout.
    """
    settings = get_settings()
    return ProcessingPolicy(
        ready=settings.ready if ready is None else ready,
        strategy=ConstantBackoff(
            max_retries=settings.max_attempts if attempts is None else attempts,
            delay=settings.attempt_delay if delay is None else delay,
        ),
        emit=typer.echo,
    )


# ── Output helpers ───────────────────────────────────────────────────────


def print_error(error: Exception, *, prefix: str = "Error") -> None:
    """Render an error on stderr, with its category when it has one."""
    if isinstance(error, RecordSpineError):
        err_console.print(f"[bold red]{prefix}[/bold red] ({error.category.value}): {escape(error.message)}")
    else:
        err_console.print(f"[bold red]{prefix}[/bold red]: {escape(str(error))}")


def output_result(
    result: Result[Any],
    *,
    as_json: bool = False,
    title: str = "",
) -> None:
    """Render a ``Result`` to the terminal; ``Err`` exits with code 1."""
    match result:
        case Err(error):
            if as_json:
                console.print_json(json.dumps(result.to_dict(), default=str))
            else:
                print_error(error)
            raise typer.Exit(code=1)
        case Ok(value):
            data = value if isinstance(value, dict) else {"value": value}

    if as_json:
        console.print_json(json.dumps(data, default=str))
        return
    print_dict(data, title=title)


def print_dict(data: dict[str, Any], *, title: str = "") -> None:
    """Render a single dict as key-value pairs."""
    if title:
        console.print(f"[bold]{title}[/bold]")
    for k, v in data.items():
        console.print(f"  [cyan]{k}[/cyan]: {escape(str(v))}")


def print_table(rows: list[dict[str, Any]], *, title: str = "") -> None:
    """Render a list of dicts as a Rich table."""
    if not rows:
        console.print("[dim]No items.[/dim]")
        return
    table = Table(title=title or None, show_lines=False, pad_edge=False)
    for col in rows[0]:
        table.add_column(col, overflow="fold")
    for row in rows:
        table.add_row(*(str(v) for v in row.values()))
    console.print(table)
