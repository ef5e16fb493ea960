"""
CLI: ``record-spine demo | process | first`` — drive the record core.
"""

from __future__ import annotations

import typer

from record_spine.cli.utils import make_policy, output_result, print_dict, print_error
from record_spine.core.errors import CallerAbort
from record_spine.core.generics import first_or_zero
from record_spine.core.logging import get_logger
from record_spine.core.narrowing import narrow
from record_spine.core.record import ProcessingPolicy, Record, new_record
from record_spine.core.result import Err, Ok

logger = get_logger(__name__)

GREETING = "Hello, record-spine!"


def _require_ok(record: Record, input: str) -> str:
    """Process ``input``; any error aborts the whole run."""
    match record.process(input):
        case Ok(message):
            return message
        case Err(error):
            raise CallerAbort(
                f"processing {input!r} failed: {error}",
                cause=error,
            ).with_context(label=record.label, operation="process")


def run_demo(policy: ProcessingPolicy) -> dict[str, object]:
    """Run the full sample orchestration once and return what it derived.

    Raises:
        CallerAbort: if either ``process`` call returns an error
    """
    numbers = [1, 2, 3, 4, 5]

    record = new_record("example", policy=policy)
    record.label = "updated"

    data = record.identity()
    _require_ok(record, data)

    held: object = "string value"
    text, ok = narrow(held, str)
    if ok:
        typer.echo(text)

    first = first_or_zero(numbers, int)
    final = _require_ok(record, "data")

    for idx, num in enumerate(numbers):
        typer.echo(f"Index: {idx}, Value: {num}, First: {first}")

    match GREETING:
        case "Hello":
            typer.echo("Matched Hello")
        case _:
            typer.echo("Default case")

    return {
        "record": str(record),
        "identity": data,
        "final_message": final,
        "first": first,
        "narrowed": text,
    }


def demo(
    attempts: int | None = typer.Option(None, "--attempts", "-n", min=0, help="Attempts per process call."),
    delay: float | None = typer.Option(None, "--delay", "-d", min=0.0, help="Seconds to wait after each attempt."),
) -> None:
    """Construct a record, process its identity and "data", and show the results."""
    policy = make_policy(attempts=attempts, delay=delay)
    try:
        summary = run_demo(policy)
    except CallerAbort as e:
        logger.error("demo_aborted", error=e.to_dict())
        print_error(e, prefix="Aborted")
        raise typer.Exit(code=1) from e
    print_dict(summary, title="Demo")


def process(
    input: str = typer.Argument(..., help="Text to process."),
    label: str = typer.Option("example", "--label", "-l", help="Record label."),
    attempts: int | None = typer.Option(None, "--attempts", "-n", min=0, help="Attempts to make."),
    delay: float | None = typer.Option(None, "--delay", "-d", min=0.0, help="Seconds to wait after each attempt."),
    not_ready: bool = typer.Option(False, "--not-ready", help="Clear the readiness flag."),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Process INPUT once with a fresh record."""
    policy = make_policy(attempts=attempts, delay=delay, ready=False if not_ready else None)
    record = new_record(label, policy=policy)
    result = record.process(input).map(
        lambda message: {"label": record.identity(), "message": message}
    )
    output_result(result, as_json=json_out, title="Process")


def first(
    items: list[int] | None = typer.Argument(None, help="Integers to select from."),
) -> None:
    """Print the first of ITEMS, or 0 when none are given."""
    typer.echo(str(first_or_zero(items or [], int)))
