"""
CLI layer for record-spine.

Provides a Typer application whose commands delegate to ``record_spine.core``.
This package handles only terminal transport: argument parsing, coloured
output, and exit codes.

Entry point::

    record-spine --help
"""

from record_spine.cli.app import app

__all__ = ["app"]
