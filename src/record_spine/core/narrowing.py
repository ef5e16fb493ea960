"""Checked narrowing of loosely typed values.

``narrow`` views a value held as ``object`` as a concrete type and reports
whether that worked, instead of raising on mismatch.

Examples:
    >>> narrow("string value", str)
    ('string value', True)
    >>> narrow(42, str)
    (None, False)
"""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def narrow(value: object, target: type[T]) -> tuple[T | None, bool]:
    """Return ``(value, True)`` if ``value`` is a ``target``, else ``(None, False)``."""
    if isinstance(value, target):
        return value, True
    return None, False


__all__ = ["narrow"]
