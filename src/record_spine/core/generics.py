"""Generic sequence helpers.

Python has no per-type zero value, so the caller names the element type
when an empty sequence must still produce a typed value: ``item_type()`` is
the zero value (``int() == 0``, ``str() == ""``, ``list() == []``).
Without a type the zero value is ``None``.

Examples:
    >>> first_or_zero([1, 2, 3, 4, 5])
    1
    >>> first_or_zero([], int)
    0
    >>> first_or_zero([], str)
    ''
    >>> first_or_zero([]) is None
    True
"""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar, overload

T = TypeVar("T")


@overload
def first_or_zero(items: Sequence[T], item_type: Callable[[], T]) -> T: ...


@overload
def first_or_zero(items: Sequence[T], item_type: None = None) -> T | None: ...


def first_or_zero(items: Sequence[T], item_type: Callable[[], T] | None = None) -> T | None:
    """Return the first element of ``items``, or the zero value of its type.

    Args:
        items: Ordered, homogeneous sequence
        item_type: Element type (or any zero-argument factory) used to build
            the zero value when ``items`` is empty

    Returns:
        ``items[0]`` if non-empty, else ``item_type()``, else ``None``
    """
    if len(items) == 0:
        if item_type is None:
            return None
        return item_type()
    return items[0]


__all__ = ["first_or_zero"]
