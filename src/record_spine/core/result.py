"""
Result[T] envelope for explicit success/failure handling.

``Ok(value)`` or ``Err(error)``: operations that can fail in expected ways
return one of these instead of raising, so the failure is visible in the
signature and the caller picks the policy (abort, log, recover).

Examples:
    >>> Ok(10).map(lambda x: x * 2).unwrap()
    20
    >>> Err(ValueError("bad")).unwrap_or(0)
    0

    Pattern matching:

    >>> match Ok("done"):
    ...     case Ok(value):
    ...         print(value)
    ...     case Err(error):
    ...         print(error)
    done
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from record_spine.core.errors import RecordSpineError


T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the value. Safe for Ok."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Get value or default (always returns value for Ok)."""
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U]:
        """Transform the value if Ok."""
        return Ok(f(self.value))

    def and_then(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """Chain to another Result-returning function."""
        return f(self.value)

    def inspect_err(self, f: Callable[[Exception], None]) -> Result[T]:
        """Call f with error for side effects (no-op for Ok)."""
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"ok": True, "value": self.value}

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[T]):
    """
    Failed result containing an error.

    Transformations short-circuit: ``map`` and ``and_then`` return the same
    error unchanged so it propagates through a chain.
    """

    error: Exception

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Raise the error. Use only when you're sure it's Ok."""
        raise self.error

    def unwrap_or(self, default: T) -> T:
        """Get default since this is Err."""
        return default

    def map(self, f: Callable[[T], U]) -> Result[U]:
        """No-op for Err."""
        return Err(self.error)

    def and_then(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """No-op for Err."""
        return Err(self.error)

    def inspect_err(self, f: Callable[[Exception], None]) -> Result[T]:
        """Call f with error for side effects, return self."""
        f(self.error)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        if isinstance(self.error, RecordSpineError):
            return {"ok": False, "error": self.error.to_dict()}
        return {
            "ok": False,
            "error": {
                "error_type": type(self.error).__name__,
                "message": str(self.error),
            },
        }

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Ok[T] | Err[T]


def from_bool(condition: bool, ok_value: T, error: Exception) -> Result[T]:
    """
    Create Result from boolean condition.

    Examples:
        >>> from_bool(True, "input", ValueError("empty")).unwrap()
        'input'
        >>> from_bool(False, "", ValueError("empty")).is_err()
        True
    """
    if condition:
        return Ok(ok_value)
    return Err(error)


__all__ = ["Ok", "Err", "Result", "from_bool"]
