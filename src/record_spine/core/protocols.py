"""
Canonical protocol definitions for record-spine.

Callers depend on these shapes, never on ``Record`` directly. Any object
with matching methods satisfies a protocol; no registration or inheritance
is needed.

Architecture:
    ::

        protocols.py
        ├── Processor   — identity() + process(input) capability
        ├── Sleeper     — blocking delay used between attempts
        └── Emitter     — line-oriented progress sink
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from record_spine.core.result import Result


@runtime_checkable
class Processor(Protocol):
    """
    Capability contract for anything that can identify itself and process input.

    Examples:
        >>> from record_spine.core.record import new_record
        >>> isinstance(new_record("example"), Processor)
        True
    """

    def identity(self) -> str:
        """Return the current label. Pure."""
        ...

    def process(self, input: str) -> Result[str]:
        """Run validated work over ``input``; ``Err`` on failure."""
        ...


class Sleeper(Protocol):
    """Blocking delay, in seconds. ``time.sleep`` satisfies it."""

    def __call__(self, seconds: float, /) -> None: ...


class Emitter(Protocol):
    """Writes one line of progress output."""

    def __call__(self, line: str, /) -> None: ...


__all__ = ["Processor", "Sleeper", "Emitter"]
