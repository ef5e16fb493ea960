"""
Record entity and its processing capability.

A ``Record`` holds a public label, a private counter and a byte buffer.
It satisfies the ``Processor`` protocol: ``identity()`` returns the label and
``process(input)`` validates the input, runs a bounded, sequential attempt
loop that emits one progress line per attempt, and finally emits the
composed message ``"Processing data: " + input``.

Everything ``process`` touches outside the record (readiness flag, attempt
strategy, sleep, output sink) lives on a ``ProcessingPolicy`` so tests can
swap in a zero-delay sleep and a list-backed emitter.

Architecture:
    ::

        new_record(label) ──► Record(label, data=b"", _counter=0, policy)
                                   │
                      process(input)
                                   │
                 ┌─────────────────┴─────────────────┐
                 │ ready and input?                   │
                 │   no  ──► Err(ValidationFailure)   │
                 │   yes ──► AttemptLoop 1..N         │
                 │             emit "Attempt i of N"  │
                 │             sleep(delay)           │
                 │           emit "Processing data: " │
                 │           ──► Ok(message)          │
                 │   emit/sleep raised                │
                 │           ──► Err(ProcessingError) │
                 └────────────────────────────────────┘

Examples:
    >>> lines = []
    >>> policy = ProcessingPolicy(sleep=lambda s: None, emit=lines.append)
    >>> record = new_record("example", policy=policy)
    >>> record.process(record.identity())
    Ok('Processing data: example')
    >>> lines
    ['Attempt 1 of 3', 'Attempt 2 of 3', 'Attempt 3 of 3', 'Processing data: example']
    >>> record.process("").is_err()
    True
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from record_spine.core.errors import ProcessingError, ValidationFailure
from record_spine.core.logging import get_logger
from record_spine.core.protocols import Emitter, Sleeper
from record_spine.core.result import Err, Ok, Result, from_bool
from record_spine.execution.retry import AttemptLoop, ConstantBackoff, RetryStrategy

if TYPE_CHECKING:
    from record_spine.core.settings import RecordSpineSettings

logger = get_logger(__name__)

MESSAGE_PREFIX = "Processing data: "


def _print_line(line: str) -> None:
    print(line, flush=True)


@dataclass
class ProcessingPolicy:
    """Collaborators used by ``Record.process``.

    Attributes:
        ready: Readiness flag; ``process`` refuses to run while False
        strategy: Number of attempts and the delay after each
        sleep: Blocking delay, ``time.sleep`` outside of tests
        emit: Sink for progress lines, stdout by default
    """

    ready: bool = True
    strategy: RetryStrategy = field(default_factory=ConstantBackoff)
    sleep: Sleeper = time.sleep
    emit: Emitter = _print_line

    @classmethod
    def from_settings(
        cls,
        settings: RecordSpineSettings | None = None,
        **overrides,
    ) -> ProcessingPolicy:
        """Build a policy from settings; keyword overrides win."""
        if settings is None:
            from record_spine.core.settings import get_settings

            settings = get_settings()
        values = {
            "ready": settings.ready,
            "strategy": ConstantBackoff(
                max_retries=settings.max_attempts,
                delay=settings.attempt_delay,
            ),
        }
        values.update(overrides)
        return cls(**values)


@dataclass
class Record:
    """
    The primary data entity: label, private counter, byte buffer.

    ``label`` and ``data`` are public and caller-assignable. ``_counter``
    starts at zero, is never negative, and is only read through
    ``_doubled_counter()``.
    """

    label: str
    data: bytearray = field(default_factory=bytearray)
    policy: ProcessingPolicy = field(default_factory=ProcessingPolicy, repr=False, compare=False)
    _counter: int = field(default=0, init=False, repr=False)

    def identity(self) -> str:
        """Return the current label."""
        return self.label

    def update_label(self, value: str) -> None:
        self.label = value

    def process(self, input: str) -> Result[str]:
        """Validate ``input`` and run the attempt loop over it.

        Args:
            input: Text to process; must be non-empty

        Returns:
            ``Ok(message)`` with the final emitted message, or
            ``Err(ValidationFailure)`` when the readiness flag is off or the
            input is empty (nothing is emitted), or ``Err(ProcessingError)``
            when emitting or sleeping fails during an attempt.
        """
        log = logger.bind(label=self.label, operation="process")

        validated = self._validate(input)
        if validated.is_err():
            log.warning("process_rejected", error=validated.error.to_dict())
            return validated

        message = MESSAGE_PREFIX + input
        loop = AttemptLoop(self.policy.strategy, sleep=self.policy.sleep)
        log.info("process_started", attempts=self.policy.strategy.max_attempts)
        try:
            loop.run(self._emit_attempt)
            self.policy.emit(message)
        except Exception as e:
            error = ProcessingError(
                f"processing failed after {loop.attempts} attempt(s): {e}",
                cause=e,
            ).with_context(label=self.label, operation="process", attempt=loop.attempts)
            log.error("process_failed", error=error.to_dict())
            return Err(error)

        log.info("process_completed", attempts=loop.attempts, total_delay=loop.total_delay)
        return Ok(message)

    def _validate(self, input: str) -> Result[str]:
        ready = from_bool(
            self.policy.ready,
            input,
            ValidationFailure(
                "record is not ready to process",
                field="ready",
                value=False,
                constraint="ready must be true",
            ).with_context(label=self.label, operation="process"),
        )
        return ready.and_then(
            lambda value: from_bool(
                len(value) > 0,
                value,
                ValidationFailure(
                    "input must not be empty",
                    field="input",
                    value=value,
                    constraint="len(input) > 0",
                ).with_context(label=self.label, operation="process"),
            )
        )

    def _emit_attempt(self, attempt: int, total: int) -> None:
        logger.debug("process_attempt", label=self.label, attempt=attempt, total=total)
        self.policy.emit(f"Attempt {attempt} of {total}")

    def _doubled_counter(self) -> int:
        return self._counter * 2

    def __str__(self) -> str:
        return f"Record {{ label: {self.label} }}"


def new_record(label: str, policy: ProcessingPolicy | None = None) -> Record:
    """Create a record with ``label``, a zero counter and an empty buffer."""
    if policy is None:
        return Record(label=label)
    return Record(label=label, policy=policy)


__all__ = ["MESSAGE_PREFIX", "ProcessingPolicy", "Record", "new_record"]
