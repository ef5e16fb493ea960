"""Attempt strategies and a sequential attempt loop with an injectable sleep.

A strategy decides how many attempts run and how long to block after each
one. ``AttemptLoop`` drives a strategy: it calls the action for attempt
1..N strictly in order, blocking through the injected ``sleep`` after every
attempt. Tests pass a fake sleep so no wall-clock time is spent.

Example:
    >>> from record_spine.execution.retry import AttemptLoop, ConstantBackoff
    >>>
    >>> delays = []
    >>> loop = AttemptLoop(ConstantBackoff(max_retries=3, delay=30.0), sleep=delays.append)
    >>> loop.run(lambda attempt, total: print(f"Attempt {attempt} of {total}"))
    Attempt 1 of 3
    Attempt 2 of 3
    Attempt 3 of 3
    3
    >>> delays
    [30.0, 30.0, 30.0]
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable

from record_spine.core.logging import get_logger
from record_spine.core.protocols import Sleeper

logger = get_logger(__name__)


class RetryStrategy(ABC):
    """Abstract base for attempt strategies."""

    max_retries: int

    @abstractmethod
    def next_delay(self, attempt: int) -> float:
        """Calculate the delay that follows an attempt.

        Args:
            attempt: Zero-based attempt number

        Returns:
            Delay in seconds
        """
        ...

    @abstractmethod
    def should_retry(self, attempt: int, error: Exception | None = None) -> bool:
        """Determine if another attempt should run.

        Args:
            attempt: Number of attempts already made
            error: The exception raised by the last attempt, if any

        Returns:
            True if another attempt is allowed
        """
        ...

    @property
    def max_attempts(self) -> int:
        """Total number of attempts a loop will make."""
        return self.max_retries


@dataclass
class ConstantBackoff(RetryStrategy):
    """Constant delay after every attempt."""

    max_retries: int = 3
    delay: float = 30.0

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if self.delay < 0:
            raise ValueError("delay must be >= 0")

    def next_delay(self, attempt: int) -> float:
        """Return constant delay."""
        return self.delay

    def should_retry(self, attempt: int, error: Exception | None = None) -> bool:
        """Check if another attempt is allowed."""
        return attempt < self.max_retries


@dataclass
class LinearBackoff(RetryStrategy):
    """Linear backoff strategy.

    Delay = base_delay + (increment * attempt), capped at max_delay
    """

    max_retries: int = 3
    base_delay: float = 1.0
    increment: float = 1.0
    max_delay: float = 30.0

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if min(self.base_delay, self.increment, self.max_delay) < 0:
            raise ValueError("base_delay, increment and max_delay must be >= 0")

    def next_delay(self, attempt: int) -> float:
        """Calculate linear backoff delay."""
        return min(
            self.base_delay + (self.increment * attempt),
            self.max_delay,
        )

    def should_retry(self, attempt: int, error: Exception | None = None) -> bool:
        """Check if another attempt is allowed."""
        return attempt < self.max_retries


@dataclass
class NoRetry(RetryStrategy):
    """Single attempt, no delay."""

    max_retries: int = field(default=1, init=False)

    def next_delay(self, attempt: int) -> float:
        """No delay needed."""
        return 0.0

    def should_retry(self, attempt: int, error: Exception | None = None) -> bool:
        """Only the first attempt runs."""
        return attempt < 1


@dataclass
class AttemptLoop:
    """
    Runs an action once per attempt, sequentially, sleeping after each.

    Attempt ``i + 1`` only starts after attempt ``i``'s sleep returns. The
    first exception raised by the action or by ``sleep`` stops the loop and
    propagates to the caller; ``attempts`` and ``last_error`` stay readable.
    Each ``run`` starts from a clean state, so a loop can be reused.

    Example:
        >>> loop = AttemptLoop(ConstantBackoff(max_retries=2, delay=0.0))
        >>> loop.run(lambda attempt, total: None)
        2
        >>> loop.total_delay
        0.0
    """

    strategy: RetryStrategy
    sleep: Sleeper = time.sleep
    attempts: int = field(default=0, init=False)
    total_delay: float = field(default=0.0, init=False)
    last_error: Exception | None = field(default=None, init=False)

    def run(self, action: Callable[[int, int], None]) -> int:
        """Execute ``action(attempt, total)`` for every allowed attempt.

        Args:
            action: Called with the one-based attempt number and the total

        Returns:
            Number of attempts made

        Raises:
            The first exception raised by ``action`` or ``sleep``
        """
        self.attempts = 0
        self.total_delay = 0.0
        self.last_error = None
        total = self.strategy.max_attempts
        while self.strategy.should_retry(self.attempts, self.last_error):
            self.attempts += 1
            try:
                action(self.attempts, total)
                delay = self.strategy.next_delay(self.attempts - 1)
                self.sleep(delay)
            except Exception as e:
                self.last_error = e
                logger.debug("attempt_failed", attempt=self.attempts, total=total, error=str(e))
                raise
            self.total_delay += delay
        return self.attempts
