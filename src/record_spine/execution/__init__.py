"""Record Spine Execution -- sequential attempt loops.

::

    RetryStrategy (how many attempts, how long after each)
      ├── ConstantBackoff
      ├── LinearBackoff
      └── NoRetry
      │
      ▼
    AttemptLoop (attempt 1..N in order, injectable sleep)
"""

from record_spine.execution.retry import (
    AttemptLoop,
    ConstantBackoff,
    LinearBackoff,
    NoRetry,
    RetryStrategy,
)

__all__ = [
    "AttemptLoop",
    "ConstantBackoff",
    "LinearBackoff",
    "NoRetry",
    "RetryStrategy",
]
