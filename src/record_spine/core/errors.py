"""
Structured error types for record-spine.

Every failure that leaves a record operation carries a category, a retry
flag, structured context, and an optional chained cause. Processing does not
raise these for expected failures: they travel inside ``Err`` values (see
``record_spine.core.result``) so callers decide what is fatal.

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │                    RecordSpineError                       │
        │   (category, retryable, context, cause)                   │
        ├──────────────────────────────────────────────────────────┤
        │  ValidationFailure   ProcessingError    CallerAbort       │
        │  (VALIDATION)        (PROCESSING)       (ORCHESTRATION)   │
        │                                                           │
        │  ConfigError                                              │
        │  (CONFIG)                                                 │
        └──────────────────────────────────────────────────────────┘

Examples:
    >>> error = ValidationFailure("input must not be empty", field="input", value="")
    >>> error.retryable
    False
    >>> error.to_dict()["category"]
    'VALIDATION'

    Adding context fluently:

    >>> error = ProcessingError("sleep interrupted").with_context(label="example", input="data")
    >>> error.context.label
    'example'
    >>> error.context.metadata
    {'input': 'data'}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and logging."""

    VALIDATION = "VALIDATION"        # Readiness flag off, empty input
    PROCESSING = "PROCESSING"        # Failure inside an attempt
    ORCHESTRATION = "ORCHESTRATION"  # Caller gave up on a failed run
    CONFIG = "CONFIG"                # Invalid settings
    INTERNAL = "INTERNAL"            # Bugs, unexpected state


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Attributes:
        label: Label of the record involved
        operation: Name of the operation that failed (e.g. ``"process"``)
        attempt: One-based attempt number, when the failure happened mid-loop
        metadata: Additional key-value pairs
    """

    label: str | None = None
    operation: str | None = None
    attempt: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["label", "operation", "attempt"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class RecordSpineError(Exception):
    """
    Base exception for all record-spine errors.

    Subclasses set ``default_category`` and ``default_retryable`` so that
    call sites only pass what differs from the defaults.

    Examples:
        >>> error = RecordSpineError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>

        Chaining:

        >>> try:
        ...     raise OSError("stdout closed")
        ... except OSError as e:
        ...     error = RecordSpineError("emit failed", cause=e)
        >>> error.cause
        OSError('stdout closed')
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        retryable: bool | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.retryable = retryable if retryable is not None else self.default_retryable
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> RecordSpineError:
        """
        Add context to this error (fluent API).

        Known ``ErrorContext`` fields are set directly; anything else lands
        in ``context.metadata``.
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "retryable": self.retryable,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# VALIDATION
# =============================================================================


class ValidationFailure(RecordSpineError):
    """
    ``process`` declined to run its attempt loop.

    Raised in value form (inside ``Err``) when the readiness flag is off or
    the input is empty. Never retryable.
    """

    default_category = ErrorCategory.VALIDATION
    default_retryable = False

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        constraint: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value
        self.constraint = constraint

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        if self.value is not None:
            result["value"] = repr(self.value)
        if self.constraint:
            result["constraint"] = self.constraint
        return result


# =============================================================================
# PROCESSING / ORCHESTRATION
# =============================================================================


class ProcessingError(RecordSpineError):
    """A downstream failure (emit or sleep) during an attempt."""

    default_category = ErrorCategory.PROCESSING
    default_retryable = False


class CallerAbort(RecordSpineError):
    """
    The orchestration received an error from ``process`` and stops the run.

    There is no recovery at the caller level; retries only happen inside
    ``process``.
    """

    default_category = ErrorCategory.ORCHESTRATION
    default_retryable = False


# =============================================================================
# CONFIGURATION
# =============================================================================


class ConfigError(RecordSpineError):
    """Invalid configuration. Never retryable."""

    default_category = ErrorCategory.CONFIG
    default_retryable = False


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "RecordSpineError",
    "ValidationFailure",
    "ProcessingError",
    "CallerAbort",
    "ConfigError",
]
