"""record-spine -- a record entity with bounded attempt processing and a generic selector.

Examples:
    >>> from record_spine import new_record, first_or_zero
    >>> record = new_record("example")
    >>> record.identity()
    'example'
    >>> first_or_zero([1, 2, 3, 4, 5])
    1
"""

__version__ = "0.1.0"

from record_spine.core import (
    CallerAbort,
    Err,
    Ok,
    ProcessingError,
    ProcessingPolicy,
    Processor,
    Record,
    RecordSpineError,
    Result,
    ValidationFailure,
    first_or_zero,
    narrow,
    new_record,
)

__all__ = [
    "__version__",
    "CallerAbort",
    "Err",
    "Ok",
    "ProcessingError",
    "ProcessingPolicy",
    "Processor",
    "Record",
    "RecordSpineError",
    "Result",
    "ValidationFailure",
    "first_or_zero",
    "narrow",
    "new_record",
]
