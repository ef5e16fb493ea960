"""Record Spine Core -- the record entity, its capability, and shared primitives.

Architecture::

    Layer 1 -- Type System & Errors
        errors.py          Structured error hierarchy (RecordSpineError, ValidationFailure)
        result.py          Result[T] envelope (Ok / Err / from_bool)
        protocols.py       Processor capability, Sleeper, Emitter

    Layer 2 -- Domain
        record.py          Record entity, ProcessingPolicy, new_record()
        generics.py        first_or_zero() selector
        narrowing.py       narrow() checked type narrowing

    Layer 3 -- Cross-Cutting Concerns
        logging.py         Structured logging (structlog)
        settings.py        RecordSpineSettings (pydantic-settings)
"""

from record_spine.core.errors import (
    CallerAbort,
    ConfigError,
    ErrorCategory,
    ErrorContext,
    ProcessingError,
    RecordSpineError,
    ValidationFailure,
)
from record_spine.core.generics import first_or_zero
from record_spine.core.narrowing import narrow
from record_spine.core.protocols import Emitter, Processor, Sleeper
from record_spine.core.record import ProcessingPolicy, Record, new_record
from record_spine.core.result import Err, Ok, Result

__all__ = [
    # errors
    "CallerAbort",
    "ConfigError",
    "ErrorCategory",
    "ErrorContext",
    "ProcessingError",
    "RecordSpineError",
    "ValidationFailure",
    # result
    "Err",
    "Ok",
    "Result",
    # protocols
    "Emitter",
    "Processor",
    "Sleeper",
    # domain
    "ProcessingPolicy",
    "Record",
    "new_record",
    "first_or_zero",
    "narrow",
]
