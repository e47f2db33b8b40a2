"""
Outcome kinds and exceptions for the factorization engine.

Validation problems are reported as ErrorKind values attached to the report
so that one bad number never aborts the rest of a request. Arithmetic failures
raise NumericOverflowError, which the engine turns into a notice.
"""
from enum import Enum


class ErrorKind(str, Enum):
    NO_NUMBERS_FOUND = "no_numbers_found"
    NUMBER_TOO_SMALL = "number_too_small"
    NUMBER_TOO_LARGE = "number_too_large"
    INSUFFICIENT_OPERANDS = "insufficient_operands_for_reduction"
    NUMERIC_OVERFLOW = "numeric_overflow"


class NumericOverflowError(ValueError):
    """Raised when a reduction result does not fit the representable range."""

    def __init__(self, operation: str, limit: int):
        self.operation = operation
        self.limit = limit
        super().__init__(f"{operation} exceeds the representable limit {limit}")
