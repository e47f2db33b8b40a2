"""
Factorization engine.

Turns one message into a Report and renders it. The engine keeps no state
between calls; every call parses, validates, factors and reduces from scratch.

Usage:
    report = analyze("12, 18")
    text = format_report(report)   # or process_message("12, 18")
"""
import logging
from typing import List

from ..errors import ErrorKind, NumericOverflowError
from ..utils.number_utils import check_number_range
from .factorizer import factorize
from .formatter import format_report
from .parser import parse_numbers
from .reducer import (
    calculate_gcd,
    calculate_lcm,
    combined_factorization,
    common_factorization,
)
from .report import FactoredValue, NumberEntry, Report

logger = logging.getLogger(__name__)


def build_entry(number: int) -> NumberEntry:
    """Validate a number and factor it if it is in range."""
    error = check_number_range(number)
    if error is not None:
        return NumberEntry(number=number, error=error)
    return NumberEntry(number=number, factors=factorize(number))


def analyze(text: str) -> Report:
    """
    Parse, factor and reduce the numbers found in text.

    A single number yields its factorization, or a request-level error if it is
    out of range. Several numbers yield one entry each, then GCD and LCM of
    the valid ones; invalid numbers are flagged inline without stopping the
    rest of the report.
    """
    numbers = parse_numbers(text)
    if not numbers:
        return Report(error=ErrorKind.NO_NUMBERS_FOUND)

    entries = tuple(build_entry(number) for number in numbers)

    if len(entries) == 1:
        return Report(entries=entries, error=entries[0].error)

    valid = [entry for entry in entries if entry.is_valid]
    if len(valid) < 2:
        return Report(entries=entries, notice=ErrorKind.INSUFFICIENT_OPERANDS)

    operands: List[int] = [entry.number for entry in valid]
    factorizations = [entry.factors for entry in valid]

    gcd_result = FactoredValue(
        value=calculate_gcd(operands),
        factors=common_factorization(factorizations),
    )

    try:
        lcm_value = calculate_lcm(operands)
    except NumericOverflowError as e:
        logger.warning(f"LCM overflow for {operands}: {e}")
        return Report(entries=entries, gcd=gcd_result, notice=ErrorKind.NUMERIC_OVERFLOW)

    lcm_result = FactoredValue(value=lcm_value, factors=combined_factorization(factorizations))
    return Report(entries=entries, gcd=gcd_result, lcm=lcm_result)


def process_message(text: str) -> str:
    """Analyze text and return the reply to send back."""
    return format_report(analyze(text))
