"""
Rendering of factorizations and reports.

    84 = 2² × 3 × 7
    13 is prime
"""
from typing import Iterable, List

from ..constants import MULTIPLICATION_SEPARATOR, SUPERSCRIPT_DIGITS
from . import messages
from .factorizer import Factorization, PrimePower, is_prime_factorization
from .report import FactoredValue, NumberEntry, Report


def to_superscript(number: int) -> str:
    """Render a non-negative integer with superscript digits, e.g. 12 -> '¹²'."""
    return "".join(SUPERSCRIPT_DIGITS[int(digit)] for digit in str(number))


def format_term(term: PrimePower) -> str:
    prime, exponent = term
    if exponent > 1:
        return f"{prime}{to_superscript(exponent)}"
    return str(prime)


def format_factors(factors: Iterable[PrimePower]) -> str:
    """Join terms with the multiplication sign: '2² × 3 × 7'."""
    return MULTIPLICATION_SEPARATOR.join(format_term(term) for term in factors)


def format_factorization(number: int, factors: Factorization) -> str:
    if is_prime_factorization(number, factors):
        return f"{number} {messages.PRIME_SUFFIX}"
    return f"{number} = {format_factors(factors)}"


def format_entry(entry: NumberEntry) -> str:
    if entry.error is not None:
        return f"{entry.number} - {messages.NUMBER_ERRORS[entry.error]}"
    return format_factorization(entry.number, entry.factors)


def format_value_line(label: str, result: FactoredValue) -> str:
    """'GCD = 6 = 2 × 3'; a value of 1 has no factors and renders as 'GCD = 1'."""
    if not result.factors:
        return f"{label} = {result.value}"
    return f"{label} = {result.value} = {format_factors(result.factors)}"


def format_report(report: Report) -> str:
    """Render the reply text for a report."""
    if report.error is not None:
        return messages.REQUEST_ERRORS[report.error]

    if not report.is_multiple:
        return format_entry(report.entries[0])

    lines: List[str] = [format_entry(entry) for entry in report.entries]
    if report.gcd is not None:
        lines.extend(["", format_value_line(messages.GCD_LABEL, report.gcd)])
    if report.lcm is not None:
        lines.extend(["", format_value_line(messages.LCM_LABEL, report.lcm)])
    if report.notice is not None:
        lines.extend(["", messages.NOTICES[report.notice]])
    return "\n".join(lines)
