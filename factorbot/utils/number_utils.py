import re
from ..constants import INT64_MAX, INT64_MIN, MAX_NUMBER, MIN_NUMBER
from ..errors import ErrorKind, NumericOverflowError

INTEGER_PATTERN = re.compile(r'-?[0-9]+')

# Decimal digits in INT64_MAX
INT64_DIGITS = len(str(INT64_MAX))


def validate_integer(number_str: str) -> bool:
    """Validate that string represents a signed decimal integer."""
    if not isinstance(number_str, str):
        return False

    # Optional leading minus, ASCII digits only
    return INTEGER_PATTERN.fullmatch(number_str) is not None


def parse_int64(number_str: str):
    """
    Parse a signed decimal integer that fits in 64 bits.

    Returns:
        The parsed integer, or None if the string is not an integer or the
        value falls outside the 64-bit signed range
    """
    if not validate_integer(number_str):
        return None

    # Anything longer cannot fit in 64 bits; int() would also refuse very long strings
    if len(number_str.lstrip("-").lstrip("0")) > INT64_DIGITS:
        return None

    value = int(number_str)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def check_number_range(number: int):
    """Return the ErrorKind for a number outside [MIN_NUMBER, MAX_NUMBER], else None."""
    if number < MIN_NUMBER:
        return ErrorKind.NUMBER_TOO_SMALL
    if number > MAX_NUMBER:
        return ErrorKind.NUMBER_TOO_LARGE
    return None


def gcd(a: int, b: int) -> int:
    """Calculate greatest common divisor using Euclidean algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int, limit: int = INT64_MAX) -> int:
    """
    Calculate least common multiple as (a / gcd(a, b)) * b.

    Args:
        a: First operand (positive)
        b: Second operand (positive)
        limit: Largest representable result

    Raises:
        NumericOverflowError: If the result exceeds limit
    """
    result = (a // gcd(a, b)) * b
    if result > limit:
        raise NumericOverflowError(f"lcm({a}, {b})", limit)
    return result

