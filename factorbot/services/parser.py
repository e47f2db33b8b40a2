"""
Number parser.

Extracts integers from free-form message text such as "12, 18, 24" or
"12 18 24". Fragments that are not integers are skipped without error.
"""
import re
from typing import List

from ..constants import NUMBER_SEPARATORS
from ..utils.number_utils import parse_int64

SEPARATOR_PATTERN = re.compile(f"[{re.escape(NUMBER_SEPARATORS)}]+")


def parse_numbers(text: str) -> List[int]:
    """
    Parse all integers from text, in order of appearance.

    Args:
        text: Raw message text

    Returns:
        List of integers (duplicates preserved); empty if none were found

    Example:
        >>> parse_numbers("abc, 7, xyz")
        [7]
    """
    numbers = []
    for fragment in SEPARATOR_PATTERN.split(text):
        value = parse_int64(fragment.strip())
        if value is not None:
            numbers.append(value)
    return numbers
