"""
Shared constants for the factorization bot.

This module centralizes the numeric limits and rendering tables used by the
parser, the factorizer, the reducer and the formatter.
"""

from typing import Tuple

# Accepted input range. The upper bound is the 32-bit signed maximum even though
# inputs are parsed as 64-bit integers.
MIN_NUMBER = 2
MAX_NUMBER = 2_147_483_647

# Parsed tokens and reduction results must fit a 64-bit signed integer
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Characters separating numbers in a message; any run of them is one separator
NUMBER_SEPARATORS = ",; \t"

# Superscript digit for each decimal digit value, indexed 0-9
SUPERSCRIPT_DIGITS: Tuple[str, ...] = (
    "⁰", "¹", "²", "³", "⁴", "⁵", "⁶", "⁷", "⁸", "⁹",
)

MULTIPLICATION_SEPARATOR = " × "

# Telegram rejects messages longer than this
TELEGRAM_MAX_MESSAGE_LENGTH = 4096
