"""User-facing texts for the chat bot."""
from ..errors import ErrorKind

START_MESSAGE = (
    "Hi! I factor numbers into primes.\n"
    "Send me numbers separated by commas or spaces and I will:\n"
    "• Factor each number into primes\n"
    "• Find the GCD and LCM of all the numbers\n"
    "• Show the prime factorization of the GCD and LCM\n\n"
    "Example: 12, 18, 24 or 12 18 24"
)

HELP_MESSAGE = (
    "How to use the bot:\n\n"
    "• Send numbers separated by commas or spaces (from 2 to 2,147,483,647)\n"
    "• I will factor each number into primes\n"
    "• I will find the GCD (greatest common divisor) and LCM (least common multiple)\n"
    "• I will show the prime factorization of the GCD and LCM\n\n"
    "Examples:\n"
    "12, 18, 24\n"
    "12 18 24\n"
    "8, 12\n\n"
    "Commands:\n"
    "/start - get started\n"
    "/help - show this help"
)

# Replies that replace the whole answer
REQUEST_ERRORS = {
    ErrorKind.NO_NUMBERS_FOUND: (
        "Could not find any numbers. Send numbers separated by commas or spaces.\n\n"
        "Example: 12, 18, 24"
    ),
    ErrorKind.NUMBER_TOO_SMALL: "Please send a number greater than 1.",
    ErrorKind.NUMBER_TOO_LARGE: "The number is too large. Send a number up to 2,147,483,647.",
}

# Inline suffix after an invalid number in a multi-number report
NUMBER_ERRORS = {
    ErrorKind.NUMBER_TOO_SMALL: "must be greater than 1",
    ErrorKind.NUMBER_TOO_LARGE: "too large, the limit is 2,147,483,647",
}

NOTICES = {
    ErrorKind.INSUFFICIENT_OPERANDS: "⚠️ GCD and LCM need at least 2 numbers greater than 1.",
    ErrorKind.NUMERIC_OVERFLOW: "⚠️ The LCM is too large to compute.",
}

PRIME_SUFFIX = "is prime"
GCD_LABEL = "GCD"
LCM_LABEL = "LCM"
