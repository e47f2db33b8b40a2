"""
Trial division factorizer.

A factorization is a tuple of (prime, exponent) terms, strictly increasing by
prime. A prime p factors as ((p, 1),) and 1 factors as the empty tuple.
"""
from typing import Tuple

PrimePower = Tuple[int, int]
Factorization = Tuple[PrimePower, ...]


def factorize(n: int) -> Factorization:
    """
    Factor n into prime powers by trial division.

    Strips factors of 2 first, then tries odd divisors while
    divisor * divisor <= remaining. Whatever remains above 1 is prime.

    Args:
        n: Positive integer to factor

    Returns:
        Tuple of (prime, exponent) terms

    Example:
        >>> factorize(84)
        ((2, 2), (3, 1), (7, 1))
    """
    remaining = n
    factors = []

    count = 0
    while remaining > 1 and remaining % 2 == 0:
        remaining //= 2
        count += 1
    if count:
        factors.append((2, count))

    divisor = 3
    while divisor * divisor <= remaining:
        count = 0
        while remaining % divisor == 0:
            remaining //= divisor
            count += 1
        if count:
            factors.append((divisor, count))
        divisor += 2

    if remaining > 1:
        factors.append((remaining, 1))
    return tuple(factors)


def is_prime_factorization(number: int, factors: Factorization) -> bool:
    """True if factors describe a prime: no terms, or the single term (number, 1)."""
    return not factors or factors == ((number, 1),)
