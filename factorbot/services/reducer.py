"""
GCD/LCM reduction over a sequence of integers.

Both values are folded pairwise from left to right in input order, so an
LCM overflow is always raised at the same step for the same input.

The factorizations of the GCD and LCM are derived from the operands'
factorizations (minimum and maximum exponent per prime) rather than by running
trial division again on a result that may be close to 2^63.
"""
from functools import reduce
from typing import Dict, Sequence

from ..constants import INT64_MAX
from ..utils.number_utils import gcd, lcm
from .factorizer import Factorization


def calculate_gcd(numbers: Sequence[int]) -> int:
    """GCD of all numbers, folded left to right."""
    if not numbers:
        raise ValueError("GCD requires at least one number")
    return reduce(gcd, numbers)


def calculate_lcm(numbers: Sequence[int], limit: int = INT64_MAX) -> int:
    """
    LCM of all numbers, folded left to right.

    Each step uses the GCD of the running LCM and the next operand.

    Raises:
        NumericOverflowError: At the first step whose result exceeds limit
    """
    if not numbers:
        raise ValueError("LCM requires at least one number")
    return reduce(lambda a, b: lcm(a, b, limit), numbers)


def common_factorization(factorizations: Sequence[Factorization]) -> Factorization:
    """Factorization of the GCD: primes shared by all, at their minimum exponent."""
    if not factorizations:
        return ()

    exponents: Dict[int, int] = dict(factorizations[0])
    for factors in factorizations[1:]:
        current = dict(factors)
        exponents = {
            prime: min(exponent, current[prime])
            for prime, exponent in exponents.items()
            if prime in current
        }
    return tuple(sorted(exponents.items()))


def combined_factorization(factorizations: Sequence[Factorization]) -> Factorization:
    """Factorization of the LCM: every prime present, at its maximum exponent."""
    exponents: Dict[int, int] = {}
    for factors in factorizations:
        for prime, exponent in factors:
            exponents[prime] = max(exponent, exponents.get(prime, 0))
    return tuple(sorted(exponents.items()))
