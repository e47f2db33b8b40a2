"""Immutable result types produced by the engine for one request."""
from dataclasses import dataclass
from typing import Optional, Tuple

from ..errors import ErrorKind
from .factorizer import Factorization, is_prime_factorization


@dataclass(frozen=True)
class NumberEntry:
    """One parsed number and either its factorization or why it was rejected."""
    number: int
    factors: Factorization = ()
    error: Optional[ErrorKind] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def is_prime(self) -> bool:
        return self.is_valid and is_prime_factorization(self.number, self.factors)


@dataclass(frozen=True)
class FactoredValue:
    value: int
    factors: Factorization


@dataclass(frozen=True)
class Report:
    """
    Everything computed for one message.

    error is set when the request failed as a whole (no numbers, or the
    only number given is out of range). notice is set when GCD/LCM could not
    be produced for a multi-number request.
    """
    entries: Tuple[NumberEntry, ...] = ()
    gcd: Optional[FactoredValue] = None
    lcm: Optional[FactoredValue] = None
    error: Optional[ErrorKind] = None
    notice: Optional[ErrorKind] = None

    @property
    def numbers(self) -> Tuple[int, ...]:
        return tuple(entry.number for entry in self.entries)

    @property
    def is_multiple(self) -> bool:
        return len(self.entries) > 1
