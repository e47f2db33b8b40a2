from pydantic import BaseModel, Field
from typing import List, Optional

from ..constants import TELEGRAM_MAX_MESSAGE_LENGTH
from ..errors import ErrorKind
from ..services.formatter import format_report
from ..services.report import FactoredValue, NumberEntry, Report


class PrimePowerSchema(BaseModel):
    prime: int = Field(..., description="Prime factor")
    exponent: int = Field(..., ge=1, description="Multiplicity of the prime")


def _terms(factors) -> List[PrimePowerSchema]:
    return [PrimePowerSchema(prime=prime, exponent=exponent) for prime, exponent in factors]


class FactorizeRequest(BaseModel):
    """Schema for a factorization request"""
    text: str = Field(
        ..., max_length=TELEGRAM_MAX_MESSAGE_LENGTH,
        description="Free-form text containing numbers, e.g. '12, 18, 24'"
    )


class NumberEntrySchema(BaseModel):
    number: int
    factors: List[PrimePowerSchema] = Field(default_factory=list)
    is_prime: bool = False
    error: Optional[ErrorKind] = Field(None, description="Why the number was rejected")

    @classmethod
    def from_entry(cls, entry: NumberEntry) -> "NumberEntrySchema":
        return cls(
            number=entry.number,
            factors=_terms(entry.factors),
            is_prime=entry.is_prime,
            error=entry.error,
        )


class FactoredValueSchema(BaseModel):
    value: int
    factors: List[PrimePowerSchema] = Field(default_factory=list)

    @classmethod
    def from_value(cls, result: Optional[FactoredValue]) -> Optional["FactoredValueSchema"]:
        if result is None:
            return None
        return cls(value=result.value, factors=_terms(result.factors))


class FactorizeResponse(BaseModel):
    """Schema for a factorization report"""
    numbers: List[int] = Field(default_factory=list, description="Numbers found in the text, in order")
    entries: List[NumberEntrySchema] = Field(default_factory=list)
    gcd: Optional[FactoredValueSchema] = None
    lcm: Optional[FactoredValueSchema] = None
    error: Optional[ErrorKind] = Field(None, description="Request-level failure")
    notice: Optional[ErrorKind] = Field(None, description="Why GCD/LCM are missing")
    text: str = Field(..., description="Rendered reply, as the bot would send it")

    @classmethod
    def from_report(cls, report: Report) -> "FactorizeResponse":
        return cls(
            numbers=list(report.numbers),
            entries=[NumberEntrySchema.from_entry(entry) for entry in report.entries],
            gcd=FactoredValueSchema.from_value(report.gcd),
            lcm=FactoredValueSchema.from_value(report.lcm),
            error=report.error,
            notice=report.notice,
            text=format_report(report),
        )
