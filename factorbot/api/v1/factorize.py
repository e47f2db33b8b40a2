from fastapi import APIRouter, Request
import logging

from ...config import get_settings
from ...dependencies import limiter
from ...schemas.factorization import FactorizeRequest, FactorizeResponse
from ...services.engine import analyze

logger = logging.getLogger(__name__)

settings = get_settings()

router = APIRouter()


@router.post("/factorize", response_model=FactorizeResponse)
@limiter.limit(settings.factorize_rate_limit)
def factorize_text(request: Request, body: FactorizeRequest):
    """
    Factor the numbers found in free-form text.

    Returns the same report the bot would send, both structured and rendered:
    - entries: one per number found, with its prime factorization or the
      reason it was rejected
    - gcd / lcm: present when at least two valid numbers were given
    - error: request-level failure (no numbers, or a single out-of-range number)
    - notice: why GCD/LCM are missing (too few valid numbers, LCM overflow)
    """
    report = analyze(body.text)
    logger.debug(f"Factorized {list(report.numbers)}")
    return FactorizeResponse.from_report(report)
