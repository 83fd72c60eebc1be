# premium_estimator/pricing/quote.py
"""
Premium calculation.

Provides:
- PremiumRequest: the five calculator inputs
- PremiumQuote / PremiumError: success and failure results
- calculate_premium: validate -> resolve rates -> annual/monthly premium

Notes:
- annual_premium = insured_amount * (base_rate + loading_rate)
- monthly_premium = annual_premium / 12, unrounded (display rounding is in utils.formatting)
- calculate_premium never raises; every failure comes back as a PremiumError.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from premium_estimator.pricing import rates
from premium_estimator.pricing.config import PricingConfig
from premium_estimator.pricing.validation import validate_inputs

logger = logging.getLogger(__name__)

MSG_RATE_NOT_FOUND = "No rate found for the specified conditions."
MSG_COMPUTATION_FAULT = "An error occurred during calculation: {detail}"


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    RATE_NOT_FOUND = "rate_not_found"
    COMPUTATION_FAULT = "computation_fault"


@dataclass(frozen=True)
class PremiumRequest:
    product_id: Any
    gender: Any
    entry_age: Any
    insurance_period: Any
    insured_amount: Any

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PremiumQuote:
    annual_premium: float
    monthly_premium: float
    base_rate: float
    loading_rate: float
    total_rate: float
    insured_amount: float

    @property
    def success(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {"success": True, **asdict(self)}


@dataclass(frozen=True)
class PremiumError:
    error_kind: ErrorKind
    message: str

    @property
    def success(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "error_kind": self.error_kind.value, "error": self.message}


PremiumResult = Union[PremiumQuote, PremiumError]


def calculate_premium(
    product_id: Any,
    gender: Any,
    entry_age: Any,
    insurance_period: Any,
    insured_amount: Any,
    cfg: Optional[PricingConfig] = None,
) -> PremiumResult:
    """
    Estimate the annual and monthly premium for one set of inputs.

    insurance_period is validated but does not affect the rate.
    """
    cfg = cfg or PricingConfig()

    try:
        validation = validate_inputs(product_id, gender, entry_age, insurance_period, insured_amount, cfg)
        if not validation.is_valid:
            logger.debug("Rejected premium inputs: %s", validation.message)
            return PremiumError(ErrorKind.INVALID_INPUT, validation.message)

        base_rate = rates.get_base_rate(product_id, gender, entry_age, cfg)
        if base_rate is None:
            logger.debug("No base rate for product=%s gender=%s age=%s", product_id, gender, entry_age)
            return PremiumError(ErrorKind.RATE_NOT_FOUND, MSG_RATE_NOT_FOUND)

        loading_rate = rates.get_loading_rate(product_id, cfg)
        total_rate = base_rate + loading_rate

        annual_premium = insured_amount * total_rate
        monthly_premium = annual_premium / 12

        return PremiumQuote(
            annual_premium=float(annual_premium),
            monthly_premium=float(monthly_premium),
            base_rate=float(base_rate),
            loading_rate=float(loading_rate),
            total_rate=float(total_rate),
            insured_amount=insured_amount,
        )
    except Exception as e:
        logger.exception("Premium calculation failed")
        return PremiumError(ErrorKind.COMPUTATION_FAULT, MSG_COMPUTATION_FAULT.format(detail=e))


def calculate(request: PremiumRequest, cfg: Optional[PricingConfig] = None) -> PremiumResult:
    return calculate_premium(
        request.product_id,
        request.gender,
        request.entry_age,
        request.insurance_period,
        request.insured_amount,
        cfg=cfg,
    )
