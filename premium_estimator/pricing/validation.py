# premium_estimator/pricing/validation.py
"""
Input validation for premium calculation.

Rules are checked in order and the first failure wins:
1. product_id is non-empty and present in the rate table
2. gender is exactly "M" or "F"
3. 0 <= entry_age <= 100
4. 1 <= insurance_period <= 50
5. 0 < insured_amount <= 1,000,000,000

Range checks are written as `lo <= x <= hi`, so NaN fails them.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any, Optional

from premium_estimator.pricing.config import PricingConfig

MSG_PRODUCT = "Please select a product."
MSG_GENDER = "Please select a valid gender (M or F)."
MSG_ENTRY_AGE = "Entry age must be between 0 and 100."
MSG_PERIOD = "Insurance period must be between 1 and 50 years."
MSG_INSURED_AMOUNT = "Insured amount must be greater than 0 and at most 1,000,000,000."
MSG_VALID = "Inputs are valid."


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    message: str


def normalize_product_id(product_id: Any) -> Optional[str]:
    """
    Render a product id as a table key.

    - ints and integral floats map to their integer form (1, 1.0 -> "1")
    - strings are stripped of surrounding whitespace (" 2 " -> "2"), since
      form values often carry it
    - None, booleans and blank strings -> None
    """
    if product_id is None or isinstance(product_id, bool):
        return None
    if isinstance(product_id, float) and product_id.is_integer():
        return str(int(product_id))
    key = str(product_id).strip()
    return key or None


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _within(value: Any, lo: float, hi: float) -> bool:
    return _is_number(value) and lo <= value <= hi


def validate_inputs(
    product_id: Any,
    gender: Any,
    entry_age: Any,
    insurance_period: Any,
    insured_amount: Any,
    cfg: Optional[PricingConfig] = None,
) -> ValidationResult:
    cfg = cfg or PricingConfig()

    key = normalize_product_id(product_id)
    if key is None or key not in cfg.base_rates:
        return ValidationResult(False, MSG_PRODUCT)

    if gender not in cfg.genders:
        return ValidationResult(False, MSG_GENDER)

    if not _within(entry_age, cfg.min_entry_age, cfg.max_entry_age):
        return ValidationResult(False, MSG_ENTRY_AGE)

    if not _within(insurance_period, cfg.min_period, cfg.max_period):
        return ValidationResult(False, MSG_PERIOD)

    if not (_is_number(insured_amount) and 0 < insured_amount <= cfg.max_insured_amount):
        return ValidationResult(False, MSG_INSURED_AMOUNT)

    return ValidationResult(True, MSG_VALID)
