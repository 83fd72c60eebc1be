# premium_estimator/forms/runtime.py
"""
Runtime form adapter for real-time premium estimates.

Goal:
- Convert raw form values (usually strings) into a PremiumRequest.

Transforms:
- product_id / gender: stripped strings, empty -> None
- entry_age / insurance_period / insured_amount: numeric coercion
  (missing -> 0, unparsable -> NaN with a warning; NaN then fails validation)
- insured_amount accepts thousands separators ("1,000,000")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from premium_estimator.pricing.quote import PremiumRequest

RAW_TEXT = ["product_id", "gender"]
RAW_NUMERIC = ["entry_age", "insurance_period", "insured_amount"]

# Fields whose display form carries thousands separators
GROUPED_NUMERIC = {"insured_amount"}


@dataclass(frozen=True)
class FormBuildResult:
    request: PremiumRequest
    warnings: List[str]


def _to_text(val: Any) -> Optional[str]:
    if val is None or (isinstance(val, float) and np.isnan(val)):
        return None
    text = str(val).strip()
    return text or None


def _to_number(col: str, val: Any, warnings: List[str]) -> float:
    if val is None or (isinstance(val, str) and not val.strip()):
        return 0

    if isinstance(val, str) and col in GROUPED_NUMERIC:
        val = val.replace(",", "")

    num = pd.to_numeric(pd.Series([val]), errors="coerce").iloc[0]
    if pd.isna(num):
        warnings.append(f"Could not parse {col}='{val}' as a number; set to NaN.")
        return float("nan")
    return num.item() if isinstance(num, np.generic) else num


def build_request_from_form(raw: Dict[str, Any]) -> FormBuildResult:
    """
    Build a PremiumRequest from raw form fields.

    Unknown keys are ignored.
    """
    warnings: List[str] = []
    values: Dict[str, Any] = {}

    for col in RAW_TEXT:
        values[col] = _to_text(raw.get(col))

    for col in RAW_NUMERIC:
        values[col] = _to_number(col, raw.get(col), warnings)

    # Ages and periods are whole numbers on the form
    for col in ("entry_age", "insurance_period"):
        v = values[col]
        if isinstance(v, float) and np.isfinite(v) and v.is_integer():
            values[col] = int(v)

    return FormBuildResult(request=PremiumRequest(**values), warnings=warnings)


def is_form_complete(request: PremiumRequest) -> bool:
    """Real-time calculation only runs once every field has a positive value."""

    def _positive(v: Any) -> bool:
        return isinstance(v, (int, float)) and not isinstance(v, bool) and v > 0

    return bool(
        request.product_id
        and request.gender
        and _positive(request.entry_age)
        and _positive(request.insurance_period)
        and _positive(request.insured_amount)
    )
