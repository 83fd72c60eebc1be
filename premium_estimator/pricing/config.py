# premium_estimator/pricing/config.py
"""
Pricing configuration and static rate tables.

Tables:
- BASE_RATES:    product_id -> gender ("M"/"F") -> age key ("0".."5") -> base rate
- LOADING_RATES: product_id -> loading (surcharge) rate

Both are read-only mappings built once at import time.
Ages above MAX_AGE_KEY reuse the MAX_AGE_KEY rate, and products missing from
LOADING_RATES fall back to DEFAULT_LOADING_RATE.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

# Highest age key present in the rate table; older entry ages are clamped to it.
MAX_AGE_KEY = 5

# Loading rate used for a product that has base rates but no loading entry.
DEFAULT_LOADING_RATE = 0.0001


def _freeze(obj: Any) -> Any:
    if isinstance(obj, dict):
        return MappingProxyType({k: _freeze(v) for k, v in obj.items()})
    return obj


BASE_RATES: Mapping[str, Mapping[str, Mapping[str, float]]] = _freeze(
    {
        # Education endowment plan A
        "1": {
            "M": {"0": 0.0012, "1": 0.00115, "2": 0.0011, "3": 0.00105, "4": 0.0010, "5": 0.00095},
            "F": {"0": 0.0011, "1": 0.00105, "2": 0.0010, "3": 0.00095, "4": 0.0009, "5": 0.00085},
        },
        # Education endowment plan B
        "2": {
            "M": {"0": 0.0010, "1": 0.00095, "2": 0.0009, "3": 0.00085, "4": 0.0008, "5": 0.00075},
            "F": {"0": 0.0009, "1": 0.00085, "2": 0.0008, "3": 0.00075, "4": 0.0007, "5": 0.00065},
        },
    }
)

LOADING_RATES: Mapping[str, float] = _freeze(
    {
        "1": 0.0001,
        "2": 0.00008,
    }
)


@dataclass(frozen=True)
class PricingConfig:
    # Accepted genders
    genders: tuple[str, ...] = ("M", "F")

    # Entry age range (inclusive)
    min_entry_age: float = 0
    max_entry_age: float = 100

    # Insurance period in years (inclusive)
    min_period: float = 1
    max_period: float = 50

    # Insured amount: must be > 0 and <= max_insured_amount
    max_insured_amount: float = 1_000_000_000

    # Rate lookup
    max_age_key: int = MAX_AGE_KEY
    default_loading_rate: float = DEFAULT_LOADING_RATE

    base_rates: Mapping[str, Mapping[str, Mapping[str, float]]] = field(default_factory=lambda: BASE_RATES, repr=False)
    loading_rates: Mapping[str, float] = field(default_factory=lambda: LOADING_RATES, repr=False)
