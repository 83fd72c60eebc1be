# premium_estimator/pricing/rates.py
"""
Rate resolution against the static rate tables.

- get_base_rate: product/gender/clamped-age lookup (None when absent)
- get_loading_rate: per-product surcharge with a default fallback
- rate_table_frame: one product's full table as a DataFrame (for display)
"""

from __future__ import annotations

from typing import Any, List, Optional

import pandas as pd

from premium_estimator.pricing.config import PricingConfig
from premium_estimator.pricing.validation import normalize_product_id


def age_key(entry_age: float, max_age_key: int) -> str:
    """
    Clamp entry_age to max_age_key and render it as a table key.

    Integral values render without a fractional part (2.0 -> "2");
    fractional ages keep it ("2.5") and therefore match no key.
    """
    clamped = min(entry_age, max_age_key)
    if float(clamped).is_integer():
        return str(int(clamped))
    return str(clamped)


def get_base_rate(
    product_id: Any,
    gender: str,
    entry_age: float,
    cfg: Optional[PricingConfig] = None,
) -> Optional[float]:
    cfg = cfg or PricingConfig()

    product_rates = cfg.base_rates.get(normalize_product_id(product_id))
    if product_rates is None:
        return None

    gender_rates = product_rates.get(gender)
    if gender_rates is None:
        return None

    return gender_rates.get(age_key(entry_age, cfg.max_age_key))


def get_loading_rate(product_id: Any, cfg: Optional[PricingConfig] = None) -> float:
    cfg = cfg or PricingConfig()
    return cfg.loading_rates.get(normalize_product_id(product_id), cfg.default_loading_rate)


def list_products(cfg: Optional[PricingConfig] = None) -> List[str]:
    cfg = cfg or PricingConfig()
    return sorted(cfg.base_rates)


def rate_table_frame(product_id: Any, cfg: Optional[PricingConfig] = None) -> pd.DataFrame:
    """
    Flatten one product's rates into rows of
    (product_id, gender, age_key, base_rate, loading_rate, total_rate).
    """
    cfg = cfg or PricingConfig()
    key = normalize_product_id(product_id)
    if key not in cfg.base_rates:
        raise KeyError(f"Unknown product_id: {product_id!r}. Known: {list_products(cfg)}")

    loading = get_loading_rate(key, cfg)
    rows = [
        {
            "product_id": key,
            "gender": gender,
            "age_key": age,
            "base_rate": rate,
            "loading_rate": loading,
            "total_rate": rate + loading,
        }
        for gender, by_age in cfg.base_rates[key].items()
        for age, rate in by_age.items()
    ]
    return pd.DataFrame(rows, columns=["product_id", "gender", "age_key", "base_rate", "loading_rate", "total_rate"])


def check_rate_tables(cfg: Optional[PricingConfig] = None) -> None:
    """
    Verify the rate tables before serving.

    Raises ValueError unless every product has a table for each accepted
    gender covering ages 0..max_age_key, and every base and loading rate is
    a fraction in [0, 1).
    """
    cfg = cfg or PricingConfig()
    expected_ages = {str(a) for a in range(cfg.max_age_key + 1)}

    problems: List[str] = []
    for product_id, by_gender in cfg.base_rates.items():
        for gender in cfg.genders:
            by_age = by_gender.get(gender)
            if by_age is None:
                problems.append(f"product {product_id}: no rates for gender {gender}")
                continue
            missing = sorted(expected_ages - set(by_age), key=int)
            if missing:
                problems.append(f"product {product_id}/{gender}: missing ages {missing}")
            for age, rate in by_age.items():
                if not 0 <= rate < 1:
                    problems.append(f"product {product_id}/{gender}/{age}: rate {rate} outside [0, 1)")

    for product_id, rate in cfg.loading_rates.items():
        if not 0 <= rate < 1:
            problems.append(f"product {product_id}: loading rate {rate} outside [0, 1)")
    if not 0 <= cfg.default_loading_rate < 1:
        problems.append(f"default loading rate {cfg.default_loading_rate} outside [0, 1)")

    if problems:
        raise ValueError(f"Invalid rate tables: {problems}")
