# premium_estimator/utils/formatting.py
"""
Display formatting for premium results.

- format_currency(1200) -> "¥1,200"
- format_rate(0.0012)   -> "0.1200%"
"""

from __future__ import annotations

from typing import Any, Dict

import numpy as np

CURRENCY_SYMBOLS = {"JPY": "¥", "GBP": "£", "USD": "$", "EUR": "€"}

# Currencies displayed without a fractional part
ZERO_DECIMAL_CURRENCIES = {"JPY"}


def format_currency(amount: float, currency: str = "JPY") -> str:
    if amount is None or not np.isfinite(amount):
        return "-"

    code = currency.upper()
    symbol = CURRENCY_SYMBOLS.get(code, f"{code} ")
    decimals = 0 if code in ZERO_DECIMAL_CURRENCIES else 2
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.{decimals}f}"


def format_rate(rate: float) -> str:
    if rate is None or not np.isfinite(rate):
        return "-"
    return f"{rate * 100:.4f}%"


def display_fields(result: Dict[str, Any], currency: str = "JPY") -> Dict[str, str]:
    """Formatted strings for a successful PremiumQuote.to_dict()."""
    return {
        "monthly_premium": format_currency(result["monthly_premium"], currency),
        "annual_premium": format_currency(result["annual_premium"], currency),
        "insured_amount": format_currency(result["insured_amount"], currency),
        "total_rate": format_rate(result["total_rate"]),
    }
