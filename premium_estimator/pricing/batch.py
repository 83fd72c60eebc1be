# premium_estimator/pricing/batch.py
"""
Batch premium calculation over entry-age and insurance-period ranges.

What this does:
- Parses range strings like "25-35" into inclusive integer lists
- Runs calculate_premium for every (age, period) pair
- Flattens results into a DataFrame (one row per pair)

Usage:
  python -m premium_estimator.pricing.batch --product_id 1 --gender M \
      --age_range 0-5 --period_range 10-12 --insured_amount 1000000
  python -m premium_estimator.pricing.batch ... --out reports/batch.parquet
"""

from __future__ import annotations

import argparse
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from premium_estimator.pricing.config import PricingConfig
from premium_estimator.pricing.quote import ErrorKind, PremiumError, PremiumResult, calculate_premium
from premium_estimator.utils.config import configure_logging, get_project_root
from premium_estimator.utils.io import write_df, write_json

logger = logging.getLogger(__name__)

MSG_INVALID_RANGE = "Invalid age or insurance period range."

_RANGE_INPUT = re.compile(r"^\d*-\d*$")

BATCH_COLUMNS = [
    "entry_age",
    "insurance_period",
    "success",
    "base_rate",
    "loading_rate",
    "total_rate",
    "annual_premium",
    "monthly_premium",
    "error",
]


def is_range_input(value: str) -> bool:
    """Pattern check for a range field while it is being typed ("25-", "-35" are allowed)."""
    return bool(_RANGE_INPUT.fullmatch(value or ""))


def parse_bounds(range_str: Optional[str]) -> Optional[Tuple[int, int]]:
    """
    "25-35" -> (25, 35)

    Returns None for empty input, anything other than two integer parts,
    or start > end.
    """
    if range_str is None or not range_str.strip():
        return None

    parts = range_str.split("-")
    if len(parts) != 2:
        return None

    try:
        start = int(parts[0].strip())
        end = int(parts[1].strip())
    except ValueError:
        return None

    if start > end:
        return None
    return start, end


def parse_range(range_str: Optional[str]) -> Optional[List[int]]:
    """
    "25-35" -> [25, 26, ..., 35]

    None when parse_bounds rejects the input.
    """
    bounds = parse_bounds(range_str)
    if bounds is None:
        return None
    return list(range(bounds[0], bounds[1] + 1))


@dataclass(frozen=True)
class BatchResult:
    product_id: Any
    gender: Any
    insured_amount: Any
    results: Dict[int, Dict[int, PremiumResult]]

    def to_frame(self) -> pd.DataFrame:
        rows = []
        for age, by_period in self.results.items():
            for period, res in by_period.items():
                row: Dict[str, Any] = {"entry_age": age, "insurance_period": period, "success": res.success}
                if res.success:
                    row.update(
                        base_rate=res.base_rate,
                        loading_rate=res.loading_rate,
                        total_rate=res.total_rate,
                        annual_premium=res.annual_premium,
                        monthly_premium=res.monthly_premium,
                        error=None,
                    )
                else:
                    row.update(
                        base_rate=np.nan,
                        loading_rate=np.nan,
                        total_rate=np.nan,
                        annual_premium=np.nan,
                        monthly_premium=np.nan,
                        error=res.message,
                    )
                rows.append(row)
        return pd.DataFrame(rows, columns=BATCH_COLUMNS)

    @property
    def success_count(self) -> int:
        return sum(1 for by_period in self.results.values() for r in by_period.values() if r.success)


def batch_calculate(
    product_id: Any,
    gender: Any,
    ages: Sequence[int],
    periods: Sequence[int],
    insured_amount: Any,
    cfg: Optional[PricingConfig] = None,
) -> BatchResult:
    cfg = cfg or PricingConfig()
    results: Dict[int, Dict[int, PremiumResult]] = {}
    for age in ages:
        for period in periods:
            results.setdefault(age, {})[period] = calculate_premium(
                product_id, gender, age, period, insured_amount, cfg=cfg
            )

    logger.info(
        "Batch calculated product=%s gender=%s ages=%d periods=%d",
        product_id,
        gender,
        len(ages),
        len(periods),
    )
    return BatchResult(product_id=product_id, gender=gender, insured_amount=insured_amount, results=results)


def batch_calculate_ranges(
    product_id: Any,
    gender: Any,
    age_range: Optional[str],
    period_range: Optional[str],
    insured_amount: Any,
    cfg: Optional[PricingConfig] = None,
) -> Union[BatchResult, PremiumError]:
    """
    Parse both ranges and run the batch.

    Ranges must lie within the validator's entry-age and period limits;
    anything wider is rejected before a single calculation runs.
    """
    cfg = cfg or PricingConfig()
    age_bounds = parse_bounds(age_range)
    period_bounds = parse_bounds(period_range)
    if (
        age_bounds is None
        or period_bounds is None
        or not _within_limits(age_bounds, cfg.min_entry_age, cfg.max_entry_age)
        or not _within_limits(period_bounds, cfg.min_period, cfg.max_period)
    ):
        return PremiumError(ErrorKind.INVALID_INPUT, MSG_INVALID_RANGE)

    ages = list(range(age_bounds[0], age_bounds[1] + 1))
    periods = list(range(period_bounds[0], period_bounds[1] + 1))
    return batch_calculate(product_id, gender, ages, periods, insured_amount, cfg=cfg)


def _within_limits(bounds: Tuple[int, int], lo: float, hi: float) -> bool:
    return lo <= bounds[0] and bounds[1] <= hi


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Batch premium estimates over age and period ranges.")
    p.add_argument("--product_id", type=str, required=True)
    p.add_argument("--gender", type=str, required=True, choices=["M", "F"])
    p.add_argument("--age_range", type=str, required=True, help='Entry ages, e.g. "0-5".')
    p.add_argument("--period_range", type=str, required=True, help='Insurance periods in years, e.g. "10-12".')
    p.add_argument("--insured_amount", type=float, required=True)
    p.add_argument(
        "--out",
        type=str,
        default="reports/premium_batch.csv",
        help="Output path (.csv or .parquet), relative to the project root.",
    )
    p.add_argument(
        "--report_path",
        type=str,
        default=None,
        help="Optional JSON summary path, relative to the project root.",
    )
    return p.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging()
    root = get_project_root()

    out = batch_calculate_ranges(
        product_id=args.product_id,
        gender=args.gender,
        age_range=args.age_range,
        period_range=args.period_range,
        insured_amount=args.insured_amount,
    )
    if isinstance(out, PremiumError):
        raise SystemExit(f"[ERROR] {out.message}")

    out_path = root / args.out
    df = out.to_frame()
    write_df(df, out_path)
    print(f"[OK] Batch results saved: {out_path}")

    if args.report_path:
        report_path = root / args.report_path
        write_json(
            {
                "product_id": out.product_id,
                "gender": out.gender,
                "insured_amount": out.insured_amount,
                "age_range": args.age_range,
                "period_range": args.period_range,
                "rows": int(len(df)),
                "succeeded": out.success_count,
                "failed": int(len(df)) - out.success_count,
            },
            report_path,
        )
        print(f"[OK] Batch report saved: {report_path}")

    print(f"Rows={len(df)} | Succeeded={out.success_count} | Failed={len(df) - out.success_count}")


if __name__ == "__main__":
    main()
