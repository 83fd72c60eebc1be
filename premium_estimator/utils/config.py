# premium_estimator/utils/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(key)
    return v if v is not None and v != "" else default


def _env_flag(key: str, default: bool) -> bool:
    v = _env(key)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes"}


@dataclass(frozen=True)
class Settings:
    log_level: str
    currency: str
    api_title: str
    check_rates: bool


def get_settings() -> Settings:
    """
    Runtime settings from environment variables.

    Env:
      PREMIUM_LOG_LEVEL  (default: INFO)
      PREMIUM_CURRENCY   (default: JPY)
      PREMIUM_API_TITLE  (default: Premium Estimator)
      CHECK_RATES        (default: true)
    """
    return Settings(
        log_level=(_env("PREMIUM_LOG_LEVEL", "INFO") or "INFO").upper(),
        currency=(_env("PREMIUM_CURRENCY", "JPY") or "JPY").upper(),
        api_title=_env("PREMIUM_API_TITLE", "Premium Estimator") or "Premium Estimator",
        check_rates=_env_flag("CHECK_RATES", True),
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Root logging setup for the API and CLI entry points (no-op if handlers exist)."""
    level = level or get_settings().log_level
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def get_project_root() -> Path:
    """
    Resolve repo root robustly.
    Assumes this file lives at: <root>/premium_estimator/utils/config.py
    """
    return Path(__file__).resolve().parents[2]
