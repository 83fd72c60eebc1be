"""Tests for settings and pricing configuration."""

import dataclasses

import pytest

from premium_estimator.pricing.config import DEFAULT_LOADING_RATE, MAX_AGE_KEY, PricingConfig
from premium_estimator.utils.config import get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for key in ["PREMIUM_LOG_LEVEL", "PREMIUM_CURRENCY", "PREMIUM_API_TITLE", "CHECK_RATES"]:
            monkeypatch.delenv(key, raising=False)

        s = get_settings()
        assert s.log_level == "INFO"
        assert s.currency == "JPY"
        assert s.api_title == "Premium Estimator"
        assert s.check_rates is True

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PREMIUM_LOG_LEVEL", "debug")
        monkeypatch.setenv("PREMIUM_CURRENCY", "gbp")
        monkeypatch.setenv("CHECK_RATES", "no")

        s = get_settings()
        assert s.log_level == "DEBUG"
        assert s.currency == "GBP"
        assert s.check_rates is False

    def test_empty_env_uses_default(self, monkeypatch):
        monkeypatch.setenv("PREMIUM_CURRENCY", "")
        assert get_settings().currency == "JPY"


class TestPricingConfig:
    def test_defaults(self, pricing_config):
        assert pricing_config.genders == ("M", "F")
        assert pricing_config.max_age_key == MAX_AGE_KEY == 5
        assert pricing_config.default_loading_rate == DEFAULT_LOADING_RATE == 0.0001
        assert pricing_config.max_insured_amount == 1_000_000_000

    def test_frozen(self, pricing_config):
        with pytest.raises(dataclasses.FrozenInstanceError):
            pricing_config.max_age_key = 10

    def test_override(self):
        cfg = PricingConfig(max_entry_age=60)
        assert cfg.max_entry_age == 60
        assert cfg.base_rates is PricingConfig().base_rates
