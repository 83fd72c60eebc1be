"""Pytest fixtures for Premium Estimator tests."""

from types import MappingProxyType

import pytest

from premium_estimator.pricing.config import PricingConfig
from premium_estimator.pricing.quote import PremiumRequest


@pytest.fixture
def pricing_config() -> PricingConfig:
    """Default pricing configuration (static tables)."""
    return PricingConfig()


@pytest.fixture
def sparse_config() -> PricingConfig:
    """A config with a male-only product and no loading entry for it."""
    return PricingConfig(
        base_rates=MappingProxyType({"9": MappingProxyType({"M": MappingProxyType({"0": 0.002, "1": 0.003})})}),
        loading_rates=MappingProxyType({}),
        max_age_key=1,
    )


@pytest.fixture
def plan_a_request() -> PremiumRequest:
    """Plan A, male, age 2, 10 years, 1,000,000 insured."""
    return PremiumRequest(
        product_id="1",
        gender="M",
        entry_age=2,
        insurance_period=10,
        insured_amount=1_000_000,
    )


@pytest.fixture
def plan_b_request() -> PremiumRequest:
    """Plan B, female, age 5, 20 years, 5,000,000 insured."""
    return PremiumRequest(
        product_id="2",
        gender="F",
        entry_age=5,
        insurance_period=20,
        insured_amount=5_000_000,
    )
