"""Tests for premium input validation."""

import math

import pytest

from premium_estimator.pricing.validation import (
    MSG_ENTRY_AGE,
    MSG_GENDER,
    MSG_INSURED_AMOUNT,
    MSG_PERIOD,
    MSG_PRODUCT,
    normalize_product_id,
    validate_inputs,
)

VALID = dict(product_id="1", gender="M", entry_age=2, insurance_period=10, insured_amount=1_000_000)


def _validate(**overrides):
    args = {**VALID, **overrides}
    return validate_inputs(**args)


class TestValidateInputs:
    """Rule-by-rule checks, first failure wins."""

    def test_valid_inputs_pass(self):
        result = _validate()
        assert result.is_valid
        assert result.message

    @pytest.mark.parametrize("product_id", ["", None, "3", "0", "  "])
    def test_unknown_or_empty_product_rejected(self, product_id):
        result = _validate(product_id=product_id)
        assert not result.is_valid
        assert result.message == MSG_PRODUCT

    def test_int_product_id_accepted(self):
        assert _validate(product_id=2).is_valid

    @pytest.mark.parametrize("gender", ["m", "f", "X", "", None, "Male"])
    def test_gender_must_be_exact(self, gender):
        result = _validate(gender=gender)
        assert not result.is_valid
        assert result.message == MSG_GENDER

    @pytest.mark.parametrize("age", [-1, 101, 100.5, math.nan, math.inf, None, "5", True])
    def test_entry_age_out_of_range(self, age):
        result = _validate(entry_age=age)
        assert not result.is_valid
        assert result.message == MSG_ENTRY_AGE

    @pytest.mark.parametrize("age", [0, 5, 100])
    def test_entry_age_bounds_inclusive(self, age):
        assert _validate(entry_age=age).is_valid

    @pytest.mark.parametrize("period", [0, 51, -3, math.nan, None])
    def test_period_out_of_range(self, period):
        result = _validate(insurance_period=period)
        assert not result.is_valid
        assert result.message == MSG_PERIOD

    @pytest.mark.parametrize("period", [1, 50])
    def test_period_bounds_inclusive(self, period):
        assert _validate(insurance_period=period).is_valid

    @pytest.mark.parametrize("amount", [0, -1, 1_000_000_001, math.inf, math.nan, None, "1000"])
    def test_amount_out_of_range(self, amount):
        result = _validate(insured_amount=amount)
        assert not result.is_valid
        assert result.message == MSG_INSURED_AMOUNT

    def test_amount_upper_bound_inclusive(self):
        assert _validate(insured_amount=1_000_000_000).is_valid

    def test_first_failure_wins(self):
        """Bad product and bad amount together report the product."""
        result = _validate(product_id="3", insured_amount=0)
        assert result.message == MSG_PRODUCT

        result = _validate(gender="X", entry_age=-1)
        assert result.message == MSG_GENDER


class TestNormalizeProductId:
    def test_values(self):
        assert normalize_product_id(1) == "1"
        assert normalize_product_id(" 2 ") == "2"
        assert normalize_product_id("") is None
        assert normalize_product_id(None) is None
        assert normalize_product_id(True) is None

    def test_integral_float_renders_as_int(self):
        assert normalize_product_id(1.0) == "1"
        assert normalize_product_id(2.0) == "2"
        assert normalize_product_id(2.5) == "2.5"

    def test_integral_float_product_accepted(self):
        assert _validate(product_id=1.0).is_valid
        assert _validate(product_id=2.5).message == MSG_PRODUCT
