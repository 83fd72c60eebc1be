"""Tests for the raw form adapter."""

import math

from premium_estimator.forms.runtime import build_request_from_form, is_form_complete
from premium_estimator.pricing.quote import ErrorKind, PremiumRequest, calculate


class TestBuildRequestFromForm:
    def test_string_fields_parsed(self):
        built = build_request_from_form(
            {
                "product_id": "1",
                "gender": "M",
                "entry_age": "2",
                "insurance_period": "10",
                "insured_amount": "1,000,000",
            }
        )
        assert built.warnings == []
        assert built.request == PremiumRequest("1", "M", 2, 10, 1_000_000)
        assert isinstance(built.request.entry_age, int)

    def test_result_feeds_calculator(self):
        built = build_request_from_form(
            {"product_id": "2", "gender": "F", "entry_age": "5", "insurance_period": "20", "insured_amount": "5000000"}
        )
        result = calculate(built.request)
        assert result.success
        assert math.isclose(result.annual_premium, 3650)

    def test_missing_fields_default(self):
        built = build_request_from_form({})
        assert built.request.product_id is None
        assert built.request.gender is None
        assert built.request.entry_age == 0
        assert built.request.insurance_period == 0
        assert built.request.insured_amount == 0

    def test_unparsable_number_warns_and_fails_validation(self):
        built = build_request_from_form(
            {"product_id": "1", "gender": "M", "entry_age": "abc", "insurance_period": "10", "insured_amount": "100"}
        )
        assert math.isnan(built.request.entry_age)
        assert len(built.warnings) == 1
        assert "entry_age" in built.warnings[0]
        assert calculate(built.request).error_kind is ErrorKind.INVALID_INPUT

    def test_whitespace_text_becomes_none(self):
        built = build_request_from_form({"product_id": "  ", "gender": " F "})
        assert built.request.product_id is None
        assert built.request.gender == "F"


class TestIsFormComplete:
    def test_complete(self):
        assert is_form_complete(PremiumRequest("1", "M", 2, 10, 1_000_000))

    def test_missing_text_fields(self):
        assert not is_form_complete(PremiumRequest(None, "M", 2, 10, 1_000_000))
        assert not is_form_complete(PremiumRequest("1", None, 2, 10, 1_000_000))

    def test_zero_or_nan_numbers(self):
        # Age 0 is a valid input but does not trigger real-time calculation
        assert not is_form_complete(PremiumRequest("1", "M", 0, 10, 1_000_000))
        assert not is_form_complete(PremiumRequest("1", "M", 2, 0, 1_000_000))
        assert not is_form_complete(PremiumRequest("1", "M", 2, 10, float("nan")))
