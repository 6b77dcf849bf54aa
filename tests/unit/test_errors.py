"""
Unit Tests for Takeoff Errors.

Tests cover:
- Error serialization
- Field and trade context
- Non-negative, finite input guard
"""

import pytest

from takeoff.config.errors import (
    CatalogError,
    ErrorCode,
    ExtractionError,
    TakeoffError,
    ValidationError,
    require_non_negative,
)


class TestErrorSerialization:
    """Errors serialize to code, message and details."""

    def test_to_dict(self):
        error = TakeoffError(ErrorCode.VALIDATION_ERROR, "bad input", {"value": 3})

        assert error.to_dict() == {
            "code": "VALIDATION_ERROR",
            "message": "bad input",
            "details": {"value": 3},
        }
        assert str(error) == "bad input"

    def test_validation_error_field(self):
        error = ValidationError("length must be non-negative", field="length")

        assert error.field == "length"
        assert error.details == {"field": "length"}
        assert error.code == ErrorCode.VALIDATION_ERROR

    def test_validation_error_without_field(self):
        assert ValidationError("bad").details == {}

    def test_catalog_error(self):
        error = CatalogError("missing tables", trade="mechanical")

        assert error.code == ErrorCode.CATALOG_TRADE_MISSING
        assert error.details["trade"] == "mechanical"

    def test_extraction_error(self):
        error = ExtractionError("no capture groups", strategy="pipe_sentence")

        assert error.to_dict()["details"] == {"strategy": "pipe_sentence"}

    def test_subclasses_share_base(self):
        assert issubclass(ValidationError, TakeoffError)
        assert issubclass(CatalogError, TakeoffError)


class TestRequireNonNegative:
    """Tests for the numeric input guard."""

    def test_passes_through(self):
        assert require_non_negative("area", 0) == 0
        assert require_non_negative("area", 12.5) == 12.5

    def test_negative(self):
        with pytest.raises(ValidationError) as exc_info:
            require_non_negative("area", -1)

        assert exc_info.value.code == ErrorCode.NEGATIVE_QUANTITY
        assert exc_info.value.details == {"value": -1, "field": "area"}

    @pytest.mark.parametrize("value", ["10", None, True])
    def test_not_a_number(self, value):
        with pytest.raises(ValidationError) as exc_info:
            require_non_negative("length", value)

        assert exc_info.value.code == ErrorCode.INVALID_FIELD

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_not_finite(self, value):
        with pytest.raises(ValidationError) as exc_info:
            require_non_negative("area", value)

        assert exc_info.value.code == ErrorCode.INVALID_FIELD
        assert exc_info.value.field == "area"
