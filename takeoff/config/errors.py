"""Takeoff error handling.

Custom exceptions and error codes. Only contract violations at a function
boundary raise; domain irregularities in the analysis text are reported as
notes on the AnalysisResult instead.
"""

import math
from typing import Optional, Dict, Any


# Error Codes
class ErrorCode:
    """Error code constants."""

    # Validation Errors (1xxx)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_FIELD = "INVALID_FIELD"
    INVALID_TEXT = "INVALID_TEXT"
    NEGATIVE_QUANTITY = "NEGATIVE_QUANTITY"
    UNKNOWN_TRADE = "UNKNOWN_TRADE"

    # Catalog Errors (2xxx)
    CATALOG_ERROR = "CATALOG_ERROR"
    CATALOG_TRADE_MISSING = "CATALOG_TRADE_MISSING"

    # Extraction Errors (3xxx)
    EXTRACTION_ERROR = "EXTRACTION_ERROR"


class TakeoffError(Exception):
    """Base exception for takeoff errors.

    Attributes:
        code: Error code from ErrorCode constants
        message: Human-readable error message
        details: Additional error context
    """

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for callers that report errors.

        Returns:
            Dictionary with code, message, and details.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class ValidationError(TakeoffError):
    """Contract violation at a function boundary."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict] = None,
        code: str = ErrorCode.VALIDATION_ERROR
    ):
        super().__init__(
            code=code,
            message=message,
            details={**(details or {}), "field": field} if field else details
        )
        self.field = field


class CatalogError(TakeoffError):
    """Raised when an injected catalog cannot serve a trade."""

    def __init__(
        self,
        message: str,
        trade: str,
        details: Optional[Dict] = None
    ):
        super().__init__(
            code=ErrorCode.CATALOG_TRADE_MISSING,
            message=message,
            details={**(details or {}), "trade": trade}
        )
        self.trade = trade


class ExtractionError(TakeoffError):
    """Raised when an extraction strategy is misconfigured."""

    def __init__(
        self,
        message: str,
        strategy: str,
        details: Optional[Dict] = None
    ):
        super().__init__(
            code=ErrorCode.EXTRACTION_ERROR,
            message=message,
            details={**(details or {}), "strategy": strategy}
        )
        self.strategy = strategy


def require_non_negative(name: str, value: float) -> float:
    """Reject negative numeric inputs.

    Raises:
        ValidationError: If value is negative, not finite or not a number.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(
            f"{name} must be a number, got {type(value).__name__}",
            field=name,
            code=ErrorCode.INVALID_FIELD,
        )
    if not math.isfinite(value):
        raise ValidationError(
            f"{name} must be finite, got {value}",
            field=name,
            details={"value": value},
            code=ErrorCode.INVALID_FIELD,
        )
    if value < 0:
        raise ValidationError(
            f"{name} must be non-negative, got {value}",
            field=name,
            details={"value": value},
            code=ErrorCode.NEGATIVE_QUANTITY,
        )
    return value
