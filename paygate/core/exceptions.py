"""
Error taxonomy for paygate.

Resolution and validation failures are raised. A declined or failed charge is
not an exception: processors report it by returning ``False``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCode(str, Enum):
    """Machine-readable error codes."""

    UNSUPPORTED_PROVIDER = "UNSUPPORTED_PROVIDER"

    VALIDATION_FAILED = "VALIDATION_FAILED"
    VALIDATION_INVALID_TYPE = "VALIDATION_INVALID_TYPE"
    VALIDATION_NEGATIVE_AMOUNT = "VALIDATION_NEGATIVE_AMOUNT"
    VALIDATION_EMPTY_CURRENCY = "VALIDATION_EMPTY_CURRENCY"
    VALIDATION_INVALID_CURRENCY_FORMAT = "VALIDATION_INVALID_CURRENCY_FORMAT"


class PaymentError(Exception):
    """Base exception for paygate errors."""

    code: ErrorCode

    def __init__(self, code: ErrorCode, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class UnsupportedProviderError(PaymentError, ValueError):
    """Raised when a provider name is outside the supported set."""

    def __init__(self, provider: str, supported: List[str]):
        self.provider = provider
        self.supported = list(supported)
        super().__init__(
            ErrorCode.UNSUPPORTED_PROVIDER,
            f"Payment provider '{provider}' is not supported. "
            f"Supported providers: {', '.join(self.supported)}",
            {"provider": provider, "supported_providers": self.supported},
        )


class PaymentValidationError(PaymentError, ValueError):
    """Raised by the request builder when its fields fail validation."""

    code = ErrorCode.VALIDATION_FAILED
    default_message = "Invalid payment request"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(type(self).code, message or self.default_message, details)


class NegativeAmountError(PaymentValidationError):
    code = ErrorCode.VALIDATION_NEGATIVE_AMOUNT
    default_message = "Amount cannot be negative"


class EmptyCurrencyError(PaymentValidationError):
    code = ErrorCode.VALIDATION_EMPTY_CURRENCY
    default_message = "Currency cannot be empty"


class InvalidCurrencyFormatError(PaymentValidationError):
    code = ErrorCode.VALIDATION_INVALID_CURRENCY_FORMAT
    default_message = "Currency must be a valid 3-letter ISO code"


class InvalidFieldTypeError(PaymentValidationError):
    code = ErrorCode.VALIDATION_INVALID_TYPE
    default_message = "Payment request field has an invalid type"
