"""Fluent builder for ``PaymentRequest`` objects."""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any, Dict, Optional

from ..core.exceptions import (
    EmptyCurrencyError,
    InvalidCurrencyFormatError,
    InvalidFieldTypeError,
    NegativeAmountError,
    PaymentValidationError,
)
from ..core.logging import get_logger
from ..schemas.payment import Amount, PaymentRequest

logger = get_logger(__name__)

DEFAULT_AMOUNT = 0.0
DEFAULT_CURRENCY = "USD"

CURRENCY_CODE_PATTERN = re.compile(r"[A-Z]{3}")


def _is_non_negative(amount: Amount) -> bool:
    # NaN compares false against everything; Decimal NaN raises on comparison
    if isinstance(amount, Decimal) and amount.is_nan():
        return False
    return amount >= 0


class PaymentRequestBuilder:
    """Builds validated ``PaymentRequest`` objects.

    Setters store values as given and return the builder, so calls can be
    chained in any order. Nothing is checked until ``build()``. Building does
    not clear the builder; use ``reset()`` for that.

    Usage:
        request = (
            PaymentRequestBuilder()
            .set_amount(10.50)
            .set_currency("USD")
            .set_description("Test payment")
            .build()
        )
    """

    def __init__(self):
        self.reset()

    def set_amount(self, amount: Amount) -> PaymentRequestBuilder:
        """Set the amount in major units (must be non-negative at build time)."""
        self._amount = amount
        return self

    def set_currency(self, currency: str) -> PaymentRequestBuilder:
        """Set the 3-letter ISO currency code, e.g. 'USD' or 'EUR'."""
        self._currency = currency
        return self

    def set_description(self, description: str) -> PaymentRequestBuilder:
        self._description = description
        return self

    def set_customer_id(self, customer_id: str) -> PaymentRequestBuilder:
        self._customer_id = customer_id
        return self

    def set_metadata(self, metadata: Dict[str, Any]) -> PaymentRequestBuilder:
        self._metadata = metadata
        return self

    def build(self) -> PaymentRequest:
        """Validate the current values and return a new ``PaymentRequest``.

        Raises:
            InvalidFieldTypeError: amount is not a number, or currency is not a str
            NegativeAmountError: amount is below zero or NaN
            EmptyCurrencyError: currency is empty
            InvalidCurrencyFormatError: currency is not three uppercase letters
            pydantic.ValidationError: description, customer_id or metadata has
                a type the request model rejects
        """
        try:
            self._validate()
        except PaymentValidationError as e:
            logger.info("payment_request_validation_failed", error_code=e.code.value, error=e.message)
            raise

        request = PaymentRequest(
            amount=self._amount,
            currency=self._currency,
            description=self._description,
            customer_id=self._customer_id,
            metadata=dict(self._metadata) if self._metadata is not None else None,
        )
        logger.debug("payment_request_built", amount=str(request.amount), currency=request.currency)
        return request

    def _validate(self) -> None:
        # Order matters: amount first, then currency presence, then format
        if isinstance(self._amount, bool) or not isinstance(self._amount, (int, float, Decimal)):
            raise InvalidFieldTypeError(
                "Amount must be a number", details={"field": "amount", "type": type(self._amount).__name__}
            )

        if not _is_non_negative(self._amount):
            raise NegativeAmountError(details={"amount": self._amount})

        if not self._currency:
            raise EmptyCurrencyError()

        if not isinstance(self._currency, str):
            raise InvalidFieldTypeError(
                "Currency must be a string", details={"field": "currency", "type": type(self._currency).__name__}
            )

        if not CURRENCY_CODE_PATTERN.fullmatch(self._currency):
            raise InvalidCurrencyFormatError(details={"currency": self._currency})

    def reset(self) -> PaymentRequestBuilder:
        """Restore every field to its default value."""
        self._amount: Amount = DEFAULT_AMOUNT
        self._currency: str = DEFAULT_CURRENCY
        self._description: Optional[str] = None
        self._customer_id: Optional[str] = None
        self._metadata: Optional[Dict[str, Any]] = None
        return self
