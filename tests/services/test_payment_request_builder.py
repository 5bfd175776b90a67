"""Test cases for PaymentRequestBuilder."""

import math
from decimal import Decimal

import pytest
from structlog.testing import capture_logs

from paygate.core.exceptions import (
    EmptyCurrencyError,
    ErrorCode,
    InvalidCurrencyFormatError,
    InvalidFieldTypeError,
    NegativeAmountError,
    PaymentValidationError,
)
from paygate.schemas.payment import PaymentRequest
from paygate.services.payment_request_builder import PaymentRequestBuilder


class TestPaymentRequestBuilder:
    """Test building payment requests."""

    def test_builder_creates_payment_request(self):
        assert isinstance(PaymentRequestBuilder().build(), PaymentRequest)

    def test_builder_has_default_values(self):
        """Test that an untouched builder produces the defaults."""
        request = PaymentRequestBuilder().build()

        assert request.amount == 0.0
        assert request.currency == "USD"
        assert request.description is None
        assert request.customer_id is None
        assert request.metadata is None

    @pytest.mark.parametrize(
        "setter, value",
        [
            ("set_amount", 10.50),
            ("set_currency", "EUR"),
            ("set_description", "Test payment"),
            ("set_customer_id", "cust_12345"),
            ("set_metadata", {"order_id": "12345"}),
        ],
    )
    def test_setters_return_builder(self, setter, value):
        """Test that every setter returns the same builder for chaining."""
        builder = PaymentRequestBuilder()

        assert getattr(builder, setter)(value) is builder

    def test_fluent_interface(self):
        request = (
            PaymentRequestBuilder()
            .set_amount(99.99)
            .set_currency("EUR")
            .build()
        )

        assert request.amount == 99.99
        assert request.currency == "EUR"

    @pytest.mark.parametrize("amount", [0.0, 0.01, 10.50, 9999.99, float("inf")])
    def test_builder_with_various_amounts(self, amount):
        request = PaymentRequestBuilder().set_amount(amount).build()

        assert request.amount == amount

    @pytest.mark.parametrize("currency", ["USD", "EUR", "GBP", "JPY"])
    def test_builder_with_various_currencies(self, currency):
        request = PaymentRequestBuilder().set_currency(currency).build()

        assert request.currency == currency

    def test_complete_builder_with_all_fields(self):
        """Test setting every field, in a non-declaration order."""
        request = (
            PaymentRequestBuilder()
            .set_metadata({"plan": "premium", "billing": "monthly"})
            .set_customer_id("cust_67890")
            .set_currency("GBP")
            .set_description("Premium subscription")
            .set_amount(150.00)
            .build()
        )

        assert request.amount == 150.00
        assert request.currency == "GBP"
        assert request.description == "Premium subscription"
        assert request.customer_id == "cust_67890"
        assert request.metadata == {"plan": "premium", "billing": "monthly"}

    def test_last_value_wins(self):
        request = PaymentRequestBuilder().set_amount(5).set_amount(7.25).build()

        assert request.amount == 7.25


class TestPaymentRequestBuilderValidation:
    """Test validation at build time."""

    def test_validates_negative_amount(self):
        builder = PaymentRequestBuilder().set_amount(-10.00)

        with pytest.raises(NegativeAmountError, match="Amount cannot be negative") as exc_info:
            builder.build()

        assert exc_info.value.code == ErrorCode.VALIDATION_NEGATIVE_AMOUNT

    @pytest.mark.parametrize("amount", [float("nan"), Decimal("NaN"), Decimal("-0.01"), -math.inf])
    def test_rejects_nan_and_negative_amounts(self, amount):
        """Test that amounts which are not >= 0, NaN included, fail as negative."""
        with pytest.raises(NegativeAmountError):
            PaymentRequestBuilder().set_amount(amount).build()

    @pytest.mark.parametrize("amount", ["10.50", None, True, [10]])
    def test_rejects_non_numeric_amount(self, amount):
        """Test that a non-numeric amount is reported as a validation error."""
        builder = PaymentRequestBuilder().set_amount(amount)

        with pytest.raises(InvalidFieldTypeError, match="Amount must be a number") as exc_info:
            builder.build()

        assert exc_info.value.code == ErrorCode.VALIDATION_INVALID_TYPE
        assert exc_info.value.details["field"] == "amount"

    @pytest.mark.parametrize("currency", [840, b"USD", ["USD"]])
    def test_rejects_non_string_currency(self, currency):
        builder = PaymentRequestBuilder().set_currency(currency)

        with pytest.raises(InvalidFieldTypeError, match="Currency must be a string"):
            builder.build()

    def test_non_string_currency_checked_after_amount(self):
        with pytest.raises(NegativeAmountError):
            PaymentRequestBuilder().set_amount(-1).set_currency(840).build()

    def test_validates_empty_currency(self):
        builder = PaymentRequestBuilder().set_currency("")

        with pytest.raises(EmptyCurrencyError, match="Currency cannot be empty") as exc_info:
            builder.build()

        assert exc_info.value.code == ErrorCode.VALIDATION_EMPTY_CURRENCY

    @pytest.mark.parametrize("currency", ["US", "USDD", "usd", "Usd", "U5D", "US ", "ÄBC", "USD\n"])
    def test_validates_currency_format(self, currency):
        """Test that only three uppercase ASCII letters are accepted; no normalization."""
        builder = PaymentRequestBuilder().set_currency(currency)

        with pytest.raises(
            InvalidCurrencyFormatError, match="Currency must be a valid 3-letter ISO code"
        ) as exc_info:
            builder.build()

        assert exc_info.value.code == ErrorCode.VALIDATION_INVALID_CURRENCY_FORMAT
        assert exc_info.value.details == {"currency": currency}

    def test_amount_is_checked_before_currency(self):
        """Test that a negative amount wins over an empty currency."""
        builder = PaymentRequestBuilder().set_amount(-10).set_currency("")

        with pytest.raises(NegativeAmountError):
            builder.build()

    def test_empty_currency_is_checked_before_format(self):
        with pytest.raises(EmptyCurrencyError):
            PaymentRequestBuilder().set_currency("").build()

    def test_setters_do_not_validate(self):
        """Test that invalid values are accepted until build()."""
        builder = PaymentRequestBuilder().set_amount(-1).set_currency("x")

        builder.set_amount(1).set_currency("CAD")

        assert builder.build().currency == "CAD"

    def test_validation_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            PaymentRequestBuilder().set_amount(-1).build()

        assert issubclass(NegativeAmountError, PaymentValidationError)
        assert issubclass(EmptyCurrencyError, PaymentValidationError)
        assert issubclass(InvalidCurrencyFormatError, PaymentValidationError)

    def test_builder_can_be_corrected_after_failure(self):
        builder = PaymentRequestBuilder().set_amount(-5)

        with pytest.raises(NegativeAmountError):
            builder.build()

        assert builder.set_amount(5).build().amount == 5

    def test_validation_failure_is_logged(self):
        with capture_logs() as logs:
            with pytest.raises(EmptyCurrencyError):
                PaymentRequestBuilder().set_currency("").build()

        assert logs[0]["event"] == "payment_request_validation_failed"
        assert logs[0]["error_code"] == "VALIDATION_EMPTY_CURRENCY"


class TestPaymentRequestBuilderReuse:
    """Test that build() keeps state and reset() clears it."""

    def test_builder_can_be_reused(self):
        builder = PaymentRequestBuilder()

        request1 = builder.set_amount(10.00).set_currency("USD").build()
        request2 = builder.set_amount(20.00).build()

        assert request1.amount == 10.00
        assert request2.amount == 20.00
        assert request2.currency == "USD"

    def test_build_does_not_clear_optional_fields(self):
        builder = PaymentRequestBuilder().set_description("Order #1").set_customer_id("cust_1")

        builder.build()
        request = builder.set_amount(3).build()

        assert request.description == "Order #1"
        assert request.customer_id == "cust_1"

    def test_reset_method_clears_all_values(self):
        builder = (
            PaymentRequestBuilder()
            .set_amount(100.00)
            .set_currency("EUR")
            .set_description("Test")
            .set_customer_id("cust_123")
            .set_metadata({"key": "value"})
        )

        request = builder.reset().build()

        assert request == PaymentRequestBuilder().build()
        assert request.amount == 0.0
        assert request.currency == "USD"
        assert request.description is None
        assert request.customer_id is None
        assert request.metadata is None

    def test_reset_returns_builder(self):
        builder = PaymentRequestBuilder()

        assert builder.reset() is builder

    def test_reset_recovers_from_invalid_state(self):
        builder = PaymentRequestBuilder().set_amount(-1).set_currency("bad")

        assert builder.reset().build().currency == "USD"

    def test_issued_request_is_isolated_from_builder_metadata(self):
        """Test that mutating the metadata passed in does not alter built requests."""
        metadata = {"ref": "order_123"}
        builder = PaymentRequestBuilder().set_metadata(metadata)

        request = builder.build()
        metadata["ref"] = "changed"
        builder.set_metadata({"ref": "other"})

        assert request.metadata == {"ref": "order_123"}
