"""PayPal payment processor."""

from __future__ import annotations

from ...core.logging import get_logger
from ...models.enums import PaymentProviderCode
from ...schemas.payment import Amount
from .base import PaymentProcessor

logger = get_logger(__name__)


class PayPalProcessor(PaymentProcessor):
    """Native ``PaymentProcessor`` for PayPal.

    PayPal already takes amounts in major units, so no adapter is involved.
    """

    @property
    def provider_name(self) -> str:
        return PaymentProviderCode.PAYPAL.value

    def process_payment(self, amount: Amount) -> bool:
        # Any positive amount is accepted
        success = amount > 0
        logger.debug("paypal_payment_processed", amount=str(amount), success=success)
        return success
