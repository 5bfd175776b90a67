"""Stripe payment processor built on the Stripe SDK."""

from __future__ import annotations

from ...core.logging import get_logger
from ...models.enums import PaymentProviderCode
from ...schemas.payment import Amount
from .base import PaymentProcessor
from .stripe_sdk import StripeSDK, StripeSDKError

logger = get_logger(__name__)


class StripeAdapter(PaymentProcessor):
    """Adapts ``StripeSDK`` to the ``PaymentProcessor`` contract.

    - ``process_payment()`` maps onto ``StripeSDK.make_charge()``
    - dollars are converted to cents before the call
    - the charged amount is turned back into a success flag
    """

    def __init__(self, stripe_sdk: StripeSDK):
        self.stripe_sdk = stripe_sdk

    @property
    def provider_name(self) -> str:
        return PaymentProviderCode.STRIPE.value

    def process_payment(self, amount: Amount) -> bool:
        """Process a payment through Stripe."""
        value = self._to_decimal(amount)
        if not value.is_finite():
            logger.warning("stripe_charge_rejected", amount=str(amount), reason="non_finite_amount")
            return False

        amount_cents = self._convert_amount_to_cents(value)

        try:
            charged_cents = self.stripe_sdk.make_charge(amount_cents)
        except StripeSDKError as e:
            logger.warning(
                "stripe_charge_failed",
                amount_cents=amount_cents,
                error=str(e),
                error_code=e.code,
            )
            return False

        # A zero charge counts as failure, same as the native processors
        success = charged_cents == amount_cents and charged_cents > 0

        logger.debug(
            "stripe_charge_translated",
            amount=str(amount),
            amount_cents=amount_cents,
            charged_cents=charged_cents,
            success=success,
        )
        return success
