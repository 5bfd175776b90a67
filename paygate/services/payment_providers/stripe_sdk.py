"""Stand-in for the third-party Stripe SDK.

Its interface is incompatible with ``PaymentProcessor`` on purpose: it charges
in cents and answers with the charged amount instead of a success flag.
"""

from __future__ import annotations


class StripeSDKError(Exception):
    """Error raised by the SDK when a charge cannot be made."""

    def __init__(self, message: str, code: str = "api_error"):
        self.code = code
        super().__init__(message)


class StripeSDK:
    """Simulated Stripe client."""

    def make_charge(self, value_in_cents: int) -> int:
        """Charge ``value_in_cents`` and return the amount actually charged.

        A real client would call the Stripe API here; the stub accepts every
        charge in full.
        """
        return value_in_cents
