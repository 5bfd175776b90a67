"""Base payment processor interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal

from ...schemas.payment import Amount

CENTS_PER_UNIT = Decimal("100")


class PaymentProcessor(ABC):
    """Uniform contract every payment backend exposes to calling code.

    Amounts are always given in major currency units (e.g. dollars), whatever
    unit the underlying provider works in. A failed charge is reported by
    returning ``False``; it is a normal outcome, not an exception.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider name identifier."""
        pass

    @abstractmethod
    def process_payment(self, amount: Amount) -> bool:
        """Process a payment for the given amount.

        Args:
            amount: Payment amount in major units (10.50 == $10.50)

        Returns:
            True if the payment was successful, False otherwise
        """
        pass

    def _to_decimal(self, amount: Amount) -> Decimal:
        """Decimal of the amount; floats go through their shortest repr."""
        return amount if isinstance(amount, Decimal) else Decimal(str(amount))

    def _convert_amount_to_cents(self, amount: Amount) -> int:
        """Convert a finite major-unit amount to cents, rounding half away from zero.

        10.505 becomes 1051 rather than 1050 (10.505 * 100 ==
        1050.4999999999998 in binary floating point).
        """
        value = self._to_decimal(amount)
        return int((value * CENTS_PER_UNIT).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} provider={self.provider_name}>"
