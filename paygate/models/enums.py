"""Enums shared across paygate."""

import enum


class PaymentProviderCode(str, enum.Enum):
    """Supported payment providers, in declaration order."""
    STRIPE = "STRIPE"
    PAYPAL = "PAYPAL"
