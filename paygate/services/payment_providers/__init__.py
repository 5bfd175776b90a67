"""Payment provider abstraction package."""

from .base import PaymentProcessor
from .stripe_sdk import StripeSDK, StripeSDKError
from .stripe_provider import StripeAdapter
from .paypal_provider import PayPalProcessor
from .provider_factory import PaymentGatewayFactory, get_payment_processor

__all__ = [
    "PaymentProcessor",
    "StripeSDK",
    "StripeSDKError",
    "StripeAdapter",
    "PayPalProcessor",
    "PaymentGatewayFactory",
    "get_payment_processor",
]
