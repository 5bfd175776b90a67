"""Payment gateway factory."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from ...core.environment import environment
from ...core.exceptions import UnsupportedProviderError
from ...core.logging import get_logger
from ...models.enums import PaymentProviderCode
from .base import PaymentProcessor
from .paypal_provider import PayPalProcessor
from .stripe_provider import StripeAdapter
from .stripe_sdk import StripeSDK

logger = get_logger(__name__)


def _create_stripe_processor() -> PaymentProcessor:
    """Stripe needs an adapter because its SDK charges in cents."""
    return StripeAdapter(StripeSDK())


def _create_paypal_processor() -> PaymentProcessor:
    return PayPalProcessor()


class PaymentGatewayFactory:
    """Factory for creating payment processor instances by provider name.

    Every lookup builds new instances; nothing is cached between calls.
    """

    _providers: Dict[PaymentProviderCode, Callable[[], PaymentProcessor]] = {
        PaymentProviderCode.STRIPE: _create_stripe_processor,
        PaymentProviderCode.PAYPAL: _create_paypal_processor,
    }

    @classmethod
    def get_processor(cls, provider: str) -> PaymentProcessor:
        """Create a payment processor for a provider.

        Args:
            provider: Provider name, case-insensitive ("stripe", "PayPal", ...)

        Returns:
            PaymentProcessor instance

        Raises:
            UnsupportedProviderError: If provider is not supported
        """
        normalized = provider.upper()

        if not cls.is_provider_supported(normalized):
            logger.warning(
                "unsupported_payment_provider",
                provider=normalized,
                supported_providers=cls.get_supported_providers(),
            )
            raise UnsupportedProviderError(normalized, cls.get_supported_providers())

        processor = cls._providers[PaymentProviderCode(normalized)]()
        logger.debug(
            "payment_processor_resolved",
            provider=normalized,
            processor=type(processor).__name__,
        )
        return processor

    @classmethod
    def get_supported_providers(cls) -> List[str]:
        """Get supported provider names in declaration order."""
        return [code.value for code in PaymentProviderCode]

    @classmethod
    def is_provider_supported(cls, provider: str) -> bool:
        """Check if a provider is supported."""
        return provider.upper() in cls.get_supported_providers()


def get_payment_processor(provider: Optional[str] = None) -> PaymentProcessor:
    """
    Convenience function to get a payment processor by name.

    Args:
        provider: Provider name (default: ``DEFAULT_PAYMENT_PROVIDER`` setting)

    Returns:
        PaymentProcessor instance
    """
    if provider is None:
        provider = environment.DEFAULT_PAYMENT_PROVIDER
    return PaymentGatewayFactory.get_processor(provider)
