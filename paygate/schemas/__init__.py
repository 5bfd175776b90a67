from .payment import Amount, PaymentRequest

__all__ = ["Amount", "PaymentRequest"]
