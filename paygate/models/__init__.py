from .enums import PaymentProviderCode

__all__ = ["PaymentProviderCode"]
