"""
Environment configuration for paygate.

Values are read from ``.env`` / ``.env.local`` and the process environment,
case-insensitively.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.enums import PaymentProviderCode


class EnvironmentMode(str, Enum):
    """Environment operation modes."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class PaymentEnvironment(BaseSettings):
    """Runtime settings for logging and provider selection."""

    model_config = SettingsConfigDict(
        env_file=[".env", ".env.local"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="",
        env_ignore_empty=True,
    )

    ENV: EnvironmentMode = Field(
        default=EnvironmentMode.DEVELOPMENT,
        description="Current environment mode"
    )

    LOG_LEVEL: Optional[str] = Field(
        default=None,
        description="Log level override (DEBUG in development, INFO otherwise)"
    )

    DEFAULT_PAYMENT_PROVIDER: str = Field(
        default=PaymentProviderCode.STRIPE.value,
        description="Provider used when callers do not name one"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return v

    @field_validator("DEFAULT_PAYMENT_PROVIDER")
    @classmethod
    def validate_default_provider(cls, v: str) -> str:
        v = v.upper()
        supported = [code.value for code in PaymentProviderCode]
        if v not in supported:
            raise ValueError(
                f"DEFAULT_PAYMENT_PROVIDER must be one of: {', '.join(supported)}"
            )
        return v

    @property
    def is_production(self) -> bool:
        return self.ENV == EnvironmentMode.PRODUCTION


environment = PaymentEnvironment()
