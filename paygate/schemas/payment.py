"""Payment request schema."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Monetary amount in major units, as accepted by builders and processors
Amount = Union[int, float, Decimal]


class PaymentRequest(BaseModel):
    """Immutable, validated payment request.

    Instances are normally produced by ``PaymentRequestBuilder.build()``, which
    reports failures as typed ``PaymentValidationError`` subclasses. Direct
    construction still enforces the amount and currency invariants.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    amount: float = Field(..., ge=0.0, description="Payment amount in major units (dollars)")
    currency: str = Field(..., pattern=r"^[A-Z]{3}$", description="3-letter ISO currency code")
    description: Optional[str] = Field(None, description="Payment description")
    customer_id: Optional[str] = Field(None, alias="customerId", description="Customer identifier")
    metadata: Optional[Dict[str, Any]] = Field(None, description="Additional key-value metadata")

    def to_dict(self) -> Dict[str, Any]:
        """Plain mapping of all five fields; unset optionals are ``None``."""
        return self.model_dump(by_alias=True)
