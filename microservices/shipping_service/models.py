"""
Shipping Service Data Models

Customer address as collected by checkout, and the normalized quote returned
by the shipping rate endpoint.
"""

import math
from decimal import Decimal
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from microservices.pricing_service.models import DestinationAddress, ShippingResult

DEFAULT_QUOTE_CURRENCY = "USD"
DEFAULT_ESTIMATED_DAYS = 5
DEFAULT_METHOD = "Standard"
DEFAULT_CARRIER = "Prodigi"


class ShippingAddress(BaseModel):
    """Customer shipping address from the checkout form"""
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    address1: str = ""
    address2: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    country: str = ""
    phone: str = ""

    @field_validator('*', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v

    def to_destination_payload(self) -> Dict[str, str]:
        """Request body for the shipping rate endpoint"""
        return {
            "countryCode": self.country,
            "stateOrCounty": self.state,
            "postalCode": self.zip,
            "city": self.city,
        }

    def to_destination(self) -> DestinationAddress:
        """Destination model for pricing-side validation (may raise ValidationError)"""
        return DestinationAddress.model_validate(self.to_destination_payload())


class ShippingQuote(BaseModel):
    """Normalized shipping quote"""
    model_config = ConfigDict(populate_by_name=True)

    cost: Decimal = Decimal("0")
    currency: str = DEFAULT_QUOTE_CURRENCY
    estimated_days: int = Field(default=DEFAULT_ESTIMATED_DAYS, alias="estimatedDays")
    method: str = DEFAULT_METHOD
    is_estimated: bool = Field(default=False, alias="isEstimated")
    address_validated: bool = Field(default=False, alias="addressValidated")

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> 'ShippingQuote':
        """
        Build a quote from a response body, defaulting every missing or
        mistyped field.
        """
        cost = data.get("cost")
        if not _is_number(cost):
            cost = 0

        estimated_days = data.get("estimatedDays")
        if not _is_number(estimated_days):
            estimated_days = DEFAULT_ESTIMATED_DAYS
        elif isinstance(estimated_days, float):
            # whole floats only; ints of any size pass as they are
            estimated_days = int(estimated_days) if estimated_days.is_integer() else DEFAULT_ESTIMATED_DAYS

        return cls(
            cost=Decimal(str(cost)),
            currency=_string_or(data.get("currency"), DEFAULT_QUOTE_CURRENCY),
            estimated_days=estimated_days,
            method=_string_or(data.get("method"), DEFAULT_METHOD),
            is_estimated=_bool_or(data.get("isEstimated"), False),
            address_validated=_bool_or(data.get("addressValidated"), False),
        )

    def to_shipping_result(self, carrier: str = DEFAULT_CARRIER) -> ShippingResult:
        """Convert to the pricing calculator's ShippingResult"""
        return ShippingResult(
            cost=self.cost,
            currency=self.currency,
            estimated_days=self.estimated_days,
            service_name=self.method,
            carrier=carrier,
            tracking_available=True,
        )


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def _string_or(value: Any, default: str) -> str:
    return value if isinstance(value, str) else default


def _bool_or(value: Any, default: bool) -> bool:
    return value if isinstance(value, bool) else default
