"""
Pricing Service Data Models

Pydantic models for cart line items, tax configuration, shipping quotes and
the itemized pricing breakdown.
"""

from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Input Models

class PricingItem(BaseModel):
    """One cart line"""
    id: UUID
    sku: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0)
    quantity: int = Field(..., ge=1)
    name: Optional[str] = None
    category: Optional[str] = None

    @field_validator('price', mode='before')
    @classmethod
    def parse_price(cls, v):
        # floats go through str so 39.99 stays 39.99
        if isinstance(v, float):
            return str(v)
        return v


class DestinationAddress(BaseModel):
    """Destination used for tax and shipping rate lookups"""
    model_config = ConfigDict(populate_by_name=True)

    country_code: str = Field(..., min_length=2, max_length=2, alias="countryCode")
    state_or_county: Optional[str] = Field(None, alias="stateOrCounty")
    postal_code: Optional[str] = Field(None, alias="postalCode")
    city: Optional[str] = None


class TaxConfig(BaseModel):
    """Tax configuration, fixed once a calculator is built"""
    model_config = ConfigDict(frozen=True)

    rate: Decimal = Field(default=Decimal("0.08"), ge=0, le=1)
    region: Optional[str] = None
    exemptions: Optional[List[str]] = None

    @field_validator('rate', mode='before')
    @classmethod
    def parse_rate(cls, v):
        if isinstance(v, float):
            return str(v)
        return v


class ShippingResult(BaseModel):
    """Shipping quote as consumed by the pricing calculator"""
    cost: Decimal
    currency: str = "USD"
    estimated_days: int
    service_name: str
    carrier: str
    tracking_available: bool = True

    @field_validator('cost', mode='before')
    @classmethod
    def parse_cost(cls, v):
        if isinstance(v, float):
            return str(v)
        return v


# Breakdown Models

class LineItemBreakdown(BaseModel):
    """Per-line entry of a pricing breakdown"""
    id: str
    name: str
    price: Decimal
    quantity: int
    line_total: Decimal


class TaxLine(BaseModel):
    """Applied tax entry"""
    type: str = "sales_tax"
    rate: Decimal
    amount: Decimal
    description: str
    region: Optional[str] = None
    exemptions: List[str] = Field(default_factory=list)


class ShippingLine(BaseModel):
    """Shipping entry"""
    cost: Decimal
    method: str
    estimated_days: int
    carrier: str


class DiscountLine(BaseModel):
    """Discount entry"""
    code: str = "APPLIED_DISCOUNT"
    amount: Decimal
    type: str = "fixed"
    description: str = "Applied Discount"


class PricingBreakdown(BaseModel):
    """Itemized breakdown of a pricing result"""
    items: List[LineItemBreakdown] = Field(default_factory=list)
    taxes: List[TaxLine] = Field(default_factory=list)
    shipping: Optional[ShippingLine] = None
    discounts: List[DiscountLine] = Field(default_factory=list)


# Result Models

class PricingResult(BaseModel):
    """Computed order total with itemized breakdown"""
    subtotal: Decimal
    tax_amount: Decimal
    shipping_amount: Decimal
    discount_amount: Decimal
    total: Decimal
    item_count: int
    currency: str
    breakdown: PricingBreakdown = Field(default_factory=PricingBreakdown)
