"""
Pricing Service

Order total calculation for the art framer storefront checkout.

Features:
- Validated cart line items and tax configuration
- Subtotal, tax, shipping and discount composition on Decimal money
- Itemized breakdown with a checked total invariant
- Coded error taxonomy for caller-side recovery
"""

from .models import (
    DestinationAddress,
    DiscountLine,
    LineItemBreakdown,
    PricingBreakdown,
    PricingItem,
    PricingResult,
    ShippingLine,
    ShippingResult,
    TaxConfig,
    TaxLine,
)
from .protocols import (
    PricingError,
    PricingErrorCode,
    ShippingCalculationError,
    TaxCalculationError,
)
from .pricing_calculator import (
    DEFAULT_CURRENCY,
    DEFAULT_TAX_RATE,
    MAX_LINE_TOTAL,
    MAX_SHIPPING_COST,
    MIN_FREE_SHIPPING_THRESHOLD,
    PricingCalculator,
    create_pricing_calculator,
    get_default_pricing_calculator,
    reset_default_pricing_calculator,
    is_valid_destination_address,
    is_valid_pricing_item,
)

__version__ = "1.0.0"
