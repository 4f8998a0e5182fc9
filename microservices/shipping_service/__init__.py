"""
Shipping Service

Shipping quote lookup for the art framer storefront checkout.
"""

from .models import ShippingAddress, ShippingQuote
from .protocols import AuthTokenProvider, EventLogger, ShippingRequestError
from .shipping_client import MAX_ATTEMPTS, ShippingClient, calculate_shipping, check_address_quality
from .shipping_utils import (
    format_shipping_cost,
    get_currency_for_country,
    get_estimated_delivery_date,
    get_supported_countries,
    is_shipping_available,
)

__version__ = "1.0.0"
