"""
Shipping helpers

Destination coverage, per-country currency, delivery date estimation and
display formatting for shipping quotes.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Dict, List, Optional, Union

from microservices.pricing_service.money import to_decimal
from microservices.pricing_service.models import ShippingResult
from microservices.pricing_service.pricing_calculator import PricingCalculator

from .models import ShippingQuote

SUPPORTED_COUNTRIES = (
    'US', 'CA', 'GB', 'AU', 'DE', 'FR', 'IT', 'ES', 'NL', 'BE',
    'AT', 'CH', 'SE', 'NO', 'DK', 'FI', 'IE', 'PT', 'LU', 'JP',
)

COUNTRY_CURRENCIES: Dict[str, str] = {
    'US': 'USD', 'CA': 'CAD', 'GB': 'GBP', 'AU': 'AUD', 'DE': 'EUR', 'FR': 'EUR',
    'IT': 'EUR', 'ES': 'EUR', 'NL': 'EUR', 'BE': 'EUR', 'AT': 'EUR', 'PT': 'EUR',
    'IE': 'EUR', 'FI': 'EUR', 'LU': 'EUR', 'JP': 'JPY', 'KR': 'KRW', 'SG': 'SGD',
    'HK': 'HKD', 'CH': 'CHF', 'SE': 'SEK', 'NO': 'NOK', 'DK': 'DKK', 'PL': 'PLN',
    'CZ': 'CZK', 'HU': 'HUF', 'MX': 'MXN', 'BR': 'BRL', 'IN': 'INR', 'NZ': 'NZD',
}

Quote = Union[ShippingQuote, ShippingResult]
DateLike = Union[date, datetime]


def get_supported_countries() -> List[str]:
    return list(SUPPORTED_COUNTRIES)


def is_shipping_available(country_code: str) -> bool:
    return country_code.upper() in SUPPORTED_COUNTRIES


def get_currency_for_country(country_code: str) -> str:
    """ISO currency for a destination country, USD when unknown"""
    return COUNTRY_CURRENCIES.get(country_code.upper(), 'USD')


def get_estimated_delivery_date(quote: Quote, order_date: Optional[DateLike] = None) -> DateLike:
    """
    Order date plus the quote's estimated days, moved forward off weekends.

    Returns the same type as ``order_date`` (today's UTC date by default).
    """
    if order_date is None:
        order_date = datetime.now(timezone.utc).date()

    delivery = order_date + timedelta(days=quote.estimated_days)
    # Saturday=5, Sunday=6
    while delivery.weekday() >= 5:
        delivery += timedelta(days=1)
    return delivery


def format_shipping_cost(quote: Quote, calculator: Optional[PricingCalculator] = None) -> str:
    """'FREE' for zero-cost quotes, otherwise the formatted price"""
    if to_decimal(quote.cost) == 0:
        return 'FREE'
    calculator = calculator or PricingCalculator()
    return calculator.format_price(quote.cost, quote.currency)


__all__ = [
    "SUPPORTED_COUNTRIES",
    "COUNTRY_CURRENCIES",
    "get_supported_countries",
    "is_shipping_available",
    "get_currency_for_country",
    "get_estimated_delivery_date",
    "format_shipping_cost",
]
