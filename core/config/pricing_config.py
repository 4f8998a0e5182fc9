#!/usr/bin/env python3
"""Pricing configuration

Defaults used when a pricing calculator is built without explicit
tax/currency arguments.
"""
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation


def _decimal(val: str, default: str) -> Decimal:
    try:
        return Decimal(val) if val else Decimal(default)
    except InvalidOperation:
        return Decimal(default)


@dataclass
class PricingConfig:
    """Pricing defaults"""
    default_tax_rate: Decimal = Decimal("0.08")
    currency: str = "USD"
    free_shipping_threshold: Decimal = Decimal("100.00")

    @classmethod
    def from_env(cls) -> 'PricingConfig':
        """Load pricing config from environment variables"""
        return cls(
            default_tax_rate=_decimal(os.getenv("PRICING_DEFAULT_TAX_RATE", ""), "0.08"),
            currency=os.getenv("PRICING_CURRENCY", "USD").upper(),
            free_shipping_threshold=_decimal(os.getenv("PRICING_FREE_SHIPPING_THRESHOLD", ""), "100.00"),
        )
