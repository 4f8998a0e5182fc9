"""
Shared Test Fixtures

Centralized factories, generators, and mock responses
used across all test layers.

Structure:
    - common.py: Base ID generators, timestamps
    - generators.py: Random data generators
    - {service}_fixtures.py: Per-service factories
"""

# Common utilities
from .common import (
    make_item_id,
    make_sku,
    make_auth_token,
    make_timestamp,
)

# Random generators
from .generators import (
    random_string,
    random_amount,
    random_quantity,
)

# Pricing service fixtures
from .pricing_fixtures import (
    make_pricing_item,
    make_pricing_item_dict,
    make_shipping_result,
    make_tax_config,
)

# Shipping service fixtures
from .shipping_fixtures import (
    make_shipping_address,
    make_shipping_address_dict,
    make_quote_payload,
)

__all__ = [
    "make_item_id",
    "make_sku",
    "make_auth_token",
    "make_timestamp",
    "random_string",
    "random_amount",
    "random_quantity",
    "make_pricing_item",
    "make_pricing_item_dict",
    "make_shipping_result",
    "make_tax_config",
    "make_shipping_address",
    "make_shipping_address_dict",
    "make_quote_payload",
]
