#!/usr/bin/env python3
"""Shipping rate API configuration

Endpoint and timing settings for the shipping quote client. The attempt ceiling
is fixed in the client itself.
"""
import os
from dataclasses import dataclass

def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


@dataclass
class ShippingConfig:
    """Shipping quote endpoint settings"""

    # ===========================================
    # Endpoint
    # ===========================================
    api_base_url: str = "http://localhost:3000"
    endpoint_path: str = "/api/cart/shipping"

    # ===========================================
    # Timeouts (seconds)
    # ===========================================
    request_timeout: float = 10.0
    auth_timeout: float = 5.0

    # ===========================================
    # Backoff between attempts (seconds)
    # ===========================================
    retry_base_delay: float = 1.0
    retry_max_delay: float = 4.0

    @classmethod
    def from_env(cls) -> 'ShippingConfig':
        """Load shipping config from environment variables"""
        return cls(
            api_base_url=os.getenv("SHIPPING_API_BASE_URL", "http://localhost:3000").rstrip('/'),
            endpoint_path=os.getenv("SHIPPING_ENDPOINT_PATH", "/api/cart/shipping"),
            request_timeout=_float(os.getenv("SHIPPING_REQUEST_TIMEOUT", ""), 10.0),
            auth_timeout=_float(os.getenv("SHIPPING_AUTH_TIMEOUT", ""), 5.0),
            retry_base_delay=_float(os.getenv("SHIPPING_RETRY_BASE_DELAY", ""), 1.0),
            retry_max_delay=_float(os.getenv("SHIPPING_RETRY_MAX_DELAY", ""), 4.0),
        )
