#!/usr/bin/env python3
"""Checkout core main configuration

Combines the logging, pricing and shipping sub-configs.
"""
import os
from dataclasses import dataclass, field

from .logging_config import LoggingConfig
from .pricing_config import PricingConfig
from .shipping_config import ShippingConfig


def _bool(val: str) -> bool:
    return val.lower() == "true"


@dataclass
class CheckoutConfig:
    """Main configuration for the checkout pricing core"""

    environment: str = "development"
    debug: bool = False

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    pricing: PricingConfig = field(default_factory=PricingConfig)
    shipping: ShippingConfig = field(default_factory=ShippingConfig)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_env(cls) -> 'CheckoutConfig':
        """Load the full configuration from environment variables"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            environment=env,
            debug=_bool(os.getenv("DEBUG", "false")),
            logging=LoggingConfig.from_env(),
            pricing=PricingConfig.from_env(),
            shipping=ShippingConfig.from_env(),
        )
