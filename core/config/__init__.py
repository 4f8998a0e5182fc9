#!/usr/bin/env python3
"""Modular configuration system for the checkout core

Configuration hierarchy:
- logging_config: Logging configuration
- pricing_config: Tax rate, currency and free-shipping defaults
- shipping_config: Shipping rate endpoint, timeouts and backoff
- checkout_config: Aggregate of the above
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .pricing_config import PricingConfig
from .shipping_config import ShippingConfig
from .checkout_config import CheckoutConfig

# Load environment file based on ENV
env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
env_files = {
    "development": "deployment/environments/dev.env",
    "dev": "deployment/environments/dev.env",
    "testing": "deployment/environments/test.env",
    "test": "deployment/environments/test.env",
    "staging": "deployment/environments/staging.env",
    "production": "deployment/environments/production.env",
}
env_file = env_files.get(env, "deployment/environments/dev.env")
load_dotenv(env_file, override=False)

# Create global settings instance
settings = CheckoutConfig.from_env()

def get_settings() -> CheckoutConfig:
    """Get global settings instance"""
    return settings

def reload_settings() -> CheckoutConfig:
    """Reload settings from environment"""
    global settings
    settings = CheckoutConfig.from_env()
    return settings

__all__ = [
    # Main config
    'CheckoutConfig',
    'get_settings',
    'reload_settings',
    'settings',
    # Sub-configs
    'LoggingConfig',
    'PricingConfig',
    'ShippingConfig',
]
