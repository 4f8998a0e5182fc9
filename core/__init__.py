#!/usr/bin/env python3
"""
Core Module for the Checkout Services

Shared infrastructure used by the pricing and shipping services.

COMPONENTS:
    - config/: Environment-driven configuration (logging, pricing, shipping)
    - logger.py: Service logger setup and the stdlib-backed event logger
    - service_client_base.py: Base async HTTP client for storefront API routes

USAGE:
    from core.config import get_settings
    from core.logger import setup_service_logger

    settings = get_settings()
    logger = setup_service_logger("shipping_service", level=settings.logging.log_level)
"""

__version__ = "1.0.0"
