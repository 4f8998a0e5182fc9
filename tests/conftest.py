"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - component/  : Component tests (mocked HTTP)
    - unit/       : Unit tests (pure functions, no I/O)
"""
import os
import sys
from decimal import Decimal
from typing import List

import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

# Import shared fixtures from tests/fixtures
from tests.fixtures import (
    make_pricing_item,
    make_shipping_result,
    make_shipping_address,
)

from microservices.pricing_service import PricingCalculator, PricingResult


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def calculator() -> PricingCalculator:
    """Calculator with the default 8% USD configuration"""
    return PricingCalculator()


@pytest.fixture
def sample_items() -> List:
    """Two framed prints: 2 x 39.99"""
    return [make_pricing_item(price="39.99", quantity=2, name="Framed Print")]


@pytest.fixture
def sample_shipping():
    """Standard shipping at 9.99"""
    return make_shipping_result(cost="9.99")


@pytest.fixture
def sample_address():
    """Valid US checkout address"""
    return make_shipping_address()


# =============================================================================
# Assertion Helpers
# =============================================================================

class AssertionHelpers:
    """Custom assertion helpers for tests"""

    @staticmethod
    def assert_total_consistent(result: PricingResult):
        """Assert total == subtotal - discount + tax + shipping, exactly"""
        expected = result.subtotal - result.discount_amount + result.tax_amount + result.shipping_amount
        assert result.total == expected, f"Expected total {expected}, got {result.total}"

    @staticmethod
    def assert_cents(*amounts: Decimal):
        """Assert each amount carries exactly two decimal places"""
        for amount in amounts:
            assert amount == amount.quantize(Decimal("0.01")), f"{amount} is not rounded to cents"


@pytest.fixture
def assertions() -> AssertionHelpers:
    """Provide assertion helpers"""
    return AssertionHelpers()


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "component: Component tests")
    config.addinivalue_line("markers", "unit: Unit tests")
