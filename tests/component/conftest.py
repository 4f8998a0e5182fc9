"""
Component Test Layer Configuration

Structure:
    tests/component/
    ├── shipping_service/   ShippingClient against a mocked HTTP client
    └── mocks/              Mock implementations

Usage:
    pytest tests/component -v
"""
import os
import sys

import pytest
import pytest_asyncio

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from core.config.shipping_config import ShippingConfig
from microservices.shipping_service import ShippingClient
from tests.component.mocks import MockEventLogger, MockHttpClient


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )


# =============================================================================
# Mocks
# =============================================================================

@pytest.fixture
def mock_http_client() -> MockHttpClient:
    """Mock HTTP client for storefront API calls"""
    return MockHttpClient()


@pytest.fixture
def mock_events() -> MockEventLogger:
    """Recording event logger"""
    return MockEventLogger()


@pytest.fixture
def shipping_config() -> ShippingConfig:
    """Shipping config with backoff disabled"""
    return ShippingConfig(
        api_base_url="https://shop.test",
        request_timeout=10.0,
        auth_timeout=0.05,
        retry_base_delay=0.0,
        retry_max_delay=0.0,
    )


@pytest_asyncio.fixture
async def shipping_client(mock_http_client, mock_events, shipping_config):
    """ShippingClient wired to the mocks, no auth provider"""
    client = ShippingClient(
        http_client=mock_http_client,
        event_logger=mock_events,
        config=shipping_config,
    )
    yield client
    await client.close()
