"""
Component Test Mocks

Shared mock implementations for component testing.
These mocks replace real I/O dependencies (HTTP, structured logging).
"""

from .http_mock import MockHttpClient, MockHttpResponse
from .event_mock import MockEventLogger

__all__ = [
    'MockHttpClient',
    'MockHttpResponse',
    'MockEventLogger',
]
