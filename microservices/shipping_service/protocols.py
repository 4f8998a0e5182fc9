"""
Shipping Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Any, Awaitable, Callable, Dict, Optional, Protocol, Union, runtime_checkable

from microservices.pricing_service.protocols import ShippingCalculationError


# ============================================================================
# Custom Exceptions
# ============================================================================

class ShippingRequestError(ShippingCalculationError):
    """A single shipping rate request failed"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        retryable: bool = False,
        details: Optional[Dict[str, Any]] = None,
    ):
        details = dict(details or {})
        details.setdefault("status_code", status_code)
        details.setdefault("retryable", retryable)
        super().__init__(message, details)
        self.status_code = status_code
        self.retryable = retryable


# ============================================================================
# Collaborator Protocols
# ============================================================================

@runtime_checkable
class EventLogger(Protocol):
    """Structured logger: one named event plus key/value fields"""

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Record an event"""
        ...


# Returns a bearer token, or None when there is no session. May be async.
AuthTokenProvider = Callable[[], Union[Optional[str], Awaitable[Optional[str]]]]
