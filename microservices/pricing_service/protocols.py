"""
Pricing Service Protocols (Interfaces)

Error taxonomy and structural interfaces for the pricing calculator.
NO import-time I/O dependencies - safe to import anywhere.
"""
from enum import Enum
from typing import Any, Dict, Optional, Protocol, runtime_checkable


class PricingErrorCode(str, Enum):
    """Machine-readable pricing error codes"""
    SUBTOTAL_CALCULATION_ERROR = "SUBTOTAL_CALCULATION_ERROR"
    INVALID_LINE_TOTAL = "INVALID_LINE_TOTAL"
    TAX_CALCULATION_ERROR = "TAX_CALCULATION_ERROR"
    SHIPPING_CALCULATION_ERROR = "SHIPPING_CALCULATION_ERROR"
    INVALID_ITEMS = "INVALID_ITEMS"
    INVALID_DISCOUNT = "INVALID_DISCOUNT"
    TOTAL_CALCULATION_ERROR = "TOTAL_CALCULATION_ERROR"
    NEGATIVE_AMOUNTS = "NEGATIVE_AMOUNTS"
    CALCULATION_MISMATCH = "CALCULATION_MISMATCH"


# ============================================================================
# Custom Exceptions
# ============================================================================

class PricingError(Exception):
    """Base exception for pricing errors"""

    def __init__(self, message: str, code: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code.value if isinstance(code, PricingErrorCode) else code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form for logs and API error bodies"""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class TaxCalculationError(PricingError):
    """Tax could not be calculated"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, PricingErrorCode.TAX_CALCULATION_ERROR, details)


class ShippingCalculationError(PricingError):
    """Shipping address or cost is invalid"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, PricingErrorCode.SHIPPING_CALCULATION_ERROR, details)


# ============================================================================
# Quote Protocol
# ============================================================================

@runtime_checkable
class ShippingQuoteConvertible(Protocol):
    """Anything that can be turned into a ShippingResult (e.g. a client quote)"""

    def to_shipping_result(self, carrier: str = ...) -> Any:
        """Convert to the calculator's ShippingResult"""
        ...
