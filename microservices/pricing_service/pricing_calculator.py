"""
Pricing Calculator

Subtotal, tax, shipping and discount composition for cart checkout.
All arithmetic is done on Decimal and rounded to cents after each step.
Every method validates its input and raises a PricingError subclass on
failure; nothing here performs I/O.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ValidationError

from .money import Amount, ZERO, round2, to_decimal
from .models import (
    DestinationAddress,
    DiscountLine,
    LineItemBreakdown,
    PricingBreakdown,
    PricingItem,
    PricingResult,
    ShippingLine,
    ShippingResult,
    TaxConfig,
    TaxLine,
)
from .protocols import (
    PricingError,
    PricingErrorCode,
    ShippingCalculationError,
    ShippingQuoteConvertible,
    TaxCalculationError,
)

# Constants
DEFAULT_TAX_RATE = Decimal("0.08")
DEFAULT_CURRENCY = "USD"
MAX_SHIPPING_COST = Decimal("999.99")
MIN_FREE_SHIPPING_THRESHOLD = Decimal("100.00")
MAX_LINE_TOTAL = Decimal("999999.99")
PRICE_TOLERANCE = Decimal("0.01")

COUNTRY_CODE_PATTERN = re.compile(r"[A-Z]{2}")
CURRENCY_CODE_PATTERN = re.compile(r"[A-Za-z]{3}")

CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
    "KRW": "₩",
    "CAD": "CA$",
    "AUD": "A$",
    "NZD": "NZ$",
    "HKD": "HK$",
    "MXN": "MX$",
    "BRL": "R$",
}

ItemInput = Union[PricingItem, Mapping[str, Any]]
ShippingInput = Union[ShippingResult, Mapping[str, Any], Any, None]

_CONVERSION_ERRORS = (ValidationError, TypeError, ValueError, InvalidOperation)


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, (list, tuple)):
        return [_dump(v) for v in value]
    return value


class PricingCalculator:
    """
    Order total calculator

    Stateless after construction: the tax configuration and currency are
    read-only, so one instance can be shared across any number of
    concurrent calculations.
    """

    def __init__(
        self,
        tax_config: Optional[Union[TaxConfig, Mapping[str, Any]]] = None,
        currency: str = DEFAULT_CURRENCY,
        free_shipping_threshold: Amount = MIN_FREE_SHIPPING_THRESHOLD,
    ):
        """
        Initialize the calculator

        Args:
            tax_config: Tax configuration (defaults to an 8% rate)
            currency: ISO currency code reported on results
            free_shipping_threshold: Subtotal at which shipping becomes free
        """
        if tax_config is None:
            tax_config = TaxConfig(rate=DEFAULT_TAX_RATE)
        elif not isinstance(tax_config, TaxConfig):
            try:
                tax_config = TaxConfig.model_validate(tax_config)
            except ValidationError as e:
                raise TaxCalculationError(
                    "Invalid tax configuration",
                    {"error": str(e), "tax_config": tax_config},
                ) from e

        self._tax_config = tax_config
        self._currency = currency
        self._free_shipping_threshold = to_decimal(free_shipping_threshold)

    @property
    def tax_config(self) -> TaxConfig:
        return self._tax_config

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def free_shipping_threshold(self) -> Decimal:
        return self._free_shipping_threshold

    # Subtotal / Tax

    def calculate_subtotal(self, items: Optional[Sequence[ItemInput]]) -> Decimal:
        """
        Sum price * quantity over all items

        Args:
            items: Cart lines (PricingItem instances or dicts)

        Returns:
            Subtotal rounded to cents, 0.00 for an empty cart

        Raises:
            PricingError: INVALID_LINE_TOTAL for an out-of-range line,
                SUBTOTAL_CALCULATION_ERROR for a malformed item
        """
        try:
            if not items:
                return ZERO

            validated = [self._parse_item(item) for item in items]

            subtotal = Decimal("0")
            for item in validated:
                line_total = item.price * item.quantity
                if line_total < 0 or line_total > MAX_LINE_TOTAL:
                    raise PricingError(
                        f"Invalid line total for item {item.id}: {line_total}",
                        PricingErrorCode.INVALID_LINE_TOTAL,
                        {"item": _dump(item), "line_total": str(line_total)},
                    )
                subtotal += line_total

            return round2(subtotal)
        except PricingError:
            raise
        except _CONVERSION_ERRORS as e:
            raise PricingError(
                "Failed to calculate subtotal",
                PricingErrorCode.SUBTOTAL_CALCULATION_ERROR,
                {"error": str(e), "items": _dump(items)},
            ) from e

    def calculate_tax(self, subtotal: Amount, shipping_amount: Amount = 0) -> Decimal:
        """
        Tax on the subtotal

        Shipping is validated but never taxed.

        Raises:
            TaxCalculationError: negative or non-numeric input
        """
        try:
            subtotal_value = to_decimal(subtotal)
            shipping_value = to_decimal(shipping_amount)

            if subtotal_value < 0:
                raise TaxCalculationError("Subtotal cannot be negative", {"subtotal": str(subtotal_value)})

            if shipping_value < 0:
                raise TaxCalculationError(
                    "Shipping amount cannot be negative", {"shipping_amount": str(shipping_value)}
                )

            taxable_amount = subtotal_value
            return round2(taxable_amount * self._tax_config.rate)
        except TaxCalculationError:
            raise
        except (TypeError, ValueError, InvalidOperation) as e:
            raise TaxCalculationError(
                "Failed to calculate tax",
                {"error": str(e), "subtotal": subtotal, "shipping_amount": shipping_amount},
            ) from e

    def validate_shipping_address(
        self, address: Union[DestinationAddress, Mapping[str, Any]]
    ) -> bool:
        """
        Check a destination address

        Returns:
            True when the address is usable

        Raises:
            ShippingCalculationError: with the offending address in details
        """
        try:
            destination = (
                address
                if isinstance(address, DestinationAddress)
                else DestinationAddress.model_validate(address)
            )
        except ValidationError as e:
            raise ShippingCalculationError(
                "Invalid shipping address", {"error": str(e), "address": _dump(address)}
            ) from e

        if destination.country_code == "US" and not destination.postal_code:
            raise ShippingCalculationError(
                "Postal code required for US addresses", {"address": _dump(destination)}
            )

        if not COUNTRY_CODE_PATTERN.fullmatch(destination.country_code):
            raise ShippingCalculationError(
                "Invalid country code format", {"address": _dump(destination)}
            )

        return True

    # Totals

    def calculate_total(
        self,
        items: Sequence[ItemInput],
        shipping_result: ShippingInput = None,
        discount_amount: Amount = 0,
    ) -> PricingResult:
        """
        Full pricing breakdown for a cart

        Args:
            items: Cart lines
            shipping_result: Shipping quote, or None when no quote is available
            discount_amount: Fixed discount; clamped to the subtotal

        Returns:
            PricingResult where total == subtotal - discount + tax + shipping

        Raises:
            PricingError: INVALID_ITEMS, INVALID_DISCOUNT, any subtotal/tax
                error, ShippingCalculationError for an out-of-range shipping
                cost, TOTAL_CALCULATION_ERROR for anything unexpected
        """
        try:
            if not isinstance(items, (list, tuple)):
                raise PricingError(
                    "Items must be a list",
                    PricingErrorCode.INVALID_ITEMS,
                    {"items_type": type(items).__name__},
                )

            discount = to_decimal(discount_amount)
            if not discount.is_finite() or discount < 0:
                raise PricingError(
                    "Discount amount cannot be negative",
                    PricingErrorCode.INVALID_DISCOUNT,
                    {"discount_amount": str(discount)},
                )

            subtotal = self.calculate_subtotal(items)

            shipping = self._coerce_shipping_result(shipping_result)
            raw_shipping = shipping.cost if shipping is not None else ZERO
            if raw_shipping < 0 or raw_shipping > MAX_SHIPPING_COST:
                raise ShippingCalculationError(
                    f"Invalid shipping cost: {raw_shipping}",
                    {"shipping_amount": str(raw_shipping), "max_allowed": str(MAX_SHIPPING_COST)},
                )
            shipping_amount = round2(raw_shipping)

            tax_amount = self.calculate_tax(subtotal, shipping_amount)

            valid_discount = round2(min(discount, subtotal))

            total = max(ZERO, subtotal - valid_discount + tax_amount + shipping_amount)

            validated_items = [self._parse_item(item) for item in items]
            item_count = sum(item.quantity for item in validated_items)

            breakdown = PricingBreakdown(
                items=[self._line_breakdown(item) for item in validated_items],
                taxes=[self._tax_line(tax_amount)],
                shipping=self._shipping_line(shipping),
                discounts=[DiscountLine(amount=valid_discount)] if valid_discount > 0 else [],
            )

            result = PricingResult(
                subtotal=round2(subtotal),
                tax_amount=round2(tax_amount),
                shipping_amount=round2(shipping_amount),
                discount_amount=round2(valid_discount),
                total=round2(total),
                item_count=item_count,
                currency=self._currency,
                breakdown=breakdown,
            )
            self.validate_pricing_result(result)
            return result
        except PricingError:
            raise
        except _CONVERSION_ERRORS as e:
            raise PricingError(
                "Failed to calculate total pricing",
                PricingErrorCode.TOTAL_CALCULATION_ERROR,
                {
                    "error": str(e),
                    "items": _dump(items),
                    "shipping_result": _dump(shipping_result),
                    "discount_amount": str(discount_amount),
                },
            ) from e

    def qualifies_for_free_shipping(self, subtotal: Amount, threshold: Optional[Amount] = None) -> bool:
        """True when the subtotal reaches ``threshold`` (the calculator's own by default)"""
        if threshold is None:
            threshold = self._free_shipping_threshold
        return to_decimal(subtotal) >= to_decimal(threshold)

    def format_price(self, amount: Amount, currency: Optional[str] = None) -> str:
        """Format an amount for display, e.g. $1,234.50. Never raises."""
        code = currency or self._currency
        try:
            if not isinstance(code, str) or not CURRENCY_CODE_PATTERN.fullmatch(code):
                raise ValueError(f"Unsupported currency code: {code!r}")
            value = round2(amount)
            sign = "-" if value < 0 else ""
            number = f"{abs(value):,.2f}"
            code = code.upper()
            symbol = CURRENCY_SYMBOLS.get(code)
            if symbol:
                return f"{sign}{symbol}{number}"
            return f"{sign}{code} {number}"
        except (TypeError, ValueError, InvalidOperation):
            return self._fallback_price(amount)

    def validate_pricing_result(self, result: Union[PricingResult, Mapping[str, Any]]) -> bool:
        """
        Sanity check a pricing result

        Raises:
            PricingError: NEGATIVE_AMOUNTS or CALCULATION_MISMATCH (beyond
                one cent of rounding tolerance)
        """
        if not isinstance(result, PricingResult):
            try:
                result = PricingResult.model_validate(result)
            except ValidationError as e:
                raise PricingError(
                    "Invalid pricing result",
                    PricingErrorCode.TOTAL_CALCULATION_ERROR,
                    {"error": str(e), "result": _dump(result)},
                ) from e

        amounts = {
            "subtotal": to_decimal(result.subtotal),
            "tax_amount": to_decimal(result.tax_amount),
            "shipping_amount": to_decimal(result.shipping_amount),
            "discount_amount": to_decimal(result.discount_amount),
            "total": to_decimal(result.total),
        }

        negative = {name: str(value) for name, value in amounts.items() if value < 0}
        if negative:
            raise PricingError(
                "Pricing amounts cannot be negative",
                PricingErrorCode.NEGATIVE_AMOUNTS,
                {"negative_fields": negative},
            )

        expected = (
            amounts["subtotal"]
            - amounts["discount_amount"]
            + amounts["tax_amount"]
            + amounts["shipping_amount"]
        )
        difference = abs(amounts["total"] - expected)
        if difference > PRICE_TOLERANCE:
            raise PricingError(
                "Total calculation mismatch",
                PricingErrorCode.CALCULATION_MISMATCH,
                {
                    "expected": str(expected),
                    "actual": str(amounts["total"]),
                    "difference": str(difference),
                },
            )

        return True

    # Internal helpers

    @staticmethod
    def _parse_item(item: ItemInput) -> PricingItem:
        if isinstance(item, PricingItem):
            return item
        return PricingItem.model_validate(item)

    @staticmethod
    def _coerce_shipping_result(shipping_result: ShippingInput) -> Optional[ShippingResult]:
        if shipping_result is None or isinstance(shipping_result, ShippingResult):
            return shipping_result
        if isinstance(shipping_result, ShippingQuoteConvertible):
            return shipping_result.to_shipping_result()
        try:
            return ShippingResult.model_validate(shipping_result)
        except ValidationError as e:
            raise ShippingCalculationError(
                "Invalid shipping result", {"error": str(e), "shipping_result": _dump(shipping_result)}
            ) from e

    @staticmethod
    def _line_breakdown(item: PricingItem) -> LineItemBreakdown:
        return LineItemBreakdown(
            id=str(item.id),
            name=item.name or f"Item {item.sku}",
            price=item.price,
            quantity=item.quantity,
            line_total=round2(item.price * item.quantity),
        )

    def _tax_line(self, tax_amount: Decimal) -> TaxLine:
        rate = self._tax_config.rate
        return TaxLine(
            rate=rate,
            amount=tax_amount,
            description=f"Sales Tax ({rate * 100:.1f}%)",
            region=self._tax_config.region,
            exemptions=list(self._tax_config.exemptions or []),
        )

    @staticmethod
    def _shipping_line(shipping: Optional[ShippingResult]) -> Optional[ShippingLine]:
        if shipping is None:
            return None
        return ShippingLine(
            cost=round2(shipping.cost),
            method=shipping.service_name,
            estimated_days=shipping.estimated_days,
            carrier=shipping.carrier,
        )

    @staticmethod
    def _fallback_price(amount: Any) -> str:
        try:
            return f"${float(amount):.2f}"
        except (TypeError, ValueError, OverflowError):
            return "$0.00"


# Factory / helpers

_default_calculator: Optional[PricingCalculator] = None


def create_pricing_calculator(
    tax_rate: Amount = DEFAULT_TAX_RATE,
    currency: str = DEFAULT_CURRENCY,
    free_shipping_threshold: Amount = MIN_FREE_SHIPPING_THRESHOLD,
) -> PricingCalculator:
    """Build a calculator from a bare tax rate"""
    return PricingCalculator({"rate": to_decimal(tax_rate)}, currency, free_shipping_threshold)


def get_default_pricing_calculator() -> PricingCalculator:
    """Shared calculator built from the configured defaults"""
    global _default_calculator
    if _default_calculator is None:
        from core.config import get_settings

        pricing = get_settings().pricing
        _default_calculator = create_pricing_calculator(
            pricing.default_tax_rate, pricing.currency, pricing.free_shipping_threshold
        )
    return _default_calculator


def reset_default_pricing_calculator() -> None:
    """Drop the shared calculator so the next lookup rereads the settings"""
    global _default_calculator
    _default_calculator = None


def is_valid_pricing_item(item: Any) -> bool:
    try:
        PricingItem.model_validate(item)
        return True
    except ValidationError:
        return False


def is_valid_destination_address(address: Any) -> bool:
    try:
        DestinationAddress.model_validate(address)
        return True
    except ValidationError:
        return False


__all__ = [
    "PricingCalculator",
    "create_pricing_calculator",
    "get_default_pricing_calculator",
    "reset_default_pricing_calculator",
    "is_valid_pricing_item",
    "is_valid_destination_address",
    "DEFAULT_TAX_RATE",
    "DEFAULT_CURRENCY",
    "MAX_SHIPPING_COST",
    "MIN_FREE_SHIPPING_THRESHOLD",
    "MAX_LINE_TOTAL",
]
