"""
Money helpers

Decimal conversion and cent rounding shared by the pricing calculator and the
shipping helpers.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Amount = Union[Decimal, int, float, str]

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_decimal(value: Amount) -> Decimal:
    """
    Convert an amount to Decimal.

    Floats go through ``str`` so 39.99 becomes Decimal("39.99") rather than
    its binary expansion. Raises decimal.InvalidOperation or TypeError for
    values that are not numbers.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("Boolean is not a monetary amount")
    if isinstance(value, (int, float, str)):
        return Decimal(str(value))
    raise TypeError(f"Unsupported amount type: {type(value).__name__}")


def round2(value: Amount) -> Decimal:
    """Round to cents, half away from zero"""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
