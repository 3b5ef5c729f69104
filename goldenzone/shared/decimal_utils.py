"""
Decimal Utilities

Helpers for converting prices to Decimal and rounding them the way prices are
displayed (half-up, fixed number of places). Floats are converted through
their string representation so that 0.618 stays 0.618 instead of the nearest
binary fraction.
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union

Number = Union[int, float, str, Decimal]


def to_decimal(value) -> Optional[Decimal]:
    """
    Convert a value to Decimal.

    Args:
        value: int, float, str or Decimal

    Returns:
        Decimal value, or None if the value is missing, not numeric, or not finite
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError, TypeError):
            return None

    if not result.is_finite():
        return None
    return result


def to_decimal_safe(value, default: Decimal = Decimal("0")) -> Decimal:
    """Convert a value to Decimal, falling back to ``default``."""
    result = to_decimal(value)
    return default if result is None else result


def quantize_half_up(value: Decimal, places: int = 2) -> Decimal:
    """Round a Decimal half-up to ``places`` decimal places."""
    exponent = Decimal(1).scaleb(-places)
    return value.quantize(exponent, rounding=ROUND_HALF_UP)


def round_half_up(value: Number, places: int = 2) -> float:
    """
    Round a number half-up and return it as a float.

    round_half_up(2.675, 2) == 2.68, where the builtin round() gives 2.67.
    """
    return float(quantize_half_up(to_decimal_safe(value), places))
