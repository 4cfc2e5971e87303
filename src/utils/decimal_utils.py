"""Helpers for Decimal normalization of monetary amounts."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats go through ``str`` so a stored ``19.9`` becomes ``Decimal("19.9")``
    instead of its binary expansion.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_money(value) -> Decimal:
    """Coerce a value and round it to cents.

    Args:
        value: Raw numeric value.

    Returns:
        Decimal: Amount quantized to two fraction digits.
    """
    return coerce_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


__all__ = ["CENT", "ZERO", "coerce_decimal", "to_money"]
