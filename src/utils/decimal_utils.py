"""Helpers for Decimal normalization of monetary amounts."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal without going through float math.

    Args:
        value: Raw amount from SQL rows (Decimal, int, float or string).

    Returns:
        Decimal: Normalized amount, zero for None.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, str):
        return Decimal(value.strip() or "0")
    return Decimal(str(value))


def quantize_money(value: Decimal) -> Decimal:
    """Round an amount to cents, half up."""
    return coerce_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def format_plain_amount(value: Decimal) -> str:
    """Render an amount without exponent or trailing zeros (``500``, ``12.5``)."""
    amount = coerce_decimal(value)
    if amount == amount.to_integral_value():
        return format(amount.to_integral_value(), "f")
    return format(amount.normalize(), "f")


__all__ = ["CENT", "coerce_decimal", "quantize_money", "format_plain_amount"]
