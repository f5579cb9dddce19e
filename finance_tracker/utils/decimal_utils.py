"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_EVEN, Decimal

TWO_PLACES = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_amount(value) -> Decimal:
    """Round a numeric value to two places using banker's rounding."""
    return coerce_decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_EVEN)


__all__ = ["coerce_decimal", "round_amount", "TWO_PLACES"]
