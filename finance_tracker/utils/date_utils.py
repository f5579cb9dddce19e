"""Helpers for date normalization."""

from datetime import date, datetime


def coerce_date(value) -> date:
    """Normalize a date-like value from SQL drivers to a date.

    Args:
        value: date, datetime or ISO formatted string.

    Returns:
        date: Date part of the value.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def coerce_datetime(value) -> datetime | None:
    """Normalize a timestamp from SQL drivers, keeping None as None."""
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


__all__ = ["coerce_date", "coerce_datetime"]
