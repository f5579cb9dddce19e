"""Domain validation helpers."""

from datetime import date

from finance_tracker.domain.exceptions import (
    InvalidArgumentError,
    InvalidPeriodError,
)


def validate_period(start_date: date, end_date: date, today: date) -> None:
    """Reject reversed periods and periods starting in the future.

    Args:
        start_date: First day of the period.
        end_date: Last day of the period.
        today: Reference date for the future check.

    Raises:
        InvalidPeriodError: If the period is invalid.
    """
    if start_date > end_date:
        raise InvalidPeriodError(
            f"Start date {start_date} is after end date {end_date}"
        )
    if start_date > today:
        raise InvalidPeriodError(
            f"Start date {start_date} is in the future"
        )


def validate_range(name: str, value: int, bounds: tuple[int, int]) -> None:
    """Ensure ``value`` lies within the inclusive ``bounds``.

    Raises:
        InvalidArgumentError: If the value is out of range.
    """
    lower, upper = bounds
    if not lower <= value <= upper:
        raise InvalidArgumentError(
            f"{name} must be between {lower} and {upper}, got {value}"
        )


__all__ = ["validate_period", "validate_range"]
