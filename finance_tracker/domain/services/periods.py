"""Calendar window helpers for reporting periods."""

import calendar
from datetime import date


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last calendar day of a month.

    Args:
        year: Calendar year.
        month: Month number (1-12).

    Returns:
        tuple[date, date]: Inclusive bounds of the month.
    """
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def year_bounds(year: int) -> tuple[date, date]:
    """Return January 1st and December 31st of ``year``."""
    return date(year, 1, 1), date(year, 12, 31)


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move a (year, month) pair by ``delta`` months.

    Args:
        year: Starting year.
        month: Starting month (1-12).
        delta: Number of months to move, negative to go back.

    Returns:
        tuple[int, int]: Resulting year and month.
    """
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def add_months(value: date, delta: int) -> date:
    """Shift a date by ``delta`` months, clamping the day to the month end."""
    year, month = shift_month(value.year, value.month, delta)
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(value.day, last_day))


def current_month_bounds(today: date) -> tuple[date, date]:
    return month_bounds(today.year, today.month)


def previous_month_bounds(today: date) -> tuple[date, date]:
    year, month = shift_month(today.year, today.month, -1)
    return month_bounds(year, month)


def trailing_months(today: date, months: int) -> list[tuple[int, int]]:
    """Return ``months`` consecutive (year, month) pairs ending at today.

    The list is ordered oldest first.
    """
    return [
        shift_month(today.year, today.month, -offset)
        for offset in range(months - 1, -1, -1)
    ]


def trailing_years(today: date, years: int) -> list[int]:
    """Return ``years`` consecutive years ending at today's year, oldest first."""
    return [today.year - offset for offset in range(years - 1, -1, -1)]


def month_label(year: int, month: int) -> str:
    """Return a "Month Year" label such as "March 2024"."""
    return f"{calendar.month_name[month]} {year}"


def relative_date_label(value: date, today: date) -> str:
    """Describe ``value`` relative to ``today``.

    Args:
        value: Date to describe.
        today: Reference date.

    Returns:
        str: "Today", "Yesterday", "N days ago" up to a week,
        "N week(s) ago" up to 30 days, otherwise the date as dd/mm/YYYY.
    """
    days = (today - value).days
    if days == 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    if 1 < days <= 7:
        return f"{days} days ago"
    if 7 < days <= 30:
        return f"{days // 7} week(s) ago"
    return value.strftime("%d/%m/%Y")


__all__ = [
    "month_bounds",
    "year_bounds",
    "shift_month",
    "add_months",
    "current_month_bounds",
    "previous_month_bounds",
    "trailing_months",
    "trailing_years",
    "month_label",
    "relative_date_label",
]
