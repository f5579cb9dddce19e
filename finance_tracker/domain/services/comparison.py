"""Period-over-period comparison helpers."""

from decimal import Decimal

from finance_tracker.domain.models import ComparisonResult, PeriodSummary
from finance_tracker.utils.decimal_utils import coerce_decimal, round_amount


def variance_percentage(current, previous) -> Decimal:
    """Return the percentage change from ``previous`` to ``current``.

    A zero ``previous`` yields 0 when ``current`` is positive and 100
    otherwise, including the flat 0 -> 0 case.

    Args:
        current: Metric for the current period.
        previous: Metric for the previous period.

    Returns:
        Decimal: Change relative to ``abs(previous)``, rounded to 2 places.
    """
    current = coerce_decimal(current)
    previous = coerce_decimal(previous)
    if previous == 0:
        return Decimal("0") if current > 0 else Decimal("100")
    return round_amount((current - previous) / abs(previous) * Decimal("100"))


def compare_summaries(
    current: PeriodSummary,
    previous: PeriodSummary,
    description: str,
) -> ComparisonResult:
    """Compute signed variances between two period summaries.

    Args:
        current: Summary of the current period.
        previous: Summary of the previous period.
        description: Human readable label of the comparison.

    Returns:
        ComparisonResult: Variance amounts, percentages and flags.
    """
    return ComparisonResult(
        current=current,
        previous=previous,
        description=description,
        income_variance_amount=current.total_income - previous.total_income,
        expense_variance_amount=(
            current.total_expenses - previous.total_expenses
        ),
        balance_variance_amount=current.balance - previous.balance,
        income_variance_percentage=variance_percentage(
            current.total_income, previous.total_income
        ),
        expense_variance_percentage=variance_percentage(
            current.total_expenses, previous.total_expenses
        ),
        balance_variance_percentage=variance_percentage(
            current.balance, previous.balance
        ),
    )


__all__ = ["variance_percentage", "compare_summaries"]
