"""Domain services for period and category aggregates."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from logging import Logger

from finance_tracker.domain.exceptions import DataInconsistencyError
from finance_tracker.domain.models import (
    Category,
    CategoryStat,
    PeriodSummary,
    Transaction,
    TransactionDirection,
)
from finance_tracker.utils.decimal_utils import coerce_decimal, round_amount

CONSISTENCY_OFF = "off"
CONSISTENCY_WARN = "warn"
CONSISTENCY_RAISE = "raise"
CONSISTENCY_MODES = (CONSISTENCY_OFF, CONSISTENCY_WARN, CONSISTENCY_RAISE)


def build_period_summary(
    start_date: date,
    end_date: date,
    total_income,
    total_expenses,
    transaction_count: int,
) -> PeriodSummary:
    """Build a period summary from raw store totals.

    Args:
        start_date: First day of the period.
        end_date: Last day of the period.
        total_income: Raw income sum from the store.
        total_expenses: Raw expense sum from the store.
        transaction_count: Number of transactions in the period.

    Returns:
        PeriodSummary: Summary with normalized Decimal totals.
    """
    return PeriodSummary(
        start_date=start_date,
        end_date=end_date,
        total_income=coerce_decimal(total_income),
        total_expenses=coerce_decimal(total_expenses),
        transaction_count=transaction_count,
    )


def sum_by_direction(
    transactions: Iterable[Transaction],
) -> dict[TransactionDirection, Decimal]:
    """Sum transaction amounts per direction.

    Transactions without a resolved category are skipped, matching the
    store sums that only count rows joined to a category.
    """
    totals = {
        TransactionDirection.INCOME: Decimal("0"),
        TransactionDirection.EXPENSE: Decimal("0"),
    }
    for transaction in transactions:
        if transaction.category is None:
            continue
        totals[transaction.direction] += transaction.amount.amount
    return totals


def check_summary_consistency(
    summary: PeriodSummary,
    transactions: list[Transaction],
    *,
    mode: str,
    logger: Logger,
) -> None:
    """Compare summary totals with a recomputation from listed transactions.

    The store answers the income sum, the expense sum and the listing with
    separate queries, so a concurrent write can make them disagree.

    Args:
        summary: Summary built from the sum queries.
        transactions: Transactions listed for the same period.
        mode: One of "off", "warn" or "raise".
        logger: Logger used for warnings.

    Raises:
        DataInconsistencyError: If totals disagree and mode is "raise".
    """
    if mode == CONSISTENCY_OFF:
        return
    totals = sum_by_direction(transactions)
    mismatches = []
    if totals[TransactionDirection.INCOME] != summary.total_income:
        mismatches.append(
            f"income={summary.total_income} "
            f"listed={totals[TransactionDirection.INCOME]}"
        )
    if totals[TransactionDirection.EXPENSE] != summary.total_expenses:
        mismatches.append(
            f"expenses={summary.total_expenses} "
            f"listed={totals[TransactionDirection.EXPENSE]}"
        )
    if not mismatches:
        return
    message = (
        f"Summary for {summary.start_date}..{summary.end_date} disagrees "
        f"with listed transactions: {', '.join(mismatches)}"
    )
    if mode == CONSISTENCY_RAISE:
        raise DataInconsistencyError(message)
    logger.warning(message)


def compute_category_stats(
    categories: Iterable[Category],
    transactions: list[Transaction],
) -> list[CategoryStat]:
    """Compute per-category totals and shares of the grand total.

    Args:
        categories: Every known category, in store order.
        transactions: Transactions of the period, both directions.

    Returns:
        list[CategoryStat]: One stat per category with at least one
        transaction, ordered by total amount descending.
    """
    grand_total = sum(
        (transaction.amount.amount for transaction in transactions),
        Decimal("0"),
    )
    by_category: dict[str, list[Transaction]] = {}
    for transaction in transactions:
        by_category.setdefault(transaction.category_id, []).append(transaction)

    stats: list[CategoryStat] = []
    for category in categories:
        matched = by_category.get(category.id)
        if not matched:
            continue
        total = sum(
            (transaction.amount.amount for transaction in matched),
            Decimal("0"),
        )
        percentage = (
            round_amount(total / grand_total * Decimal("100"))
            if grand_total > 0
            else Decimal("0")
        )
        stats.append(
            CategoryStat(
                category_id=category.id,
                category_name=category.name,
                category_type=category.category_type,
                direction=category.direction,
                total_amount=total,
                transaction_count=len(matched),
                percentage=percentage,
            )
        )
    # sorted() is stable, so ties keep the category listing order.
    return sorted(stats, key=lambda stat: stat.total_amount, reverse=True)


def select_top_categories(
    stats: Iterable[CategoryStat],
    direction: TransactionDirection,
    limit: int,
) -> list[CategoryStat]:
    """Return the first ``limit`` stats of a direction, largest first."""
    filtered = [stat for stat in stats if stat.direction == direction]
    filtered.sort(key=lambda stat: stat.total_amount, reverse=True)
    return filtered[:limit]


__all__ = [
    "CONSISTENCY_OFF",
    "CONSISTENCY_WARN",
    "CONSISTENCY_RAISE",
    "CONSISTENCY_MODES",
    "build_period_summary",
    "sum_by_direction",
    "check_summary_consistency",
    "compute_category_stats",
    "select_top_categories",
]
