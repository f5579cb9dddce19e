"""Tests for category statistics, comparison and projection services."""

from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from finance_tracker.domain.exceptions import DataInconsistencyError
from finance_tracker.domain.models import (
    Category,
    CategoryType,
    Money,
    PeriodSummary,
    Transaction,
    TransactionDirection,
    TrendPoint,
)
from finance_tracker.domain.services.comparison import (
    compare_summaries,
    variance_percentage,
)
from finance_tracker.domain.services.finance import (
    build_period_summary,
    check_summary_consistency,
    compute_category_stats,
    select_top_categories,
)
from finance_tracker.domain.services.projection import (
    INSUFFICIENT_DATA_METHOD,
    project_from_trend,
)

SALARY = Category(
    id="salary", name="Salary", category_type=CategoryType.SALARY
)
FOOD = Category(id="food", name="Food", category_type=CategoryType.FOOD)
TRAVEL = Category(
    id="travel", name="Travel", category_type=CategoryType.TRAVEL
)


def _transaction(tx_id: str, category: Category, amount: str) -> Transaction:
    return Transaction(
        id=tx_id,
        description=f"{category.name} {tx_id}",
        amount=Money(Decimal(amount)),
        transaction_date=date(2024, 3, 5),
        category_id=category.id,
        category=category,
        created_at=datetime(2024, 3, 5, tzinfo=timezone.utc),
    )


def _summary(income: str, expenses: str, count: int = 1) -> PeriodSummary:
    return PeriodSummary(
        start_date=date(2024, 3, 1),
        end_date=date(2024, 3, 31),
        total_income=Decimal(income),
        total_expenses=Decimal(expenses),
        transaction_count=count,
    )


def _point(month: int, income: str, expenses: str) -> TrendPoint:
    return TrendPoint(
        label=f"{month}",
        year=2024,
        month=month,
        summary=_summary(income, expenses),
    )


def test_category_stats_share_of_grand_total() -> None:
    transactions = [
        _transaction("1", SALARY, "2000"),
        _transaction("2", FOOD, "300"),
        _transaction("3", FOOD, "200"),
    ]

    stats = compute_category_stats([FOOD, SALARY, TRAVEL], transactions)

    assert [stat.category_name for stat in stats] == ["Salary", "Food"]
    assert [stat.percentage for stat in stats] == [
        Decimal("80.00"),
        Decimal("20.00"),
    ]
    assert stats[1].total_amount == Decimal("500.00")
    assert stats[1].transaction_count == 2
    assert stats[0].direction == TransactionDirection.INCOME


def test_category_stats_ties_keep_listing_order() -> None:
    transactions = [
        _transaction("1", TRAVEL, "100"),
        _transaction("2", FOOD, "100"),
    ]

    stats = compute_category_stats([FOOD, TRAVEL], transactions)

    assert [stat.category_id for stat in stats] == ["food", "travel"]


def test_category_stats_zero_total_gives_zero_percentage() -> None:
    stats = compute_category_stats(
        [FOOD], [_transaction("1", FOOD, "0")]
    )

    assert stats[0].percentage == Decimal("0")


def test_select_top_categories_filters_direction() -> None:
    stats = compute_category_stats(
        [SALARY, FOOD, TRAVEL],
        [
            _transaction("1", SALARY, "2000"),
            _transaction("2", FOOD, "300"),
            _transaction("3", TRAVEL, "700"),
        ],
    )

    top = select_top_categories(stats, TransactionDirection.EXPENSE, 1)

    assert [stat.category_name for stat in top] == ["Travel"]


def test_build_period_summary_normalizes_totals() -> None:
    summary = build_period_summary(
        date(2024, 3, 1), date(2024, 3, 31), None, 12.5, 1
    )

    assert summary.total_income == Decimal("0")
    assert summary.total_expenses == Decimal("12.5")
    assert summary.balance == Decimal("-12.5")


def test_consistency_check_warns_on_mismatch() -> None:
    logger = MagicMock()
    summary = _summary("2000", "0", count=2)
    transactions = [
        _transaction("1", SALARY, "2000"),
        _transaction("2", FOOD, "50"),
    ]

    check_summary_consistency(
        summary, transactions, mode="warn", logger=logger
    )

    logger.warning.assert_called_once()
    assert "expenses=0" in logger.warning.call_args[0][0]


def test_consistency_check_raises_in_strict_mode() -> None:
    with pytest.raises(DataInconsistencyError):
        check_summary_consistency(
            _summary("10", "0"),
            [],
            mode="raise",
            logger=MagicMock(),
        )


def test_consistency_check_is_silent_when_totals_match_or_off() -> None:
    logger = MagicMock()
    transactions = [_transaction("1", SALARY, "2000")]

    check_summary_consistency(
        _summary("2000", "0"), transactions, mode="raise", logger=logger
    )
    check_summary_consistency(
        _summary("1", "1"), transactions, mode="off", logger=logger
    )

    logger.warning.assert_not_called()


def test_consistency_check_ignores_uncategorized_transactions() -> None:
    logger = MagicMock()
    orphan = Transaction(
        id="2",
        description="Cash withdrawal",
        amount=Money(Decimal("40")),
        transaction_date=date(2024, 3, 6),
        category_id="deleted",
        category=None,
    )

    check_summary_consistency(
        _summary("2000", "0", count=2),
        [_transaction("1", SALARY, "2000"), orphan],
        mode="raise",
        logger=logger,
    )

    logger.warning.assert_not_called()


def test_compare_summaries_variances_and_flags() -> None:
    result = compare_summaries(
        _summary("3000", "1500"),
        _summary("2800", "1200"),
        "current month vs previous month",
    )

    assert result.income_variance_amount == Decimal("200")
    assert result.expense_variance_amount == Decimal("300")
    assert result.balance_variance_amount == Decimal("-100")
    assert result.income_variance_percentage == Decimal("7.14")
    assert result.expense_variance_percentage == Decimal("25.00")
    assert result.balance_variance_percentage == Decimal("-6.25")
    assert result.income_improved is True
    assert result.expense_improved is False
    assert result.balance_improved is False


def test_compare_summary_with_itself_is_flat() -> None:
    summary = _summary("3000", "1500")

    result = compare_summaries(summary, summary, "same")

    assert result.income_variance_percentage == Decimal("0")
    assert result.expense_variance_percentage == Decimal("0")
    assert result.balance_variance_percentage == Decimal("0")
    assert result.balance_improved is False


@pytest.mark.parametrize(
    ("current", "previous", "expected"),
    [
        ("150", "100", Decimal("50.00")),
        ("-50", "-100", Decimal("50.00")),
        ("5", "0", Decimal("0")),
        ("0", "0", Decimal("100")),
        ("-5", "0", Decimal("100")),
    ],
)
def test_variance_percentage(current, previous, expected) -> None:
    assert variance_percentage(current, previous) == expected


def test_projection_without_points() -> None:
    projection = project_from_trend([], date(2024, 4, 20))

    assert projection.confidence_level == 0
    assert projection.data_points_used == 0
    assert projection.method == INSUFFICIENT_DATA_METHOD
    assert projection.projected_balance == Decimal("0")


def test_projection_averages_full_window() -> None:
    points = [
        _point(1, "1000", "500"),
        _point(2, "2000", "800"),
        _point(3, "3001", "700"),
    ]

    projection = project_from_trend(points, date(2024, 4, 20))

    assert projection.projected_income == Decimal("2000.33")
    assert projection.projected_expenses == Decimal("666.67")
    assert projection.projected_balance == Decimal("1333.67")
    assert projection.confidence_level == 75
    assert projection.method == "average of the last 3 months"
    assert projection.projection_date == date(2024, 4, 20)


def test_projection_with_partial_window() -> None:
    projection = project_from_trend(
        [_point(2, "100", "50"), _point(3, "200", "50")],
        date(2024, 4, 20),
    )

    assert projection.confidence_level == 50
    assert projection.projected_income == Decimal("150.00")
