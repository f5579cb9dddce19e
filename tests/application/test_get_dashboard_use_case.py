"""Tests for the GetDashboardUseCase."""

from datetime import date
from decimal import Decimal

import pytest

from finance_tracker.application.use_cases.get_category_stats import (
    GetCategoryStatsUseCase,
)
from finance_tracker.application.use_cases.get_dashboard import (
    GetDashboardUseCase,
)
from finance_tracker.application.use_cases.get_period_summary import (
    GetPeriodSummaryUseCase,
)
from finance_tracker.application.use_cases.get_recent_transactions import (
    GetRecentTransactionsUseCase,
)
from finance_tracker.application.use_cases.get_trends import GetTrendsUseCase
from finance_tracker.domain.exceptions import InvalidPeriodError
from finance_tracker.domain.models import FullDashboard, PeriodDashboard


@pytest.fixture
def dashboard(transaction_repository, category_repository, logger, clock):
    summary = GetPeriodSummaryUseCase(
        transaction_repository, logger=logger, clock=clock
    )
    return GetDashboardUseCase(
        summary,
        GetCategoryStatsUseCase(
            transaction_repository,
            category_repository,
            logger=logger,
            clock=clock,
        ),
        GetTrendsUseCase(summary, logger=logger, clock=clock),
        GetRecentTransactionsUseCase(
            transaction_repository, logger=logger, clock=clock
        ),
        logger=logger,
    )


def test_execute_builds_full_dashboard(dashboard) -> None:
    result = dashboard.execute()

    assert isinstance(result, FullDashboard)
    assert result.current_month.total_income == Decimal("3000.00")
    assert result.last_month.total_income == Decimal("2800.00")
    assert result.current_year.balance == Decimal("4450.00")
    assert [stat.category_name for stat in result.top_categories] == [
        "Rent",
        "Groceries",
    ]
    assert len(result.monthly_trend) == 6
    assert result.monthly_trend[0].label == "October 2023"
    assert result.monthly_trend[-1].label == "March 2024"
    assert len(result.recent_transactions) == 7


def test_execute_for_period_builds_period_dashboard(dashboard) -> None:
    result = dashboard.execute_for_period(
        date(2024, 2, 1), date(2024, 2, 29)
    )

    assert isinstance(result, PeriodDashboard)
    assert result.period.total_income == Decimal("2800.00")
    assert result.period.total_expenses == Decimal("150.00")
    assert [stat.category_name for stat in result.category_stats] == [
        "Salary",
        "Groceries",
    ]
    assert [
        record.transaction_id for record in result.recent_transactions
    ] == ["t5", "t4"]


def test_execute_for_period_rejects_invalid_period(
    dashboard, transaction_repository
) -> None:
    with pytest.raises(InvalidPeriodError):
        dashboard.execute_for_period(date(2024, 3, 31), date(2024, 3, 1))

    assert transaction_repository.calls == []
