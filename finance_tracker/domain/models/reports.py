"""Derived reporting models.

Every model here is recomputed on request and never persisted.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from finance_tracker.domain.models.categories import (
    CategoryType,
    TransactionDirection,
)


@dataclass(frozen=True)
class PeriodSummary:
    """Income and expense totals for an inclusive date range.

    Attributes:
        start_date: First day of the period.
        end_date: Last day of the period.
        total_income: Sum of income amounts.
        total_expenses: Sum of expense amounts.
        transaction_count: Number of transactions of any direction.
    """

    start_date: date
    end_date: date
    total_income: Decimal
    total_expenses: Decimal
    transaction_count: int

    @property
    def balance(self) -> Decimal:
        """Return total_income minus total_expenses."""
        return self.total_income - self.total_expenses

    @classmethod
    def empty(cls, start_date: date, end_date: date) -> "PeriodSummary":
        return cls(
            start_date=start_date,
            end_date=end_date,
            total_income=Decimal("0"),
            total_expenses=Decimal("0"),
            transaction_count=0,
        )


@dataclass(frozen=True)
class CategoryStat:
    """Per-category totals for a period."""

    category_id: str
    category_name: str
    category_type: CategoryType
    direction: TransactionDirection
    total_amount: Decimal
    transaction_count: int
    percentage: Decimal


@dataclass(frozen=True)
class TrendPoint:
    """One labelled period of a chronological series.

    ``month`` is None for yearly points.
    """

    label: str
    year: int
    month: int | None
    summary: PeriodSummary


@dataclass(frozen=True)
class ComparisonResult:
    """Variance between a current and a previous period."""

    current: PeriodSummary
    previous: PeriodSummary
    description: str
    income_variance_amount: Decimal
    expense_variance_amount: Decimal
    balance_variance_amount: Decimal
    income_variance_percentage: Decimal
    expense_variance_percentage: Decimal
    balance_variance_percentage: Decimal

    @property
    def income_improved(self) -> bool:
        return self.income_variance_percentage > 0

    @property
    def expense_improved(self) -> bool:
        """Less spending counts as an improvement."""
        return self.expense_variance_percentage < 0

    @property
    def balance_improved(self) -> bool:
        return self.balance_variance_percentage > 0


@dataclass(frozen=True)
class Projection:
    """Naive forward projection for the next month."""

    projection_date: date
    projected_income: Decimal
    projected_expenses: Decimal
    projected_balance: Decimal
    data_points_used: int
    confidence_level: int
    method: str


@dataclass(frozen=True)
class RecentTransaction:
    """Display record for a recently created transaction."""

    transaction_id: str
    description: str
    amount: Decimal
    transaction_date: date
    relative_date: str
    category_name: str
    direction: TransactionDirection


@dataclass(frozen=True)
class FullDashboard:
    """Consolidated view anchored on today."""

    current_month: PeriodSummary
    last_month: PeriodSummary
    current_year: PeriodSummary
    top_categories: list[CategoryStat]
    monthly_trend: list[TrendPoint]
    recent_transactions: list[RecentTransaction]


@dataclass(frozen=True)
class PeriodDashboard:
    """Consolidated view for an arbitrary period."""

    period: PeriodSummary
    category_stats: list[CategoryStat]
    recent_transactions: list[RecentTransaction]


__all__ = [
    "PeriodSummary",
    "CategoryStat",
    "TrendPoint",
    "ComparisonResult",
    "Projection",
    "RecentTransaction",
    "FullDashboard",
    "PeriodDashboard",
]
