"""Application use cases package."""

from .compare_periods import ComparePeriodsUseCase, ComparisonResult
from .get_category_stats import CategoryStat, GetCategoryStatsUseCase
from .get_dashboard import FullDashboard, GetDashboardUseCase, PeriodDashboard
from .get_period_summary import GetPeriodSummaryUseCase, PeriodSummary
from .get_recent_transactions import (
    GetRecentTransactionsUseCase,
    RecentTransaction,
)
from .get_trends import GetTrendsUseCase, TrendPoint
from .project_next_month import ProjectNextMonthUseCase, Projection

__all__ = [
    "ComparePeriodsUseCase",
    "ComparisonResult",
    "GetCategoryStatsUseCase",
    "CategoryStat",
    "GetDashboardUseCase",
    "FullDashboard",
    "PeriodDashboard",
    "GetPeriodSummaryUseCase",
    "PeriodSummary",
    "GetRecentTransactionsUseCase",
    "RecentTransaction",
    "GetTrendsUseCase",
    "TrendPoint",
    "ProjectNextMonthUseCase",
    "Projection",
]
