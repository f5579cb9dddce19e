"""Domain models package."""

from .categories import (
    CATEGORY_TYPE_INFO,
    Category,
    CategoryType,
    CategoryTypeInfo,
    TransactionDirection,
    category_types_for,
    classify,
)
from .money import Money
from .reports import (
    CategoryStat,
    ComparisonResult,
    FullDashboard,
    PeriodDashboard,
    PeriodSummary,
    Projection,
    RecentTransaction,
    TrendPoint,
)
from .transactions import Transaction

__all__ = [
    "CATEGORY_TYPE_INFO",
    "Category",
    "CategoryType",
    "CategoryTypeInfo",
    "TransactionDirection",
    "category_types_for",
    "classify",
    "Money",
    "Transaction",
    "PeriodSummary",
    "CategoryStat",
    "TrendPoint",
    "ComparisonResult",
    "Projection",
    "RecentTransaction",
    "FullDashboard",
    "PeriodDashboard",
]
