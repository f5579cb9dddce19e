"""Domain package for business rules and core models."""

from .exceptions import (
    DataInconsistencyError,
    DomainError,
    FinanceTrackerError,
    InvalidArgumentError,
    InvalidPeriodError,
    NegativeAmountError,
)
from .models import (
    Category,
    CategoryStat,
    CategoryType,
    ComparisonResult,
    FullDashboard,
    Money,
    PeriodDashboard,
    PeriodSummary,
    Projection,
    RecentTransaction,
    Transaction,
    TransactionDirection,
    TrendPoint,
)

__all__ = [
    "DataInconsistencyError",
    "DomainError",
    "FinanceTrackerError",
    "InvalidArgumentError",
    "InvalidPeriodError",
    "NegativeAmountError",
    "Category",
    "CategoryStat",
    "CategoryType",
    "ComparisonResult",
    "FullDashboard",
    "Money",
    "PeriodDashboard",
    "PeriodSummary",
    "Projection",
    "RecentTransaction",
    "Transaction",
    "TransactionDirection",
    "TrendPoint",
]
