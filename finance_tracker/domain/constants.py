"""Domain constants for finance reporting."""

MONTHLY_TREND_RANGE = (1, 24)
YEARLY_TREND_RANGE = (1, 10)
TOP_CATEGORIES_RANGE = (1, 20)
RECENT_TRANSACTIONS_RANGE = (1, 50)
RECENT_BY_CATEGORY_RANGE = (1, 20)

DEFAULT_MONTHLY_TREND_MONTHS = 12
DEFAULT_YEARLY_TREND_YEARS = 3
DEFAULT_TOP_CATEGORIES = 5
DEFAULT_RECENT_TRANSACTIONS = 10
DEFAULT_RECENT_BY_CATEGORY = 5

DASHBOARD_TOP_CATEGORIES = 5
DASHBOARD_TREND_MONTHS = 6
DASHBOARD_RECENT_TRANSACTIONS = 10

PROJECTION_WINDOW_MONTHS = 3
PROJECTION_CONFIDENCE_FULL = 75
PROJECTION_CONFIDENCE_PARTIAL = 50
PROJECTION_CONFIDENCE_NONE = 0

UNCATEGORIZED_LABEL = "Uncategorized"


__all__ = [
    "MONTHLY_TREND_RANGE",
    "YEARLY_TREND_RANGE",
    "TOP_CATEGORIES_RANGE",
    "RECENT_TRANSACTIONS_RANGE",
    "RECENT_BY_CATEGORY_RANGE",
    "DEFAULT_MONTHLY_TREND_MONTHS",
    "DEFAULT_YEARLY_TREND_YEARS",
    "DEFAULT_TOP_CATEGORIES",
    "DEFAULT_RECENT_TRANSACTIONS",
    "DEFAULT_RECENT_BY_CATEGORY",
    "DASHBOARD_TOP_CATEGORIES",
    "DASHBOARD_TREND_MONTHS",
    "DASHBOARD_RECENT_TRANSACTIONS",
    "PROJECTION_WINDOW_MONTHS",
    "PROJECTION_CONFIDENCE_FULL",
    "PROJECTION_CONFIDENCE_PARTIAL",
    "PROJECTION_CONFIDENCE_NONE",
    "UNCATEGORIZED_LABEL",
]
