"""Domain services package."""

from .comparison import compare_summaries, variance_percentage
from .finance import (
    CONSISTENCY_MODES,
    build_period_summary,
    check_summary_consistency,
    compute_category_stats,
    select_top_categories,
    sum_by_direction,
)
from .periods import (
    add_months,
    current_month_bounds,
    month_bounds,
    month_label,
    previous_month_bounds,
    relative_date_label,
    shift_month,
    trailing_months,
    trailing_years,
    year_bounds,
)
from .projection import project_from_trend
from .validation import validate_period, validate_range

__all__ = [
    "compare_summaries",
    "variance_percentage",
    "CONSISTENCY_MODES",
    "build_period_summary",
    "check_summary_consistency",
    "compute_category_stats",
    "select_top_categories",
    "sum_by_direction",
    "add_months",
    "current_month_bounds",
    "month_bounds",
    "month_label",
    "previous_month_bounds",
    "relative_date_label",
    "shift_month",
    "trailing_months",
    "trailing_years",
    "year_bounds",
    "project_from_trend",
    "validate_period",
    "validate_range",
]
