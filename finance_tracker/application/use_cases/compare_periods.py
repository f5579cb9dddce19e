"""Use case to compare a period with the previous one."""

from collections.abc import Callable
from datetime import date

from finance_tracker.application.use_cases.get_period_summary import (
    GetPeriodSummaryUseCase,
)
from finance_tracker.domain.models import ComparisonResult, PeriodSummary
from finance_tracker.domain.services.comparison import compare_summaries
from finance_tracker.infrastructure.logging.logger import get_app_logger

MONTH_OVER_MONTH_DESCRIPTION = "current month vs previous month"


class ComparePeriodsUseCase:
    """Compute period-over-period variances."""

    def __init__(
        self,
        summary_use_case: GetPeriodSummaryUseCase,
        logger=None,
        clock: Callable[[], date] | None = None,
    ) -> None:
        self._summary_use_case = summary_use_case
        self._logger = logger or get_app_logger()
        self._clock = clock or date.today

    def execute(
        self,
        current: PeriodSummary,
        previous: PeriodSummary,
        description: str,
    ) -> ComparisonResult:
        """Compare two summaries.

        Args:
            current: Summary of the current period.
            previous: Summary of the previous period.
            description: Label describing the comparison.

        Returns:
            ComparisonResult: Variances and improvement flags.
        """
        result = compare_summaries(current, previous, description)
        self._logger.info(
            f"Comparison '{description}': "
            f"income={result.income_variance_amount}, "
            f"expenses={result.expense_variance_amount}, "
            f"balance={result.balance_variance_amount}"
        )
        return result

    def month_over_month(self) -> ComparisonResult:
        """Compare the current month with the previous month."""
        return self.execute(
            self._summary_use_case.current_month(),
            self._summary_use_case.last_month(),
            MONTH_OVER_MONTH_DESCRIPTION,
        )

    def year_over_year(self) -> ComparisonResult:
        """Compare the current year with the previous year."""
        year = self._clock().year
        return self.execute(
            self._summary_use_case.current_year(),
            self._summary_use_case.previous_year(),
            f"{year} vs {year - 1}",
        )


__all__ = [
    "ComparePeriodsUseCase",
    "ComparisonResult",
    "MONTH_OVER_MONTH_DESCRIPTION",
]
