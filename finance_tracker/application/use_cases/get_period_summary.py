"""Use case to compute income and expense totals for a period."""

from collections.abc import Callable
from datetime import date

from finance_tracker.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from finance_tracker.domain.models import PeriodSummary, TransactionDirection
from finance_tracker.domain.services.finance import (
    CONSISTENCY_WARN,
    build_period_summary,
    check_summary_consistency,
)
from finance_tracker.domain.services.periods import (
    current_month_bounds,
    previous_month_bounds,
    year_bounds,
)
from finance_tracker.domain.services.validation import validate_period
from finance_tracker.infrastructure.logging.logger import get_app_logger


class GetPeriodSummaryUseCase:
    """Compute period summaries from the transaction store."""

    def __init__(
        self,
        transaction_repository: TransactionRepositoryPort,
        logger=None,
        clock: Callable[[], date] | None = None,
        consistency_mode: str = CONSISTENCY_WARN,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_repository: Port providing transaction reads.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning today's date.
            consistency_mode: How to react when the sum queries disagree
                with the listed transactions ("off", "warn" or "raise").
        """
        self._transaction_repository = transaction_repository
        self._logger = logger or get_app_logger()
        self._clock = clock or date.today
        self._consistency_mode = consistency_mode

    def execute(self, start_date: date, end_date: date) -> PeriodSummary:
        """Return the summary of an inclusive date range.

        Args:
            start_date: First day of the period.
            end_date: Last day of the period.

        Returns:
            PeriodSummary: Income, expenses, balance and transaction count.

        Raises:
            InvalidPeriodError: If the range is reversed or starts in the
                future.
            DataInconsistencyError: If the consistency mode is "raise" and
                the store answers disagree.
        """
        validate_period(start_date, end_date, self._clock())

        total_income = (
            self._transaction_repository.sum_amount_by_direction_and_range(
                TransactionDirection.INCOME, start_date, end_date
            )
        )
        total_expenses = (
            self._transaction_repository.sum_amount_by_direction_and_range(
                TransactionDirection.EXPENSE, start_date, end_date
            )
        )
        transactions = self._transaction_repository.list_by_date_range(
            start_date, end_date
        )
        summary = build_period_summary(
            start_date,
            end_date,
            total_income,
            total_expenses,
            len(transactions),
        )
        check_summary_consistency(
            summary,
            transactions,
            mode=self._consistency_mode,
            logger=self._logger,
        )
        self._logger.info(
            f"Period summary {start_date}..{end_date}: "
            f"income={summary.total_income}, "
            f"expenses={summary.total_expenses}, "
            f"count={summary.transaction_count}"
        )
        return summary

    def current_month(self) -> PeriodSummary:
        return self.execute(*current_month_bounds(self._clock()))

    def last_month(self) -> PeriodSummary:
        return self.execute(*previous_month_bounds(self._clock()))

    def current_year(self) -> PeriodSummary:
        return self.execute(*year_bounds(self._clock().year))

    def previous_year(self) -> PeriodSummary:
        return self.execute(*year_bounds(self._clock().year - 1))


__all__ = ["GetPeriodSummaryUseCase", "PeriodSummary"]
