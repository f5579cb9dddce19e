"""Use case to compute per-category statistics."""

from collections.abc import Callable
from datetime import date

from finance_tracker.application.ports.category_repository import (
    CategoryRepositoryPort,
)
from finance_tracker.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from finance_tracker.domain.constants import (
    DEFAULT_TOP_CATEGORIES,
    TOP_CATEGORIES_RANGE,
)
from finance_tracker.domain.models import CategoryStat, TransactionDirection
from finance_tracker.domain.services.finance import (
    compute_category_stats,
    select_top_categories,
)
from finance_tracker.domain.services.periods import current_month_bounds
from finance_tracker.domain.services.validation import (
    validate_period,
    validate_range,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


class GetCategoryStatsUseCase:
    """Compute category totals and shares for a period."""

    def __init__(
        self,
        transaction_repository: TransactionRepositoryPort,
        category_repository: CategoryRepositoryPort,
        logger=None,
        clock: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_repository: Port providing transaction reads.
            category_repository: Port providing category reads.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning today's date.
        """
        self._transaction_repository = transaction_repository
        self._category_repository = category_repository
        self._logger = logger or get_app_logger()
        self._clock = clock or date.today

    def execute(self, start_date: date, end_date: date) -> list[CategoryStat]:
        """Return category statistics for an inclusive date range.

        Args:
            start_date: First day of the period.
            end_date: Last day of the period.

        Returns:
            list[CategoryStat]: Categories with at least one transaction,
            ordered by total amount descending.

        Raises:
            InvalidPeriodError: If the range is reversed or starts in the
                future.
        """
        validate_period(start_date, end_date, self._clock())

        categories = self._category_repository.list_all()
        transactions = self._transaction_repository.list_by_date_range(
            start_date, end_date
        )
        self._logger.info(
            f"Fetched {len(categories)} categories and "
            f"{len(transactions)} transactions for {start_date}..{end_date}"
        )
        return compute_category_stats(categories, transactions)

    def current_month(self) -> list[CategoryStat]:
        return self.execute(*current_month_bounds(self._clock()))

    def top_by_expense(
        self,
        limit: int = DEFAULT_TOP_CATEGORIES,
    ) -> list[CategoryStat]:
        """Return the largest expense categories of the current month."""
        return self._top(TransactionDirection.EXPENSE, limit)

    def top_by_income(
        self,
        limit: int = DEFAULT_TOP_CATEGORIES,
    ) -> list[CategoryStat]:
        """Return the largest income categories of the current month."""
        return self._top(TransactionDirection.INCOME, limit)

    def _top(
        self,
        direction: TransactionDirection,
        limit: int,
    ) -> list[CategoryStat]:
        validate_range("limit", limit, TOP_CATEGORIES_RANGE)
        return select_top_categories(self.current_month(), direction, limit)


__all__ = ["GetCategoryStatsUseCase", "CategoryStat"]
