"""Use case to list recently created transactions for display."""

from collections.abc import Callable, Iterable
from datetime import date

from finance_tracker.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from finance_tracker.domain.constants import (
    DEFAULT_RECENT_BY_CATEGORY,
    DEFAULT_RECENT_TRANSACTIONS,
    RECENT_BY_CATEGORY_RANGE,
    RECENT_TRANSACTIONS_RANGE,
    UNCATEGORIZED_LABEL,
)
from finance_tracker.domain.models import RecentTransaction, Transaction
from finance_tracker.domain.services.periods import relative_date_label
from finance_tracker.domain.services.validation import (
    validate_period,
    validate_range,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


class GetRecentTransactionsUseCase:
    """Return the most recently created transactions as display records."""

    def __init__(
        self,
        transaction_repository: TransactionRepositoryPort,
        logger=None,
        clock: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_repository: Port providing transaction reads.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning today's date.
        """
        self._transaction_repository = transaction_repository
        self._logger = logger or get_app_logger()
        self._clock = clock or date.today

    def execute(
        self,
        limit: int = DEFAULT_RECENT_TRANSACTIONS,
    ) -> list[RecentTransaction]:
        """Return the latest transactions across all categories.

        Args:
            limit: Maximum number of records (1-50).

        Raises:
            InvalidArgumentError: If ``limit`` is out of range.
        """
        validate_range("limit", limit, RECENT_TRANSACTIONS_RANGE)
        transactions = self._transaction_repository.list_all_with_category()
        return self._latest(transactions, limit)

    def by_category(
        self,
        category_id: str,
        limit: int = DEFAULT_RECENT_BY_CATEGORY,
    ) -> list[RecentTransaction]:
        """Return the latest transactions of one category.

        Args:
            category_id: Identifier of the category.
            limit: Maximum number of records (1-20).

        Raises:
            InvalidArgumentError: If ``limit`` is out of range.
        """
        validate_range("limit", limit, RECENT_BY_CATEGORY_RANGE)
        transactions = self._transaction_repository.list_by_category(
            category_id
        )
        return self._latest(transactions, limit)

    def for_period(
        self,
        start_date: date,
        end_date: date,
        limit: int = DEFAULT_RECENT_TRANSACTIONS,
    ) -> list[RecentTransaction]:
        """Return the latest transactions dated within a period."""
        validate_period(start_date, end_date, self._clock())
        validate_range("limit", limit, RECENT_TRANSACTIONS_RANGE)
        transactions = self._transaction_repository.list_by_date_range(
            start_date, end_date
        )
        return self._latest(transactions, limit)

    def _latest(
        self,
        transactions: Iterable[Transaction],
        limit: int,
    ) -> list[RecentTransaction]:
        ordered = sorted(
            transactions,
            # Rows without a creation timestamp sort last.
            key=lambda transaction: (
                transaction.created_at is not None,
                transaction.created_at,
            ),
            reverse=True,
        )
        today = self._clock()
        records = [
            self._to_record(transaction, today)
            for transaction in ordered[:limit]
        ]
        self._logger.info(f"Selected {len(records)} recent transactions")
        return records

    @staticmethod
    def _to_record(transaction: Transaction, today: date) -> RecentTransaction:
        category_name = (
            transaction.category.name
            if transaction.category is not None
            else UNCATEGORIZED_LABEL
        )
        return RecentTransaction(
            transaction_id=transaction.id,
            description=transaction.description,
            amount=transaction.amount.amount,
            transaction_date=transaction.transaction_date,
            relative_date=relative_date_label(
                transaction.transaction_date, today
            ),
            category_name=category_name,
            direction=transaction.direction,
        )


__all__ = ["GetRecentTransactionsUseCase", "RecentTransaction"]
