"""Application port for transaction reads."""

from datetime import date
from decimal import Decimal
from typing import Protocol

from finance_tracker.domain.models import Transaction, TransactionDirection


class TransactionRepositoryPort(Protocol):
    """Port exposing read access to recorded transactions.

    Date bounds are inclusive and compared on the transaction date only.
    Returned transactions carry their resolved category when one exists.
    """

    def sum_amount_by_direction_and_range(
        self,
        direction: TransactionDirection,
        start_date: date,
        end_date: date,
    ) -> Decimal:
        """Return the total amount of one direction within the range."""

    def list_by_date_range(
        self,
        start_date: date,
        end_date: date,
    ) -> list[Transaction]:
        """Return every transaction dated within the range."""

    def list_all_with_category(self) -> list[Transaction]:
        """Return every transaction with its category resolved."""

    def list_by_category(self, category_id: str) -> list[Transaction]:
        """Return the transactions linked to a category."""


__all__ = ["TransactionRepositoryPort"]
