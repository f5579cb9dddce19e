"""Domain model for transactions."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from finance_tracker.domain.models.categories import (
    Category,
    TransactionDirection,
)
from finance_tracker.domain.models.money import Money


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(eq=False)
class Transaction:
    """Recorded income or expense.

    Direction is read through the resolved ``category``. A transaction whose
    category was not resolved reports an expense.

    Attributes:
        id: Unique identifier.
        description: Free-text description.
        amount: Non-negative amount.
        transaction_date: Date the money moved (time part discarded).
        category_id: Identifier of the linked category.
        category: Resolved category, when loaded.
        created_at: Creation timestamp.
        updated_at: Timestamp of the last explicit update.
    """

    id: str
    description: str
    amount: Money
    transaction_date: date
    category_id: str
    category: Category | None = None
    created_at: datetime | None = field(default_factory=_utcnow)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self.transaction_date = _as_date(self.transaction_date)

    @property
    def direction(self) -> TransactionDirection:
        if self.category is None:
            return TransactionDirection.EXPENSE
        return self.category.direction

    @property
    def is_income(self) -> bool:
        return self.category is not None and self.category.is_income

    @property
    def is_expense(self) -> bool:
        return self.category is not None and self.category.is_expense

    def update_description(self, description: str) -> None:
        self.description = description.strip()
        self._touch()

    def update_amount(self, amount: Money) -> None:
        self.amount = amount
        self._touch()

    def update_transaction_date(self, transaction_date: date | datetime) -> None:
        self.transaction_date = _as_date(transaction_date)
        self._touch()

    def update_category(self, category: Category) -> None:
        self.category_id = category.id
        self.category = category
        self._touch()

    def _touch(self) -> None:
        self.updated_at = _utcnow()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Transaction):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


__all__ = ["Transaction"]
