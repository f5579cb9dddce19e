"""Shared fakes for application use case tests."""

from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from finance_tracker.application.ports.category_repository import (
    CategoryRepositoryPort,
)
from finance_tracker.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from finance_tracker.domain.models import (
    Category,
    CategoryType,
    Money,
    Transaction,
    TransactionDirection,
)

TODAY = date(2024, 3, 20)

SALARY = Category(
    id="salary", name="Salary", category_type=CategoryType.SALARY
)
FREELANCE = Category(
    id="freelance", name="Freelance", category_type=CategoryType.FREELANCE
)
GROCERIES = Category(
    id="groceries", name="Groceries", category_type=CategoryType.FOOD
)
RENT = Category(id="rent", name="Rent", category_type=CategoryType.HOUSING)


def make_transaction(
    tx_id: str,
    category: Category | None,
    amount: str,
    on: date,
) -> Transaction:
    return Transaction(
        id=tx_id,
        description=f"tx {tx_id}",
        amount=Money(Decimal(amount)),
        transaction_date=on,
        category_id=category.id if category else "missing",
        category=category,
        created_at=datetime(
            on.year, on.month, on.day, 9, tzinfo=timezone.utc
        ),
    )


class FakeTransactionRepository(TransactionRepositoryPort):
    """In-memory transaction store recording every call."""

    def __init__(self, transactions: list[Transaction]) -> None:
        self._transactions = list(transactions)
        self.calls: list[tuple] = []

    def _in_range(
        self,
        start_date: date,
        end_date: date,
    ) -> list[Transaction]:
        return [
            transaction
            for transaction in self._transactions
            if start_date <= transaction.transaction_date <= end_date
        ]

    def sum_amount_by_direction_and_range(
        self,
        direction: TransactionDirection,
        start_date: date,
        end_date: date,
    ) -> Decimal:
        self.calls.append(("sum", direction, start_date, end_date))
        return sum(
            (
                transaction.amount.amount
                for transaction in self._in_range(start_date, end_date)
                if transaction.category is not None
                and transaction.direction == direction
            ),
            Decimal("0"),
        )

    def list_by_date_range(
        self,
        start_date: date,
        end_date: date,
    ) -> list[Transaction]:
        self.calls.append(("list", start_date, end_date))
        return self._in_range(start_date, end_date)

    def list_all_with_category(self) -> list[Transaction]:
        self.calls.append(("list_all",))
        return list(self._transactions)

    def list_by_category(self, category_id: str) -> list[Transaction]:
        self.calls.append(("list_by_category", category_id))
        return [
            transaction
            for transaction in self._transactions
            if transaction.category_id == category_id
        ]


class FakeCategoryRepository(CategoryRepositoryPort):
    def __init__(self, categories: list[Category]) -> None:
        self._categories = list(categories)

    def list_all(self) -> list[Category]:
        return list(self._categories)


@pytest.fixture
def clock():
    return lambda: TODAY


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def transactions() -> list[Transaction]:
    return [
        make_transaction("t1", SALARY, "3000", date(2024, 3, 1)),
        make_transaction("t2", GROCERIES, "200", date(2024, 3, 5)),
        make_transaction("t3", RENT, "1000", date(2024, 3, 2)),
        make_transaction("t4", SALARY, "2800", date(2024, 2, 1)),
        make_transaction("t5", GROCERIES, "150", date(2024, 2, 10)),
        make_transaction("t6", FREELANCE, "500", date(2023, 12, 15)),
        make_transaction("t7", RENT, "900", date(2023, 6, 1)),
    ]


@pytest.fixture
def transaction_repository(transactions) -> FakeTransactionRepository:
    return FakeTransactionRepository(transactions)


@pytest.fixture
def category_repository() -> FakeCategoryRepository:
    return FakeCategoryRepository([FREELANCE, GROCERIES, RENT, SALARY])


@pytest.fixture
def categories() -> dict[str, Category]:
    return {
        category.id: category
        for category in (SALARY, FREELANCE, GROCERIES, RENT)
    }


@pytest.fixture
def transaction_factory():
    return make_transaction


@pytest.fixture
def repository_factory():
    return FakeTransactionRepository
