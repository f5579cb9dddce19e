"""Tests for the SQLAlchemy transaction and category repositories."""

from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from finance_tracker.domain.models import CategoryType, TransactionDirection
from finance_tracker.infrastructure.category_repository import (
    SqlAlchemyCategoryRepository,
)
from finance_tracker.infrastructure.transaction_repository import (
    SqlAlchemyTransactionRepository,
)


class _FakeResult:
    def __init__(self, rows: list[SimpleNamespace]) -> None:
        self._rows = rows

    def all(self):
        return self._rows

    def first(self):
        return self._rows[0] if self._rows else None


def _build_db_port(results: list[list[SimpleNamespace]]):
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context
    conn.execute.side_effect = [_FakeResult(rows) for rows in results]

    db_port = MagicMock()
    db_port.get_finance_engine.return_value = engine
    return db_port, conn


def _transaction_row(**overrides) -> SimpleNamespace:
    values = {
        "id": 7,
        "description": "Weekly groceries",
        "amount": "42.105",
        "transaction_date": "2024-03-05",
        "category_id": 3,
        "created_at": datetime(2024, 3, 5, 9, 0),
        "updated_at": None,
        "category_name": "Groceries",
        "category_type": 1,
        "category_created_at": "2024-01-01T00:00:00",
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def test_sum_filters_on_direction_category_types() -> None:
    db_port, conn = _build_db_port([[SimpleNamespace(total=Decimal("12.5"))]])
    repository = SqlAlchemyTransactionRepository(db_port)

    total = repository.sum_amount_by_direction_and_range(
        TransactionDirection.INCOME,
        date(2024, 3, 1),
        date(2024, 3, 31),
    )

    assert total == Decimal("12.5")
    query, params = conn.execute.call_args[0]
    assert "COALESCE(SUM(t.amount), 0)" in str(query)
    assert params["start_date"] == date(2024, 3, 1)
    assert params["end_date"] == date(2024, 3, 31)
    assert params["category_types"] == [
        int(CategoryType.SALARY),
        int(CategoryType.FREELANCE),
        int(CategoryType.INVESTMENT),
        int(CategoryType.BONUS),
        int(CategoryType.GIFT),
        int(CategoryType.REFUND),
        int(CategoryType.SIDE_INCOME),
    ]


def test_sum_without_row_is_zero() -> None:
    db_port, _ = _build_db_port([[]])
    repository = SqlAlchemyTransactionRepository(db_port)

    total = repository.sum_amount_by_direction_and_range(
        TransactionDirection.EXPENSE,
        date(2024, 3, 1),
        date(2024, 3, 31),
    )

    assert total == Decimal("0")


def test_list_by_date_range_maps_rows() -> None:
    db_port, conn = _build_db_port(
        [[_transaction_row(), _transaction_row(id=8, category_name=None)]]
    )
    repository = SqlAlchemyTransactionRepository(db_port)

    transactions = repository.list_by_date_range(
        date(2024, 3, 1), date(2024, 3, 31)
    )

    first, second = transactions
    assert first.id == "7"
    assert first.amount.amount == Decimal("42.10")
    assert first.transaction_date == date(2024, 3, 5)
    assert first.category.name == "Groceries"
    assert first.category.category_type == CategoryType.FOOD
    assert first.direction == TransactionDirection.EXPENSE
    assert second.category is None
    assert second.category_id == "3"
    query, params = conn.execute.call_args[0]
    assert "LEFT JOIN categories" in str(query)
    assert params == {
        "start_date": date(2024, 3, 1),
        "end_date": date(2024, 3, 31),
    }


def test_list_by_category_binds_identifier() -> None:
    db_port, conn = _build_db_port([[_transaction_row()]])
    repository = SqlAlchemyTransactionRepository(db_port)

    transactions = repository.list_by_category("3")

    assert [transaction.id for transaction in transactions] == ["7"]
    _, params = conn.execute.call_args[0]
    assert params == {"category_id": "3"}


def test_list_all_with_category_resolves_income() -> None:
    db_port, _ = _build_db_port(
        [[_transaction_row(category_name="Salary", category_type=100)]]
    )
    repository = SqlAlchemyTransactionRepository(db_port)

    transactions = repository.list_all_with_category()

    assert transactions[0].is_income
    assert transactions[0].created_at == datetime(2024, 3, 5, 9, 0)


def test_category_repository_lists_categories() -> None:
    db_port, _ = _build_db_port(
        [
            [
                SimpleNamespace(
                    id=1,
                    name="Groceries",
                    category_type=1,
                    created_at="2024-01-01T10:00:00",
                ),
                SimpleNamespace(
                    id=2,
                    name="Salary",
                    category_type=100,
                    created_at=datetime(2024, 1, 2),
                ),
            ]
        ]
    )
    repository = SqlAlchemyCategoryRepository(db_port)

    categories = repository.list_all()

    assert [category.id for category in categories] == ["1", "2"]
    assert categories[0].created_at == datetime(2024, 1, 1, 10, 0)
    assert categories[1].is_income
