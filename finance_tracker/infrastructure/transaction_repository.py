"""SQLAlchemy-backed repository for transactions."""

from datetime import date
from decimal import Decimal

from sqlalchemy import bindparam, text

from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from finance_tracker.domain.models import (
    Category,
    CategoryType,
    Money,
    Transaction,
    TransactionDirection,
    category_types_for,
)
from finance_tracker.utils.date_utils import coerce_date, coerce_datetime
from finance_tracker.utils.decimal_utils import coerce_decimal

# Shared by the sum and listing queries so both see the same rows.
DATE_RANGE_FILTER = (
    "t.transaction_date >= :start_date AND t.transaction_date <= :end_date"
)

_SELECT_WITH_CATEGORY = """
    SELECT t.id AS id,
           t.description AS description,
           t.amount AS amount,
           t.transaction_date AS transaction_date,
           t.category_id AS category_id,
           t.created_at AS created_at,
           t.updated_at AS updated_at,
           c.name AS category_name,
           c.category_type AS category_type,
           c.created_at AS category_created_at
    FROM transactions t
    LEFT JOIN categories c ON c.id = t.category_id
"""


def row_to_transaction(row) -> Transaction:
    """Map a joined transaction row to a domain transaction.

    Args:
        row: Result row exposing transaction and ``category_*`` columns.

    Returns:
        Transaction: Transaction with its category resolved when the join
        matched.
    """
    category = None
    if row.category_name is not None:
        category = Category(
            id=str(row.category_id),
            name=row.category_name,
            category_type=CategoryType(int(row.category_type)),
            created_at=coerce_datetime(row.category_created_at),
        )
    return Transaction(
        id=str(row.id),
        description=row.description,
        amount=Money(coerce_decimal(row.amount)),
        transaction_date=coerce_date(row.transaction_date),
        category_id=str(row.category_id),
        category=category,
        created_at=coerce_datetime(row.created_at),
        updated_at=coerce_datetime(row.updated_at),
    )


class SqlAlchemyTransactionRepository(TransactionRepositoryPort):
    """Repository backed by SQLAlchemy for transactions."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def sum_amount_by_direction_and_range(
        self,
        direction: TransactionDirection,
        start_date: date,
        end_date: date,
    ) -> Decimal:
        query = text(
            f"""
            SELECT COALESCE(SUM(t.amount), 0) AS total
            FROM transactions t
            JOIN categories c ON c.id = t.category_id
            WHERE {DATE_RANGE_FILTER}
              AND c.category_type IN :category_types
            """
        ).bindparams(bindparam("category_types", expanding=True))
        params = {
            "start_date": start_date,
            "end_date": end_date,
            "category_types": [
                int(category_type)
                for category_type in category_types_for(direction)
            ],
        }
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            result = conn.execute(query, params).first()
        if not result:
            return Decimal("0")
        return coerce_decimal(result.total)

    def list_by_date_range(
        self,
        start_date: date,
        end_date: date,
    ) -> list[Transaction]:
        query = text(
            _SELECT_WITH_CATEGORY
            + f" WHERE {DATE_RANGE_FILTER}"
            + " ORDER BY t.transaction_date DESC, t.created_at DESC"
        )
        params = {"start_date": start_date, "end_date": end_date}
        return self._fetch(query, params)

    def list_all_with_category(self) -> list[Transaction]:
        query = text(
            _SELECT_WITH_CATEGORY + " ORDER BY t.transaction_date DESC"
        )
        return self._fetch(query, {})

    def list_by_category(self, category_id: str) -> list[Transaction]:
        query = text(
            _SELECT_WITH_CATEGORY
            + " WHERE t.category_id = :category_id"
            + " ORDER BY t.transaction_date DESC"
        )
        return self._fetch(query, {"category_id": category_id})

    def _fetch(self, query, params: dict) -> list[Transaction]:
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [row_to_transaction(row) for row in rows]


__all__ = [
    "DATE_RANGE_FILTER",
    "SqlAlchemyTransactionRepository",
    "row_to_transaction",
]
