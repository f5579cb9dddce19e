"""SQLAlchemy-backed repository for categories."""

from sqlalchemy import text

from finance_tracker.application.ports.category_repository import (
    CategoryRepositoryPort,
)
from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.domain.models import Category, CategoryType
from finance_tracker.utils.date_utils import coerce_datetime


class SqlAlchemyCategoryRepository(CategoryRepositoryPort):
    """Repository backed by SQLAlchemy for categories."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def list_all(self) -> list[Category]:
        """Return every category ordered by name."""
        query = text(
            """
            SELECT id, name, category_type, created_at
            FROM categories
            ORDER BY name
            """
        )
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            Category(
                id=str(row.id),
                name=row.name,
                category_type=CategoryType(int(row.category_type)),
                created_at=coerce_datetime(row.created_at),
            )
            for row in rows
        ]


__all__ = ["SqlAlchemyCategoryRepository"]
