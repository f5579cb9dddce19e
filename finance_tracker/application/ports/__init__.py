"""Application ports package."""

from .category_repository import CategoryRepositoryPort
from .database import DatabaseEnginePort
from .transaction_repository import TransactionRepositoryPort

__all__ = [
    "CategoryRepositoryPort",
    "DatabaseEnginePort",
    "TransactionRepositoryPort",
]
