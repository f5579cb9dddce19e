"""Application port for category reads."""

from typing import Protocol

from finance_tracker.domain.models import Category


class CategoryRepositoryPort(Protocol):
    """Port exposing read access to categories."""

    def list_all(self) -> list[Category]:
        """Return every category."""


__all__ = ["CategoryRepositoryPort"]
