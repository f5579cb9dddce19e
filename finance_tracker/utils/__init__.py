"""Shared helpers."""

from .date_utils import coerce_date, coerce_datetime
from .decimal_utils import coerce_decimal, round_amount
from .utils import get_project_root

__all__ = [
    "coerce_date",
    "coerce_datetime",
    "coerce_decimal",
    "round_amount",
    "get_project_root",
]
