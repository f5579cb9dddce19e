"""Domain models for categories and their classification."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, IntEnum

from finance_tracker.domain.exceptions import InvalidArgumentError


class TransactionDirection(str, Enum):
    """Direction of money flow for a category or transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class CategoryType(IntEnum):
    """Persisted category tags.

    The integer values are storage codes only; classification goes through
    ``CATEGORY_TYPE_INFO``.
    """

    FOOD = 1
    HEALTH = 2
    ENTERTAINMENT = 3
    TRANSPORT = 4
    EDUCATION = 5
    HOUSING = 6
    CLOTHING = 7
    TECHNOLOGY = 8
    TRAVEL = 9
    UTILITIES = 10
    INSURANCE = 11
    PERSONAL_CARE = 12
    GIFTS = 13
    OTHER = 14

    SALARY = 100
    FREELANCE = 101
    INVESTMENT = 102
    BONUS = 103
    GIFT = 104
    REFUND = 105
    SIDE_INCOME = 106


@dataclass(frozen=True)
class CategoryTypeInfo:
    """Classification entry for a category type."""

    direction: TransactionDirection
    display_name: str


_EXPENSE = TransactionDirection.EXPENSE
_INCOME = TransactionDirection.INCOME

CATEGORY_TYPE_INFO: dict[CategoryType, CategoryTypeInfo] = {
    CategoryType.FOOD: CategoryTypeInfo(_EXPENSE, "Food"),
    CategoryType.HEALTH: CategoryTypeInfo(_EXPENSE, "Health"),
    CategoryType.ENTERTAINMENT: CategoryTypeInfo(_EXPENSE, "Entertainment"),
    CategoryType.TRANSPORT: CategoryTypeInfo(_EXPENSE, "Transport"),
    CategoryType.EDUCATION: CategoryTypeInfo(_EXPENSE, "Education"),
    CategoryType.HOUSING: CategoryTypeInfo(_EXPENSE, "Housing"),
    CategoryType.CLOTHING: CategoryTypeInfo(_EXPENSE, "Clothing"),
    CategoryType.TECHNOLOGY: CategoryTypeInfo(_EXPENSE, "Technology"),
    CategoryType.TRAVEL: CategoryTypeInfo(_EXPENSE, "Travel"),
    CategoryType.UTILITIES: CategoryTypeInfo(_EXPENSE, "Utilities"),
    CategoryType.INSURANCE: CategoryTypeInfo(_EXPENSE, "Insurance"),
    CategoryType.PERSONAL_CARE: CategoryTypeInfo(_EXPENSE, "Personal Care"),
    CategoryType.GIFTS: CategoryTypeInfo(_EXPENSE, "Gifts"),
    CategoryType.OTHER: CategoryTypeInfo(_EXPENSE, "Other"),
    CategoryType.SALARY: CategoryTypeInfo(_INCOME, "Salary"),
    CategoryType.FREELANCE: CategoryTypeInfo(_INCOME, "Freelance"),
    CategoryType.INVESTMENT: CategoryTypeInfo(_INCOME, "Investments"),
    CategoryType.BONUS: CategoryTypeInfo(_INCOME, "Bonus"),
    CategoryType.GIFT: CategoryTypeInfo(_INCOME, "Gift Received"),
    CategoryType.REFUND: CategoryTypeInfo(_INCOME, "Refund"),
    CategoryType.SIDE_INCOME: CategoryTypeInfo(_INCOME, "Side Income"),
}


def classify(category_type: CategoryType) -> CategoryTypeInfo:
    """Return the classification entry for a category type.

    Args:
        category_type: Tag to classify.

    Returns:
        CategoryTypeInfo: Direction and display label.

    Raises:
        InvalidArgumentError: If the tag has no classification entry.
    """
    try:
        return CATEGORY_TYPE_INFO[category_type]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown category type: {category_type!r}"
        ) from None


def category_types_for(direction: TransactionDirection) -> list[CategoryType]:
    """Return every category type classified under ``direction``."""
    return [
        category_type
        for category_type, info in CATEGORY_TYPE_INFO.items()
        if info.direction == direction
    ]


@dataclass(eq=False)
class Category:
    """Named grouping of transactions with a fixed category type.

    Attributes:
        id: Unique identifier.
        name: Display name chosen by the user.
        category_type: Tag determining direction and display label.
        created_at: Creation timestamp.
    """

    id: str
    name: str
    category_type: CategoryType
    created_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def direction(self) -> TransactionDirection:
        return classify(self.category_type).direction

    @property
    def is_income(self) -> bool:
        return self.direction == TransactionDirection.INCOME

    @property
    def is_expense(self) -> bool:
        return self.direction == TransactionDirection.EXPENSE

    @property
    def display_name(self) -> str:
        return classify(self.category_type).display_name

    def __eq__(self, other) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"{self.name} ({self.display_name})"


__all__ = [
    "TransactionDirection",
    "CategoryType",
    "CategoryTypeInfo",
    "CATEGORY_TYPE_INFO",
    "classify",
    "category_types_for",
    "Category",
]
