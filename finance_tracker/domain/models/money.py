"""Money value object."""

from dataclasses import dataclass
from decimal import Decimal

from finance_tracker.domain.exceptions import NegativeAmountError
from finance_tracker.utils.decimal_utils import coerce_decimal, round_amount


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount rounded to two decimal places.

    Rounding is banker's rounding (half to even). Two values are equal when
    their rounded amounts are equal.

    Attributes:
        amount: Rounded, non-negative amount.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        raw = coerce_decimal(self.amount)
        if raw < 0:
            raise NegativeAmountError(
                f"Amount cannot be negative: {raw}"
            )
        object.__setattr__(self, "amount", round_amount(raw))

    @classmethod
    def zero(cls) -> "Money":
        """Return a zero amount."""
        return cls(Decimal("0"))

    def add(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def subtract(self, other: "Money") -> "Money":
        """Return the difference, failing when it would be negative."""
        return Money(self.amount - other.amount)

    def multiply(self, factor) -> "Money":
        """Return the amount scaled by ``factor``.

        Raises:
            NegativeAmountError: If the scaled amount is negative.
        """
        return Money(self.amount * coerce_decimal(factor))

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    @property
    def is_positive(self) -> bool:
        return self.amount > 0

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor) -> "Money":
        if isinstance(factor, Money):
            return NotImplemented
        return self.multiply(factor)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"{self.amount:,.2f}"


__all__ = ["Money"]
