"""Exceptions raised by the reporting core."""


class FinanceTrackerError(Exception):
    """Base class for every error raised by the finance tracker."""


class DomainError(FinanceTrackerError, ValueError):
    """A value object or entity rule was violated."""


class NegativeAmountError(DomainError):
    """Raised when a monetary amount would become negative."""


class InvalidPeriodError(FinanceTrackerError, ValueError):
    """Raised when a reporting period is reversed or starts in the future."""


class InvalidArgumentError(FinanceTrackerError, ValueError):
    """Raised when a numeric parameter falls outside its allowed range."""


class DataInconsistencyError(FinanceTrackerError):
    """Raised when summary totals disagree with the listed transactions."""


__all__ = [
    "FinanceTrackerError",
    "DomainError",
    "NegativeAmountError",
    "InvalidPeriodError",
    "InvalidArgumentError",
    "DataInconsistencyError",
]
