"""Tests for the GetRecentTransactionsUseCase."""

from datetime import date
from decimal import Decimal

import pytest

from finance_tracker.application.use_cases.get_recent_transactions import (
    GetRecentTransactionsUseCase,
)
from finance_tracker.domain.exceptions import (
    InvalidArgumentError,
    InvalidPeriodError,
)
from finance_tracker.domain.models import TransactionDirection


@pytest.fixture
def use_case(transaction_repository, logger, clock):
    return GetRecentTransactionsUseCase(
        transaction_repository, logger=logger, clock=clock
    )


def test_execute_orders_by_creation_time(use_case) -> None:
    records = use_case.execute(3)

    assert [record.transaction_id for record in records] == ["t2", "t3", "t1"]
    assert records[0].relative_date == "2 week(s) ago"
    assert records[0].category_name == "Groceries"
    assert records[0].amount == Decimal("200.00")
    assert records[0].direction == TransactionDirection.EXPENSE
    assert records[2].direction == TransactionDirection.INCOME


def test_execute_returns_everything_under_limit(use_case) -> None:
    assert len(use_case.execute()) == 7


def test_uncategorized_transactions_are_labelled(
    transactions, transaction_factory, repository_factory, logger, clock
) -> None:
    withdrawal = transaction_factory("t8", None, "40", date(2024, 3, 19))
    use_case = GetRecentTransactionsUseCase(
        repository_factory([*transactions, withdrawal]),
        logger=logger,
        clock=clock,
    )

    latest = use_case.execute(1)[0]

    assert latest.transaction_id == "t8"
    assert latest.category_name == "Uncategorized"
    assert latest.relative_date == "Yesterday"
    assert latest.direction == TransactionDirection.EXPENSE


def test_missing_creation_time_sorts_last(
    transaction_factory, repository_factory, categories, logger, clock
) -> None:
    undated = transaction_factory(
        "u1", categories["rent"], "900", date(2024, 3, 18)
    )
    undated.created_at = None
    other_undated = transaction_factory(
        "u2", categories["rent"], "50", date(2024, 3, 19)
    )
    other_undated.created_at = None
    dated = transaction_factory(
        "d1", categories["salary"], "3000", date(2024, 3, 1)
    )
    use_case = GetRecentTransactionsUseCase(
        repository_factory([undated, dated, other_undated]),
        logger=logger,
        clock=clock,
    )

    records = use_case.execute()

    assert records[0].transaction_id == "d1"
    assert {record.transaction_id for record in records[1:]} == {"u1", "u2"}


@pytest.mark.parametrize("limit", [0, 51])
def test_execute_rejects_out_of_range_limit(
    use_case, transaction_repository, limit
) -> None:
    with pytest.raises(InvalidArgumentError):
        use_case.execute(limit)

    assert transaction_repository.calls == []


def test_by_category(use_case, transaction_repository) -> None:
    records = use_case.by_category("groceries")

    assert [record.transaction_id for record in records] == ["t2", "t5"]
    assert transaction_repository.calls == [
        ("list_by_category", "groceries")
    ]


def test_by_category_limit_is_capped_at_twenty(use_case) -> None:
    with pytest.raises(InvalidArgumentError):
        use_case.by_category("groceries", 21)


def test_for_period(use_case) -> None:
    records = use_case.for_period(date(2024, 2, 1), date(2024, 2, 29))

    assert [record.transaction_id for record in records] == ["t5", "t4"]
    assert records[0].relative_date == "10/02/2024"


def test_for_period_validates_dates(use_case) -> None:
    with pytest.raises(InvalidPeriodError):
        use_case.for_period(date(2024, 2, 29), date(2024, 2, 1))
