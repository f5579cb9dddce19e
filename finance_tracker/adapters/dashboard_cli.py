"""CLI adapter printing the finance dashboard."""

from datetime import date
import os

from finance_tracker.domain.exceptions import FinanceTrackerError
from finance_tracker.domain.models import (
    FullDashboard,
    PeriodDashboard,
    PeriodSummary,
)
from finance_tracker.infrastructure.container import build_reporting_services
from finance_tracker.infrastructure.logging.logger import get_app_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _format_summary(label: str, summary: PeriodSummary, symbol: str) -> str:
    return (
        f"{label} ({summary.start_date} to {summary.end_date}): "
        f"income={symbol} {summary.total_income:,.2f}, "
        f"expenses={symbol} {summary.total_expenses:,.2f}, "
        f"balance={symbol} {summary.balance:,.2f}, "
        f"transactions={summary.transaction_count}"
    )


def _print_full(dashboard: FullDashboard, symbol: str) -> None:
    print(_format_summary("Current month", dashboard.current_month, symbol))
    print(_format_summary("Last month", dashboard.last_month, symbol))
    print(_format_summary("Current year", dashboard.current_year, symbol))
    print("Top expense categories:")
    for stat in dashboard.top_categories:
        print(
            f"  {stat.category_name}: {symbol} {stat.total_amount:,.2f} "
            f"({stat.percentage}%)"
        )
    print("Monthly trend:")
    for point in dashboard.monthly_trend:
        print(f"  {point.label}: balance={symbol} {point.summary.balance:,.2f}")
    _print_recent(dashboard.recent_transactions, symbol)


def _print_period(dashboard: PeriodDashboard, symbol: str) -> None:
    print(_format_summary("Period", dashboard.period, symbol))
    print("Categories:")
    for stat in dashboard.category_stats:
        print(
            f"  {stat.category_name} [{stat.direction.value}]: "
            f"{symbol} {stat.total_amount:,.2f} ({stat.percentage}%)"
        )
    _print_recent(dashboard.recent_transactions, symbol)


def _print_recent(records, symbol: str) -> None:
    print("Recent transactions:")
    for record in records:
        print(
            f"  {record.relative_date}: {record.description} "
            f"{symbol} {record.amount:,.2f} ({record.category_name})"
        )


def main() -> None:
    """Print the dashboard, or a period dashboard when dates are set."""
    logger = get_app_logger()
    start_date = _parse_date(os.getenv("REPORT_START_DATE"), logger)
    end_date = _parse_date(os.getenv("REPORT_END_DATE"), logger)

    services = build_reporting_services()
    symbol = services.settings.currency_symbol
    try:
        if start_date and end_date:
            _print_period(
                services.dashboard.execute_for_period(start_date, end_date),
                symbol,
            )
        else:
            _print_full(services.dashboard.execute(), symbol)
    except FinanceTrackerError as exc:
        logger.error(str(exc))
        return


if __name__ == "__main__":  # pragma: no cover
    main()
