"""Use case composing the reporting calculators into one dashboard."""

from datetime import date

from finance_tracker.application.use_cases.get_category_stats import (
    GetCategoryStatsUseCase,
)
from finance_tracker.application.use_cases.get_period_summary import (
    GetPeriodSummaryUseCase,
)
from finance_tracker.application.use_cases.get_recent_transactions import (
    GetRecentTransactionsUseCase,
)
from finance_tracker.application.use_cases.get_trends import GetTrendsUseCase
from finance_tracker.domain.constants import (
    DASHBOARD_RECENT_TRANSACTIONS,
    DASHBOARD_TOP_CATEGORIES,
    DASHBOARD_TREND_MONTHS,
)
from finance_tracker.domain.models import FullDashboard, PeriodDashboard
from finance_tracker.infrastructure.logging.logger import get_app_logger


class GetDashboardUseCase:
    """Assemble the consolidated dashboard views.

    Every component is fetched through its own use case; nothing is cached
    between calls.
    """

    def __init__(
        self,
        summary_use_case: GetPeriodSummaryUseCase,
        category_stats_use_case: GetCategoryStatsUseCase,
        trends_use_case: GetTrendsUseCase,
        recent_transactions_use_case: GetRecentTransactionsUseCase,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            summary_use_case: Use case computing period summaries.
            category_stats_use_case: Use case computing category statistics.
            trends_use_case: Use case producing trend series.
            recent_transactions_use_case: Use case listing recent records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._summary_use_case = summary_use_case
        self._category_stats_use_case = category_stats_use_case
        self._trends_use_case = trends_use_case
        self._recent_transactions_use_case = recent_transactions_use_case
        self._logger = logger or get_app_logger()

    def execute(self) -> FullDashboard:
        """Return the dashboard anchored on today.

        Returns:
            FullDashboard: Current month, last month and current year
            summaries, top expense categories, a six month trend and the
            latest transactions.
        """
        dashboard = FullDashboard(
            current_month=self._summary_use_case.current_month(),
            last_month=self._summary_use_case.last_month(),
            current_year=self._summary_use_case.current_year(),
            top_categories=self._category_stats_use_case.top_by_expense(
                DASHBOARD_TOP_CATEGORIES
            ),
            monthly_trend=self._trends_use_case.monthly(
                DASHBOARD_TREND_MONTHS
            ),
            recent_transactions=self._recent_transactions_use_case.execute(
                DASHBOARD_RECENT_TRANSACTIONS
            ),
        )
        self._logger.info(
            f"Dashboard built: month balance={dashboard.current_month.balance}, "
            f"year balance={dashboard.current_year.balance}"
        )
        return dashboard

    def execute_for_period(
        self,
        start_date: date,
        end_date: date,
    ) -> PeriodDashboard:
        """Return the dashboard of an arbitrary period.

        Args:
            start_date: First day of the period.
            end_date: Last day of the period.

        Returns:
            PeriodDashboard: Period summary, every category statistic and
            the latest transactions dated within the period.

        Raises:
            InvalidPeriodError: If the range is reversed or starts in the
                future.
        """
        period = self._summary_use_case.execute(start_date, end_date)
        dashboard = PeriodDashboard(
            period=period,
            category_stats=self._category_stats_use_case.execute(
                start_date, end_date
            ),
            recent_transactions=(
                self._recent_transactions_use_case.for_period(
                    start_date,
                    end_date,
                    DASHBOARD_RECENT_TRANSACTIONS,
                )
            ),
        )
        self._logger.info(
            f"Period dashboard built for {start_date}..{end_date}: "
            f"balance={period.balance}"
        )
        return dashboard


__all__ = ["GetDashboardUseCase", "FullDashboard", "PeriodDashboard"]
