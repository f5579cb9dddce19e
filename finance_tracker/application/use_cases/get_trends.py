"""Use case to build chronological series of period summaries."""

from collections.abc import Callable
from datetime import date

from finance_tracker.application.use_cases.get_period_summary import (
    GetPeriodSummaryUseCase,
)
from finance_tracker.domain.constants import (
    DEFAULT_MONTHLY_TREND_MONTHS,
    DEFAULT_YEARLY_TREND_YEARS,
    MONTHLY_TREND_RANGE,
    YEARLY_TREND_RANGE,
)
from finance_tracker.domain.models import TrendPoint
from finance_tracker.domain.services.periods import (
    month_bounds,
    month_label,
    trailing_months,
    trailing_years,
    year_bounds,
)
from finance_tracker.domain.services.validation import validate_range
from finance_tracker.infrastructure.logging.logger import get_app_logger


class GetTrendsUseCase:
    """Produce monthly and yearly trend series ending at today."""

    def __init__(
        self,
        summary_use_case: GetPeriodSummaryUseCase,
        logger=None,
        clock: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            summary_use_case: Use case computing each point's summary.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning today's date.
        """
        self._summary_use_case = summary_use_case
        self._logger = logger or get_app_logger()
        self._clock = clock or date.today

    def monthly(
        self,
        months: int = DEFAULT_MONTHLY_TREND_MONTHS,
    ) -> list[TrendPoint]:
        """Return one point per calendar month, oldest first.

        Args:
            months: Number of months ending at the current one (1-24).

        Returns:
            list[TrendPoint]: Exactly ``months`` points.

        Raises:
            InvalidArgumentError: If ``months`` is out of range.
        """
        validate_range("months", months, MONTHLY_TREND_RANGE)
        points = []
        for year, month in trailing_months(self._clock(), months):
            summary = self._summary_use_case.execute(*month_bounds(year, month))
            points.append(
                TrendPoint(
                    label=month_label(year, month),
                    year=year,
                    month=month,
                    summary=summary,
                )
            )
        self._logger.info(f"Built monthly trend with {len(points)} points")
        return points

    def yearly(
        self,
        years: int = DEFAULT_YEARLY_TREND_YEARS,
    ) -> list[TrendPoint]:
        """Return one point per calendar year, oldest first.

        Args:
            years: Number of distinct years ending at the current one (1-10).

        Returns:
            list[TrendPoint]: Exactly ``years`` points.

        Raises:
            InvalidArgumentError: If ``years`` is out of range.
        """
        validate_range("years", years, YEARLY_TREND_RANGE)
        points = []
        for year in trailing_years(self._clock(), years):
            summary = self._summary_use_case.execute(*year_bounds(year))
            points.append(
                TrendPoint(
                    label=str(year),
                    year=year,
                    month=None,
                    summary=summary,
                )
            )
        self._logger.info(f"Built yearly trend with {len(points)} points")
        return points


__all__ = ["GetTrendsUseCase", "TrendPoint"]
