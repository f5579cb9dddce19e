"""Use case to project next month's income and expenses."""

from collections.abc import Callable
from datetime import date

from finance_tracker.application.use_cases.get_trends import GetTrendsUseCase
from finance_tracker.domain.constants import PROJECTION_WINDOW_MONTHS
from finance_tracker.domain.models import Projection
from finance_tracker.domain.services.periods import add_months
from finance_tracker.domain.services.projection import project_from_trend
from finance_tracker.infrastructure.logging.logger import get_app_logger


class ProjectNextMonthUseCase:
    """Average the last months of the trend into a projection."""

    def __init__(
        self,
        trends_use_case: GetTrendsUseCase,
        logger=None,
        clock: Callable[[], date] | None = None,
    ) -> None:
        self._trends_use_case = trends_use_case
        self._logger = logger or get_app_logger()
        self._clock = clock or date.today

    def execute(self) -> Projection:
        """Return the projection for one month after today."""
        points = self._trends_use_case.monthly(PROJECTION_WINDOW_MONTHS)
        projection = project_from_trend(points, add_months(self._clock(), 1))
        self._logger.info(
            f"Projection for {projection.projection_date}: "
            f"income={projection.projected_income}, "
            f"expenses={projection.projected_expenses}, "
            f"confidence={projection.confidence_level}"
        )
        return projection


__all__ = ["ProjectNextMonthUseCase", "Projection"]
