"""Naive moving-average projection."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from finance_tracker.domain.constants import (
    PROJECTION_CONFIDENCE_FULL,
    PROJECTION_CONFIDENCE_NONE,
    PROJECTION_CONFIDENCE_PARTIAL,
    PROJECTION_WINDOW_MONTHS,
)
from finance_tracker.domain.models import Projection, TrendPoint
from finance_tracker.utils.decimal_utils import round_amount

INSUFFICIENT_DATA_METHOD = "insufficient data"


def project_from_trend(
    points: Sequence[TrendPoint],
    projection_date: date,
) -> Projection:
    """Project the next period as the mean of the given trend points.

    Args:
        points: Trend points feeding the average.
        projection_date: Date the projection refers to.

    Returns:
        Projection: Averages rounded to 2 places with a coarse confidence
        score (75 with a full window, 50 otherwise, 0 without data).
    """
    if not points:
        return Projection(
            projection_date=projection_date,
            projected_income=Decimal("0"),
            projected_expenses=Decimal("0"),
            projected_balance=Decimal("0"),
            data_points_used=0,
            confidence_level=PROJECTION_CONFIDENCE_NONE,
            method=INSUFFICIENT_DATA_METHOD,
        )
    count = len(points)
    average_income = sum(
        (point.summary.total_income for point in points), Decimal("0")
    ) / count
    average_expenses = sum(
        (point.summary.total_expenses for point in points), Decimal("0")
    ) / count
    confidence = (
        PROJECTION_CONFIDENCE_FULL
        if count >= PROJECTION_WINDOW_MONTHS
        else PROJECTION_CONFIDENCE_PARTIAL
    )
    return Projection(
        projection_date=projection_date,
        projected_income=round_amount(average_income),
        projected_expenses=round_amount(average_expenses),
        projected_balance=round_amount(average_income - average_expenses),
        data_points_used=count,
        confidence_level=confidence,
        method=f"average of the last {count} months",
    )


__all__ = ["INSUFFICIENT_DATA_METHOD", "project_from_trend"]
