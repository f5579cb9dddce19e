"""Composition root for wiring infrastructure adapters and use cases."""

from collections.abc import Callable
from datetime import date

from finance_tracker.application.ports.category_repository import (
    CategoryRepositoryPort,
)
from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from finance_tracker.application.use_cases.compare_periods import (
    ComparePeriodsUseCase,
)
from finance_tracker.application.use_cases.get_category_stats import (
    GetCategoryStatsUseCase,
)
from finance_tracker.application.use_cases.get_dashboard import (
    GetDashboardUseCase,
)
from finance_tracker.application.use_cases.get_period_summary import (
    GetPeriodSummaryUseCase,
)
from finance_tracker.application.use_cases.get_recent_transactions import (
    GetRecentTransactionsUseCase,
)
from finance_tracker.application.use_cases.get_trends import GetTrendsUseCase
from finance_tracker.application.use_cases.project_next_month import (
    ProjectNextMonthUseCase,
)
from finance_tracker.infrastructure.category_repository import (
    SqlAlchemyCategoryRepository,
)
from finance_tracker.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.settings import FinanceSettings
from finance_tracker.infrastructure.transaction_repository import (
    SqlAlchemyTransactionRepository,
)


class ReportingServices:
    """Reporting use cases sharing one pair of stores and one clock."""

    def __init__(
        self,
        transaction_repository: TransactionRepositoryPort,
        category_repository: CategoryRepositoryPort,
        settings: FinanceSettings | None = None,
        logger=None,
        clock: Callable[[], date] | None = None,
    ) -> None:
        """Wire every reporting use case.

        Args:
            transaction_repository: Port providing transaction reads.
            category_repository: Port providing category reads.
            settings: Optional settings; read from the environment if absent.
            logger: Optional logger shared by the use cases.
            clock: Optional callable returning today's date.
        """
        resolved_settings = settings or FinanceSettings.from_env()
        resolved_logger = logger or get_app_logger()
        self.settings = resolved_settings
        self.summary = GetPeriodSummaryUseCase(
            transaction_repository,
            logger=resolved_logger,
            clock=clock,
            consistency_mode=resolved_settings.consistency_mode,
        )
        self.category_stats = GetCategoryStatsUseCase(
            transaction_repository,
            category_repository,
            logger=resolved_logger,
            clock=clock,
        )
        self.trends = GetTrendsUseCase(
            self.summary,
            logger=resolved_logger,
            clock=clock,
        )
        self.comparison = ComparePeriodsUseCase(
            self.summary,
            logger=resolved_logger,
            clock=clock,
        )
        self.projection = ProjectNextMonthUseCase(
            self.trends,
            logger=resolved_logger,
            clock=clock,
        )
        self.recent_transactions = GetRecentTransactionsUseCase(
            transaction_repository,
            logger=resolved_logger,
            clock=clock,
        )
        self.dashboard = GetDashboardUseCase(
            self.summary,
            self.category_stats,
            self.trends,
            self.recent_transactions,
            logger=resolved_logger,
        )


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_transaction_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionRepositoryPort:
    """Return the SQL transaction repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionRepository(resolved_db)


def build_category_repository(
    db_port: DatabaseEnginePort | None = None,
) -> CategoryRepositoryPort:
    """Return the SQL category repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyCategoryRepository(resolved_db)


def build_reporting_services(
    db_port: DatabaseEnginePort | None = None,
    settings: FinanceSettings | None = None,
) -> ReportingServices:
    """Return every reporting use case wired to the SQL repositories."""
    resolved_db = db_port or build_database_adapter()
    return ReportingServices(
        build_transaction_repository(resolved_db),
        build_category_repository(resolved_db),
        settings=settings or FinanceSettings.from_env(),
        logger=get_app_logger(),
    )


__all__ = [
    "ReportingServices",
    "build_database_adapter",
    "build_transaction_repository",
    "build_category_repository",
    "build_reporting_services",
]
