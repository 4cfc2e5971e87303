"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.records_repository import RecordsRepositoryPort
from src.application.use_cases.build_report import BuildPeriodReportUseCase
from src.application.use_cases.get_weekly_summary import (
    GetWeeklySummaryUseCase,
)
from src.application.use_cases.list_available_weeks import (
    ListAvailableWeeksUseCase,
)
from src.application.use_cases.report_session import ReportSession
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.records_repository import SqlAlchemyRecordsRepository
from src.infrastructure.settings import ReportingSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_records_repository(
    db_port: DatabaseEnginePort | None = None,
) -> RecordsRepositoryPort:
    """Return the records repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyRecordsRepository(resolved_db, logger=get_app_logger())


def build_report_use_case(
    repository: RecordsRepositoryPort | None = None,
    settings: ReportingSettings | None = None,
) -> BuildPeriodReportUseCase:
    """Return the period report use case."""
    resolved_settings = settings or ReportingSettings.from_env()
    return BuildPeriodReportUseCase(
        repository or build_records_repository(),
        logger=get_app_logger(),
        max_workers=resolved_settings.fetch_workers,
    )


def build_list_weeks_use_case(
    repository: RecordsRepositoryPort | None = None,
    settings: ReportingSettings | None = None,
) -> ListAvailableWeeksUseCase:
    """Return the available-weeks use case."""
    resolved_settings = settings or ReportingSettings.from_env()
    return ListAvailableWeeksUseCase(
        repository or build_records_repository(),
        logger=get_app_logger(),
        max_workers=resolved_settings.fetch_workers,
    )


def build_weekly_summary_use_case(
    repository: RecordsRepositoryPort | None = None,
    settings: ReportingSettings | None = None,
) -> GetWeeklySummaryUseCase:
    """Return the dashboard weekly summary use case."""
    resolved_settings = settings or ReportingSettings.from_env()
    return GetWeeklySummaryUseCase(
        repository or build_records_repository(),
        logger=get_app_logger(),
        recent_limit=resolved_settings.recent_limit,
    )


def build_report_session(
    tenant_id: str,
    repository: RecordsRepositoryPort | None = None,
    settings: ReportingSettings | None = None,
) -> ReportSession:
    """Return a report session sharing one repository for both use cases."""
    resolved_settings = settings or ReportingSettings.from_env()
    resolved_repository = repository or build_records_repository()
    return ReportSession(
        build_report_use_case(resolved_repository, resolved_settings),
        build_list_weeks_use_case(resolved_repository, resolved_settings),
        tenant_id=tenant_id,
        logger=get_app_logger(),
        mode=resolved_settings.mode,
    )


__all__ = [
    "build_database_adapter",
    "build_records_repository",
    "build_report_use_case",
    "build_list_weeks_use_case",
    "build_weekly_summary_use_case",
    "build_report_session",
]
