"""Application use cases package."""

from .build_report import (
    BuildPeriodReportUseCase,
    assemble_report,
    build_report,
)
from .get_weekly_summary import GetWeeklySummaryUseCase
from .list_available_weeks import ListAvailableWeeksUseCase
from .report_session import ReportSession

__all__ = [
    "BuildPeriodReportUseCase",
    "assemble_report",
    "build_report",
    "GetWeeklySummaryUseCase",
    "ListAvailableWeeksUseCase",
    "ReportSession",
]
