"""Use case assembling a period report from resolved buckets and records."""

from collections.abc import Iterable, Sequence
from datetime import datetime

from src.application.ports.records_repository import RecordsRepositoryPort
from src.domain.errors import StorageUnavailableError
from src.domain.models import (
    CalendarWeek,
    FinancialRecord,
    PeriodKind,
    PeriodReport,
    ReportingMode,
    ResolvedPeriod,
)
from src.domain.services import (
    aggregate_buckets,
    category_breakdown,
    compute_period_totals,
    earliest_occurrence,
    enumerate_available_weeks,
    resolve_period,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.concurrency import fetch_concurrently


def build_report(
    mode: ReportingMode,
    now: datetime,
    records: Iterable[FinancialRecord],
    weeks: Sequence[CalendarWeek] | None = None,
) -> PeriodReport:
    """Build a report for ``mode`` from an in-memory record set.

    Args:
        mode: Reporting mode to resolve.
        now: Reference instant.
        records: Sales and expenses; records outside the range are ignored.
        weeks: Available weeks for specific-week modes. When omitted they are
            enumerated from ``records``.

    Returns:
        PeriodReport: Period totals, bucket totals and category breakdown.

    Raises:
        InvalidSelectionError: If a specific week id does not exist.
    """
    materialized = tuple(records)
    if weeks is None and mode.kind is PeriodKind.SPECIFIC_WEEK:
        weeks = enumerate_available_weeks(
            [earliest_occurrence(materialized, now)],
            now,
        )
    period = resolve_period(mode, now, weeks or ())
    return assemble_report(period, materialized)


def assemble_report(
    period: ResolvedPeriod,
    records: Sequence[FinancialRecord],
) -> PeriodReport:
    """Aggregate ``records`` over a resolved period.

    Period totals are computed over the whole range, not by summing buckets.
    """
    totals = compute_period_totals(records, within=period.range)
    return PeriodReport(
        range=period.range,
        label=period.label,
        totals=totals,
        buckets=aggregate_buckets(period.buckets, records),
        category_breakdown=category_breakdown(totals),
    )


class BuildPeriodReportUseCase:
    """Fetch a tenant's records for a period and assemble the report."""

    def __init__(
        self,
        records_repository: RecordsRepositoryPort,
        logger=None,
        max_workers: int = 2,
    ) -> None:
        """Initialize the use case.

        Args:
            records_repository: Port providing sale and expense reads.
            logger: Optional logger compatible with logging.Logger-like API.
            max_workers: Threads used for the concurrent reads.
        """
        self._records_repository = records_repository
        self._logger = logger or get_app_logger()
        self._max_workers = max_workers

    def execute(
        self,
        tenant_id: str,
        mode: ReportingMode,
        now: datetime,
        weeks: Sequence[CalendarWeek] = (),
    ) -> PeriodReport:
        """Return the report for ``mode`` as of ``now``.

        Args:
            tenant_id: Owner of the records.
            mode: Reporting mode to resolve.
            now: Reference instant.
            weeks: Available weeks, required for specific-week modes.

        Returns:
            PeriodReport: Fully populated report.

        Raises:
            InvalidSelectionError: If a specific week id does not exist.
            StorageUnavailableError: If either read fails.
        """
        period = resolve_period(mode, now, weeks)
        start, end = period.range.start, period.range.end
        try:
            sales, expenses = fetch_concurrently(
                lambda: self._records_repository.fetch_sales(
                    tenant_id, start, end
                ),
                lambda: self._records_repository.fetch_expenses(
                    tenant_id, start, end
                ),
                max_workers=self._max_workers,
            )
        except StorageUnavailableError as exc:
            self._logger.error(
                f"Report build aborted for {mode.kind.value}: {exc}"
            )
            raise
        self._logger.info(
            f"Fetched {len(sales)} sales and {len(expenses)} expenses "
            f"for {period.label} ({start} - {end})"
        )

        report = assemble_report(period, [*sales, *expenses])
        self._logger.info(
            f"Report totals computed: sales={report.sales_total}, "
            f"expenses={report.expenses_total}, net={report.net_total}"
        )
        return report


__all__ = [
    "build_report",
    "assemble_report",
    "BuildPeriodReportUseCase",
]
