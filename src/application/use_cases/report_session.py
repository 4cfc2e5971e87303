"""Selection state for the reports screen.

A session remembers the selected reporting mode and the last published
report. Builds are keyed by the selection at the time they started; a build
whose key no longer matches the current selection is discarded, and a failed
build leaves the previous report in place.
"""

import threading
from datetime import datetime

from src.application.use_cases.build_report import BuildPeriodReportUseCase
from src.application.use_cases.list_available_weeks import (
    ListAvailableWeeksUseCase,
)
from src.domain.errors import InvalidSelectionError, ReportingError
from src.domain.models import CalendarWeek, PeriodReport, ReportingMode
from src.domain.services import default_week, find_week
from src.infrastructure.logging.logger import get_app_logger


class ReportSession:
    """Track the current report selection for one tenant."""

    def __init__(
        self,
        build_report_use_case: BuildPeriodReportUseCase,
        list_weeks_use_case: ListAvailableWeeksUseCase,
        tenant_id: str,
        logger=None,
        mode: ReportingMode | None = None,
    ) -> None:
        self._build_report = build_report_use_case
        self._list_weeks = list_weeks_use_case
        self._tenant_id = tenant_id
        self._logger = logger or get_app_logger()
        self._lock = threading.Lock()
        self._mode = mode or ReportingMode.rolling_week()
        self._weeks: tuple[CalendarWeek, ...] = ()
        self._report: PeriodReport | None = None

    @property
    def mode(self) -> ReportingMode:
        with self._lock:
            return self._mode

    @property
    def weeks(self) -> tuple[CalendarWeek, ...]:
        with self._lock:
            return self._weeks

    @property
    def report(self) -> PeriodReport | None:
        """Return the last published report, if any."""
        with self._lock:
            return self._report

    def select(self, mode: ReportingMode) -> tuple[str, int | None]:
        """Make ``mode`` the current selection and return its key."""
        with self._lock:
            self._mode = mode
        return mode.selection_key

    def select_week(self, week_id: int | None = None) -> ReportingMode:
        """Select a specific week, defaulting to the most recent one.

        Raises:
            InvalidSelectionError: If the week does not exist or the week
                list is empty.
        """
        weeks = self.weeks
        if week_id is None:
            week = default_week(weeks)
            if week is None:
                raise InvalidSelectionError(None)
        else:
            week = find_week(weeks, week_id)
        mode = ReportingMode.specific_week(week.sequence_number)
        self.select(mode)
        return mode

    def refresh_weeks(self, now: datetime) -> tuple[CalendarWeek, ...]:
        """Reload the available weeks from the store."""
        weeks = self._list_weeks.execute(self._tenant_id, now)
        with self._lock:
            self._weeks = weeks
        return weeks

    def load(self, now: datetime) -> PeriodReport | None:
        """Build the report for the current selection and publish it.

        Returns:
            PeriodReport | None: The new report, or None when the selection
            changed while it was being built.

        Raises:
            StorageUnavailableError: If the store could not be read; the
                previous report stays published.
            InvalidSelectionError: If the selected week no longer exists.
        """
        with self._lock:
            mode = self._mode
            weeks = self._weeks
        try:
            report = self._build_report.execute(
                self._tenant_id,
                mode,
                now,
                weeks,
            )
        except ReportingError as exc:
            self._logger.warning(
                f"Keeping previous report after failed build: {exc}"
            )
            raise
        if self.publish(mode.selection_key, report):
            return report
        return None

    def publish(
        self,
        key: tuple[str, int | None],
        report: PeriodReport,
    ) -> bool:
        """Publish ``report`` if ``key`` still matches the selection."""
        with self._lock:
            current_key = self._mode.selection_key
            if key != current_key:
                self._logger.info(
                    f"Discarding stale report for {key}; "
                    f"current selection is {current_key}"
                )
                return False
            self._report = report
            return True


__all__ = ["ReportSession"]
