"""Use case listing the calendar weeks a tenant has records for."""

from datetime import datetime

from src.application.ports.records_repository import RecordsRepositoryPort
from src.domain.models import CalendarWeek
from src.domain.services import enumerate_available_weeks
from src.infrastructure.logging.logger import get_app_logger
from src.utils.concurrency import fetch_concurrently


class ListAvailableWeeksUseCase:
    """Enumerate weeks from the earliest sale or expense up to now."""

    def __init__(
        self,
        records_repository: RecordsRepositoryPort,
        logger=None,
        max_workers: int = 2,
    ) -> None:
        self._records_repository = records_repository
        self._logger = logger or get_app_logger()
        self._max_workers = max_workers

    def execute(
        self,
        tenant_id: str,
        now: datetime,
    ) -> tuple[CalendarWeek, ...]:
        """Return the available weeks, oldest first.

        Only the earliest record of each kind is read from the store.
        """
        earliest_sale, earliest_expense = fetch_concurrently(
            lambda: self._records_repository.fetch_earliest_sale_date(
                tenant_id
            ),
            lambda: self._records_repository.fetch_earliest_expense_date(
                tenant_id
            ),
            max_workers=self._max_workers,
        )
        weeks = enumerate_available_weeks(
            [earliest_sale, earliest_expense],
            now,
        )
        self._logger.info(f"Enumerated {len(weeks)} available weeks")
        return weeks


__all__ = ["ListAvailableWeeksUseCase"]
