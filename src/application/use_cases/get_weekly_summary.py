"""Use case computing the dashboard summary for the current week.

The dashboard week runs Monday to Sunday, unlike the Sunday-start weeks used
by the report week selector.
"""

from datetime import datetime, timedelta

from src.application.ports.records_repository import RecordsRepositoryPort
from src.domain.constants import DAYS_PER_WEEK, DEFAULT_RECENT_LIMIT
from src.domain.models import DateRange, WeeklySummary
from src.domain.services import compute_period_totals
from src.domain.services.time_bounds import end_of_day, start_of_monday_week
from src.infrastructure.logging.logger import get_app_logger
from src.utils.concurrency import fetch_concurrently


def current_monday_week(now: datetime) -> DateRange:
    """Return Monday 00:00 to Sunday end of day around ``now``."""
    start = start_of_monday_week(now)
    return DateRange(
        start=start,
        end=end_of_day(start + timedelta(days=DAYS_PER_WEEK - 1)),
    )


class GetWeeklySummaryUseCase:
    """Summarize the current Monday-start week and the latest records."""

    def __init__(
        self,
        records_repository: RecordsRepositoryPort,
        logger=None,
        recent_limit: int = DEFAULT_RECENT_LIMIT,
        max_workers: int = 4,
    ) -> None:
        """Initialize the use case.

        Args:
            records_repository: Port providing sale and expense reads.
            logger: Optional logger compatible with logging.Logger-like API.
            recent_limit: How many recent sales and expenses to return.
            max_workers: Threads used for the concurrent reads.
        """
        self._records_repository = records_repository
        self._logger = logger or get_app_logger()
        self._recent_limit = recent_limit
        self._max_workers = max_workers

    def execute(self, tenant_id: str, now: datetime) -> WeeklySummary:
        week = current_monday_week(now)
        repository = self._records_repository
        sales, expenses, recent_sales, recent_expenses = fetch_concurrently(
            lambda: repository.fetch_sales(tenant_id, week.start, week.end),
            lambda: repository.fetch_expenses(tenant_id, week.start, week.end),
            lambda: repository.fetch_latest_sales(
                tenant_id, self._recent_limit
            ),
            lambda: repository.fetch_latest_expenses(
                tenant_id, self._recent_limit
            ),
            max_workers=self._max_workers,
        )
        totals = compute_period_totals([*sales, *expenses], within=week)
        self._logger.info(
            f"Weekly summary computed: sales={totals.sales_total}, "
            f"expenses={totals.expenses_total}"
        )
        return WeeklySummary(
            range=week,
            totals=totals,
            recent_sales=tuple(recent_sales),
            recent_expenses=tuple(recent_expenses),
        )


__all__ = ["GetWeeklySummaryUseCase", "current_monday_week"]
