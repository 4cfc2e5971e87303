"""Application port for reading sale and expense records."""

from datetime import datetime
from typing import Protocol

from src.domain.models import Expense, Sale


class RecordsRepositoryPort(Protocol):
    """Port exposing read access to a tenant's dated records.

    Range reads are inclusive on both ends and return records sorted by
    ``occurred_at`` descending. Implementations raise
    ``StorageUnavailableError`` when the store cannot be read.
    """

    def fetch_sales(
        self,
        tenant_id: str,
        start: datetime,
        end: datetime,
    ) -> list[Sale]:
        """Return sales with ``start <= occurred_at <= end``."""

    def fetch_expenses(
        self,
        tenant_id: str,
        start: datetime,
        end: datetime,
    ) -> list[Expense]:
        """Return expenses with ``start <= occurred_at <= end``."""

    def fetch_earliest_sale_date(self, tenant_id: str) -> datetime | None:
        """Return the date of the oldest sale, or None."""

    def fetch_earliest_expense_date(self, tenant_id: str) -> datetime | None:
        """Return the date of the oldest expense, or None."""

    def fetch_latest_sales(self, tenant_id: str, limit: int) -> list[Sale]:
        """Return the ``limit`` most recent sales."""

    def fetch_latest_expenses(
        self,
        tenant_id: str,
        limit: int,
    ) -> list[Expense]:
        """Return the ``limit`` most recent expenses."""


__all__ = ["RecordsRepositoryPort"]
