"""Shared fixtures for the reporting tests."""

from datetime import datetime

import pytest

from src.application.ports.records_repository import RecordsRepositoryPort
from src.domain.models import Expense, Sale


class FakeRecordsRepository(RecordsRepositoryPort):
    """In-memory records store honouring the port contract."""

    def __init__(
        self,
        sales: list[Sale] | None = None,
        expenses: list[Expense] | None = None,
    ) -> None:
        self.sales = list(sales or [])
        self.expenses = list(expenses or [])
        self.calls: list[tuple] = []

    def fetch_sales(self, tenant_id, start, end):
        self.calls.append(("fetch_sales", tenant_id, start, end))
        return self._in_range(self.sales, start, end)

    def fetch_expenses(self, tenant_id, start, end):
        self.calls.append(("fetch_expenses", tenant_id, start, end))
        return self._in_range(self.expenses, start, end)

    def fetch_earliest_sale_date(self, tenant_id):
        self.calls.append(("fetch_earliest_sale_date", tenant_id))
        return min((sale.occurred_at for sale in self.sales), default=None)

    def fetch_earliest_expense_date(self, tenant_id):
        self.calls.append(("fetch_earliest_expense_date", tenant_id))
        return min(
            (expense.occurred_at for expense in self.expenses),
            default=None,
        )

    def fetch_latest_sales(self, tenant_id, limit):
        self.calls.append(("fetch_latest_sales", tenant_id, limit))
        return self._newest_first(self.sales)[:limit]

    def fetch_latest_expenses(self, tenant_id, limit):
        self.calls.append(("fetch_latest_expenses", tenant_id, limit))
        return self._newest_first(self.expenses)[:limit]

    @staticmethod
    def _in_range(records, start, end):
        selected = [r for r in records if start <= r.occurred_at <= end]
        return sorted(selected, key=lambda r: r.occurred_at, reverse=True)

    @staticmethod
    def _newest_first(records):
        return sorted(records, key=lambda r: r.occurred_at, reverse=True)


@pytest.fixture
def now() -> datetime:
    """A Wednesday afternoon."""
    return datetime(2024, 6, 12, 15, 30)


@pytest.fixture
def fake_repository_factory():
    """Return a factory building in-memory repositories."""
    return FakeRecordsRepository
