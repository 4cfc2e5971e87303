"""SQLAlchemy-backed repository for sale and expense records."""

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.records_repository import RecordsRepositoryPort
from src.domain.errors import StorageUnavailableError
from src.domain.models import Expense, ExpenseCategory, Sale, SaleChannel
from src.infrastructure.logging.logger import get_app_logger
from src.utils.datetime_utils import is_aware
from src.utils.decimal_utils import coerce_decimal


SELECT_SALES_SQL = text(
    """
    SELECT id, amount, occurred_at, product, channel
    FROM sales
    WHERE user_id = :tenant_id
      AND occurred_at >= :start
      AND occurred_at <= :end
    ORDER BY occurred_at DESC
    """
)

SELECT_EXPENSES_SQL = text(
    """
    SELECT id, amount, occurred_at, description, category
    FROM expenses
    WHERE user_id = :tenant_id
      AND occurred_at >= :start
      AND occurred_at <= :end
    ORDER BY occurred_at DESC
    """
)

SELECT_EARLIEST_SALE_SQL = text(
    """
    SELECT MIN(occurred_at) AS earliest
    FROM sales
    WHERE user_id = :tenant_id
    """
)

SELECT_EARLIEST_EXPENSE_SQL = text(
    """
    SELECT MIN(occurred_at) AS earliest
    FROM expenses
    WHERE user_id = :tenant_id
    """
)

SELECT_LATEST_SALES_SQL = text(
    """
    SELECT id, amount, occurred_at, product, channel
    FROM sales
    WHERE user_id = :tenant_id
    ORDER BY occurred_at DESC
    LIMIT :limit
    """
)

SELECT_LATEST_EXPENSES_SQL = text(
    """
    SELECT id, amount, occurred_at, description, category
    FROM expenses
    WHERE user_id = :tenant_id
    ORDER BY occurred_at DESC
    LIMIT :limit
    """
)


class SqlAlchemyRecordsRepository(RecordsRepositoryPort):
    """Records repository reading the ``sales`` and ``expenses`` tables."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the records engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_sales(
        self,
        tenant_id: str,
        start: datetime,
        end: datetime,
    ) -> list[Sale]:
        rows = self._fetch_rows(
            SELECT_SALES_SQL,
            {"tenant_id": tenant_id, "start": start, "end": end},
        )
        return [self._to_sale(row) for row in rows]

    def fetch_expenses(
        self,
        tenant_id: str,
        start: datetime,
        end: datetime,
    ) -> list[Expense]:
        rows = self._fetch_rows(
            SELECT_EXPENSES_SQL,
            {"tenant_id": tenant_id, "start": start, "end": end},
        )
        return [self._to_expense(row) for row in rows]

    def fetch_earliest_sale_date(self, tenant_id: str) -> datetime | None:
        return self._fetch_earliest(SELECT_EARLIEST_SALE_SQL, tenant_id)

    def fetch_earliest_expense_date(self, tenant_id: str) -> datetime | None:
        return self._fetch_earliest(SELECT_EARLIEST_EXPENSE_SQL, tenant_id)

    def fetch_latest_sales(self, tenant_id: str, limit: int) -> list[Sale]:
        rows = self._fetch_rows(
            SELECT_LATEST_SALES_SQL,
            {"tenant_id": tenant_id, "limit": limit},
        )
        return [self._to_sale(row) for row in rows]

    def fetch_latest_expenses(
        self,
        tenant_id: str,
        limit: int,
    ) -> list[Expense]:
        rows = self._fetch_rows(
            SELECT_LATEST_EXPENSES_SQL,
            {"tenant_id": tenant_id, "limit": limit},
        )
        return [self._to_expense(row) for row in rows]

    def _fetch_rows(self, query, params: dict[str, Any]) -> list:
        return self._run(lambda conn: conn.execute(query, params).all())

    def _fetch_earliest(self, query, tenant_id: str) -> datetime | None:
        row = self._run(
            lambda conn: conn.execute(query, {"tenant_id": tenant_id}).first()
        )
        if row is None or row.earliest is None:
            return None
        return _coerce_datetime(row.earliest)

    def _run(self, operation: Callable[[Any], Any]) -> Any:
        try:
            engine = self._db_port.get_records_engine()
            with engine.connect() as conn:
                return operation(conn)
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(
                f"Records store unavailable: {exc}"
            ) from exc

    def _to_sale(self, row) -> Sale:
        return Sale(
            id=str(row.id),
            amount=coerce_decimal(row.amount),
            occurred_at=_coerce_datetime(row.occurred_at),
            product=row.product,
            channel=self._parse_channel(row.channel),
        )

    def _to_expense(self, row) -> Expense:
        return Expense(
            id=str(row.id),
            amount=coerce_decimal(row.amount),
            occurred_at=_coerce_datetime(row.occurred_at),
            description=row.description or "",
            category=self._parse_category(row.category),
        )

    def _parse_channel(self, raw: str | None) -> SaleChannel:
        try:
            return SaleChannel(raw)
        except ValueError:
            self._logger.warning(
                f"Unknown sale channel {raw!r}; treating as direct sale"
            )
            return SaleChannel.DIRECT

    def _parse_category(self, raw: str | None) -> ExpenseCategory:
        try:
            return ExpenseCategory(raw)
        except ValueError:
            self._logger.warning(
                f"Unknown expense category {raw!r}; treating as emergency"
            )
            return ExpenseCategory.EMERGENCY


def _coerce_datetime(value) -> datetime:
    """Accept driver datetimes or ISO strings (SQLite returns text).

    Timezone-aware values (``timestamptz`` columns, offset strings) are
    converted to UTC; naive values are returned as stored.
    """
    if not isinstance(value, datetime):
        raw = str(value).strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        value = datetime.fromisoformat(raw)
    if is_aware(value):
        return value.astimezone(timezone.utc)
    return value


__all__ = ["SqlAlchemyRecordsRepository"]
