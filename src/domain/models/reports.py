"""Domain models for aggregated report figures."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.constants import (
    EMERGENCY_EXPENSE_LABEL,
    FIXED_EXPENSE_LABEL,
)
from src.domain.models.intervals import DateRange, Interval
from src.domain.models.records import Expense, Sale


@dataclass(frozen=True)
class PeriodTotals:
    """Totals over a set of records.

    Attributes:
        sales_total: Sum of sale amounts.
        expenses_total: Sum of expense amounts.
        fixed_expense_total: Sum of fixed expenses.
        emergency_expense_total: Sum of emergency expenses.
    """

    sales_total: Decimal
    expenses_total: Decimal
    fixed_expense_total: Decimal
    emergency_expense_total: Decimal

    @property
    def net_total(self) -> Decimal:
        """Return sales minus expenses."""
        return self.sales_total - self.expenses_total


@dataclass(frozen=True)
class BucketTotals:
    """Totals for one bucket of the time series."""

    interval: Interval
    sales_total: Decimal
    expenses_total: Decimal

    @property
    def net_total(self) -> Decimal:
        return self.sales_total - self.expenses_total


@dataclass(frozen=True)
class CategoryBreakdown:
    """Expense split used by pie-chart consumers."""

    fixed: Decimal
    emergency: Decimal

    def as_rows(self) -> list[tuple[str, Decimal]]:
        """Return ``(label, amount)`` rows in display order."""
        return [
            (FIXED_EXPENSE_LABEL, self.fixed),
            (EMERGENCY_EXPENSE_LABEL, self.emergency),
        ]


@dataclass(frozen=True)
class PeriodReport:
    """Fully populated report for a reporting period.

    Attributes:
        range: Inclusive range the period totals were computed over.
        label: Human-readable period label.
        totals: Period-level totals over ``range``.
        buckets: Ordered per-bucket totals.
        category_breakdown: Fixed vs emergency expenses over ``range``.
    """

    range: DateRange
    label: str
    totals: PeriodTotals
    buckets: tuple[BucketTotals, ...]
    category_breakdown: CategoryBreakdown

    @property
    def sales_total(self) -> Decimal:
        return self.totals.sales_total

    @property
    def expenses_total(self) -> Decimal:
        return self.totals.expenses_total

    @property
    def net_total(self) -> Decimal:
        return self.totals.net_total

    @property
    def fixed_expense_total(self) -> Decimal:
        return self.totals.fixed_expense_total

    @property
    def emergency_expense_total(self) -> Decimal:
        return self.totals.emergency_expense_total

    @property
    def is_empty(self) -> bool:
        """Return True when no sale or expense contributed to the period."""
        return self.sales_total == 0 and self.expenses_total == 0


@dataclass(frozen=True)
class WeeklySummary:
    """Dashboard summary of the current Monday-start week."""

    range: DateRange
    totals: PeriodTotals
    recent_sales: tuple[Sale, ...]
    recent_expenses: tuple[Expense, ...]


__all__ = [
    "PeriodTotals",
    "BucketTotals",
    "CategoryBreakdown",
    "PeriodReport",
    "WeeklySummary",
]
