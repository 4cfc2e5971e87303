"""Domain package for period reporting rules and core models."""

from .errors import (
    InvalidSelectionError,
    ReportingError,
    StorageUnavailableError,
)
from .models import (
    BucketTotals,
    CalendarWeek,
    CategoryBreakdown,
    DateRange,
    Expense,
    ExpenseCategory,
    FinancialRecord,
    Interval,
    PeriodKind,
    PeriodReport,
    PeriodTotals,
    ReportingMode,
    ResolvedPeriod,
    Sale,
    SaleChannel,
    WeeklySummary,
)
from .services import (
    aggregate_buckets,
    compute_period_totals,
    enumerate_available_weeks,
    resolve_period,
)

__all__ = [
    "InvalidSelectionError",
    "ReportingError",
    "StorageUnavailableError",
    "BucketTotals",
    "CalendarWeek",
    "CategoryBreakdown",
    "DateRange",
    "Expense",
    "ExpenseCategory",
    "FinancialRecord",
    "Interval",
    "PeriodKind",
    "PeriodReport",
    "PeriodTotals",
    "ReportingMode",
    "ResolvedPeriod",
    "Sale",
    "SaleChannel",
    "WeeklySummary",
    "aggregate_buckets",
    "compute_period_totals",
    "enumerate_available_weeks",
    "resolve_period",
]
