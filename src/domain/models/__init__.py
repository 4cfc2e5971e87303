"""Domain models package."""

from .intervals import CalendarWeek, DateRange, Interval
from .periods import PeriodKind, ReportingMode, ResolvedPeriod
from .records import (
    Expense,
    ExpenseCategory,
    FinancialRecord,
    Sale,
    SaleChannel,
)
from .reports import (
    BucketTotals,
    CategoryBreakdown,
    PeriodReport,
    PeriodTotals,
    WeeklySummary,
)

__all__ = [
    "CalendarWeek",
    "DateRange",
    "Interval",
    "PeriodKind",
    "ReportingMode",
    "ResolvedPeriod",
    "Expense",
    "ExpenseCategory",
    "FinancialRecord",
    "Sale",
    "SaleChannel",
    "BucketTotals",
    "CategoryBreakdown",
    "PeriodReport",
    "PeriodTotals",
    "WeeklySummary",
]
