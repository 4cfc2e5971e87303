"""Aggregate sale and expense records into period and bucket totals."""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from src.domain.models import (
    BucketTotals,
    CategoryBreakdown,
    DateRange,
    Expense,
    ExpenseCategory,
    FinancialRecord,
    Interval,
    PeriodTotals,
    Sale,
)
from src.utils.decimal_utils import ZERO


def partition(
    records: Iterable[FinancialRecord],
    window: Interval | DateRange,
) -> list[FinancialRecord]:
    """Return the records whose ``occurred_at`` falls inside ``window``."""
    return [record for record in records if window.contains(record.occurred_at)]


def compute_period_totals(
    records: Iterable[FinancialRecord],
    within: Interval | DateRange | None = None,
) -> PeriodTotals:
    """Sum sales and expenses, splitting expenses by category.

    Args:
        records: Sales and expenses in any order.
        within: Optional window restricting which records count.

    Returns:
        PeriodTotals: Decimal totals; zero when nothing matches.
    """
    selected = list(records) if within is None else partition(records, within)
    sales = [record for record in selected if isinstance(record, Sale)]
    expenses = [record for record in selected if isinstance(record, Expense)]
    fixed = [
        expense
        for expense in expenses
        if expense.category is ExpenseCategory.FIXED
    ]
    emergency = [
        expense
        for expense in expenses
        if expense.category is not ExpenseCategory.FIXED
    ]
    return PeriodTotals(
        sales_total=_sum_amounts(sales),
        expenses_total=_sum_amounts(expenses),
        fixed_expense_total=_sum_amounts(fixed),
        emergency_expense_total=_sum_amounts(emergency),
    )


def aggregate_buckets(
    intervals: Sequence[Interval],
    records: Iterable[FinancialRecord],
) -> tuple[BucketTotals, ...]:
    """Return per-interval totals, one entry per interval, in order.

    Records falling in none of the intervals are left out.
    """
    materialized = tuple(records)
    buckets = []
    for interval in intervals:
        totals = compute_period_totals(materialized, within=interval)
        buckets.append(
            BucketTotals(
                interval=interval,
                sales_total=totals.sales_total,
                expenses_total=totals.expenses_total,
            )
        )
    return tuple(buckets)


def category_breakdown(totals: PeriodTotals) -> CategoryBreakdown:
    return CategoryBreakdown(
        fixed=totals.fixed_expense_total,
        emergency=totals.emergency_expense_total,
    )


def _sum_amounts(records: Iterable[FinancialRecord]) -> Decimal:
    return sum((record.amount for record in records), start=ZERO)


__all__ = [
    "partition",
    "compute_period_totals",
    "aggregate_buckets",
    "category_breakdown",
]
