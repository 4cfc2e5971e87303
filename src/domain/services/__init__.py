"""Domain services package."""

from .aggregator import (
    aggregate_buckets,
    category_breakdown,
    compute_period_totals,
    partition,
)
from .formatting import format_brl, format_date, format_day_month
from .period_resolver import daily_buckets, resolve_period
from .week_enumerator import (
    default_week,
    earliest_occurrence,
    enumerate_available_weeks,
    find_week,
)

__all__ = [
    "aggregate_buckets",
    "category_breakdown",
    "compute_period_totals",
    "partition",
    "format_brl",
    "format_date",
    "format_day_month",
    "daily_buckets",
    "resolve_period",
    "default_week",
    "earliest_occurrence",
    "enumerate_available_weeks",
    "find_week",
]
