"""Resolve a reporting mode into a date range and ordered buckets."""

import math
from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime, timedelta

from src.domain.constants import (
    DAYS_PER_WEEK,
    ROLLING_MONTH_BUCKET_DAYS,
    ROLLING_MONTH_DAYS,
    ROLLING_MONTH_LABEL,
    ROLLING_WEEK_DAYS,
    ROLLING_WEEK_LABEL,
    ROLLING_YEAR_LABEL,
    ROLLING_YEAR_MONTHS,
    WEEK_BUCKET_LABEL,
)
from src.domain.models import (
    CalendarWeek,
    DateRange,
    Interval,
    PeriodKind,
    ReportingMode,
    ResolvedPeriod,
)
from src.domain.services.formatting import (
    format_day_month,
    format_month_abbreviation,
)
from src.domain.services.time_bounds import (
    end_of_day,
    end_of_month,
    shift_months,
    start_of_day,
    start_of_month,
)
from src.domain.services.week_enumerator import find_week


def resolve_period(
    mode: ReportingMode,
    now: datetime,
    weeks: Sequence[CalendarWeek] = (),
) -> ResolvedPeriod:
    """Return the range, buckets and label for ``mode``.

    Args:
        mode: Reporting mode to resolve.
        now: Reference instant; rolling periods end here.
        weeks: Available weeks, only consulted for specific-week modes.

    Returns:
        ResolvedPeriod: Range plus ordered, non-overlapping buckets.

    Raises:
        InvalidSelectionError: If a specific week id is not in ``weeks``.
    """
    if mode.kind is PeriodKind.ROLLING_WEEK:
        return _resolve_rolling_week(now)
    if mode.kind is PeriodKind.ROLLING_MONTH:
        return _resolve_rolling_month(now)
    if mode.kind is PeriodKind.ROLLING_YEAR:
        return _resolve_rolling_year(now)
    return _resolve_specific_week(find_week(weeks, mode.week_id))


def daily_buckets(first_day: datetime, days: int) -> list[Interval]:
    """Return ``days`` consecutive whole-day intervals labelled ``D/M``."""
    buckets = []
    for offset in range(days):
        day = start_of_day(first_day + timedelta(days=offset))
        buckets.append(
            Interval(
                start=day,
                end=end_of_day(day),
                label=format_day_month(day),
            )
        )
    return buckets


def _resolve_rolling_week(now: datetime) -> ResolvedPeriod:
    first_day = start_of_day(now) - timedelta(days=ROLLING_WEEK_DAYS - 1)
    buckets = daily_buckets(first_day, ROLLING_WEEK_DAYS)
    return ResolvedPeriod(
        range=DateRange(start=first_day, end=now),
        buckets=_clamp(buckets, now),
        label=ROLLING_WEEK_LABEL,
    )


def _resolve_rolling_month(now: datetime) -> ResolvedPeriod:
    first_day = start_of_day(now) - timedelta(days=ROLLING_MONTH_DAYS)
    bucket_count = math.ceil(ROLLING_MONTH_DAYS / ROLLING_MONTH_BUCKET_DAYS)
    buckets = []
    for index in range(bucket_count):
        bucket_start = first_day + timedelta(
            days=index * ROLLING_MONTH_BUCKET_DAYS
        )
        buckets.append(
            Interval(
                start=bucket_start,
                end=end_of_day(
                    bucket_start
                    + timedelta(days=ROLLING_MONTH_BUCKET_DAYS - 1)
                ),
                label=f"{WEEK_BUCKET_LABEL} {index + 1}",
            )
        )
    return ResolvedPeriod(
        range=DateRange(start=first_day, end=now),
        buckets=_clamp(buckets, now),
        label=ROLLING_MONTH_LABEL,
    )


def _resolve_rolling_year(now: datetime) -> ResolvedPeriod:
    current_month = start_of_month(now)
    buckets = []
    for index in range(ROLLING_YEAR_MONTHS):
        month = shift_months(current_month, -(ROLLING_YEAR_MONTHS - 1 - index))
        buckets.append(
            Interval(
                start=month,
                end=end_of_month(month),
                label=format_month_abbreviation(month),
            )
        )
    return ResolvedPeriod(
        range=DateRange(
            start=shift_months(now, -ROLLING_YEAR_MONTHS),
            end=now,
        ),
        buckets=_clamp(buckets, now),
        label=ROLLING_YEAR_LABEL,
    )


def _resolve_specific_week(week: CalendarWeek) -> ResolvedPeriod:
    return ResolvedPeriod(
        range=week.as_range(),
        buckets=tuple(daily_buckets(week.start, DAYS_PER_WEEK)),
        label=week.label,
    )


def _clamp(buckets: list[Interval], limit: datetime) -> tuple[Interval, ...]:
    """Drop buckets starting after ``limit`` and cut the rest at ``limit``."""
    clamped = []
    for bucket in buckets:
        if bucket.start > limit:
            continue
        if bucket.end > limit:
            bucket = replace(bucket, end=limit)
        clamped.append(bucket)
    return tuple(clamped)


__all__ = ["resolve_period", "daily_buckets"]
