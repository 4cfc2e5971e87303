"""Enumerate the Sunday-start calendar weeks that have held records."""

from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta

from src.domain.constants import DAYS_PER_WEEK, WEEK_BUCKET_LABEL
from src.domain.errors import InvalidSelectionError
from src.domain.models import CalendarWeek, FinancialRecord
from src.domain.services.formatting import format_date
from src.domain.services.time_bounds import end_of_day, start_of_sunday_week
from src.utils.datetime_utils import align_to


def enumerate_available_weeks(
    earliest_dates: Iterable[datetime | None],
    now: datetime,
) -> tuple[CalendarWeek, ...]:
    """Return every calendar week from the earliest record up to ``now``.

    The walk starts on the Sunday of the week holding the earliest date and
    advances in 7-day strides while the stride start is not after ``now``, so
    the last week always contains ``now`` (its end may lie in the future).

    Args:
        earliest_dates: Earliest ``occurred_at`` per record kind; ``None``
            entries stand for kinds without records.
        now: Reference instant.

    Returns:
        tuple[CalendarWeek, ...]: Weeks numbered 1, 2, 3... in walk order,
        empty when there are no records.
    """
    known = [
        align_to(value, now) for value in earliest_dates if value is not None
    ]
    if not known:
        return ()

    stride = timedelta(days=DAYS_PER_WEEK)
    cursor = start_of_sunday_week(min(known))
    weeks: list[CalendarWeek] = []
    while cursor <= now:
        sequence_number = len(weeks) + 1
        week_end = end_of_day(cursor + timedelta(days=DAYS_PER_WEEK - 1))
        weeks.append(
            CalendarWeek(
                sequence_number=sequence_number,
                start=cursor,
                end=week_end,
                label=_week_label(sequence_number, cursor, week_end),
            )
        )
        cursor += stride
    return tuple(weeks)


def earliest_occurrence(
    records: Iterable[FinancialRecord],
    reference: datetime | None = None,
) -> datetime | None:
    """Return the earliest ``occurred_at`` of ``records`` or None.

    When ``reference`` is given every instant is first aligned to its
    naive/aware convention, so mixed record sets can be compared.
    """
    instants = (record.occurred_at for record in records)
    if reference is not None:
        instants = (align_to(instant, reference) for instant in instants)
    return min(instants, default=None)


def find_week(
    weeks: Sequence[CalendarWeek],
    week_id: int,
) -> CalendarWeek:
    """Return the week numbered ``week_id``.

    Raises:
        InvalidSelectionError: If no week carries that sequence number.
    """
    for week in weeks:
        if week.sequence_number == week_id:
            return week
    raise InvalidSelectionError(week_id)


def default_week(weeks: Sequence[CalendarWeek]) -> CalendarWeek | None:
    """Return the most recent week, used when nothing was selected."""
    return weeks[-1] if weeks else None


def _week_label(sequence_number: int, start: datetime, end: datetime) -> str:
    return (
        f"{WEEK_BUCKET_LABEL} {sequence_number} "
        f"({format_date(start)} - {format_date(end)})"
    )


__all__ = [
    "enumerate_available_weeks",
    "earliest_occurrence",
    "find_week",
    "default_week",
]
