"""Calendar boundary helpers.

Every helper keeps the ``tzinfo`` of the instant it is given, so bounds
computed from an aware ``now`` stay aware and comparable with it. Plain
``date`` inputs produce naive datetimes.
"""

import calendar
from datetime import date, datetime, time, timedelta, tzinfo


def start_of_day(instant: datetime | date) -> datetime:
    """Return 00:00:00.000000 of the instant's day."""
    return datetime.combine(
        _as_date(instant),
        time.min,
        tzinfo=_zone(instant),
    )


def end_of_day(instant: datetime | date) -> datetime:
    """Return 23:59:59.999999 of the instant's day."""
    return datetime.combine(
        _as_date(instant),
        time.max,
        tzinfo=_zone(instant),
    )


def start_of_sunday_week(instant: datetime | date) -> datetime:
    """Return Sunday 00:00 of the Sunday-to-Saturday week holding ``instant``."""
    days_since_sunday = (_as_date(instant).weekday() + 1) % 7
    return start_of_day(instant) - timedelta(days=days_since_sunday)


def start_of_monday_week(instant: datetime | date) -> datetime:
    """Return Monday 00:00 of the Monday-to-Sunday week holding ``instant``."""
    return start_of_day(instant) - timedelta(days=_as_date(instant).weekday())


def shift_months(instant: datetime, months: int) -> datetime:
    """Move ``instant`` by whole months, clamping the day to the month end.

    Args:
        instant: Reference datetime.
        months: Number of months to add (negative to go back).

    Returns:
        datetime: Same time of day, ``months`` calendar months away.
    """
    month_index = instant.year * 12 + (instant.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(instant.day, calendar.monthrange(year, month)[1])
    return instant.replace(year=year, month=month, day=day)


def start_of_month(instant: datetime | date) -> datetime:
    return start_of_day(instant).replace(day=1)


def end_of_month(instant: datetime | date) -> datetime:
    day = _as_date(instant)
    last_day = calendar.monthrange(day.year, day.month)[1]
    return end_of_day(instant).replace(day=last_day)


def _as_date(instant: datetime | date) -> date:
    if isinstance(instant, datetime):
        return instant.date()
    return instant


def _zone(instant: datetime | date) -> tzinfo | None:
    if isinstance(instant, datetime):
        return instant.tzinfo
    return None


__all__ = [
    "start_of_day",
    "end_of_day",
    "start_of_sunday_week",
    "start_of_monday_week",
    "shift_months",
    "start_of_month",
    "end_of_month",
]
