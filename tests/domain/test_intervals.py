"""Tests for interval value types."""

from datetime import datetime, timedelta, timezone

import pytest

from src.domain.models import CalendarWeek, DateRange, Interval


def test_contains_is_inclusive_on_both_ends() -> None:
    """Both boundary instants belong to the interval."""
    interval = Interval(
        start=datetime(2024, 6, 1),
        end=datetime(2024, 6, 1, 23, 59, 59, 999999),
        label="1/6",
    )

    assert interval.contains(datetime(2024, 6, 1))
    assert interval.contains(datetime(2024, 6, 1, 23, 59, 59, 999999))
    assert interval.contains(datetime(2024, 6, 1, 12, 0))
    assert not interval.contains(datetime(2024, 5, 31, 23, 59, 59, 999999))
    assert not interval.contains(datetime(2024, 6, 2))


def test_start_after_end_is_rejected() -> None:
    with pytest.raises(ValueError):
        Interval(
            start=datetime(2024, 6, 2),
            end=datetime(2024, 6, 1),
            label="bad",
        )
    with pytest.raises(ValueError):
        DateRange(start=datetime(2024, 6, 2), end=datetime(2024, 6, 1))


def test_overlaps_detects_shared_instants() -> None:
    first = Interval(datetime(2024, 6, 1), datetime(2024, 6, 3), "a")
    touching = Interval(datetime(2024, 6, 3), datetime(2024, 6, 4), "b")
    apart = Interval(datetime(2024, 6, 5), datetime(2024, 6, 6), "c")

    assert first.overlaps(touching)
    assert not first.overlaps(apart)


def test_calendar_week_requires_positive_sequence() -> None:
    with pytest.raises(ValueError):
        CalendarWeek(
            sequence_number=0,
            start=datetime(2024, 6, 2),
            end=datetime(2024, 6, 8, 23, 59, 59, 999999),
            label="Semana 0",
        )


def test_values_compare_structurally() -> None:
    start = datetime(2024, 6, 1)
    end = datetime(2024, 6, 2)

    assert Interval(start, end, "x") == Interval(start, end, "x")
    assert DateRange(start, end) == DateRange(start, end)


def test_contains_accepts_the_other_timezone_convention() -> None:
    """Naive instants take an aware interval's zone, and the reverse."""
    brt = timezone(timedelta(hours=-3))
    aware_day = Interval(
        start=datetime(2024, 6, 1, tzinfo=brt),
        end=datetime(2024, 6, 1, 23, 59, 59, 999999, tzinfo=brt),
        label="1/6",
    )
    naive_day = DateRange(
        start=datetime(2024, 6, 1),
        end=datetime(2024, 6, 1, 23, 59, 59, 999999),
    )

    assert aware_day.contains(datetime(2024, 6, 1, 12))
    # 01:00 UTC on 2/6 is still 1/6 in BRT.
    assert aware_day.contains(datetime(2024, 6, 2, 1, tzinfo=timezone.utc))
    assert not aware_day.contains(datetime(2024, 6, 2, 4, tzinfo=timezone.utc))
    assert naive_day.contains(datetime(2024, 6, 1, 12).astimezone())


def test_mixed_bounds_are_rejected() -> None:
    with pytest.raises(ValueError):
        DateRange(
            start=datetime(2024, 6, 1),
            end=datetime(2024, 6, 2, tzinfo=timezone.utc),
        )


def test_overlaps_across_zones() -> None:
    """Intervals in different zones are compared as absolute instants."""
    brt = timezone(timedelta(hours=-3))
    utc_day = Interval(
        datetime(2024, 6, 1, tzinfo=timezone.utc),
        datetime(2024, 6, 1, 23, 59, tzinfo=timezone.utc),
        "utc",
    )
    # 20:00-20:30 BRT is 23:00-23:30 UTC.
    late_evening = Interval(
        datetime(2024, 6, 1, 20, tzinfo=brt),
        datetime(2024, 6, 1, 20, 30, tzinfo=brt),
        "brt",
    )
    # 21:00-22:00 BRT is 00:00-01:00 UTC on 2/6.
    next_utc_day = Interval(
        datetime(2024, 6, 1, 21, tzinfo=brt),
        datetime(2024, 6, 1, 22, tzinfo=brt),
        "brt",
    )

    assert utc_day.overlaps(late_evening)
    assert not utc_day.overlaps(next_utc_day)
