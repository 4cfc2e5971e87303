"""Tests for calendar boundary helpers."""

from datetime import date, datetime, timedelta, timezone

from src.domain.services.time_bounds import (
    end_of_day,
    end_of_month,
    shift_months,
    start_of_day,
    start_of_monday_week,
    start_of_month,
    start_of_sunday_week,
)


def test_day_bounds_drop_time_of_day() -> None:
    instant = datetime(2024, 6, 12, 15, 30, 12)

    assert start_of_day(instant) == datetime(2024, 6, 12)
    assert end_of_day(instant) == datetime(2024, 6, 12, 23, 59, 59, 999999)
    assert start_of_day(date(2024, 6, 12)) == datetime(2024, 6, 12)


def test_sunday_week_start() -> None:
    """Wednesday maps to the preceding Sunday; Sunday maps to itself."""
    assert start_of_sunday_week(datetime(2024, 6, 12, 9)) == datetime(2024, 6, 9)
    assert start_of_sunday_week(datetime(2024, 6, 9, 18)) == datetime(2024, 6, 9)
    assert start_of_sunday_week(datetime(2024, 6, 15, 23)) == datetime(2024, 6, 9)


def test_monday_week_start() -> None:
    """Sunday belongs to the week that started the Monday before."""
    assert start_of_monday_week(datetime(2024, 6, 12, 9)) == datetime(2024, 6, 10)
    assert start_of_monday_week(datetime(2024, 6, 9, 18)) == datetime(2024, 6, 3)
    assert start_of_monday_week(datetime(2024, 6, 10)) == datetime(2024, 6, 10)


def test_shift_months_clamps_day_and_crosses_years() -> None:
    assert shift_months(datetime(2024, 3, 31, 8), -1) == datetime(2024, 2, 29, 8)
    assert shift_months(datetime(2024, 1, 15), -1) == datetime(2023, 12, 15)
    assert shift_months(datetime(2024, 6, 12, 15, 30), -12) == datetime(
        2023, 6, 12, 15, 30
    )
    assert shift_months(datetime(2023, 11, 30), 3) == datetime(2024, 2, 29)


def test_month_bounds() -> None:
    assert start_of_month(datetime(2024, 2, 17, 10)) == datetime(2024, 2, 1)
    assert end_of_month(datetime(2024, 2, 17)) == datetime(
        2024, 2, 29, 23, 59, 59, 999999
    )
    assert end_of_month(datetime(2023, 12, 1)) == datetime(
        2023, 12, 31, 23, 59, 59, 999999
    )


def test_bounds_keep_timezone_of_instant() -> None:
    brt = timezone(timedelta(hours=-3))
    instant = datetime(2024, 6, 12, 15, 30, tzinfo=brt)

    assert start_of_day(instant) == datetime(2024, 6, 12, tzinfo=brt)
    assert end_of_day(instant) == datetime(
        2024, 6, 12, 23, 59, 59, 999999, tzinfo=brt
    )
    assert start_of_sunday_week(instant) == datetime(2024, 6, 9, tzinfo=brt)
    assert start_of_monday_week(instant) == datetime(2024, 6, 10, tzinfo=brt)
    assert start_of_month(instant) == datetime(2024, 6, 1, tzinfo=brt)
    assert end_of_month(instant).tzinfo is brt
    assert shift_months(instant, -12).tzinfo is brt
    assert start_of_day(date(2024, 6, 12)).tzinfo is None
