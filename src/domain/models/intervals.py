"""Value types for date ranges, labelled intervals and calendar weeks."""

from dataclasses import dataclass
from datetime import datetime

from src.utils.datetime_utils import align_to, is_aware


def _check_order(start: datetime, end: datetime) -> None:
    if is_aware(start) != is_aware(end):
        raise ValueError(
            f"start {start} and end {end} must both be naive or both "
            "timezone-aware"
        )
    if start > end:
        raise ValueError(f"start {start} is after end {end}")


def _within(start: datetime, end: datetime, instant: datetime) -> bool:
    instant = align_to(instant, start)
    return start <= instant <= end


@dataclass(frozen=True)
class DateRange:
    """Inclusive date range ``[start, end]``."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        _check_order(self.start, self.end)

    def contains(self, instant: datetime) -> bool:
        """Return True when ``start <= instant <= end``."""
        return _within(self.start, self.end, instant)


@dataclass(frozen=True)
class Interval:
    """Inclusive labelled sub-interval of a reporting period.

    Naive and timezone-aware instants may be mixed; naive values are read
    as local time.

    Attributes:
        start: First instant of the interval.
        end: Last instant of the interval (inclusive).
        label: Display label, e.g. ``"3/6"`` or ``"Semana 2"``.
    """

    start: datetime
    end: datetime
    label: str

    def __post_init__(self) -> None:
        _check_order(self.start, self.end)

    def contains(self, instant: datetime) -> bool:
        """Return True when ``start <= instant <= end``."""
        return _within(self.start, self.end, instant)

    def overlaps(self, other: "Interval") -> bool:
        """Return True when the two intervals share at least one instant.

        Touching intervals (one ends exactly where the other starts) overlap
        because both ends are inclusive.
        """
        other_start = align_to(other.start, self.start)
        other_end = align_to(other.end, self.start)
        return self.start <= other_end and other_start <= self.end


@dataclass(frozen=True)
class CalendarWeek:
    """Sunday-to-Saturday week that has existed since the first record.

    Attributes:
        sequence_number: 1-based position in the computed week list.
        start: Sunday 00:00.
        end: Saturday end of day.
        label: ``"Semana N (dd/mm/yyyy - dd/mm/yyyy)"``.
    """

    sequence_number: int
    start: datetime
    end: datetime
    label: str

    def __post_init__(self) -> None:
        if self.sequence_number < 1:
            raise ValueError(
                f"sequence_number must be positive: {self.sequence_number}"
            )
        _check_order(self.start, self.end)

    def contains(self, instant: datetime) -> bool:
        return _within(self.start, self.end, instant)

    def as_range(self) -> DateRange:
        return DateRange(start=self.start, end=self.end)


__all__ = ["DateRange", "Interval", "CalendarWeek"]
