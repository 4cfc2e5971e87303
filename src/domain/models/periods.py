"""Reporting mode selector and its resolved form."""

from dataclasses import dataclass
from enum import Enum

from src.domain.models.intervals import DateRange, Interval


class PeriodKind(str, Enum):
    """Kinds of reporting period."""

    ROLLING_WEEK = "semana"
    ROLLING_MONTH = "mes"
    ROLLING_YEAR = "ano"
    SPECIFIC_WEEK = "semana_especifica"


@dataclass(frozen=True)
class ReportingMode:
    """Reporting period selection.

    ``week_id`` is the ``CalendarWeek.sequence_number`` to report on and is
    required for (and only allowed with) ``PeriodKind.SPECIFIC_WEEK``.
    """

    kind: PeriodKind
    week_id: int | None = None

    def __post_init__(self) -> None:
        if self.kind is PeriodKind.SPECIFIC_WEEK and self.week_id is None:
            raise ValueError("A specific week selection requires a week_id")
        if self.kind is not PeriodKind.SPECIFIC_WEEK and self.week_id is not None:
            raise ValueError(
                f"week_id is only valid for specific weeks, not {self.kind.value}"
            )

    @classmethod
    def rolling_week(cls) -> "ReportingMode":
        return cls(PeriodKind.ROLLING_WEEK)

    @classmethod
    def rolling_month(cls) -> "ReportingMode":
        return cls(PeriodKind.ROLLING_MONTH)

    @classmethod
    def rolling_year(cls) -> "ReportingMode":
        return cls(PeriodKind.ROLLING_YEAR)

    @classmethod
    def specific_week(cls, week_id: int) -> "ReportingMode":
        return cls(PeriodKind.SPECIFIC_WEEK, week_id)

    @property
    def selection_key(self) -> tuple[str, int | None]:
        """Key identifying an in-flight computation for this selection."""
        return (self.kind.value, self.week_id)


@dataclass(frozen=True)
class ResolvedPeriod:
    """Concrete range and ordered buckets for a reporting mode."""

    range: DateRange
    buckets: tuple[Interval, ...]
    label: str


__all__ = ["PeriodKind", "ReportingMode", "ResolvedPeriod"]
