"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

from src.domain.constants import DEFAULT_RECENT_LIMIT
from src.domain.models import PeriodKind, ReportingMode
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ReportingSettings:
    """Settings for building reports from the environment.

    Attributes:
        tenant_id: Owner of the records to report on.
        mode: Reporting mode requested.
        fetch_workers: Threads used for concurrent store reads.
        recent_limit: Recent records shown in the weekly summary.
    """

    tenant_id: str | None = None
    mode: ReportingMode = ReportingMode.rolling_week()
    fetch_workers: int = 2
    recent_limit: int = DEFAULT_RECENT_LIMIT

    @classmethod
    def from_env(cls) -> "ReportingSettings":
        """Build settings from environment variables.

        Returns:
            ReportingSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        tenant_id = (os.getenv("REPORT_TENANT_ID") or "").strip() or None
        mode = cls._parse_mode(
            os.getenv("REPORT_MODE", PeriodKind.ROLLING_WEEK.value),
            os.getenv("REPORT_WEEK_ID"),
            logger=logger,
        )
        fetch_workers = cls._parse_positive_int(
            "REPORT_FETCH_WORKERS",
            default=2,
            logger=logger,
        )
        recent_limit = cls._parse_positive_int(
            "DASHBOARD_RECENT_LIMIT",
            default=DEFAULT_RECENT_LIMIT,
            logger=logger,
        )
        return cls(
            tenant_id=tenant_id,
            mode=mode,
            fetch_workers=fetch_workers,
            recent_limit=recent_limit,
        )

    @staticmethod
    def _parse_mode(
        raw_mode: str,
        raw_week_id: str | None,
        logger,
    ) -> ReportingMode:
        """Parse the reporting mode, falling back to the rolling week.

        Args:
            raw_mode: Period kind value (semana, mes, ano, semana_especifica).
            raw_week_id: Week sequence number for specific weeks.
            logger: Logger used for warnings.

        Returns:
            ReportingMode: Parsed mode.
        """
        try:
            kind = PeriodKind(raw_mode.strip().lower())
        except ValueError:
            logger.warning(
                f"Unknown REPORT_MODE '{raw_mode}'. Using rolling week."
            )
            return ReportingMode.rolling_week()
        if kind is not PeriodKind.SPECIFIC_WEEK:
            return ReportingMode(kind)
        try:
            return ReportingMode.specific_week(int(raw_week_id or ""))
        except ValueError:
            logger.warning(
                "REPORT_WEEK_ID must be an integer for specific weeks. "
                "Using rolling week."
            )
            return ReportingMode.rolling_week()

    @staticmethod
    def _parse_positive_int(name: str, default: int, logger) -> int:
        raw = os.getenv(name)
        if not raw:
            return default
        try:
            value = int(raw)
        except ValueError:
            value = 0
        if value < 1:
            logger.warning(
                f"{name} must be a positive integer, got '{raw}'. "
                f"Using {default}."
            )
            return default
        return value


__all__ = ["ReportingSettings"]
