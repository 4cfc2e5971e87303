"""CLI adapter printing a period report for one tenant.

Configuration comes from the environment (see ``ReportingSettings``);
``REPORT_NOW`` optionally pins the reference instant (ISO format).
"""

from datetime import datetime
import os

from src.domain.errors import ReportingError
from src.domain.models import PeriodKind, PeriodReport
from src.domain.services.formatting import format_brl, format_date
from src.infrastructure.container import build_report_session
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import ReportingSettings


def _parse_now(value: str | None, logger) -> datetime:
    """Parse an ISO datetime, defaulting to the current time.

    Args:
        value: Datetime string in ISO format.
        logger: Logger used for warnings.

    Returns:
        datetime: Parsed datetime or ``datetime.now()`` when absent/invalid.
    """
    if not value:
        return datetime.now()
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid REPORT_NOW '{value}'. Expected ISO format."
        )
        return datetime.now()


def _print_report(report: PeriodReport) -> None:
    print(f"Resumo Financeiro - {report.label}")
    print(
        f"Período: {format_date(report.range.start)} até "
        f"{format_date(report.range.end)}"
    )
    print(f"Total de Vendas: {format_brl(report.sales_total)}")
    print(f"Total de Gastos: {format_brl(report.expenses_total)}")
    print(f"Lucro Líquido: {format_brl(report.net_total)}")
    for label, amount in report.category_breakdown.as_rows():
        print(f"  {label}: {format_brl(amount)}")
    for bucket in report.buckets:
        print(
            f"{bucket.interval.label}: "
            f"vendas={format_brl(bucket.sales_total)} "
            f"gastos={format_brl(bucket.expenses_total)} "
            f"lucro={format_brl(bucket.net_total)}"
        )


def main() -> None:
    """Build and print the configured report."""
    logger = get_app_logger()
    settings = ReportingSettings.from_env()
    if settings.tenant_id is None:
        logger.warning("REPORT_TENANT_ID is required to build a report.")
        return

    now = _parse_now(os.getenv("REPORT_NOW"), logger)
    session = build_report_session(settings.tenant_id, settings=settings)
    try:
        if settings.mode.kind is PeriodKind.SPECIFIC_WEEK:
            session.refresh_weeks(now)
        report = session.load(now)
    except ReportingError as exc:
        logger.error(str(exc))
        return

    get_usage_logger().info(
        f"report mode={settings.mode.kind.value} "
        f"week={settings.mode.week_id} tenant={settings.tenant_id}"
    )
    if report is not None:
        _print_report(report)


if __name__ == "__main__":  # pragma: no cover
    main()
