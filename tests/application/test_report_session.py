"""Tests for ReportSession selection handling."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.build_report import BuildPeriodReportUseCase
from src.application.use_cases.list_available_weeks import (
    ListAvailableWeeksUseCase,
)
from src.application.use_cases.report_session import ReportSession
from src.domain.errors import InvalidSelectionError, StorageUnavailableError
from src.domain.models import ReportingMode, Sale


def _session(repository) -> ReportSession:
    logger = MagicMock()
    return ReportSession(
        BuildPeriodReportUseCase(repository, logger=logger),
        ListAvailableWeeksUseCase(repository, logger=logger),
        tenant_id="tenant-1",
        logger=logger,
    )


def _repository(factory):
    return factory(
        sales=[
            Sale(id="a", amount=Decimal("10.00"), occurred_at=datetime(2024, 5, 22)),
            Sale(id="b", amount=Decimal("5.00"), occurred_at=datetime(2024, 6, 11)),
        ],
    )


def test_load_publishes_report_for_current_selection(
    now,
    fake_repository_factory,
) -> None:
    session = _session(_repository(fake_repository_factory))

    report = session.load(now)

    assert report is not None
    assert session.report is report
    assert report.sales_total == Decimal("5.00")
    assert session.mode == ReportingMode.rolling_week()


def test_select_week_defaults_to_most_recent(
    now,
    fake_repository_factory,
) -> None:
    session = _session(_repository(fake_repository_factory))
    session.refresh_weeks(now)

    mode = session.select_week()

    assert mode == ReportingMode.specific_week(4)
    report = session.load(now)
    assert report.range.start == datetime(2024, 6, 9)
    assert report.sales_total == Decimal("5.00")


def test_select_week_without_weeks_raises(
    fake_repository_factory,
) -> None:
    session = _session(fake_repository_factory())

    with pytest.raises(InvalidSelectionError):
        session.select_week()
    with pytest.raises(InvalidSelectionError):
        session.select_week(2)


def test_stale_result_is_discarded(now, fake_repository_factory) -> None:
    """A build finishing after the user switched modes is dropped."""
    repository = _repository(fake_repository_factory)
    session = _session(repository)
    first = session.load(now)

    original_fetch = repository.fetch_sales

    def _switch_then_fetch(tenant_id, start, end):
        session.select(ReportingMode.rolling_year())
        return original_fetch(tenant_id, start, end)

    repository.fetch_sales = _switch_then_fetch
    session.select(ReportingMode.rolling_month())

    result = session.load(now)

    assert result is None
    assert session.report is first
    assert session.mode == ReportingMode.rolling_year()


def test_publish_checks_selection_key(now, fake_repository_factory) -> None:
    session = _session(_repository(fake_repository_factory))
    report = session.load(now)

    session.select(ReportingMode.rolling_month())

    assert session.publish(ReportingMode.rolling_week().selection_key, report) is False
    assert session.publish(ReportingMode.rolling_month().selection_key, report) is True


def test_failed_build_keeps_previous_report(
    now,
    fake_repository_factory,
) -> None:
    repository = _repository(fake_repository_factory)
    session = _session(repository)
    first = session.load(now)

    def _fail(*_args):
        raise StorageUnavailableError("offline")

    repository.fetch_expenses = _fail
    session.select(ReportingMode.rolling_month())

    with pytest.raises(StorageUnavailableError):
        session.load(now)

    assert session.report is first
