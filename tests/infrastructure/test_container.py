"""Tests for the composition root."""

from pathlib import Path
from unittest.mock import MagicMock

from src.adapters.reports.pdf_report import InvestorPdfRenderer
from src.application.use_cases.build_investor_report import (
    BuildInvestorReportUseCase,
)
from src.infrastructure import container
from src.infrastructure.record_store import SqlAlchemyRecordStore
from src.infrastructure.settings import ReportSettings


def test_build_record_store_uses_given_port() -> None:
    db_port = MagicMock()

    store = container.build_record_store(db_port)

    assert isinstance(store, SqlAlchemyRecordStore)
    assert store._db_port is db_port


def test_build_report_use_case_applies_settings(monkeypatch) -> None:
    """Company name and monthly window flow from settings."""
    monkeypatch.setattr(container, "get_app_logger", MagicMock)
    settings = ReportSettings(
        company_name="Acme Fleet",
        monthly_window=3,
        output_dir=Path("/tmp"),
    )

    use_case = container.build_report_use_case(
        record_store=MagicMock(),
        settings=settings,
    )

    assert isinstance(use_case, BuildInvestorReportUseCase)
    assert use_case._monthly_window == 3
    assert isinstance(use_case._renderer, InvestorPdfRenderer)
    assert use_case._renderer._company_name == "Acme Fleet"
