"""Composition root for wiring infrastructure adapters."""

from src.adapters.reports.pdf_report import InvestorPdfRenderer
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.record_store import RecordStorePort
from src.application.use_cases.build_investor_report import (
    BuildInvestorReportUseCase,
)
from src.application.use_cases.get_investor_financial_summary import (
    GetInvestorFinancialSummaryUseCase,
)
from src.application.use_cases.get_investor_monthly_financials import (
    GetInvestorMonthlyFinancialsUseCase,
)
from src.application.use_cases.get_investor_transactions import (
    GetInvestorTransactionsUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.record_store import SqlAlchemyRecordStore
from src.infrastructure.settings import ReportSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_record_store(
    db_port: DatabaseEnginePort | None = None,
) -> RecordStorePort:
    """Return the record store reading the fleet database."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyRecordStore(resolved_db)


def build_summary_use_case(
    record_store: RecordStorePort | None = None,
) -> GetInvestorFinancialSummaryUseCase:
    """Return the investor summary use case."""
    return GetInvestorFinancialSummaryUseCase(
        record_store or build_record_store(),
        logger=get_app_logger(),
    )


def build_monthly_use_case(
    record_store: RecordStorePort | None = None,
) -> GetInvestorMonthlyFinancialsUseCase:
    """Return the monthly evolution use case."""
    return GetInvestorMonthlyFinancialsUseCase(
        record_store or build_record_store(),
        logger=get_app_logger(),
    )


def build_transactions_use_case(
    record_store: RecordStorePort | None = None,
) -> GetInvestorTransactionsUseCase:
    """Return the transaction history use case."""
    return GetInvestorTransactionsUseCase(
        record_store or build_record_store(),
        logger=get_app_logger(),
    )


def build_report_use_case(
    record_store: RecordStorePort | None = None,
    settings: ReportSettings | None = None,
) -> BuildInvestorReportUseCase:
    """Return the PDF report use case configured from the environment."""
    resolved_settings = settings or ReportSettings.from_env()
    logger = get_app_logger()
    return BuildInvestorReportUseCase(
        record_store or build_record_store(),
        renderer=InvestorPdfRenderer(
            company_name=resolved_settings.company_name,
            logger=logger,
        ),
        logger=logger,
        monthly_window=resolved_settings.monthly_window,
    )


__all__ = [
    "build_database_adapter",
    "build_record_store",
    "build_summary_use_case",
    "build_monthly_use_case",
    "build_transactions_use_case",
    "build_report_use_case",
]
