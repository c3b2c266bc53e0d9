"""Application use cases package."""

from .build_investor_report import (
    BuildInvestorReportUseCase,
    InvestorReportOutcome,
)
from .get_investor_financial_summary import GetInvestorFinancialSummaryUseCase
from .get_investor_monthly_financials import (
    GetInvestorMonthlyFinancialsUseCase,
)
from .get_investor_transactions import GetInvestorTransactionsUseCase
from .request_cache import CachedRecordStore, RequestCache

__all__ = [
    "BuildInvestorReportUseCase",
    "InvestorReportOutcome",
    "GetInvestorFinancialSummaryUseCase",
    "GetInvestorMonthlyFinancialsUseCase",
    "GetInvestorTransactionsUseCase",
    "CachedRecordStore",
    "RequestCache",
]
