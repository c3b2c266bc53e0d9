"""Domain package for fleet reporting rules and core models."""

from .constants import (
    DEFAULT_MONTHLY_WINDOW,
    INVESTOR_ROLE,
    TRANSACTION_EXPENSE,
    TRANSACTION_INCOME,
)
from .models import (
    CategoryTotal,
    ExportResult,
    FinancialRecordRow,
    InvestorFinancialSummary,
    InvestorRow,
    InvestorVehicleFinancials,
    MonthlyBucket,
    ReportResult,
    TransactionRow,
    VehicleRow,
)
from .services import (
    compute_category_totals,
    compute_investor_summaries,
    compute_monthly_buckets,
    compute_vehicle_financials,
    select_month,
    subtract_months,
)

__all__ = [
    "DEFAULT_MONTHLY_WINDOW",
    "INVESTOR_ROLE",
    "TRANSACTION_EXPENSE",
    "TRANSACTION_INCOME",
    "CategoryTotal",
    "ExportResult",
    "FinancialRecordRow",
    "InvestorFinancialSummary",
    "InvestorRow",
    "InvestorVehicleFinancials",
    "MonthlyBucket",
    "ReportResult",
    "TransactionRow",
    "VehicleRow",
    "compute_category_totals",
    "compute_investor_summaries",
    "compute_monthly_buckets",
    "compute_vehicle_financials",
    "select_month",
    "subtract_months",
]
