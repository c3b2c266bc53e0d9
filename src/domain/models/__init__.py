"""Domain models package."""

from .finance import (
    CategoryTotal,
    ExportResult,
    InvestorFinancialSummary,
    InvestorVehicleFinancials,
    MonthlyBucket,
    ReportResult,
)
from .fleet_rows import (
    FinancialRecordRow,
    InvestorRow,
    TransactionRow,
    VehicleRow,
)

__all__ = [
    "CategoryTotal",
    "ExportResult",
    "InvestorFinancialSummary",
    "InvestorVehicleFinancials",
    "MonthlyBucket",
    "ReportResult",
    "FinancialRecordRow",
    "InvestorRow",
    "TransactionRow",
    "VehicleRow",
]
