"""Port for turning investor aggregates into a downloadable document."""

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from src.domain.models import (
    ExportResult,
    InvestorFinancialSummary,
    MonthlyBucket,
    TransactionRow,
)


class InvestorReportRendererPort(Protocol):
    """Port exposing the investor report renderer."""

    def render(
        self,
        summary: InvestorFinancialSummary,
        transactions: Sequence[TransactionRow],
        monthly_buckets: Sequence[MonthlyBucket],
        generated_at: datetime | None = None,
    ) -> ExportResult:
        """Return the rendered report and its suggested filename."""


__all__ = ["InvestorReportRendererPort"]
