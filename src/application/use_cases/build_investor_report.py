"""Use case gathering everything an investor report needs and rendering it."""

from dataclasses import dataclass
from datetime import datetime

from src.application.ports.record_store import RecordStorePort
from src.application.ports.report_renderer import InvestorReportRendererPort
from src.application.use_cases.get_investor_financial_summary import (
    GetInvestorFinancialSummaryUseCase,
)
from src.application.use_cases.get_investor_monthly_financials import (
    GetInvestorMonthlyFinancialsUseCase,
)
from src.application.use_cases.get_investor_transactions import (
    GetInvestorTransactionsUseCase,
)
from src.application.use_cases.request_cache import RequestCache
from src.domain.constants import DEFAULT_MONTHLY_WINDOW
from src.domain.models import ExportResult
from src.infrastructure.logging.logger import get_app_logger

INVESTOR_NOT_FOUND_MESSAGE = "Inversor no encontrado."
INVESTOR_FETCH_FAILED_MESSAGE = "No se pudieron obtener los datos del inversor."


@dataclass(frozen=True)
class InvestorReportOutcome:
    """Export result plus the warnings collected while gathering data."""

    export: ExportResult
    warnings: tuple[str, ...] = ()


class BuildInvestorReportUseCase:
    """Fetch summary, transactions and monthly buckets, then render them.

    All reads of one execution share a single RequestCache, so vehicles
    and records are fetched once even though three use cases need them.
    """

    def __init__(
        self,
        record_store: RecordStorePort,
        renderer: InvestorReportRendererPort,
        logger=None,
        monthly_window: int = DEFAULT_MONTHLY_WINDOW,
        summary_use_case: GetInvestorFinancialSummaryUseCase | None = None,
        monthly_use_case: GetInvestorMonthlyFinancialsUseCase | None = None,
        transactions_use_case: GetInvestorTransactionsUseCase | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing investors, vehicles and records.
            renderer: Renderer turning the gathered data into a document.
            logger: Optional logger compatible with logging.Logger-like API.
            monthly_window: Months covered by the monthly evolution table.
            summary_use_case: Optional override of the summary use case.
            monthly_use_case: Optional override of the monthly use case.
            transactions_use_case: Optional override of the history use case.
        """
        self._logger = logger or get_app_logger()
        self._renderer = renderer
        self._monthly_window = monthly_window
        self._summary_use_case = summary_use_case or (
            GetInvestorFinancialSummaryUseCase(record_store, logger=self._logger)
        )
        self._monthly_use_case = monthly_use_case or (
            GetInvestorMonthlyFinancialsUseCase(record_store, logger=self._logger)
        )
        self._transactions_use_case = transactions_use_case or (
            GetInvestorTransactionsUseCase(record_store, logger=self._logger)
        )

    def execute(
        self,
        investor_id: str,
        generated_at: datetime | None = None,
    ) -> InvestorReportOutcome:
        """Build the report of one investor.

        Args:
            investor_id: Investor to report on.
            generated_at: Generation timestamp, now by default.

        Returns:
            InvestorReportOutcome: Rendered document (or a failed export when
            the investor is unknown or cannot be read) and fetch warnings.
        """
        cache = RequestCache()
        summary_result = self._summary_use_case.execute(
            investor_id=investor_id,
            cache=cache,
        )
        warnings = list(summary_result.warnings)
        if not summary_result.value:
            if summary_result.degraded:
                message = INVESTOR_FETCH_FAILED_MESSAGE
                self._logger.error(
                    f"Report skipped: investor {investor_id} could not be read"
                )
            else:
                message = INVESTOR_NOT_FOUND_MESSAGE
                self._logger.warning(
                    f"Report skipped: investor {investor_id} not found"
                )
            return InvestorReportOutcome(
                export=ExportResult(success=False, message=message),
                warnings=tuple(warnings),
            )
        summary = summary_result.value[0]

        transactions_result = self._transactions_use_case.execute(
            investor_id,
            vehicle_ids=[vehicle.vehicle_id for vehicle in summary.vehicles],
            cache=cache,
        )
        monthly_result = self._monthly_use_case.execute(
            investor_id,
            window_months=self._monthly_window,
            cache=cache,
        )
        warnings.extend(transactions_result.warnings)
        warnings.extend(monthly_result.warnings)

        export = self._renderer.render(
            summary,
            transactions_result.value,
            monthly_result.value,
            generated_at=generated_at,
        )
        self._logger.info(
            f"Report for investor {investor_id} built "
            f"(success={export.success}, cache_entries={len(cache)})"
        )
        return InvestorReportOutcome(export=export, warnings=tuple(warnings))


__all__ = [
    "BuildInvestorReportUseCase",
    "InvestorReportOutcome",
    "INVESTOR_NOT_FOUND_MESSAGE",
    "INVESTOR_FETCH_FAILED_MESSAGE",
]
