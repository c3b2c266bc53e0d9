"""Use case to compute per-investor financial summaries."""

from src.application.ports.record_store import (
    RecordStoreError,
    RecordStorePort,
)
from src.application.use_cases.request_cache import (
    RequestCache,
    with_request_cache,
)
from src.domain.constants import INVESTOR_ROLE
from src.domain.models import (
    FinancialRecordRow,
    InvestorFinancialSummary,
    ReportResult,
    VehicleRow,
)
from src.domain.services.finance import compute_investor_summaries
from src.infrastructure.logging.logger import get_app_logger


class GetInvestorFinancialSummaryUseCase:
    """Aggregate income and expenses per investor and per vehicle.

    Reads are best effort: a failed investor read yields an empty result,
    while failed vehicle or record reads are replaced by empty datasets so
    investors still show up with zero totals. Every degradation is logged
    and reported as a warning on the returned ReportResult.
    """

    def __init__(
        self,
        record_store: RecordStorePort,
        logger=None,
        investor_role: str = INVESTOR_ROLE,
    ) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing investors, vehicles and records.
            logger: Optional logger compatible with logging.Logger-like API.
            investor_role: Profile role identifying investors.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()
        self._investor_role = investor_role

    def execute(
        self,
        investor_id: str | None = None,
        cache: RequestCache | None = None,
    ) -> ReportResult[list[InvestorFinancialSummary]]:
        """Return summaries sorted by net balance, highest first.

        Args:
            investor_id: Optional investor to restrict the computation to.
            cache: Optional per-request cache shared with other use cases.

        Returns:
            ReportResult[list[InvestorFinancialSummary]]: Summaries and the
            warnings collected while fetching.
        """
        store = with_request_cache(self._record_store, cache)
        warnings: list[str] = []

        try:
            investors = store.list_investors(
                self._investor_role,
                investor_id,
            )
        except RecordStoreError as exc:
            message = f"Error fetching investors: {exc}"
            self._logger.error(message)
            return ReportResult(value=[], warnings=(message,))
        if not investors:
            self._logger.info(
                f"No investors found (investor_id={investor_id})"
            )
            return ReportResult(value=[])

        vehicles = self._fetch_vehicles(store, warnings)
        records = self._fetch_records(store, vehicles, warnings)

        summaries = compute_investor_summaries(
            investors,
            vehicles,
            records,
            logger=self._logger,
        )
        self._logger.info(
            f"Computed {len(summaries)} investor summaries from "
            f"{len(vehicles)} vehicles and {len(records)} records"
        )
        return ReportResult(value=summaries, warnings=tuple(warnings))

    def _fetch_vehicles(
        self,
        store: RecordStorePort,
        warnings: list[str],
    ) -> list[VehicleRow]:
        try:
            return store.list_vehicles(must_have_assigned_investor=True)
        except RecordStoreError as exc:
            message = f"Error fetching vehicles: {exc}"
            self._logger.warning(message)
            warnings.append(message)
            return []

    def _fetch_records(
        self,
        store: RecordStorePort,
        vehicles: list[VehicleRow],
        warnings: list[str],
    ) -> list[FinancialRecordRow]:
        vehicle_ids = [vehicle.id for vehicle in vehicles]
        if not vehicle_ids:
            return []
        try:
            return store.list_financial_records(vehicle_ids)
        except RecordStoreError as exc:
            message = f"Error fetching financial records: {exc}"
            self._logger.warning(message)
            warnings.append(message)
            return []


__all__ = ["GetInvestorFinancialSummaryUseCase"]
