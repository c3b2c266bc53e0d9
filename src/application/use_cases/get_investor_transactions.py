"""Use case to list every movement of an investor's vehicles."""

from collections.abc import Sequence

from src.application.ports.record_store import (
    RecordStoreError,
    RecordStorePort,
)
from src.application.use_cases.request_cache import (
    RequestCache,
    with_request_cache,
)
from src.domain.models import ReportResult, TransactionRow
from src.infrastructure.logging.logger import get_app_logger


class GetInvestorTransactionsUseCase:
    """Return the flat transaction history of an investor, newest first."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        investor_id: str,
        vehicle_ids: Sequence[str] | None = None,
        cache: RequestCache | None = None,
    ) -> ReportResult[list[TransactionRow]]:
        """Return the investor's transactions.

        Args:
            investor_id: Investor whose vehicles are listed.
            vehicle_ids: Known vehicle ids; fetched when omitted.
            cache: Optional per-request cache shared with other use cases.

        Returns:
            ReportResult[list[TransactionRow]]: Transactions and warnings.
        """
        store = with_request_cache(self._record_store, cache)
        try:
            if vehicle_ids is None:
                vehicle_ids = [
                    vehicle.id
                    for vehicle in store.list_vehicles(
                        must_have_assigned_investor=True,
                        investor_id=investor_id,
                    )
                ]
            if not vehicle_ids:
                return ReportResult(value=[])
            transactions = store.list_transactions(vehicle_ids)
        except RecordStoreError as exc:
            message = f"Error fetching transactions for investor {investor_id}: {exc}"
            self._logger.warning(message)
            return ReportResult(value=[], warnings=(message,))

        self._logger.info(
            f"Fetched {len(transactions)} transactions for investor {investor_id}"
        )
        return ReportResult(value=transactions)


__all__ = ["GetInvestorTransactionsUseCase"]
