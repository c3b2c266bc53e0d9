"""Use case to compute the monthly evolution of an investor."""

from collections.abc import Callable
from datetime import datetime

from src.application.ports.record_store import (
    RecordStoreError,
    RecordStorePort,
)
from src.application.use_cases.request_cache import (
    RequestCache,
    with_request_cache,
)
from src.domain.constants import DEFAULT_MONTHLY_WINDOW
from src.domain.models import MonthlyBucket, ReportResult
from src.domain.services.finance import compute_monthly_buckets
from src.domain.services.periods import subtract_months
from src.domain.services.validation import validate_window_months
from src.infrastructure.logging.logger import get_app_logger


class GetInvestorMonthlyFinancialsUseCase:
    """Group an investor's recent records into calendar-month buckets.

    Only months with at least one record are returned; gaps inside the
    window are not filled with zero buckets.
    """

    def __init__(
        self,
        record_store: RecordStorePort,
        logger=None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing vehicles and records.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Callable returning the current naive local timestamp.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()
        self._clock = clock

    def execute(
        self,
        investor_id: str,
        window_months: int = DEFAULT_MONTHLY_WINDOW,
        cache: RequestCache | None = None,
    ) -> ReportResult[list[MonthlyBucket]]:
        """Return monthly buckets for the trailing window.

        Args:
            investor_id: Investor whose vehicles are reported.
            window_months: Number of calendar months to look back (>= 1).
            cache: Optional per-request cache shared with other use cases.

        Returns:
            ReportResult[list[MonthlyBucket]]: Buckets in ascending month
            order and any fetch warnings.

        Raises:
            ValueError: If window_months is smaller than 1.
        """
        validate_window_months(window_months)
        store = with_request_cache(self._record_store, cache)

        try:
            vehicles = store.list_vehicles(
                must_have_assigned_investor=True,
                investor_id=investor_id,
            )
        except RecordStoreError as exc:
            message = f"Error fetching vehicles for investor {investor_id}: {exc}"
            self._logger.warning(message)
            return ReportResult(value=[], warnings=(message,))
        if not vehicles:
            return ReportResult(value=[])

        window_start = subtract_months(self._clock(), window_months)
        try:
            records = store.list_financial_records(
                [vehicle.id for vehicle in vehicles],
                date_from=window_start,
            )
        except RecordStoreError as exc:
            message = f"Error fetching financial records for investor {investor_id}: {exc}"
            self._logger.warning(message)
            return ReportResult(value=[], warnings=(message,))

        buckets = compute_monthly_buckets(records, logger=self._logger)
        self._logger.info(
            f"Computed {len(buckets)} monthly buckets for investor "
            f"{investor_id} since {window_start.date().isoformat()}"
        )
        return ReportResult(value=buckets)


__all__ = ["GetInvestorMonthlyFinancialsUseCase"]
