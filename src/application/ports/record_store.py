"""Port for reading investors, vehicles and financial records."""

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from src.domain.models import (
    FinancialRecordRow,
    InvestorRow,
    TransactionRow,
    VehicleRow,
)


class RecordStoreError(RuntimeError):
    """Raised when the record store cannot answer a query."""


class RecordStorePort(Protocol):
    """Port exposing the rows needed for investor reporting.

    Implementations raise RecordStoreError on network, auth or query
    failures.
    """

    def list_investors(
        self,
        role: str,
        investor_id: str | None = None,
    ) -> list[InvestorRow]:
        """Return profiles with the role, ordered by name when unfiltered."""

    def list_vehicles(
        self,
        must_have_assigned_investor: bool = True,
        investor_id: str | None = None,
    ) -> list[VehicleRow]:
        """Return vehicles, optionally only assigned ones or one owner's."""

    def list_financial_records(
        self,
        vehicle_ids: Sequence[str],
        date_from: datetime | None = None,
    ) -> list[FinancialRecordRow]:
        """Return records of the vehicles, ascending by date."""

    def list_transactions(
        self,
        vehicle_ids: Sequence[str],
    ) -> list[TransactionRow]:
        """Return full records joined with vehicles, newest first."""


__all__ = ["RecordStoreError", "RecordStorePort"]
