"""Shared fakes and fixtures for application tests."""

from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal

import pytest

from src.application.ports.record_store import RecordStoreError
from src.domain.models import (
    FinancialRecordRow,
    InvestorRow,
    TransactionRow,
    VehicleRow,
)


class FakeRecordStore:
    """Record store serving fixed rows and counting every call."""

    def __init__(
        self,
        investors: list[InvestorRow] | None = None,
        vehicles: list[VehicleRow] | None = None,
        records: list[FinancialRecordRow] | None = None,
        transactions: list[TransactionRow] | None = None,
        failing: set[str] | None = None,
    ) -> None:
        self.investors = investors or []
        self.vehicles = vehicles or []
        self.records = records or []
        self.transactions = transactions or []
        self.failing = failing or set()
        self.calls: list[tuple[str, tuple]] = []

    def _check(self, operation: str, arguments: tuple) -> None:
        self.calls.append((operation, arguments))
        if operation in self.failing:
            raise RecordStoreError(f"{operation} unavailable")

    def count(self, operation: str) -> int:
        return sum(1 for name, _ in self.calls if name == operation)

    def list_investors(
        self,
        role: str,
        investor_id: str | None = None,
    ) -> list[InvestorRow]:
        self._check("list_investors", (role, investor_id))
        return [
            investor
            for investor in self.investors
            if investor_id is None or investor.id == investor_id
        ]

    def list_vehicles(
        self,
        must_have_assigned_investor: bool = True,
        investor_id: str | None = None,
    ) -> list[VehicleRow]:
        self._check("list_vehicles", (must_have_assigned_investor, investor_id))
        return [
            vehicle
            for vehicle in self.vehicles
            if (
                not must_have_assigned_investor
                or vehicle.assigned_investor_id is not None
            )
            and (investor_id is None or vehicle.assigned_investor_id == investor_id)
        ]

    def list_financial_records(
        self,
        vehicle_ids: Sequence[str],
        date_from: datetime | None = None,
    ) -> list[FinancialRecordRow]:
        self._check("list_financial_records", (tuple(vehicle_ids), date_from))
        return [
            record
            for record in self.records
            if record.vehicle_id in vehicle_ids
            and (date_from is None or record.date >= date_from)
        ]

    def list_transactions(
        self,
        vehicle_ids: Sequence[str],
    ) -> list[TransactionRow]:
        self._check("list_transactions", (tuple(vehicle_ids),))
        return sorted(
            (
                transaction
                for transaction in self.transactions
                if transaction.vehicle_id in vehicle_ids
            ),
            key=lambda transaction: transaction.date,
            reverse=True,
        )


@pytest.fixture
def make_store():
    """Return the fake store class for tests building their own rows."""
    return FakeRecordStore


@pytest.fixture
def fleet_store() -> FakeRecordStore:
    """Two investors; only Ana owns a vehicle."""
    return FakeRecordStore(
        investors=[
            InvestorRow(id="ana", full_name="Ana Gómez", email="ana@example.com"),
            InvestorRow(id="beto", full_name="Beto Ruiz", email="beto@example.com"),
        ],
        vehicles=[
            VehicleRow(
                id="v1",
                make="Ford",
                model="Mustang",
                license_plate="ABC123",
                assigned_investor_id="ana",
            ),
            VehicleRow(
                id="v2",
                make="Kia",
                model="Rio",
                license_plate="XYZ789",
                assigned_investor_id=None,
            ),
        ],
        records=[
            FinancialRecordRow("v1", "income", Decimal("1000"), datetime(2026, 8, 5)),
            FinancialRecordRow("v1", "expense", Decimal("200"), datetime(2026, 9, 10)),
            FinancialRecordRow("v1", "income", Decimal("50"), datetime(2025, 1, 2)),
            FinancialRecordRow("v2", "income", Decimal("999"), datetime(2026, 9, 1)),
        ],
        transactions=[
            TransactionRow(
                id="t1",
                vehicle_id="v1",
                type="income",
                category="rental",
                amount=Decimal("1000"),
                date=datetime(2026, 8, 5),
                description="Turo payout",
                vehicle_make="Ford",
                vehicle_model="Mustang",
            ),
            TransactionRow(
                id="t2",
                vehicle_id="v1",
                type="expense",
                category="maintenance",
                amount=Decimal("200"),
                date=datetime(2026, 9, 10),
                vehicle_make="Ford",
                vehicle_model="Mustang",
            ),
        ],
    )
