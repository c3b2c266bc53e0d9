"""SQLAlchemy-backed record store for profiles, vehicles and records."""

from collections.abc import Sequence
from datetime import datetime
from typing import Any

from sqlalchemy import bindparam, text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.record_store import (
    RecordStoreError,
    RecordStorePort,
)
from src.domain.models import (
    FinancialRecordRow,
    InvestorRow,
    TransactionRow,
    VehicleRow,
)
from src.utils.decimal_utils import coerce_decimal


SELECT_INVESTORS_SQL = """
SELECT id, full_name, email
FROM profiles
WHERE role = :role
"""

SELECT_VEHICLES_SQL = """
SELECT id, make, model, license_plate, assigned_investor_id, image_url
FROM vehicles
WHERE 1=1
"""

SELECT_RECORDS_SQL = """
SELECT vehicle_id, type, amount, date
FROM financial_records
WHERE vehicle_id IN :vehicle_ids
"""

SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT fr.id AS id,
           fr.vehicle_id AS vehicle_id,
           fr.type AS type,
           fr.category AS category,
           fr.amount AS amount,
           fr.date AS date,
           fr.description AS description,
           v.make AS vehicle_make,
           v.model AS vehicle_model,
           v.license_plate AS vehicle_license_plate
    FROM financial_records fr
    LEFT JOIN vehicles v ON v.id = fr.vehicle_id
    WHERE fr.vehicle_id IN :vehicle_ids
    ORDER BY fr.date DESC
    """
).bindparams(bindparam("vehicle_ids", expanding=True))


class SqlAlchemyRecordStore(RecordStorePort):
    """Record store reading the hosted fleet database."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the fleet engine.
        """
        self._db_port = db_port

    def list_investors(
        self,
        role: str,
        investor_id: str | None = None,
    ) -> list[InvestorRow]:
        sql = SELECT_INVESTORS_SQL
        params: dict[str, Any] = {"role": role}
        if investor_id:
            sql += " AND id = :investor_id"
            params["investor_id"] = investor_id
        else:
            sql += " ORDER BY full_name ASC"
        rows = self._fetch(text(sql), params, "investors")
        return [
            InvestorRow(id=str(row.id), full_name=row.full_name, email=row.email)
            for row in rows
        ]

    def list_vehicles(
        self,
        must_have_assigned_investor: bool = True,
        investor_id: str | None = None,
    ) -> list[VehicleRow]:
        sql = SELECT_VEHICLES_SQL
        params: dict[str, Any] = {}
        if must_have_assigned_investor:
            sql += " AND assigned_investor_id IS NOT NULL"
        if investor_id:
            sql += " AND assigned_investor_id = :investor_id"
            params["investor_id"] = investor_id
        rows = self._fetch(text(sql), params, "vehicles")
        return [
            VehicleRow(
                id=str(row.id),
                make=row.make,
                model=row.model,
                license_plate=row.license_plate,
                assigned_investor_id=(
                    str(row.assigned_investor_id)
                    if row.assigned_investor_id is not None
                    else None
                ),
                image_url=row.image_url,
            )
            for row in rows
        ]

    def list_financial_records(
        self,
        vehicle_ids: Sequence[str],
        date_from: datetime | None = None,
    ) -> list[FinancialRecordRow]:
        if not vehicle_ids:
            return []
        sql = SELECT_RECORDS_SQL
        params: dict[str, Any] = {"vehicle_ids": list(vehicle_ids)}
        if date_from is not None:
            sql += " AND date >= :date_from"
            params["date_from"] = date_from
        sql += " ORDER BY date ASC"
        query = text(sql).bindparams(bindparam("vehicle_ids", expanding=True))
        rows = self._fetch(query, params, "financial records")
        return [
            FinancialRecordRow(
                vehicle_id=str(row.vehicle_id),
                type=row.type,
                amount=coerce_decimal(row.amount),
                date=row.date,
            )
            for row in rows
        ]

    def list_transactions(
        self,
        vehicle_ids: Sequence[str],
    ) -> list[TransactionRow]:
        if not vehicle_ids:
            return []
        rows = self._fetch(
            SELECT_TRANSACTIONS_SQL,
            {"vehicle_ids": list(vehicle_ids)},
            "transactions",
        )
        return [
            TransactionRow(
                id=str(row.id),
                vehicle_id=str(row.vehicle_id),
                type=row.type,
                category=row.category,
                amount=coerce_decimal(row.amount),
                date=row.date,
                description=row.description,
                vehicle_make=row.vehicle_make,
                vehicle_model=row.vehicle_model,
                vehicle_license_plate=row.vehicle_license_plate,
            )
            for row in rows
        ]

    def _fetch(self, query, params: dict[str, Any], label: str) -> list:
        """Run a read query, wrapping driver errors.

        Raises:
            RecordStoreError: If the engine or the query fails.
        """
        try:
            engine = self._db_port.get_fleet_engine()
            with engine.connect() as conn:
                return conn.execute(query, params).all()
        except SQLAlchemyError as exc:
            raise RecordStoreError(f"Failed to fetch {label}: {exc}") from exc


__all__ = ["SqlAlchemyRecordStore"]
