"""Domain models for rows read from the fleet record store."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class InvestorRow:
    """Row representing a profile holding the investor role."""

    id: str
    full_name: str | None
    email: str


@dataclass(frozen=True)
class VehicleRow:
    """Row representing a fleet vehicle and its owning investor."""

    id: str
    make: str
    model: str
    license_plate: str | None
    assigned_investor_id: str | None
    image_url: str | None = None


@dataclass(frozen=True)
class FinancialRecordRow:
    """Row representing a single income or expense movement.

    Attributes:
        vehicle_id: Vehicle the movement belongs to.
        type: Either ``income`` or ``expense``.
        amount: Unsigned magnitude; the sign is implied by ``type``.
        date: Timestamp of the movement.
    """

    vehicle_id: str
    type: str
    amount: Decimal
    date: datetime


@dataclass(frozen=True)
class TransactionRow:
    """Financial record joined with the vehicle it belongs to."""

    id: str
    vehicle_id: str
    type: str
    category: str
    amount: Decimal
    date: datetime
    description: str | None = None
    vehicle_make: str | None = None
    vehicle_model: str | None = None
    vehicle_license_plate: str | None = None

    @property
    def vehicle_name(self) -> str | None:
        """Return ``make model`` or None when no vehicle data was joined."""
        name = f"{self.vehicle_make or ''} {self.vehicle_model or ''}".strip()
        return name or None


__all__ = [
    "InvestorRow",
    "VehicleRow",
    "FinancialRecordRow",
    "TransactionRow",
]
