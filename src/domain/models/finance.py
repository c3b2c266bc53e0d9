"""Domain models for investor financial aggregates."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Generic, TypeVar


T = TypeVar("T")


@dataclass(frozen=True)
class InvestorVehicleFinancials:
    """Totals for a single vehicle owned by an investor.

    Attributes:
        vehicle_id: Identifier of the vehicle.
        total_income: Sum of income records.
        total_expenses: Sum of expense records.
        net_balance: Income minus expenses.
        transaction_count: Number of records of any type.
    """

    vehicle_id: str
    make: str
    model: str
    license_plate: str | None
    image_url: str | None
    total_income: Decimal
    total_expenses: Decimal
    net_balance: Decimal
    transaction_count: int

    @property
    def display_name(self) -> str:
        """Return the vehicle label used in reports."""
        return f"{self.make} {self.model}".strip()


@dataclass(frozen=True)
class InvestorFinancialSummary:
    """Financial position of one investor across all owned vehicles."""

    investor_id: str
    investor_name: str | None
    investor_email: str
    vehicle_count: int
    total_income: Decimal
    total_expenses: Decimal
    net_balance: Decimal
    vehicles: list[InvestorVehicleFinancials]
    last_transaction_date: datetime | None


@dataclass(frozen=True)
class MonthlyBucket:
    """Income and expenses aggregated for one calendar month."""

    month: str
    income: Decimal
    expenses: Decimal

    @property
    def net(self) -> Decimal:
        """Return income minus expenses."""
        return self.income - self.expenses


@dataclass(frozen=True)
class CategoryTotal:
    """Amount aggregated for a movement type and category."""

    type: str
    category: str
    amount: Decimal


@dataclass(frozen=True)
class ReportResult(Generic[T]):
    """Value produced by a reporting use case plus non-fatal warnings.

    A result with warnings is degraded: part of the data could not be
    fetched and was replaced by an empty default.
    """

    value: T
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def degraded(self) -> bool:
        """Return True when at least one warning was recorded."""
        return bool(self.warnings)


@dataclass(frozen=True)
class ExportResult:
    """Outcome of a report export.

    Attributes:
        success: Whether an artifact was produced.
        content: Raw bytes of the artifact, None on failure.
        filename: Suggested download filename, None on failure.
        message: User-facing notice describing the outcome.
    """

    success: bool
    content: bytes | None = None
    filename: str | None = None
    message: str = ""


__all__ = [
    "InvestorVehicleFinancials",
    "InvestorFinancialSummary",
    "MonthlyBucket",
    "CategoryTotal",
    "ReportResult",
    "ExportResult",
]
