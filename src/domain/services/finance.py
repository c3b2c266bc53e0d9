"""Domain services for investor financial aggregates."""

from collections.abc import Iterable, Iterator, Sequence
from datetime import date
from decimal import Decimal
from logging import Logger

from src.domain.constants import TRANSACTION_EXPENSE, TRANSACTION_INCOME
from src.domain.models import (
    CategoryTotal,
    FinancialRecordRow,
    InvestorFinancialSummary,
    InvestorRow,
    InvestorVehicleFinancials,
    MonthlyBucket,
    TransactionRow,
    VehicleRow,
)
from src.domain.services.normalization import normalize_transaction_type
from src.domain.services.periods import is_same_month, month_key
from src.domain.services.validation import (
    validate_amount_sign,
    validate_record_type,
)
from src.utils.decimal_utils import coerce_decimal


def compute_vehicle_financials(
    vehicle: VehicleRow,
    records: Sequence[FinancialRecordRow],
    *,
    logger: Logger,
) -> InvestorVehicleFinancials:
    """Compute income, expense and net totals for one vehicle.

    Args:
        vehicle: Vehicle row from the repository.
        records: Financial records belonging to the vehicle.
        logger: Logger used for warnings.

    Returns:
        InvestorVehicleFinancials: Totals for the vehicle.
    """
    income, expenses = _sum_by_type(records, logger)
    return InvestorVehicleFinancials(
        vehicle_id=vehicle.id,
        make=vehicle.make,
        model=vehicle.model,
        license_plate=vehicle.license_plate,
        image_url=vehicle.image_url,
        total_income=income,
        total_expenses=expenses,
        net_balance=income - expenses,
        transaction_count=len(records),
    )


def compute_investor_summaries(
    investors: Iterable[InvestorRow],
    vehicles: Iterable[VehicleRow],
    records: Iterable[FinancialRecordRow],
    *,
    logger: Logger,
) -> list[InvestorFinancialSummary]:
    """Compute one summary per investor, highest net balance first.

    Vehicles without an assigned investor are ignored. Investors without
    vehicles are kept with zero totals.

    Args:
        investors: Investors to report on.
        vehicles: Vehicles with their owning investor.
        records: Financial records for those vehicles.
        logger: Logger used for warnings.

    Returns:
        list[InvestorFinancialSummary]: Summaries sorted by net balance
        descending.
    """
    vehicles_by_investor: dict[str, list[VehicleRow]] = {}
    for vehicle in vehicles:
        if vehicle.assigned_investor_id is None:
            continue
        vehicles_by_investor.setdefault(
            vehicle.assigned_investor_id, []
        ).append(vehicle)

    records_by_vehicle: dict[str, list[FinancialRecordRow]] = {}
    for record in records:
        records_by_vehicle.setdefault(record.vehicle_id, []).append(record)

    summaries: list[InvestorFinancialSummary] = []
    for investor in investors:
        owned = vehicles_by_investor.get(investor.id, [])
        vehicle_financials = [
            compute_vehicle_financials(
                vehicle,
                records_by_vehicle.get(vehicle.id, []),
                logger=logger,
            )
            for vehicle in owned
        ]
        total_income = sum(
            (item.total_income for item in vehicle_financials),
            Decimal("0"),
        )
        total_expenses = sum(
            (item.total_expenses for item in vehicle_financials),
            Decimal("0"),
        )
        owned_dates = [
            record.date
            for vehicle in owned
            for record in records_by_vehicle.get(vehicle.id, [])
        ]
        summaries.append(
            InvestorFinancialSummary(
                investor_id=investor.id,
                investor_name=investor.full_name,
                investor_email=investor.email,
                vehicle_count=len(owned),
                total_income=total_income,
                total_expenses=total_expenses,
                net_balance=total_income - total_expenses,
                vehicles=vehicle_financials,
                last_transaction_date=max(owned_dates) if owned_dates else None,
            )
        )

    return sorted(
        summaries,
        key=lambda summary: summary.net_balance,
        reverse=True,
    )


def compute_monthly_buckets(
    records: Iterable[FinancialRecordRow],
    *,
    logger: Logger,
) -> list[MonthlyBucket]:
    """Group records by calendar month.

    Buckets keep the order in which their month first appears. Months
    without records are not emitted.

    Args:
        records: Financial records, usually ascending by date.
        logger: Logger used for warnings.

    Returns:
        list[MonthlyBucket]: One bucket per month with activity.
    """
    income: dict[str, Decimal] = {}
    expenses: dict[str, Decimal] = {}
    order: list[str] = []
    for record, record_type, amount in _valid_movements(records, logger):
        key = month_key(record.date)
        if key not in income:
            order.append(key)
            income[key] = Decimal("0")
            expenses[key] = Decimal("0")
        if record_type == TRANSACTION_INCOME:
            income[key] += amount
        else:
            expenses[key] += amount

    return [
        MonthlyBucket(month=key, income=income[key], expenses=expenses[key])
        for key in order
    ]


def compute_category_totals(
    transactions: Iterable[TransactionRow],
) -> list[CategoryTotal]:
    """Aggregate transaction amounts per type and category.

    Returns:
        list[CategoryTotal]: Income categories first, each type sorted by
        amount descending.
    """
    totals: dict[tuple[str, str], Decimal] = {}
    for transaction in transactions:
        record_type = normalize_transaction_type(transaction.type)
        if record_type not in (TRANSACTION_INCOME, TRANSACTION_EXPENSE):
            continue
        key = (record_type, transaction.category)
        totals[key] = totals.get(key, Decimal("0")) + coerce_decimal(
            transaction.amount
        )
    type_rank = {TRANSACTION_INCOME: 0, TRANSACTION_EXPENSE: 1}
    return [
        CategoryTotal(type=record_type, category=category, amount=amount)
        for (record_type, category), amount in sorted(
            totals.items(),
            key=lambda item: (type_rank[item[0][0]], -item[1], item[0][1]),
        )
    ]


def select_month(
    transactions: Iterable[TransactionRow],
    reference: date,
) -> list[TransactionRow]:
    """Return the transactions falling in the reference calendar month."""
    return [
        transaction
        for transaction in transactions
        if is_same_month(transaction.date, reference)
    ]


def _valid_movements(
    records: Iterable[FinancialRecordRow],
    logger: Logger,
) -> Iterator[tuple[FinancialRecordRow, str, Decimal]]:
    """Yield each record with its normalized type and Decimal amount.

    Records with an unknown type are skipped; negative amounts are kept.
    Both cases are logged as warnings.
    """
    for record in records:
        record_type = normalize_transaction_type(record.type)
        if not validate_record_type(record_type, record.vehicle_id, logger):
            continue
        amount = coerce_decimal(record.amount)
        validate_amount_sign(amount, record.vehicle_id, logger)
        yield record, record_type, amount


def _sum_by_type(
    records: Iterable[FinancialRecordRow],
    logger: Logger,
) -> tuple[Decimal, Decimal]:
    income = Decimal("0")
    expenses = Decimal("0")
    for _, record_type, amount in _valid_movements(records, logger):
        if record_type == TRANSACTION_INCOME:
            income += amount
        else:
            expenses += amount
    return income, expenses


__all__ = [
    "compute_vehicle_financials",
    "compute_investor_summaries",
    "compute_monthly_buckets",
    "compute_category_totals",
    "select_month",
]
