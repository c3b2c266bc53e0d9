"""CSV export of financial transactions."""

from collections.abc import Sequence
from datetime import datetime

from src.domain.constants import TRANSACTION_INCOME
from src.domain.models import ExportResult, TransactionRow
from src.domain.services.normalization import normalize_transaction_type
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import format_plain_amount

CSV_HEADERS = ("Fecha", "Tipo", "Categoría", "Vehículo", "Monto", "Descripción")
TYPE_LABELS = {TRANSACTION_INCOME: "Ingreso"}
DEFAULT_TYPE_LABEL = "Egreso"
EMPTY_INPUT_MESSAGE = "No hay datos disponibles para el reporte de este mes."
SUCCESS_MESSAGE = "Reporte generado y descargado exitosamente."


def _quote(value: str) -> str:
    """Wrap a free-text field in double quotes, doubling embedded quotes."""
    return '"' + value.replace('"', '""') + '"'


def _format_date(moment: datetime) -> str:
    """Format a date the en-US way, M/D/YYYY."""
    return f"{moment.month}/{moment.day}/{moment.year}"


def _format_row(transaction: TransactionRow) -> str:
    record_type = normalize_transaction_type(transaction.type)
    return ",".join(
        [
            _format_date(transaction.date),
            TYPE_LABELS.get(record_type, DEFAULT_TYPE_LABEL),
            transaction.category,
            _quote(transaction.vehicle_name or "N/A"),
            format_plain_amount(transaction.amount),
            _quote(transaction.description or ""),
        ]
    )


def build_csv_filename(generated_at: datetime) -> str:
    """Return the monthly report filename for the generation date."""
    return f"Reporte_Mensual_{generated_at.month}_{generated_at.year}.csv"


def render_transactions_csv(
    transactions: Sequence[TransactionRow],
    generated_at: datetime | None = None,
    logger=None,
) -> ExportResult:
    """Render transactions as a CSV document.

    Args:
        transactions: Rows to export, in output order.
        generated_at: Generation timestamp used in the filename.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        ExportResult: The encoded document, or a failed result without
        content when there is nothing to export.
    """
    resolved_logger = logger or get_app_logger()
    if not transactions:
        resolved_logger.info("CSV export skipped: no transactions")
        return ExportResult(success=False, message=EMPTY_INPUT_MESSAGE)

    moment = generated_at or datetime.now()
    lines = [",".join(CSV_HEADERS)]
    lines.extend(_format_row(transaction) for transaction in transactions)
    content = "\n".join(lines).encode("utf-8")
    resolved_logger.info(f"CSV export built with {len(transactions)} rows")
    return ExportResult(
        success=True,
        content=content,
        filename=build_csv_filename(moment),
        message=SUCCESS_MESSAGE,
    )


__all__ = [
    "CSV_HEADERS",
    "EMPTY_INPUT_MESSAGE",
    "build_csv_filename",
    "render_transactions_csv",
]
