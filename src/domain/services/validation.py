"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from src.domain.constants import TRANSACTION_TYPES


def validate_record_type(
    record_type: str | None,
    vehicle_id: str,
    logger: Logger,
) -> bool:
    """Return whether a movement type is known, warning otherwise.

    Args:
        record_type: Normalized movement type.
        vehicle_id: Vehicle the movement belongs to, for the log message.
        logger: Logger used for warnings.

    Returns:
        bool: True for ``income`` or ``expense``.
    """
    if record_type in TRANSACTION_TYPES:
        return True
    logger.warning(
        f"Ignoring record with unknown type={record_type} "
        f"for vehicle_id={vehicle_id}"
    )
    return False


def validate_amount_sign(
    amount: Decimal,
    vehicle_id: str,
    logger: Logger,
) -> None:
    """Warn when an amount is negative; amounts are unsigned magnitudes.

    Args:
        amount: Raw amount of the movement.
        vehicle_id: Vehicle the movement belongs to, for the log message.
        logger: Logger used for warnings.
    """
    if amount < 0:
        logger.warning(
            f"Negative amount for vehicle_id={vehicle_id}: {amount}"
        )


def validate_window_months(window_months: int) -> int:
    """Return the window if it covers at least one month.

    Raises:
        ValueError: If the window is smaller than one month.
    """
    if window_months < 1:
        raise ValueError(
            f"window_months must be at least 1, got {window_months}"
        )
    return window_months


__all__ = [
    "validate_record_type",
    "validate_amount_sign",
    "validate_window_months",
]
