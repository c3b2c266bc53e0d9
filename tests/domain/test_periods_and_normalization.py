"""Tests for calendar and normalization helpers."""

from datetime import datetime, timezone

import pytest

from src.domain.services.normalization import (
    normalize_filename_part,
    normalize_transaction_type,
)
from src.domain.services.periods import month_key, subtract_months
from src.domain.services.validation import validate_window_months


def test_subtract_months_uses_calendar_months() -> None:
    """Six months before mid-October is mid-April, not 180 days."""
    moment = datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc)

    assert subtract_months(moment, 6) == datetime(
        2026, 4, 19, 8, 30, tzinfo=timezone.utc
    )


def test_subtract_months_crosses_year_and_clamps_day() -> None:
    """Day is clamped to the target month length."""
    assert subtract_months(datetime(2024, 3, 31), 1) == datetime(2024, 2, 29)
    assert subtract_months(datetime(2024, 1, 31), 2) == datetime(2023, 11, 30)


def test_month_key_is_zero_padded() -> None:
    assert month_key(datetime(2024, 3, 9)) == "2024-03"


def test_validate_window_months_rejects_zero() -> None:
    with pytest.raises(ValueError):
        validate_window_months(0)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Juan Pérez", "Juan_Pérez"),
        ("  Ana -- María  ", "Ana_María"),
        ("O'Neil & Co.", "O_Neil_Co"),
        ("", "Inversor"),
        (None, "Inversor"),
        ("***", "Inversor"),
    ],
)
def test_normalize_filename_part(raw, expected) -> None:
    """Runs of non-alphanumeric characters collapse to one underscore."""
    assert normalize_filename_part(raw, "Inversor") == expected


def test_normalize_transaction_type() -> None:
    assert normalize_transaction_type(" Income ") == "income"
    assert normalize_transaction_type("") is None
