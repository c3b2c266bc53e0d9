"""Domain services package."""

from .finance import (
    compute_category_totals,
    compute_investor_summaries,
    compute_monthly_buckets,
    compute_vehicle_financials,
    select_month,
)
from .normalization import normalize_filename_part, normalize_transaction_type
from .periods import is_same_month, month_key, subtract_months
from .validation import (
    validate_amount_sign,
    validate_record_type,
    validate_window_months,
)

__all__ = [
    "compute_category_totals",
    "compute_investor_summaries",
    "compute_monthly_buckets",
    "compute_vehicle_financials",
    "select_month",
    "normalize_filename_part",
    "normalize_transaction_type",
    "is_same_month",
    "month_key",
    "subtract_months",
    "validate_amount_sign",
    "validate_record_type",
    "validate_window_months",
]
