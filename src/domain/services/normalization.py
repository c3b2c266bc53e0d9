"""Domain normalization helpers."""

import re

_NON_ALPHANUMERIC_RUN = re.compile(r"[\W_]+")


def normalize_transaction_type(raw_type: str | None) -> str | None:
    """Normalize movement type values.

    Args:
        raw_type: Raw type value from a repository row.

    Returns:
        str | None: Lower-cased type, None when empty.
    """
    if not raw_type:
        return None
    cleaned = raw_type.strip()
    return cleaned.lower() if cleaned else None


def normalize_filename_part(value: str | None, fallback: str) -> str:
    """Collapse runs of non-alphanumeric characters into underscores.

    Args:
        value: Raw display value, e.g. an investor name.
        fallback: Value returned when nothing usable remains.

    Returns:
        str: Filename-safe fragment.
    """
    if not value:
        return fallback
    cleaned = _NON_ALPHANUMERIC_RUN.sub("_", value).strip("_")
    return cleaned or fallback


__all__ = ["normalize_transaction_type", "normalize_filename_part"]
