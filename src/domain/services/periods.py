"""Calendar helpers for monthly reporting windows."""

import calendar
from datetime import date, datetime


def subtract_months(moment: datetime, months: int) -> datetime:
    """Move a timestamp back by whole calendar months.

    The day is clamped to the length of the target month, so
    March 31 minus one month is the last day of February.

    Args:
        moment: Reference timestamp.
        months: Number of calendar months to go back.

    Returns:
        datetime: Shifted timestamp with the same time of day and tzinfo.
    """
    total = moment.year * 12 + (moment.month - 1) - months
    year, month_index = divmod(total, 12)
    month = month_index + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def month_key(moment: date) -> str:
    """Return the ``YYYY-MM`` key for a date or datetime."""
    return f"{moment.year:04d}-{moment.month:02d}"


def is_same_month(moment: date, reference: date) -> bool:
    """Return True when both values fall in the same calendar month."""
    return (moment.year, moment.month) == (reference.year, reference.month)


__all__ = ["subtract_months", "month_key", "is_same_month"]
