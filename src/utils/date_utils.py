"""Calendar helpers for month-based arithmetic."""

from datetime import date, datetime

from dateutil.relativedelta import relativedelta


def add_months(value: date, months: int) -> date:
    """Shift a date by whole calendar months.

    The day is clamped to the last day of the target month, so
    January 31 plus one month is the last day of February.

    Args:
        value: Date to shift.
        months: Number of months, may be negative.

    Returns:
        date: Shifted date.
    """
    return value + relativedelta(months=months)


def month_start(value: date) -> date:
    """Return the first day of the month containing value."""
    return value.replace(day=1)


def parse_iso_date(value) -> date | None:
    """Parse an ISO date or timestamp string into a date.

    Args:
        value: ``YYYY-MM-DD`` string, ISO timestamp, date, or None.

    Returns:
        date | None: Parsed date, or None when missing or invalid.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raw = str(value).strip()
    if not raw:
        return None
    try:
        return date.fromisoformat(raw[:10])
    except ValueError:
        return None


__all__ = ["add_months", "month_start", "parse_iso_date"]
