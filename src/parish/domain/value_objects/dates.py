"""Lenient date parsing for stored records."""

from datetime import date, datetime


def parse_date(value: object) -> date | None:
    """Date from a date, datetime or ISO string. None when missing or malformed."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        return None
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None
