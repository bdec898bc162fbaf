"""Date conversion helpers.

Birthdays are stored as ISO-8601 text (YYYY-MM-DD), so equality in SQL is a
comparison of calendar days.

Functions:
- to_sql_date(value) -> str | None: Python date/datetime to column value
- from_sql_date(value) -> date | None: column value back to a date
- build_date(day, month, year) -> date: calendar date from its parts
"""

from __future__ import annotations

from datetime import date, datetime


def to_sql_date(value: date | datetime | None) -> str | None:
    """Convert a date to the value bound to a DATE column.

    Args:
        value: Date to store. A datetime is truncated to its calendar day.

    Returns:
        ISO date string, or None for SQL NULL
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def from_sql_date(value: str | bytes | date | None) -> date | None:
    """Convert a DATE column value back to a date.

    Args:
        value: Raw column value as returned by the driver

    Returns:
        The calendar date, or None when the column is NULL

    Raises:
        ValueError: If the stored value is not YYYY-MM-DD text
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, bytes):
        value = value.decode("utf-8")
    if not isinstance(value, str):
        raise ValueError(f"unsupported DATE value: {value!r}")
    parsed = date.fromisoformat(value)
    # Only the canonical form compares equal in find_by_birthday
    if parsed.isoformat() != value:
        raise ValueError(f"non-canonical DATE value: {value!r}")
    return parsed


def build_date(day: int, month: int, year: int) -> date:
    """Build a calendar date from day, month and year.

    Raises:
        ValueError: If the combination is not a valid date
    """
    return date(year, month, day)
