"""
Shared utility functions for cycle-related services.

These utilities are used across multiple service modules to handle common
operations like date coercion and whole-day arithmetic.
"""
from typing import Optional
from datetime import date, datetime

from src.models.profile import DateLike
from src.services.exceptions import InvalidProfileError

def to_date(value: Optional[DateLike], field_name: str) -> date:
    """
    Reduce a date, datetime or ISO string to a calendar date.

    Time of day is dropped, so two timestamps on the same calendar day are
    always zero days apart.

    Args:
        value: Date-like value to convert
        field_name: Name used in the error message

    Returns:
        Calendar date

    Raises:
        InvalidProfileError: If the value is missing or cannot be parsed

    Example:
        >>> to_date("2024-01-01T23:59:00", "last_period_start")
        datetime.date(2024, 1, 1)
    """
    if value is None:
        raise InvalidProfileError(f"{field_name} is required")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) > 10:
                return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
            return date.fromisoformat(text)
        except ValueError:
            raise InvalidProfileError(f"{field_name} is not a valid date: {value!r}")
    raise InvalidProfileError(f"{field_name} is not a valid date: {value!r}")

def days_between(start: date, end: date) -> int:
    """
    Count whole calendar days from start to end (negative if end is earlier).

    Example:
        >>> days_between(date(2024, 1, 1), date(2024, 1, 20))
        19
    """
    return (end - start).days
