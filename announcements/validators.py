"""
Date-range checks for announcements.
"""
from datetime import datetime
from typing import Any, Mapping, Tuple


def is_date_before(start_date: datetime, end_date: datetime) -> bool:
    """True if start_date is strictly before end_date. Equal instants are not."""
    return start_date < end_date


def resulting_interval(existing, changes: Mapping[str, Any]) -> Tuple[datetime, datetime]:
    """
    The (start_date, end_date) an announcement would have after ``changes``.

    Dates present in ``changes`` win; the others come from the stored record.
    """
    return (
        changes.get("start_date", existing.start_date),
        changes.get("end_date", existing.end_date),
    )


def is_slug_list(value) -> bool:
    """True for a list whose items are all strings. A bare string is not a list of slugs."""
    return isinstance(value, list) and all(isinstance(item, str) for item in value)
