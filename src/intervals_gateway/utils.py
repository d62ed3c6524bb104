"""
Shared utility functions for the Intervals.icu gateway.

Date parsing and normalization, JSON rendering for tool results.
"""

import json
import re
from datetime import date, datetime, timedelta
from typing import Any

from intervals_gateway.errors import ClientInputError


_BARE_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(value: str, field: str = "date") -> date:
    """Parse a yyyy-MM-dd string.

    Raises:
        ClientInputError: If the value is not a valid calendar date
    """
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ClientInputError(f"Invalid {field} {value!r} (use yyyy-MM-dd)")


def parse_date_range(oldest: str, newest: str) -> tuple:
    """Parse and order-check an inclusive date range."""
    start = parse_date(oldest, "oldest")
    end = parse_date(newest, "newest")
    if start > end:
        raise ClientInputError(f"oldest ({oldest}) is after newest ({newest})")
    return start, end


def shift_date(day: date, days: int) -> str:
    """Return day + days as yyyy-MM-dd."""
    return (day + timedelta(days=days)).isoformat()


def normalize_local_datetime(value: Any) -> str:
    """Give a local start date the time part Intervals.icu requires.

    "2026-02-02" becomes "2026-02-02T00:00:00"; anything already holding a
    time part ("T") is returned unchanged.

    Raises:
        ClientInputError: If the value is missing, blank, or neither form
    """
    if not isinstance(value, str) or not value.strip():
        raise ClientInputError(
            "Missing or invalid start_date_local (use yyyy-MM-dd or yyyy-MM-ddT00:00:00)"
        )
    s = value.strip()
    if _BARE_DATE.match(s):
        return f"{s}T00:00:00"
    if "T" in s:
        return value
    raise ClientInputError(
        f"Invalid start_date_local {value!r} (use yyyy-MM-dd or yyyy-MM-ddT00:00:00)"
    )


def to_json(data: Any) -> str:
    """Render a tool result as indented JSON text."""
    return json.dumps(data, indent=2)
