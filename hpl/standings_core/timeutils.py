"""
Date and time parsing for match schedules.

Stored dates arrive as date objects, datetimes or strings in a handful of
formats; times are 24-hour "HH:MM" wall-clock strings. Parsers return None
for anything they cannot read so callers can treat the value as unknown.
"""

import datetime
import logging
import re
from typing import Any, Optional, Tuple

logger = logging.getLogger(__name__)

_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{1,2})(?::\d{1,2})?\s*$")
_DAY_FIRST_RE = re.compile(r"^\s*(\d{1,2})[-/](\d{1,2})[-/](\d{4})\s*$")


def parse_date(value: Any) -> Optional[datetime.date]:
    """Parse a stored match date. Returns None when the value is missing or unreadable."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str):
        logger.warning("Unsupported date value %r", value)
        return None

    text = value.strip()
    try:
        return datetime.date.fromisoformat(text[:10])
    except ValueError:
        pass

    match = _DAY_FIRST_RE.match(text)
    if match:
        first, second, year = (int(g) for g in match.groups())
        # DD/MM/YYYY first, then MM/DD/YYYY
        for day, month in ((first, second), (second, first)):
            try:
                return datetime.date(year, month, day)
            except ValueError:
                continue

    logger.warning("Unparseable date %r", value)
    return None


def parse_time(value: Any) -> Tuple[int, int]:
    """Return (hours, minutes) of a 24-hour time string.

    Raises:
        ValueError: if the value is not a valid "H:MM" or "HH:MM" time
    """
    if not isinstance(value, str):
        raise ValueError(f"Time must be a string, got {value!r}")
    match = _TIME_RE.match(value)
    if not match:
        raise ValueError(f"Invalid time format: {value!r}")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise ValueError(f"Time out of range: {value!r}")
    return hours, minutes


def normalize_time(value: Any) -> Optional[str]:
    """Zero-pad a time to "HH:MM", or None if it is missing or invalid."""
    if value is None or value == "":
        return None
    try:
        hours, minutes = parse_time(value)
    except ValueError:
        logger.warning("Unparseable time %r", value)
        return None
    return f"{hours:02d}:{minutes:02d}"


def combine(day: datetime.date, time_str: str) -> datetime.datetime:
    """Combine a date with an "HH:MM" time into a naive local datetime."""
    hours, minutes = parse_time(time_str)
    return datetime.datetime(day.year, day.month, day.day, hours, minutes)
