"""DateTime parsing utilities for recurrence rules - rrule_lite.

Wraps python-dateutil so every timestamp the package reads (UNTIL values,
exception dates, CLI arguments) fails the same way, with InvalidDateError.
"""

import logging
from datetime import date, datetime
from typing import Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import parser as dateutil_parser

from .lite_exceptions import InvalidDateError

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]


def parse_rule_datetime(value: str) -> datetime:
    """Parse a rule or exception timestamp.

    Handles:
    - RRULE format: 20250623T083000Z, 20250623
    - ISO format: 2025-06-23T08:30:00Z, 2025-06-23

    Args:
        value: Timestamp string

    Returns:
        Parsed datetime (timezone-aware only if the string carried an offset)

    Raises:
        InvalidDateError: If the string is not a recognisable date/time
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateError(f"Unable to parse datetime: {value!r}")

    try:
        return dateutil_parser.parse(value.strip())
    except (ValueError, OverflowError) as e:
        logger.warning("Failed to parse datetime %r: %s", value, e)
        raise InvalidDateError(f"Unable to parse datetime: {value!r}") from e


def to_civil_date(value: DateLike) -> date:
    """Narrow a date or datetime to its calendar date, ignoring any timezone."""
    if isinstance(value, datetime):
        return value.date()
    return value


def resolve_zone(zone: Union[str, ZoneInfo]) -> ZoneInfo:
    """Return a ZoneInfo for an IANA name, passing ZoneInfo instances through.

    Raises:
        InvalidDateError: If the name is not a known timezone
    """
    if isinstance(zone, ZoneInfo):
        return zone
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidDateError(f"Unknown timezone: {zone!r}") from e


def localize(dt: datetime, zone: ZoneInfo) -> datetime:
    """Express ``dt`` in ``zone``.

    Naive datetimes are read as wall-clock time in ``zone``; aware ones are
    converted.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=zone)
    return dt.astimezone(zone)
