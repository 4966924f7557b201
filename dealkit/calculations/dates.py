"""
Date Calculations

Days on market and elapsed-time helpers for listing dates. Both helpers
return sentinel values for bad input instead of raising.
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, Optional, Union

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

NOT_FOUND = "Not found"
INVALID_DATE = "Invalid date"
CALCULATION_ERROR = "Calculation error"

DateLike = Union[str, date, datetime]


def _parse_listing_date(date_string: str) -> date:
    """Parse M/D/YYYY (or M/D/YY) explicitly; hand anything else to dateutil."""
    if "/" in date_string:
        parts = date_string.split("/")
        if len(parts) != 3:
            raise ValueError(f"Expected M/D/YYYY, got {date_string!r}")
        month, day, year = (int(part) for part in parts)
        # Two-digit years: 00-49 -> 2000s, 50-99 -> 1900s
        if len(parts[2].strip()) <= 2:
            year += 2000 if year < 50 else 1900
        return date(year, month, day)

    return date_parser.parse(date_string).date()


def calculate_dom(date_string: Optional[str], today: Optional[date] = None) -> str:
    """
    Calculate days on market from a listing date.

    Args:
        date_string: Listing date ("01/15/2024", "2024-01-15", "March 15, 2024")
        today: Reference date (defaults to today)

    Returns:
        "<days> (MM/DD/YYYY)", or "Not found", "Invalid date" or
        "Calculation error" for a listing date in the future
    """
    if not date_string or date_string == NOT_FOUND:
        return NOT_FOUND

    if today is None:
        today = date.today()

    try:
        listing_date = _parse_listing_date(date_string)
    except (ValueError, OverflowError) as e:
        logger.debug("Unparseable listing date %r: %s", date_string, e)
        return INVALID_DATE

    days = (today - listing_date).days

    if days < 0:
        return CALCULATION_ERROR

    return f"{days} ({listing_date.strftime('%m/%d/%Y')})"


def _to_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return date_parser.parse(value)


def calculate_time_difference(
    start_date: DateLike, end_date: Optional[DateLike] = None
) -> Dict[str, Any]:
    """
    Calculate the absolute time between two dates.

    Args:
        start_date: Start date (string, date or datetime)
        end_date: End date (defaults to now)

    Returns:
        Dict with total_ms, days, hours, minutes and formatted ("14d 0h 0m").
        On invalid input the numbers are zero, formatted is "Invalid" and an
        error message is included.
    """
    try:
        start = _to_datetime(start_date)
        end = _to_datetime(end_date) if end_date is not None else datetime.now()
        diff = abs(end - start)
    except (ValueError, TypeError, OverflowError) as e:
        logger.debug("Invalid time difference input: %s", e)
        return {
            "error": str(e) or "Invalid date format",
            "total_ms": 0,
            "days": 0,
            "hours": 0,
            "minutes": 0,
            "formatted": "Invalid",
        }

    days = diff.days
    hours = diff.seconds // 3600
    minutes = (diff.seconds % 3600) // 60

    return {
        "total_ms": int(diff.total_seconds() * 1000),
        "days": days,
        "hours": hours,
        "minutes": minutes,
        "formatted": f"{days}d {hours}h {minutes}m",
    }
