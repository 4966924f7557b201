"""
Validation utilities for extracted data.
"""

import re

from dateutil import parser as date_parser

_NON_DIGIT = re.compile(r"\D")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_phone_number(phone_number: str) -> bool:
    """
    Validate US phone number format.

    Accepts any punctuation as long as there are 10 digits, or 11 with a
    leading country code of 1.
    """
    if not phone_number or not isinstance(phone_number, str):
        return False

    digits = _NON_DIGIT.sub("", phone_number)

    if len(digits) == 10:
        return True
    return len(digits) == 11 and digits[0] == "1"


def validate_email(email: str) -> bool:
    """Validate email address format."""
    if not email or not isinstance(email, str):
        return False
    return bool(_EMAIL_RE.match(email))


def validate_date(date_string: str) -> bool:
    """
    Validate a date string.

    ISO dates (YYYY-MM-DD) must name a real calendar day, so '2024-02-30'
    is rejected instead of rolling over into March.
    """
    if not date_string or not isinstance(date_string, str):
        return False

    try:
        parsed = date_parser.parse(date_string)
    except (ValueError, OverflowError):
        return False

    if _ISO_DATE_RE.match(date_string):
        return parsed.date().isoformat() == date_string

    return True
