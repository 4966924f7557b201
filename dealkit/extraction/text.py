"""
Text extraction helpers for listing pages.

All functions take the text to search explicitly. Reading a live page is the
job of :mod:`dealkit.adapters.listing_page`.
"""

import re
from typing import List

NOT_FOUND = "Not found"
DEFAULT_BEDROOMS = 10
MAX_BEDROOMS = 100

# Most specific first
_PHONE_PATTERNS = [
    re.compile(r"\(\d{3}\)\s*\d{3}[-.\s]?\d{4}"),  # (555) 123-4567
    re.compile(r"\+?1?\s*\(\d{3}\)\s*\d{3}[-.\s]?\d{4}"),  # +1 (555) 123-4567
    re.compile(r"\+?1?\s*\d{3}[-.\s]?\d{3}[-.\s]?\d{4}"),  # +1 555-123-4567
    re.compile(r"\d{3}[-.\s]?\d{3}[-.\s]?\d{4}"),  # 555-123-4567
]

_BEDROOM_PATTERNS = [
    re.compile(r"(\d+)\s*bed(?:room)?s?\b", re.IGNORECASE),
    re.compile(r"beds?\s*:?\s*(\d+)", re.IGNORECASE),
    re.compile(r"(\d+)\s*br\b", re.IGNORECASE),
]

_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b")

_PRICE_PATTERNS = [
    re.compile(r"\$\s*(\d{1,3}(?:,\d{3})*(?:\.\d{2})?)"),  # $1,000,000.00
    re.compile(r"\$\s*(\d+(?:\.\d+)?)\s*([KMB])", re.IGNORECASE),  # $1.5M
    re.compile(r"(\d{1,3}(?:,\d{3})*(?:\.\d{2})?)\s*(?:dollars?|usd)", re.IGNORECASE),
    re.compile(r"(\d{7,})\s*(?:dollars?|usd)", re.IGNORECASE),  # 2500000 dollars
]

_MULTIPLIERS = {"K": 1_000, "M": 1_000_000, "B": 1_000_000_000}


def extract_phone_number(text: str) -> str:
    """
    Extract the first phone number from text.

    Returns:
        The phone number as written, or "Not found"
    """
    if not text or not isinstance(text, str):
        return NOT_FOUND

    for pattern in _PHONE_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(0).strip()

    return NOT_FOUND


def extract_bedrooms(text: str) -> int:
    """
    Extract a bedroom count from text.

    Patterns are tried in order; the first match in the 0-100 range wins
    (studios report 0). Falls back to 10 when nothing plausible is found.
    """
    if not text:
        return DEFAULT_BEDROOMS

    for pattern in _BEDROOM_PATTERNS:
        match = pattern.search(text)
        if match:
            bedrooms = int(match.group(1))
            if 0 <= bedrooms <= MAX_BEDROOMS:
                return bedrooms

    return DEFAULT_BEDROOMS


def extract_email(text: str) -> List[str]:
    """Extract every email address in text, in order."""
    if not text:
        return []
    return _EMAIL_RE.findall(text)


def extract_price(text: str) -> List[float]:
    """
    Extract dollar amounts from text.

    Each pattern is scanned in turn, so one amount can be reported by more
    than one pattern ("$1.5M" yields both 1.0 and 1500000.0). Order and
    duplicates are preserved.
    """
    if not text:
        return []

    prices = []

    for pattern in _PRICE_PATTERNS:
        for match in pattern.finditer(text):
            value = float(match.group(1).replace(",", ""))

            if match.lastindex and match.lastindex >= 2:
                value *= _MULTIPLIERS[match.group(2).upper()]

            prices.append(value)

    return prices
