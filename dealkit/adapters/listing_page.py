"""
Listing page adapter (HTML markup -> extractor input).

The calculation core never reads a document on its own; callers that hold a
listing page wrap its markup in :class:`ListingPage` and pass the result on.
Phone numbers get a DOM-aware lookup first, since broker widgets often render
the number in a dedicated element.
"""

import re
from typing import List, Optional

from bs4 import BeautifulSoup

from dealkit.calculations.investment import calculate_noi_by_property_type
from dealkit.extraction.text import (
    NOT_FOUND,
    extract_bedrooms,
    extract_email,
    extract_phone_number,
    extract_price,
)
from dealkit.rules import RealEstateRules

# In order of preference
PHONE_SELECTORS = [
    "span.phone-number",
    'a.number[href^="tel:"]',
    "#broker-phone-number",
    ".broker-phone .number",
    'a[href^="tel:"]',
]

_PHONE_SHAPE_RES = [
    re.compile(r"\(\d{3}\)\s*\d{3}[-.\s]?\d{4}"),
    re.compile(r"\d{3}[-.\s]?\d{3}[-.\s]?\d{4}"),
]


def _looks_like_phone(text: str) -> bool:
    # Skip button labels like "Call"
    if not text or text == "Call" or len(text) <= 5:
        return False
    return any(p.search(text) for p in _PHONE_SHAPE_RES)


class ListingPage:
    """A parsed listing page."""

    def __init__(self, html: str):
        self.soup = BeautifulSoup(html or "", "html.parser")
        body = self.soup.body or self.soup
        self.text = body.get_text(" ", strip=True)

    def phone_number(self) -> str:
        for selector in PHONE_SELECTORS:
            element = self.soup.select_one(selector)
            if element is None:
                continue
            phone_text = element.get_text(strip=True)
            if _looks_like_phone(phone_text):
                return phone_text

        if not self.text:
            return NOT_FOUND
        return extract_phone_number(self.text)

    def bedrooms(self) -> int:
        return extract_bedrooms(self.text)

    def prices(self) -> List[float]:
        return extract_price(self.text)

    def emails(self) -> List[str]:
        return extract_email(self.text)

    def noi(
        self,
        asking_price: float,
        cap_rate: Optional[float] = None,
        property_type: Optional[str] = None,
        bedroom_count: Optional[int] = None,
        str_gross_income: Optional[float] = None,
        rules: Optional[RealEstateRules] = None,
    ) -> float:
        """NOI for the property type, reading bedroom counts from the page text."""
        return calculate_noi_by_property_type(
            asking_price,
            cap_rate,
            property_type=property_type,
            bedroom_count=bedroom_count,
            str_gross_income=str_gross_income,
            listing_text=self.text,
            rules=rules,
        )
