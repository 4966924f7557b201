"""
Listing text extraction and validation helpers.
"""

from dealkit.extraction.text import (
    extract_bedrooms,
    extract_email,
    extract_phone_number,
    extract_price,
)
from dealkit.extraction.validators import (
    validate_date,
    validate_email,
    validate_phone_number,
)

__all__ = [
    "extract_bedrooms",
    "extract_email",
    "extract_phone_number",
    "extract_price",
    "validate_date",
    "validate_email",
    "validate_phone_number",
]
