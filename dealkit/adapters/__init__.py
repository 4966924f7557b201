"""
Adapters between outside documents and the calculation core.
"""

from dealkit.adapters.listing_page import ListingPage

__all__ = ["ListingPage"]
