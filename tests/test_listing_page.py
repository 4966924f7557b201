"""
Tests for the listing page adapter.
"""

import pytest

from dealkit.adapters import ListingPage
from dealkit.extraction.text import NOT_FOUND

LISTING_HTML = """
<html>
  <head><title>12-Bed Assisted Living Facility</title></head>
  <body>
    <h1>Assisted Living Facility</h1>
    <ul class="facts">
      <li>Beds: 12</li>
      <li>Asking $1,250,000</li>
    </ul>
    <div class="broker-phone">
      <a class="number" href="tel:5551234567">Call</a>
    </div>
    <p>Questions? Email listings@broker.com or call 555-987-6543.</p>
  </body>
</html>
"""


class TestListingPage:
    """Test reading listing details from markup."""

    def test_text(self):
        page = ListingPage(LISTING_HTML)

        assert "Assisted Living Facility" in page.text
        # Title sits outside the body
        assert "12-Bed" not in page.text

    def test_phone_from_selector(self):
        html = '<body><span class="phone-number">(555) 123-4567</span> 555-000-1111</body>'
        assert ListingPage(html).phone_number() == "(555) 123-4567"

    def test_phone_skips_button_label(self):
        """A tel link labelled "Call" falls back to the page text."""
        assert ListingPage(LISTING_HTML).phone_number() == "555-987-6543"

    def test_phone_not_found(self):
        assert ListingPage("<body><p>No contact info</p></body>").phone_number() == NOT_FOUND
        assert ListingPage("").phone_number() == NOT_FOUND

    def test_bedrooms(self):
        assert ListingPage(LISTING_HTML).bedrooms() == 12

    def test_prices(self):
        assert ListingPage(LISTING_HTML).prices() == [1250000.0]

    def test_emails(self):
        assert ListingPage(LISTING_HTML).emails() == ["listings@broker.com"]

    def test_assisted_noi_uses_page_bedrooms(self, rules):
        page = ListingPage(LISTING_HTML)
        noi = page.noi(1_250_000, 0.06, "assisted", rules=rules)
        assert noi == 12 * 1500 * 12

    def test_explicit_bedrooms_win(self, rules):
        page = ListingPage(LISTING_HTML)
        noi = page.noi(1_250_000, 0.06, "assisted", bedroom_count=6, rules=rules)
        assert noi == 6 * 1500 * 12

    def test_multifamily_noi(self, rules):
        noi = ListingPage(LISTING_HTML).noi(1_250_000, 0.06, rules=rules)
        assert noi == pytest.approx(75000)

    def test_noi_defaults_from_rules(self, rules):
        """No cap rate or property type falls back to 5% multifamily."""
        noi = ListingPage(LISTING_HTML).noi(1_250_000, rules=rules)
        assert noi == pytest.approx(62500)
