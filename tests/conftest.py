"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os
from datetime import date

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dealkit.config import get_settings
from dealkit.calculations.investment import InvestmentParameters
from dealkit.rules import DEFAULT_RULES, get_rules


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture
def rules():
    """Stock business rules, independent of the environment."""
    return DEFAULT_RULES


@pytest.fixture
def today():
    """Fixed reference date for days-on-market calculations."""
    return date(2024, 3, 15)


@pytest.fixture
def deal_params():
    """Factory for a $1M / $60K NOI deal with default financing."""

    def _factory(**overrides):
        values = {"asking_price": 1_000_000, "noi": 60_000}
        values.update(overrides)
        return InvestmentParameters(**values)

    return _factory


@pytest.fixture
def fresh_settings():
    """Clear cached settings and rules before and after a test."""
    get_settings.cache_clear()
    get_rules.cache_clear()
    yield
    get_settings.cache_clear()
    get_rules.cache_clear()
