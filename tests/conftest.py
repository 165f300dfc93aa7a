"""
Unit test configuration for the order & catalog contracts.

Usage:
    pytest tests -v              # All tests
    pytest tests -m unit -v      # By marker
"""
import os
import sys

import pytest

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tests.factories import make_order, make_order_item, make_product  # noqa: E402


def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


@pytest.fixture
def order_item():
    return make_order_item()


@pytest.fixture
def order():
    return make_order()


@pytest.fixture
def product():
    return make_product()
