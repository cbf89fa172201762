"""Test data store.

Usage:
    from swaglabs.data import load_test_data

    data = load_test_data()
    standard = data.user("standard")
"""

from swaglabs.data.models import (
    CheckoutInformation,
    LoginOutcome,
    Messages,
    Product,
    SortKey,
    SortOption,
    TestData,
    UserCredential,
)
from swaglabs.data.pricing import OrderTotals, format_price, order_totals, parse_price
from swaglabs.data.store import load_test_data

__all__ = [
    "CheckoutInformation",
    "LoginOutcome",
    "Messages",
    "OrderTotals",
    "Product",
    "SortKey",
    "SortOption",
    "TestData",
    "UserCredential",
    "format_price",
    "load_test_data",
    "order_totals",
    "parse_price",
]
