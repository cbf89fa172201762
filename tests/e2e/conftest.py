"""Playwright E2E configuration for the Swag Labs shop.

This module provides:
- Browser launch arguments with per-engine overrides (slow_mo, headless)
- Browser context arguments (base URL, 1720x850 viewport)
- Shortcuts to frequently used test data records

Usage:
    @pytest.mark.e2e
    def test_checkout(logged_in_pages, backpack):
        logged_in_pages.products.add_product_to_cart(backpack)
"""

from typing import Any

import pytest

from swaglabs.config.settings import Settings
from swaglabs.data.models import CheckoutInformation, Product, TestData, UserCredential

# =============================================================================
# pytest-playwright Configuration
# =============================================================================


@pytest.fixture(scope="session")
def browser_type_launch_args(
    browser_type_launch_args: dict[str, Any],
    browser_name: str,
    swaglabs_settings: Settings,
) -> dict[str, Any]:
    """Configure browser launch arguments for the engine under test."""
    return {
        **browser_type_launch_args,
        **swaglabs_settings.launch_args_for(browser_name, browser_type_launch_args),
    }


@pytest.fixture(scope="session")
def browser_context_args(
    browser_context_args: dict[str, Any], swaglabs_settings: Settings
) -> dict[str, Any]:
    """Configure browser context: base URL and viewport."""
    return {
        **browser_context_args,
        **swaglabs_settings.context_args(),
    }


# =============================================================================
# Test Data Shortcuts
# =============================================================================


@pytest.fixture
def standard_user(test_data: TestData) -> UserCredential:
    return test_data.user("standard")


@pytest.fixture
def backpack(test_data: TestData) -> Product:
    return test_data.product("backpack")


@pytest.fixture
def customer(test_data: TestData) -> CheckoutInformation:
    return test_data.customer
