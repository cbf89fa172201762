"""
Page Objects

Page Object Model for the Swag Labs shop. Encapsulates page interactions
and locators.

Usage:
    from swaglabs.pages import build_page_bundle

    pages = build_page_bundle(page, settings)
    pages.login.open()
    pages.login.login("standard_user", "secret_sauce")
    pages.products.wait_until_displayed()

Pattern:
    - One class per screen, composing a PageActions helper
    - Locators come from the selector registry
    - Domain operations are reported as steps
"""

from swaglabs.pages.actions import Clickable, Fillable, Navigable, PageActions, Waitable
from swaglabs.pages.bundle import PAGE_OBJECTS, PageBundle, build_page_bundle
from swaglabs.pages.cart_page import CartPage
from swaglabs.pages.checkout_complete_page import CheckoutCompletePage
from swaglabs.pages.checkout_information_page import CheckoutInformationPage
from swaglabs.pages.checkout_overview_page import CheckoutOverviewPage
from swaglabs.pages.header import HeaderComponent
from swaglabs.pages.login_page import LoginPage
from swaglabs.pages.product_detail_page import ProductDetailPage
from swaglabs.pages.products_page import ProductsPage

__all__ = [
    "PAGE_OBJECTS",
    "CartPage",
    "CheckoutCompletePage",
    "CheckoutInformationPage",
    "CheckoutOverviewPage",
    "Clickable",
    "Fillable",
    "HeaderComponent",
    "LoginPage",
    "Navigable",
    "PageActions",
    "PageBundle",
    "ProductDetailPage",
    "ProductsPage",
    "Waitable",
    "build_page_bundle",
]
