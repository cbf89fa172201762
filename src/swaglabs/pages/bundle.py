"""One instance of every page object, sharing one browser page."""

from __future__ import annotations

from dataclasses import dataclass

from playwright.sync_api import Page

from swaglabs.config.settings import Settings
from swaglabs.core.steps import StepRecorder
from swaglabs.core.waits import Deadline
from swaglabs.pages.actions import PageActions
from swaglabs.pages.cart_page import CartPage
from swaglabs.pages.checkout_complete_page import CheckoutCompletePage
from swaglabs.pages.checkout_information_page import CheckoutInformationPage
from swaglabs.pages.checkout_overview_page import CheckoutOverviewPage
from swaglabs.pages.header import HeaderComponent
from swaglabs.pages.login_page import LoginPage
from swaglabs.pages.product_detail_page import ProductDetailPage
from swaglabs.pages.products_page import ProductsPage

# Bundle attribute -> page object class
PAGE_OBJECTS: dict[str, type] = {
    "login": LoginPage,
    "header": HeaderComponent,
    "products": ProductsPage,
    "product_detail": ProductDetailPage,
    "cart": CartPage,
    "checkout_information": CheckoutInformationPage,
    "checkout_overview": CheckoutOverviewPage,
    "checkout_complete": CheckoutCompletePage,
}


@dataclass(frozen=True)
class PageBundle:
    """Page objects of one isolated browser session."""

    page: Page
    login: LoginPage
    header: HeaderComponent
    products: ProductsPage
    product_detail: ProductDetailPage
    cart: CartPage
    checkout_information: CheckoutInformationPage
    checkout_overview: CheckoutOverviewPage
    checkout_complete: CheckoutCompletePage


def build_page_bundle(
    page: Page,
    settings: Settings,
    *,
    deadline: Deadline | None = None,
    recorder: StepRecorder | None = None,
    headless: bool | None = None,
) -> PageBundle:
    """Construct every registered page object around ``page``.

    All page objects share the same deadline and step recorder. ``headless``
    is the launch mode of the browser behind ``page``; settings decide when None.
    """
    page.set_default_timeout(settings.default_timeout_ms)
    base = PageActions(
        page, settings, deadline=deadline, recorder=recorder, headless=headless
    )
    objects = {name: cls(base.for_page(name)) for name, cls in PAGE_OBJECTS.items()}
    return PageBundle(page=page, **objects)
