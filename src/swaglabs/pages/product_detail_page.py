"""Single product screen."""

from __future__ import annotations

from decimal import Decimal

from swaglabs.data.models import Product
from swaglabs.data.pricing import parse_price
from swaglabs.pages.actions import PageActions
from swaglabs.pages.header import HeaderComponent
from swaglabs.pages.selectors import PRODUCT_DETAIL


class ProductDetailPage:
    path = "/inventory-item.html"

    def __init__(self, actions: PageActions) -> None:
        self._actions = actions
        self._sel = PRODUCT_DETAIL
        self.header = HeaderComponent(actions.for_page("header"))

    def open(self, product: Product) -> ProductDetailPage:
        self._actions.open(f"{self.path}?id={product.item_id}")
        self.wait_until_displayed()
        return self

    def is_displayed(self) -> bool:
        return self._actions.current_path() == self.path and self._actions.is_visible(
            self._sel("name")
        )

    def wait_until_displayed(self) -> None:
        self._actions.wait_for_url(self.path)
        self._actions.wait_ready(self._sel("name"), enabled=False)

    def name(self) -> str:
        return self._actions.text_of(self._sel("name"))

    def price(self) -> Decimal:
        return parse_price(self._actions.text_of(self._sel("price")))

    def description(self) -> str:
        return self._actions.text_of(self._sel("description"))

    def add_to_cart(self) -> None:
        with self._actions.step("Add product to cart from detail page"):
            self._actions.click_when_ready(self._sel("add_to_cart"))
            self._actions.wait_ready(self._sel("remove"))

    def remove_from_cart(self) -> None:
        with self._actions.step("Remove product from cart on detail page"):
            self._actions.click_when_ready(self._sel("remove"))
            self._actions.wait_ready(self._sel("add_to_cart"))

    def back_to_products(self) -> None:
        with self._actions.step("Back to products"):
            self._actions.click_when_ready(self._sel("back"))
            self._actions.wait_for_url("/inventory.html")
