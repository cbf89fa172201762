"""Cart screen."""

from __future__ import annotations

from swaglabs.data.models import Product
from swaglabs.pages.actions import PageActions
from swaglabs.pages.header import HeaderComponent
from swaglabs.pages.selectors import CART


class CartPage:
    path = "/cart.html"

    def __init__(self, actions: PageActions) -> None:
        self._actions = actions
        self._sel = CART
        self.header = HeaderComponent(actions.for_page("header"))

    def open(self) -> CartPage:
        self._actions.open(self.path)
        self.wait_until_displayed()
        return self

    def is_displayed(self) -> bool:
        return self._actions.current_path() == self.path and self._actions.is_visible(
            self._sel("checkout")
        )

    def wait_until_displayed(self) -> None:
        self._actions.wait_for_url(self.path)
        self._actions.wait_ready(self._sel("checkout"))

    def item_names(self) -> list[str]:
        return self._actions.texts_of(self._sel("item_name"))

    def item_count(self) -> int:
        return self._actions.count(self._sel("item"))

    def contains(self, product: Product) -> bool:
        return product.name in self.item_names()

    def remove_product(self, product: Product) -> None:
        remove = self._sel("remove", slug=product.slug)
        with self._actions.step(f"Remove {product.name} from cart page"):
            self._actions.click_when_ready(remove)
            # the row disappears once removed
            self._actions.wait_until_gone(remove)

    def continue_shopping(self) -> None:
        with self._actions.step("Continue shopping"):
            self._actions.click_when_ready(self._sel("continue_shopping"))
            self._actions.wait_for_url("/inventory.html")

    def proceed_to_checkout(self) -> None:
        with self._actions.step("Proceed to checkout"):
            self._actions.click_when_ready(self._sel("checkout"))
            self._actions.wait_for_url("/checkout-step-one.html")
