"""Second checkout step: order overview with totals."""

from __future__ import annotations

from decimal import Decimal

from swaglabs.data.pricing import format_price, parse_price
from swaglabs.pages.actions import PageActions
from swaglabs.pages.selectors import CHECKOUT_OVERVIEW


class CheckoutOverviewPage:
    path = "/checkout-step-two.html"

    def __init__(self, actions: PageActions) -> None:
        self._actions = actions
        self._sel = CHECKOUT_OVERVIEW

    def is_displayed(self) -> bool:
        return self._actions.current_path() == self.path and self._actions.is_visible(
            self._sel("finish")
        )

    def wait_until_displayed(self) -> None:
        self._actions.wait_for_url(self.path)
        self._actions.wait_ready(self._sel("finish"))

    def item_names(self) -> list[str]:
        return self._actions.texts_of(self._sel("item_name"))

    def item_total(self) -> Decimal:
        return parse_price(self._actions.text_of(self._sel("subtotal")))

    def tax(self) -> Decimal:
        return parse_price(self._actions.text_of(self._sel("tax")))

    def total(self) -> Decimal:
        return parse_price(self._actions.text_of(self._sel("total")))

    def verify_order_total(self, expected: Decimal) -> None:
        """
        Raises:
            AssertionError: If the displayed total differs from ``expected``.
        """
        with self._actions.step(f"Verify order total {format_price(expected)}"):
            actual = self.total()
            if actual != expected:
                raise AssertionError(
                    f"Order total {format_price(actual)} != expected {format_price(expected)}"
                )

    def finish(self) -> None:
        with self._actions.step("Finish order"):
            self._actions.click_when_ready(self._sel("finish"))
            self._actions.wait_for_url("/checkout-complete.html")

    def cancel(self) -> None:
        with self._actions.step("Cancel order"):
            self._actions.click_when_ready(self._sel("cancel"))
            self._actions.wait_for_url("/inventory.html")
