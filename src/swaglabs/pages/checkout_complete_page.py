"""Order confirmation screen."""

from __future__ import annotations

from swaglabs.pages.actions import PageActions
from swaglabs.pages.selectors import CHECKOUT_COMPLETE


class CheckoutCompletePage:
    path = "/checkout-complete.html"

    def __init__(self, actions: PageActions) -> None:
        self._actions = actions
        self._sel = CHECKOUT_COMPLETE

    def is_displayed(self) -> bool:
        return self._actions.current_path() == self.path and self._actions.is_visible(
            self._sel("header")
        )

    def wait_until_displayed(self) -> None:
        self._actions.wait_for_url(self.path)
        self._actions.wait_ready(self._sel("header"), enabled=False)

    def header_text(self) -> str:
        return self._actions.text_of(self._sel("header"))

    def body_text(self) -> str:
        return self._actions.text_of(self._sel("text"))

    def back_home(self) -> None:
        with self._actions.step("Back home"):
            self._actions.click_when_ready(self._sel("back_home"))
            self._actions.wait_for_url("/inventory.html")
