"""Header bar and burger menu shared by every signed-in screen."""

from __future__ import annotations

from swaglabs.pages.actions import PageActions
from swaglabs.pages.selectors import HEADER


class HeaderComponent:
    def __init__(self, actions: PageActions) -> None:
        self._actions = actions
        self._sel = HEADER

    def cart_count(self) -> int:
        """Number on the cart badge; 0 when the badge is hidden."""
        badge = self._sel("cart_badge")
        if not self._actions.is_visible(badge):
            return 0
        return int(self._actions.text_of(badge))

    def open_cart(self) -> None:
        with self._actions.step("Open cart"):
            self._actions.click_when_ready(self._sel("cart_link"))
            self._actions.wait_for_url("/cart.html")

    def open_menu(self) -> None:
        self._actions.click_when_ready(self._sel("menu_button"))
        self._actions.wait_ready(self._sel("logout"))

    def close_menu(self) -> None:
        self._actions.click_when_ready(self._sel("menu_close"))

    def all_items(self) -> None:
        with self._actions.step("Go to all items"):
            self.open_menu()
            self._actions.click_when_ready(self._sel("all_items"))
            self._actions.wait_for_url("/inventory.html")

    def logout(self) -> None:
        with self._actions.step("Log out"):
            self.open_menu()
            self._actions.click_when_ready(self._sel("logout"))
            self._actions.wait_for_url("/")

    def reset_app_state(self) -> None:
        """Clear the cart and the added-item buttons from the menu."""
        with self._actions.step("Reset app state"):
            self.open_menu()
            self._actions.click_when_ready(self._sel("reset_app_state"))
            self.close_menu()
