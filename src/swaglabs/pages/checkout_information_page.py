"""First checkout step: customer information form."""

from __future__ import annotations

from swaglabs.data.models import CheckoutInformation
from swaglabs.pages.actions import PageActions
from swaglabs.pages.selectors import CHECKOUT_INFORMATION


class CheckoutInformationPage:
    path = "/checkout-step-one.html"

    def __init__(self, actions: PageActions) -> None:
        self._actions = actions
        self._sel = CHECKOUT_INFORMATION

    def is_displayed(self) -> bool:
        return self._actions.current_path() == self.path and self._actions.is_visible(
            self._sel("continue")
        )

    def wait_until_displayed(self) -> None:
        self._actions.wait_for_url(self.path)
        self._actions.wait_ready(self._sel("continue"))

    def fill_information(self, first_name: str, last_name: str, postal_code: str) -> None:
        self._actions.fill_when_ready(self._sel("first_name"), first_name)
        self._actions.fill_when_ready(self._sel("last_name"), last_name)
        self._actions.fill_when_ready(self._sel("postal_code"), postal_code)

    def field_value(self, field: str) -> str:
        """Current value of ``first_name``, ``last_name`` or ``postal_code``."""
        target = self._actions.wait_ready(self._sel(field), enabled=False)
        return target.input_value()

    def submit_information(self, first_name: str, last_name: str, postal_code: str) -> None:
        """Fill the form and press Continue.

        Does not wait for the overview; validation errors keep the browser
        on this step.
        """
        with self._actions.step(f"Submit checkout information for {first_name} {last_name}"):
            self.fill_information(first_name, last_name, postal_code)
            self._actions.click_when_ready(self._sel("continue"))

    def submit(self, info: CheckoutInformation) -> None:
        self.submit_information(info.first_name, info.last_name, info.postal_code)

    def has_error(self) -> bool:
        return self._actions.is_visible(self._sel("error"))

    def error_message(self) -> str:
        return self._actions.text_of(self._sel("error"))

    def cancel(self) -> None:
        with self._actions.step("Cancel checkout information"):
            self._actions.click_when_ready(self._sel("cancel"))
            self._actions.wait_for_url("/cart.html")
