"""Login screen."""

from __future__ import annotations

from swaglabs.data.models import UserCredential
from swaglabs.pages.actions import PageActions
from swaglabs.pages.selectors import LOGIN


class LoginPage:
    """The shop's landing page with the credential form."""

    path = "/"

    def __init__(self, actions: PageActions) -> None:
        self._actions = actions
        self._sel = LOGIN

    def open(self) -> LoginPage:
        with self._actions.step("Open login page"):
            self._actions.open(self.path)
            self._actions.wait_ready(self._sel("login_button"))
        return self

    def is_displayed(self) -> bool:
        return self._actions.is_visible(self._sel("login_button"))

    def login(self, username: str, password: str) -> None:
        """Submit the form. Does not wait for the outcome."""
        with self._actions.step(f"Log in as {username or '<empty>'}"):
            self._actions.fill_when_ready(self._sel("username"), username)
            self._actions.fill_when_ready(self._sel("password"), password)
            self._actions.click_when_ready(self._sel("login_button"))

    def login_as(self, user: UserCredential) -> None:
        self.login(user.username, user.password)

    def has_error(self) -> bool:
        return self._actions.is_visible(self._sel("error"))

    def error_message(self) -> str:
        return self._actions.text_of(self._sel("error"))

    def dismiss_error(self) -> None:
        with self._actions.step("Dismiss login error"):
            self._actions.click_when_ready(self._sel("error_close"))
