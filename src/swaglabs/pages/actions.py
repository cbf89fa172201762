"""Shared page primitives.

Every page object composes one ``PageActions`` helper instead of extending
a base class. The helper implements the small capability protocols below
and routes every "when ready" primitive through the explicit wait contract
in ``swaglabs.core.waits``.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol, runtime_checkable
from urllib.parse import urlparse

import structlog
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from swaglabs.config.settings import Settings
from swaglabs.core.exceptions import ConfigurationError, NavigationError, NotReadyError
from swaglabs.core.steps import StepRecorder
from swaglabs.core.waits import Deadline, WaitPolicy, wait_until

log = structlog.get_logger(__name__)

# Playwright treats a timeout of 0 as "wait forever"
_MIN_TIMEOUT_MS = 1.0

_STRICT_MODE_VIOLATION = "strict mode violation"


@runtime_checkable
class Clickable(Protocol):
    def click_when_ready(self, selector: str) -> None: ...

    def force_click(self, selector: str) -> None: ...


@runtime_checkable
class Fillable(Protocol):
    def fill_when_ready(self, selector: str, text: str) -> None: ...

    def select_option(self, selector: str, value: str) -> None: ...


@runtime_checkable
class Waitable(Protocol):
    def wait_for_load(self) -> None: ...

    def wait_for_url(self, path: str) -> None: ...

    def is_visible(self, selector: str) -> bool: ...

    def is_enabled(self, selector: str) -> bool: ...


@runtime_checkable
class Navigable(Protocol):
    def open(self, path: str) -> None: ...


class PageActions:
    """Click, fill, wait and navigation primitives for one browser page.

    All waits share one test-wide ``Deadline``; a wait never gets more time
    than what is left of it.
    """

    def __init__(
        self,
        page: Page,
        settings: Settings,
        *,
        deadline: Deadline | None = None,
        recorder: StepRecorder | None = None,
        name: str = "page",
        headless: bool | None = None,
    ) -> None:
        self.page = page
        self.settings = settings
        # launch mode of the browser actually driving ``page``
        self.headless = settings.headless if headless is None else headless
        self.deadline = deadline or Deadline(settings.default_timeout_seconds)
        self.policy = WaitPolicy(
            timeout=settings.default_timeout_seconds,
            poll_interval=settings.poll_interval_seconds,
        )
        self.recorder = recorder or StepRecorder()
        self.name = name
        self.log = log.bind(page=name)

    def for_page(self, name: str) -> PageActions:
        """Same page, deadline and recorder, logged under another page name."""
        return PageActions(
            self.page,
            self.settings,
            deadline=self.deadline,
            recorder=self.recorder,
            name=name,
            headless=self.headless,
        )

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _timeout_ms(self) -> float:
        return max(_MIN_TIMEOUT_MS, self.deadline.remaining() * 1000)

    def locator(self, selector: str) -> Locator:
        return self.page.locator(selector)

    def wait_ready(self, selector: str, *, enabled: bool = True) -> Locator:
        """Wait until ``selector`` is visible (and enabled) and return it.

        Raises:
            NotReadyError: If the element is not actionable in time.
            ConfigurationError: If ``selector`` matches several elements.
        """
        target = self.locator(selector)

        def actionable() -> bool:
            try:
                return target.is_visible() and (not enabled or target.is_enabled())
            except PlaywrightError as e:
                # an ambiguous selector never becomes ready
                if _STRICT_MODE_VIOLATION in e.message:
                    raise ConfigurationError(
                        f"Selector {selector} matches several elements: "
                        f"{e.message.splitlines()[0]}"
                    ) from e
                raise

        wait_until(
            actionable,
            description=selector,
            policy=self.policy,
            deadline=self.deadline,
            ignored_exceptions=(PlaywrightError,),
        )
        return target

    def wait_until_gone(self, selector: str) -> None:
        """Wait until no element matching ``selector`` is visible."""
        wait_until(
            lambda: not self.is_visible(selector),
            description=f"{selector} to disappear",
            policy=self.policy,
            deadline=self.deadline,
            ignored_exceptions=(PlaywrightError,),
        )

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def open(self, path: str) -> None:
        """Navigate to ``path`` (relative to the base URL) and wait for load.

        Raises:
            NavigationError: If the browser cannot reach the URL.
        """
        url = self.settings.resolve_url(path)
        self.log.info("page_open", url=url)
        try:
            self.page.goto(url, timeout=self._timeout_ms())
        except PlaywrightError as e:
            raise NavigationError(url, str(e).splitlines()[0]) from e
        self.wait_for_load()

    def wait_for_load(self) -> None:
        """Wait for the page's load event.

        Raises:
            NotReadyError: If the page does not finish loading in time.
        """
        timeout_ms = self._timeout_ms()
        try:
            self.page.wait_for_load_state("load", timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            raise NotReadyError("page load", timeout_ms / 1000) from e

    def current_path(self) -> str:
        return urlparse(self.page.url).path or "/"

    def wait_for_url(self, path: str) -> None:
        """Wait until the browser is on ``path``.

        Raises:
            NavigationError: If the URL never matches.
        """
        try:
            wait_until(
                lambda: self.current_path() == path,
                description=f"url {path}",
                policy=self.policy,
                deadline=self.deadline,
            )
        except NotReadyError as e:
            raise NavigationError(path, f"still on {self.current_path()}") from e
        self.wait_for_load()

    # -------------------------------------------------------------------------
    # Interaction
    # -------------------------------------------------------------------------

    def click_when_ready(self, selector: str) -> None:
        target = self.wait_ready(selector)
        self.log.debug("click", selector=selector)
        timeout_ms = self._timeout_ms()
        try:
            target.click(timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            raise NotReadyError(selector, timeout_ms / 1000, "click timed out") from e

    def fill_when_ready(self, selector: str, text: str) -> None:
        target = self.wait_ready(selector)
        self.log.debug("fill", selector=selector, length=len(text))
        timeout_ms = self._timeout_ms()
        try:
            target.fill(text, timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            raise NotReadyError(selector, timeout_ms / 1000, "fill timed out") from e

    def select_option(self, selector: str, value: str) -> None:
        target = self.wait_ready(selector)
        self.log.debug("select_option", selector=selector, value=value)
        timeout_ms = self._timeout_ms()
        try:
            target.select_option(value, timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            raise NotReadyError(selector, timeout_ms / 1000, "select timed out") from e

    def force_click(self, selector: str) -> None:
        """Click through the page's JavaScript bridge.

        Skips visibility and overlap checks, for elements a regular click
        cannot reach. The element must still be attached.
        """
        self.log.debug("force_click", selector=selector)
        timeout_ms = self._timeout_ms()
        try:
            self.locator(selector).evaluate("el => el.click()", timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            raise NotReadyError(selector, timeout_ms / 1000, "not attached") from e

    # -------------------------------------------------------------------------
    # Probes
    # -------------------------------------------------------------------------

    def is_visible(self, selector: str) -> bool:
        """Instant visibility probe; no waiting."""
        target = self.locator(selector)
        return target.count() > 0 and target.first.is_visible()

    def is_enabled(self, selector: str) -> bool:
        """Instant enabled probe; False when the element is absent."""
        target = self.locator(selector)
        return target.count() > 0 and target.first.is_enabled()

    def count(self, selector: str) -> int:
        return self.locator(selector).count()

    def text_of(self, selector: str) -> str:
        """Wait for ``selector`` to be visible and return its text."""
        target = self.wait_ready(selector, enabled=False)
        return target.inner_text(timeout=self._timeout_ms()).strip()

    def texts_of(self, selector: str) -> list[str]:
        """Texts of every match, without waiting; empty when none match."""
        return [text.strip() for text in self.locator(selector).all_inner_texts()]

    # -------------------------------------------------------------------------
    # Debug and reporting
    # -------------------------------------------------------------------------

    def pause_for_inspection(self) -> None:
        """Open the Playwright inspector in local headed debug runs only."""
        if self.settings.ci or self.headless or not self.settings.pause_on_debug:
            self.log.debug("pause_skipped", ci=self.settings.ci, headless=self.headless)
            return
        self.log.info("pause_for_inspection")
        self.page.pause()

    def step(self, description: str) -> AbstractContextManager[None]:
        return self.recorder.step(description)
