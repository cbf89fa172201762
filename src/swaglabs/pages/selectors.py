"""Selector registry.

Per-page mapping from logical element name to locator string. Locators may
carry ``{placeholders}`` (a product slug, for instance) filled at lookup.
All locators use the shop's ``data-test`` attribute where it has one.
"""

from __future__ import annotations

import string
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from swaglabs.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class SelectorEntry:
    """One logical element of a page."""

    logical_name: str
    locator: str

    @property
    def placeholders(self) -> frozenset[str]:
        return frozenset(
            field for _, field, _, _ in string.Formatter().parse(self.locator) if field
        )

    def resolve(self, **params: str) -> str:
        """Fill placeholders of the locator.

        Raises:
            ConfigurationError: If a placeholder has no value.
        """
        missing = self.placeholders - params.keys()
        if missing:
            raise ConfigurationError(
                f"Selector {self.logical_name!r} needs {', '.join(sorted(missing))}"
            )
        return self.locator.format(**params) if self.placeholders else self.locator


class PageSelectors(Mapping[str, SelectorEntry]):
    """Read-only selectors of one page."""

    def __init__(self, page: str, locators: Mapping[str, str]) -> None:
        self.page = page
        self._entries = MappingProxyType(
            {name: SelectorEntry(name, locator) for name, locator in locators.items()}
        )

    def __getitem__(self, name: str) -> SelectorEntry:
        try:
            return self._entries[name]
        except KeyError:
            raise ConfigurationError(f"No selector {name!r} on page {self.page!r}") from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __call__(self, name: str, **params: str) -> str:
        """Resolve a logical name to a locator string."""
        return self[name].resolve(**params)


def _data_test(value: str) -> str:
    return f'[data-test="{value}"]'


LOGIN = PageSelectors(
    "login",
    {
        "username": _data_test("username"),
        "password": _data_test("password"),
        "login_button": _data_test("login-button"),
        "error": _data_test("error"),
        "error_close": _data_test("error-button"),
        "logo": ".login_logo",
    },
)

HEADER = PageSelectors(
    "header",
    {
        "cart_link": _data_test("shopping-cart-link"),
        "cart_badge": _data_test("shopping-cart-badge"),
        "menu_button": "#react-burger-menu-btn",
        "menu_close": "#react-burger-cross-btn",
        "all_items": _data_test("inventory-sidebar-link"),
        "logout": _data_test("logout-sidebar-link"),
        "reset_app_state": _data_test("reset-sidebar-link"),
        "title": _data_test("title"),
    },
)

PRODUCTS = PageSelectors(
    "products",
    {
        "title": _data_test("title"),
        "inventory_list": _data_test("inventory-list"),
        "item": _data_test("inventory-item"),
        "item_name": _data_test("inventory-item-name"),
        "item_price": _data_test("inventory-item-price"),
        "item_link": _data_test("item-{item_id}-title-link"),
        "sort": _data_test("product-sort-container"),
        "active_sort": _data_test("active-option"),
        "add_to_cart": _data_test("add-to-cart-{slug}"),
        "remove": _data_test("remove-{slug}"),
    },
)

PRODUCT_DETAIL = PageSelectors(
    "product_detail",
    {
        "container": _data_test("inventory-container"),
        "name": _data_test("inventory-item-name"),
        "price": _data_test("inventory-item-price"),
        "description": _data_test("inventory-item-desc"),
        "add_to_cart": _data_test("add-to-cart"),
        "remove": _data_test("remove"),
        "back": _data_test("back-to-products"),
    },
)

CART = PageSelectors(
    "cart",
    {
        "title": _data_test("title"),
        "cart_list": _data_test("cart-list"),
        "item": _data_test("inventory-item"),
        "item_name": _data_test("inventory-item-name"),
        "remove": _data_test("remove-{slug}"),
        "continue_shopping": _data_test("continue-shopping"),
        "checkout": _data_test("checkout"),
    },
)

CHECKOUT_INFORMATION = PageSelectors(
    "checkout_information",
    {
        "title": _data_test("title"),
        "first_name": _data_test("firstName"),
        "last_name": _data_test("lastName"),
        "postal_code": _data_test("postalCode"),
        "continue": _data_test("continue"),
        "cancel": _data_test("cancel"),
        "error": _data_test("error"),
    },
)

CHECKOUT_OVERVIEW = PageSelectors(
    "checkout_overview",
    {
        "title": _data_test("title"),
        "item_name": _data_test("inventory-item-name"),
        "subtotal": _data_test("subtotal-label"),
        "tax": _data_test("tax-label"),
        "total": _data_test("total-label"),
        "finish": _data_test("finish"),
        "cancel": _data_test("cancel"),
    },
)

CHECKOUT_COMPLETE = PageSelectors(
    "checkout_complete",
    {
        "title": _data_test("title"),
        "header": _data_test("complete-header"),
        "text": _data_test("complete-text"),
        "back_home": _data_test("back-to-products"),
    },
)

REGISTRY: Mapping[str, PageSelectors] = MappingProxyType(
    {
        selectors.page: selectors
        for selectors in (
            LOGIN,
            HEADER,
            PRODUCTS,
            PRODUCT_DETAIL,
            CART,
            CHECKOUT_INFORMATION,
            CHECKOUT_OVERVIEW,
            CHECKOUT_COMPLETE,
        )
    }
)


def selector(page: str, name: str, **params: str) -> str:
    """Resolve ``name`` on ``page`` from the registry.

    Raises:
        ConfigurationError: If the page or the name is unknown.
    """
    try:
        selectors = REGISTRY[page]
    except KeyError:
        raise ConfigurationError(f"No selectors registered for page {page!r}") from None
    return selectors(name, **params)
