"""Product listing (inventory) screen."""

from __future__ import annotations

from decimal import Decimal

from swaglabs.data.models import Product, SortKey
from swaglabs.data.pricing import parse_price
from swaglabs.pages.actions import PageActions
from swaglabs.pages.header import HeaderComponent
from swaglabs.pages.selectors import PRODUCTS


class ProductsPage:
    """Inventory grid with sorting and add/remove buttons per product."""

    path = "/inventory.html"

    def __init__(self, actions: PageActions) -> None:
        self._actions = actions
        self._sel = PRODUCTS
        self.header = HeaderComponent(actions.for_page("header"))

    def open(self) -> ProductsPage:
        """Open the listing directly; requires a signed-in session."""
        self._actions.open(self.path)
        self.wait_until_displayed()
        return self

    def is_displayed(self) -> bool:
        return self._actions.current_path() == self.path and self._actions.is_visible(
            self._sel("inventory_list")
        )

    def wait_until_displayed(self) -> None:
        """
        Raises:
            NavigationError: If the browser never lands on the listing.
            NotReadyError: If the grid does not render in time.
        """
        self._actions.wait_for_url(self.path)
        self._actions.wait_ready(self._sel("inventory_list"), enabled=False)

    def title(self) -> str:
        return self._actions.text_of(self._sel("title"))

    def product_names(self) -> list[str]:
        return self._actions.texts_of(self._sel("item_name"))

    def product_prices(self) -> list[Decimal]:
        return [parse_price(text) for text in self._actions.texts_of(self._sel("item_price"))]

    def is_in_cart(self, product: Product) -> bool:
        """A product is in the cart when its button reads "Remove"."""
        return self._actions.is_visible(self._sel("remove", slug=product.slug))

    def add_product_to_cart(self, product: Product) -> None:
        with self._actions.step(f"Add {product.name} to cart"):
            self._actions.click_when_ready(self._sel("add_to_cart", slug=product.slug))
            self._actions.wait_ready(self._sel("remove", slug=product.slug))

    def add_products_to_cart(self, products: list[Product]) -> None:
        for product in products:
            self.add_product_to_cart(product)

    def remove_product_from_cart(self, product: Product) -> None:
        with self._actions.step(f"Remove {product.name} from cart"):
            self._actions.click_when_ready(self._sel("remove", slug=product.slug))
            self._actions.wait_ready(self._sel("add_to_cart", slug=product.slug))

    def sort_by(self, key: SortKey | str) -> None:
        key = SortKey(key)
        with self._actions.step(f"Sort products by {key.value}"):
            self._actions.select_option(self._sel("sort"), key.value)

    def active_sort(self) -> str:
        """Label of the selected sort option."""
        return self._actions.text_of(self._sel("active_sort"))

    def open_product(self, product: Product) -> None:
        with self._actions.step(f"Open {product.name}"):
            self._actions.click_when_ready(self._sel("item_link", item_id=str(product.item_id)))
            self._actions.wait_for_url("/inventory-item.html")
