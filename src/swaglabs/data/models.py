"""Test data models.

Immutable records loaded once per session from the static test data file
and shared read-only by every worker.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from swaglabs.core.exceptions import TestDataError


class LoginOutcome(str, Enum):
    """What a login attempt with a credential is expected to do."""

    SUCCESS = "success"
    LOCKED_OUT = "locked_out"
    VALIDATION_ERROR = "validation_error"


class SortKey(str, Enum):
    """Option values of the product sort dropdown."""

    NAME_ASC = "az"
    NAME_DESC = "za"
    PRICE_ASC = "lohi"
    PRICE_DESC = "hilo"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class UserCredential(_Frozen):
    """A named user of the demo shop."""

    username: str
    password: str
    expected_outcome: LoginOutcome = LoginOutcome.SUCCESS
    expected_message: str | None = None

    @model_validator(mode="after")
    def message_required_for_failures(self) -> UserCredential:
        """Failing credentials must document the message they produce."""
        if self.expected_outcome != LoginOutcome.SUCCESS and not self.expected_message:
            raise ValueError(
                f"{self.expected_outcome.value} credential needs expected_message"
            )
        return self

    @property
    def can_log_in(self) -> bool:
        return self.expected_outcome == LoginOutcome.SUCCESS


class Product(_Frozen):
    """A catalog item.

    ``slug`` is the suffix the shop uses in its add/remove button ids.
    """

    name: str
    slug: str
    item_id: int = Field(ge=0)
    price: Decimal = Field(gt=0, decimal_places=2)
    description: str = ""


class SortOption(_Frozen):
    """An entry of the product sort dropdown."""

    key: SortKey
    label: str


class CheckoutInformation(_Frozen):
    """Customer details entered on the first checkout step."""

    first_name: str
    last_name: str
    postal_code: str


class Messages(_Frozen):
    """Expected user-facing strings."""

    products_title: str = "Products"
    cart_title: str = "Your Cart"
    checkout_information_title: str = "Checkout: Your Information"
    checkout_overview_title: str = "Checkout: Overview"
    checkout_complete_title: str = "Checkout: Complete!"
    order_complete_header: str = "Thank you for your order!"
    first_name_required: str = "Error: First Name is required"
    last_name_required: str = "Error: Last Name is required"
    postal_code_required: str = "Error: Postal Code is required"


class TestData(_Frozen):
    """Root of the static test data file."""

    __test__ = False

    users: dict[str, UserCredential]
    products: dict[str, Product]
    sort_options: list[SortOption]
    expected_cart_counts: dict[str, int] = Field(default_factory=dict)
    messages: Messages = Field(default_factory=Messages)
    tax_rate: Decimal = Field(ge=0, lt=1)
    customer: CheckoutInformation

    @field_validator("products")
    @classmethod
    def unique_slugs(cls, v: dict[str, Product]) -> dict[str, Product]:
        slugs = [p.slug for p in v.values()]
        if len(slugs) != len(set(slugs)):
            raise ValueError("Product slugs must be unique")
        return v

    def user(self, key: str) -> UserCredential:
        """Look up a user by key.

        Raises:
            TestDataError: If the key is unknown.
        """
        try:
            return self.users[key]
        except KeyError:
            raise TestDataError(f"Unknown user key: {key}") from None

    def product(self, key: str) -> Product:
        """Look up a product by key.

        Raises:
            TestDataError: If the key is unknown.
        """
        try:
            return self.products[key]
        except KeyError:
            raise TestDataError(f"Unknown product key: {key}") from None

    def users_with_outcome(self, outcome: LoginOutcome) -> dict[str, UserCredential]:
        return {k: u for k, u in self.users.items() if u.expected_outcome == outcome}

    def sort_option(self, key: SortKey | str) -> SortOption:
        key = SortKey(key)
        for option in self.sort_options:
            if option.key == key:
                return option
        raise TestDataError(f"Unknown sort option: {key.value}")
