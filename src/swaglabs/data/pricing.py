"""Price parsing and order total arithmetic."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")

_PRICE_RE = re.compile(r"\$\s*(\d+(?:\.\d+)?)")


def parse_price(text: str) -> Decimal:
    """
    Extract the dollar amount from a label.

    Args:
        text: Label text like "Item total: $29.99" or "$7.99"

    Returns:
        Amount as Decimal

    Raises:
        ValueError: If no dollar amount is present

    Example:
        parse_price("Tax: $2.40")  # Decimal("2.40")
    """
    match = _PRICE_RE.search(text)
    if match is None:
        raise ValueError(f"No price in {text!r}")
    try:
        return Decimal(match.group(1))
    except InvalidOperation as e:
        raise ValueError(f"Invalid price in {text!r}") from e


def format_price(amount: Decimal) -> str:
    """Format an amount the way the shop displays it ("$29.99")."""
    return f"${amount.quantize(CENT, rounding=ROUND_HALF_UP)}"


@dataclass(frozen=True)
class OrderTotals:
    """Expected figures of the checkout overview."""

    item_total: Decimal
    tax: Decimal
    total: Decimal


def order_totals(prices: Iterable[Decimal], tax_rate: Decimal) -> OrderTotals:
    """
    Compute item total, tax and grand total for a cart.

    Tax is rounded half-up to cents before it is added.

    Example:
        order_totals([Decimal("29.99")], Decimal("0.08"))
        # OrderTotals(item_total=29.99, tax=2.40, total=32.39)
    """
    item_total = sum(prices, Decimal("0")).quantize(CENT)
    tax = (item_total * tax_rate).quantize(CENT, rounding=ROUND_HALF_UP)
    return OrderTotals(item_total=item_total, tax=tax, total=item_total + tax)
