"""Pure views computed from menu and cart snapshots."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from chefkiss.constant import CATEGORIES
from chefkiss.models import MenuItem, OrderEntry

_CENTS = Decimal("0.01")


def filter_by_category(items: Iterable[MenuItem], category: str) -> list[MenuItem]:
    return [item for item in items if item.category == category]


def average_price(items: Iterable[MenuItem], category: str) -> Decimal:
    """Mean price of ``category`` rounded to cents, or 0.00 for an empty category."""
    prices = [item.price for item in filter_by_category(items, category)]
    if not prices:
        return Decimal("0.00")
    return (sum(prices, Decimal(0)) / len(prices)).quantize(_CENTS, rounding=ROUND_HALF_UP)


def category_averages(items: Iterable[MenuItem]) -> dict[str, Decimal]:
    snapshot = list(items)
    return {category: average_price(snapshot, category) for category in CATEGORIES}


def group_by_category(items: Iterable[MenuItem]) -> dict[str, list[MenuItem]]:
    """Partition items by category, keeping insertion order inside each group."""
    groups: dict[str, list[MenuItem]] = {category: [] for category in CATEGORIES}
    for item in items:
        groups.setdefault(item.category, []).append(item)
    return groups


def cart_total(entries: Iterable[OrderEntry]) -> Decimal:
    return sum((entry.price for entry in entries), Decimal(0))
