"""Domain models for the Chef Kiss menu."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import uuid4


def _new_id() -> str:
    return uuid4().hex


@dataclass(frozen=True)
class MenuItem:
    """A dish on the menu. ``item_id`` is the identity, ``name`` is only for display."""

    name: str
    price: Decimal
    category: str
    description: str
    item_id: str = field(default_factory=_new_id)


@dataclass(frozen=True)
class OrderEntry:
    """A by-value copy of a menu item placed in the cart."""

    item_id: str
    name: str
    price: Decimal
    category: str
    entry_id: str = field(default_factory=_new_id)

    @classmethod
    def from_menu_item(cls, item: MenuItem) -> OrderEntry:
        return cls(item_id=item.item_id, name=item.name, price=item.price, category=item.category)


@dataclass(frozen=True)
class MenuItemForm:
    """Raw add-item form input, before validation."""

    name: str = ""
    description: str = ""
    price_text: str = ""
    category: str = "Starters"
