"""In-memory menu and cart stores owned by the running app."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Iterable, Iterator

from chefkiss.constant import CATEGORIES, MAX_PRICE
from chefkiss.data import seed_menu_items
from chefkiss.models import MenuItem, MenuItemForm, OrderEntry

logger = logging.getLogger(__name__)

REJECTED_MESSAGE = "Please fill in all fields"


class MenuItemRejected(ValueError):
    """Raised when add-item form input cannot become a menu item."""


def parse_menu_item_form(form: MenuItemForm) -> MenuItem:
    """Validate raw form input and build a new menu item.

    Missing fields and an unusable price are not told apart: both raise
    ``MenuItemRejected`` with the same message.
    """
    name = form.name.strip()
    description = form.description.strip()
    price_text = form.price_text.strip()
    if not name or not description or not price_text:
        raise MenuItemRejected(REJECTED_MESSAGE)
    if form.category not in CATEGORIES:
        raise MenuItemRejected(REJECTED_MESSAGE)

    try:
        price = Decimal(price_text)
    except InvalidOperation as exc:
        raise MenuItemRejected(REJECTED_MESSAGE) from exc
    if not price.is_finite() or price < 0 or price > MAX_PRICE:
        raise MenuItemRejected(REJECTED_MESSAGE)

    return MenuItem(name=name, price=price, category=form.category, description=description)


class MenuStore:
    """Ordered menu collection keyed by ``MenuItem.item_id``."""

    def __init__(self, items: Iterable[MenuItem] = ()) -> None:
        self._items: list[MenuItem] = list(items)

    @property
    def items(self) -> tuple[MenuItem, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self.items)

    def add(self, item: MenuItem) -> MenuItem:
        self._items.append(item)
        logger.info("menu_add item_id=%s name=%r category=%s", item.item_id, item.name, item.category)
        return item

    def remove(self, item_id: str) -> MenuItem | None:
        """Remove the item with ``item_id``. Unknown ids are ignored."""
        for idx, item in enumerate(self._items):
            if item.item_id == item_id:
                del self._items[idx]
                logger.info("menu_remove item_id=%s name=%r", item_id, item.name)
                return item
        return None

    def remove_by_name(self, name: str) -> MenuItem | None:
        """Remove the first item called ``name``. Unknown names are ignored."""
        item = self.find_by_name(name)
        if item is None:
            return None
        return self.remove(item.item_id)

    def get(self, item_id: str) -> MenuItem | None:
        for item in self._items:
            if item.item_id == item_id:
                return item
        return None

    def find_by_name(self, name: str) -> MenuItem | None:
        for item in self._items:
            if item.name == name:
                return item
        return None


class CartStore:
    """The guest's in-progress order."""

    def __init__(self) -> None:
        self._entries: list[OrderEntry] = []

    @property
    def entries(self) -> tuple[OrderEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[OrderEntry]:
        return iter(self.entries)

    def add(self, item: MenuItem) -> OrderEntry:
        entry = OrderEntry.from_menu_item(item)
        self._entries.append(entry)
        logger.info("cart_add entry_id=%s name=%r rows=%d", entry.entry_id, entry.name, len(self._entries))
        return entry

    def clear(self) -> tuple[OrderEntry, ...]:
        removed = tuple(self._entries)
        self._entries.clear()
        logger.info("cart_clear rows=%d", len(removed))
        return removed


class AppState:
    """Top-level owner of the menu and the cart.

    All mutation happens on the UI thread, one user action at a time.
    """

    def __init__(self, menu: MenuStore | None = None, cart: CartStore | None = None) -> None:
        self.menu = menu if menu is not None else MenuStore(seed_menu_items())
        self.cart = cart if cart is not None else CartStore()

    def add_menu_item(self, form: MenuItemForm) -> MenuItem:
        try:
            item = parse_menu_item_form(form)
        except MenuItemRejected:
            logger.warning("menu_add_rejected name=%r price_text=%r", form.name, form.price_text)
            raise
        return self.menu.add(item)

    def checkout(self) -> tuple[OrderEntry, ...]:
        """Place the order: the cart is emptied and nothing is kept."""
        placed = self.cart.clear()
        logger.info("checkout_placed rows=%d", len(placed))
        return placed
