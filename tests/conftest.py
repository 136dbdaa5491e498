from decimal import Decimal

import pytest

from chefkiss.models import MenuItem
from chefkiss.state import AppState, CartStore, MenuStore
from chefkiss.data import seed_menu_items


@pytest.fixture
def seed_menu() -> MenuStore:
    """Menu store holding the nine seed dishes."""
    return MenuStore(seed_menu_items())


@pytest.fixture
def cart() -> CartStore:
    return CartStore()


@pytest.fixture
def state(seed_menu: MenuStore, cart: CartStore) -> AppState:
    return AppState(menu=seed_menu, cart=cart)


@pytest.fixture
def make_item():
    """Factory for ad-hoc menu items."""

    def _make(name="Soup", price="10", category="Starters", description="Hot soup"):
        return MenuItem(name=name, price=Decimal(price), category=category, description=description)

    return _make
