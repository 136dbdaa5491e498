from decimal import Decimal

import pytest

from chefkiss.constant import SEED_MENU
from chefkiss.data import seed_menu_items
from chefkiss.derived import average_price
from chefkiss.models import MenuItemForm, OrderEntry
from chefkiss.state import REJECTED_MESSAGE, AppState, MenuItemRejected, MenuStore, parse_menu_item_form


def test_seed_menu_has_three_dishes_per_category(seed_menu):
    assert [item.name for item in seed_menu] == [record["name"] for record in SEED_MENU]
    assert len(seed_menu) == 9
    for category in ("Starters", "Mains", "Desserts"):
        assert sum(1 for item in seed_menu if item.category == category) == 3


def test_seed_items_get_fresh_unique_ids():
    first = seed_menu_items()
    second = seed_menu_items()
    ids = {item.item_id for item in first} | {item.item_id for item in second}
    assert len(ids) == 18


def test_default_state_is_seeded_with_empty_cart():
    state = AppState()
    assert len(state.menu) == 9
    assert len(state.cart) == 0


def test_add_appends_and_is_retrievable(seed_menu, make_item):
    item = make_item(name="Tiramisu", category="Desserts")
    seed_menu.add(item)

    assert len(seed_menu) == 10
    assert seed_menu.items[-1] is item
    assert seed_menu.get(item.item_id) is item
    assert seed_menu.find_by_name("Tiramisu") is item


def test_remove_by_id_keeps_order_and_is_idempotent(seed_menu):
    bruschetta = seed_menu.find_by_name("Bruschetta")

    assert seed_menu.remove(bruschetta.item_id) is bruschetta
    assert seed_menu.remove(bruschetta.item_id) is None
    assert len(seed_menu) == 8
    assert [item.name for item in seed_menu][:2] == ["Garlic Bread", "Creamy mushroom soup"]


def test_remove_by_name_is_idempotent(seed_menu):
    seed_menu.remove_by_name("Cheesecake")
    seed_menu.remove_by_name("Cheesecake")

    assert len(seed_menu) == 8
    assert seed_menu.find_by_name("Cheesecake") is None


def test_remove_unknown_is_noop(seed_menu):
    assert seed_menu.remove("missing") is None
    assert seed_menu.remove_by_name("Missing dish") is None
    assert len(seed_menu) == 9


def test_duplicate_names_are_told_apart_by_id(make_item):
    first = make_item(name="Special")
    second = make_item(name="Special", price="20")
    menu = MenuStore([first, second])

    menu.remove(second.item_id)

    assert menu.items == (first,)


def test_items_snapshot_is_read_only(seed_menu, make_item):
    snapshot = seed_menu.items
    seed_menu.add(make_item())

    assert isinstance(snapshot, tuple)
    assert len(snapshot) == 9


def test_cart_add_copies_and_does_not_dedupe(seed_menu, cart):
    garlic = seed_menu.find_by_name("Garlic Bread")

    first = cart.add(garlic)
    second = cart.add(garlic)

    assert len(cart) == 2
    assert first.entry_id != second.entry_id
    assert first == OrderEntry(
        item_id=garlic.item_id, name="Garlic Bread", price=Decimal(45), category="Starters", entry_id=first.entry_id
    )


def test_cart_entries_survive_menu_removal(seed_menu, cart):
    rib = seed_menu.find_by_name("Rib Burger")
    cart.add(rib)
    seed_menu.remove(rib.item_id)

    assert [entry.name for entry in cart] == ["Rib Burger"]


def test_cart_clear_returns_removed_entries(seed_menu, cart):
    cart.add(seed_menu.find_by_name("BBQ Wrap"))

    removed = cart.clear()

    assert [entry.name for entry in removed] == ["BBQ Wrap"]
    assert cart.entries == ()
    assert cart.clear() == ()


def test_checkout_clears_cart(state):
    state.cart.add(state.menu.find_by_name("Garlic Bread"))
    state.cart.add(state.menu.find_by_name("Rib Burger"))

    placed = state.checkout()

    assert len(placed) == 2
    assert len(state.cart) == 0
    assert state.checkout() == ()


def test_parse_form_builds_item():
    item = parse_menu_item_form(
        MenuItemForm(name="  Tiramisu ", description="Coffee dessert", price_text="65.5", category="Desserts")
    )

    assert item.name == "Tiramisu"
    assert item.price == Decimal("65.5")
    assert item.category == "Desserts"
    assert item.description == "Coffee dessert"


@pytest.mark.parametrize(
    "form",
    [
        MenuItemForm(name="", description="d", price_text="10"),
        MenuItemForm(name="   ", description="d", price_text="10"),
        MenuItemForm(name="n", description="", price_text="10"),
        MenuItemForm(name="n", description="d", price_text=""),
        MenuItemForm(name="n", description="d", price_text="ten"),
        MenuItemForm(name="n", description="d", price_text="12abc"),
        MenuItemForm(name="n", description="d", price_text="NaN"),
        MenuItemForm(name="n", description="d", price_text="Infinity"),
        MenuItemForm(name="n", description="d", price_text="-5"),
        MenuItemForm(name="n", description="d", price_text="1e30"),
        MenuItemForm(name="n", description="d", price_text="1000000000.01"),
        MenuItemForm(name="n", description="d", price_text="10", category="Drinks"),
    ],
)
def test_parse_form_rejects_with_generic_message(form):
    with pytest.raises(MenuItemRejected, match=REJECTED_MESSAGE):
        parse_menu_item_form(form)


def test_rejected_add_leaves_menu_unchanged(state):
    with pytest.raises(MenuItemRejected):
        state.add_menu_item(MenuItemForm(name="", description="Nice", price_text="30"))

    assert len(state.menu) == 9


def test_accepted_add_grows_menu_by_one(state):
    item = state.add_menu_item(MenuItemForm(name="Tiramisu", description="Coffee", price_text="65", category="Desserts"))

    assert len(state.menu) == 10
    assert state.menu.find_by_name("Tiramisu") is item


def test_rejected_error_is_a_value_error():
    assert issubclass(MenuItemRejected, ValueError)


def test_oversized_price_is_rejected_and_averages_still_compute(state):
    with pytest.raises(MenuItemRejected):
        state.add_menu_item(MenuItemForm(name="Gold", description="x", price_text="1e30", category="Starters"))

    assert len(state.menu) == 9
    assert average_price(state.menu.items, "Starters") == Decimal("58.33")
