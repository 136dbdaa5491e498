"""Checkout: review the order, see the total and place it."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from chefkiss.derived import cart_total
from chefkiss.models import OrderEntry
from chefkiss.rendering import format_order_row, format_price, format_selectable_rows, visible_rows
from chefkiss.state import CartStore

EMPTY_CART_MESSAGE = "No items in your order."


class CheckoutScreen(Screen[None]):
    """Order summary. Placing the order only clears the cart."""

    CSS = """
    #checkout-list {
        height: 1fr;
        border: round $primary;
        padding: 0 1;
    }

    #checkout-total {
        color: #00aaff;
        text-style: bold;
        margin-top: 1;
    }
    """

    BINDINGS = [
        ("enter", "place_order", "Place order"),
    ]

    def __init__(self, cart: CartStore, checkout: Callable[[], tuple[OrderEntry, ...]]) -> None:
        super().__init__()
        self.cart = cart
        self.checkout = checkout
        self.list_text = ""
        self.total_text = ""

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical():
            yield Static("Checkout", classes="pane-title")
            yield Static(id="checkout-list")
            yield Static(id="checkout-total")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_all()

    def on_screen_resume(self) -> None:
        self._refresh_all()

    def action_place_order(self) -> None:
        if not len(self.cart):
            self.notify(EMPTY_CART_MESSAGE, severity="warning")
            return
        self.checkout()
        self.notify("Your order has been placed successfully!", title="Thank You!")
        self._refresh_all()

    def _refresh_all(self) -> None:
        try:
            list_widget = self.query_one("#checkout-list", Static)
            total_widget = self.query_one("#checkout-total", Static)
        except NoMatches:
            return
        entries = self.cart.entries
        if not entries:
            self.list_text = EMPTY_CART_MESSAGE
            self.total_text = ""
            list_widget.update(self.list_text)
            total_widget.update(self.total_text)
            return

        rows = [format_order_row(entry) for entry in entries]
        listing = format_selectable_rows(rows, None, visible_rows(list_widget))
        self.list_text = listing.plain
        self.total_text = f"Total: {format_price(cart_total(entries))}"
        list_widget.update(listing)
        total_widget.update(Text(self.total_text))
