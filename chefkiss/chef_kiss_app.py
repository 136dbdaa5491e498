"""Main Textual app class."""

from __future__ import annotations

import logging

from textual.app import App

from chefkiss.browse_screen import BrowseScreen
from chefkiss.checkout_screen import CheckoutScreen
from chefkiss.guest_screen import GuestFilterScreen
from chefkiss.manager_screen import ChefManagerScreen
from chefkiss.state import AppState

logger = logging.getLogger(__name__)


class ChefKissApp(App):
    """Restaurant menu app with chef and guest views over one in-memory state."""

    TITLE = "Chef Kiss Menu"
    SUB_TITLE = "Starters / Mains / Desserts"

    CSS = """
    Screen {
        layout: vertical;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    VIEW_NAMES = ("browse", "manage", "guest", "checkout")

    BINDINGS = [
        ("1", "show_view('browse')", "Menu"),
        ("2", "show_view('manage')", "Chef"),
        ("3", "show_view('guest')", "Guest"),
        ("4", "show_view('checkout')", "Checkout"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, state: AppState | None = None) -> None:
        super().__init__()
        self.state = state if state is not None else AppState()
        logger.info("app_init menu_items=%d", len(self.state.menu))

    def on_mount(self) -> None:
        self.install_screen(BrowseScreen(self.state.menu), name="browse")
        self.install_screen(ChefManagerScreen(self.state.menu, self.state.add_menu_item), name="manage")
        self.install_screen(GuestFilterScreen(self.state.menu, self.state.cart), name="guest")
        self.install_screen(CheckoutScreen(self.state.cart, self.state.checkout), name="checkout")
        self.push_screen("browse")

    def action_show_view(self, name: str) -> None:
        if name not in self.VIEW_NAMES:
            return
        logger.debug("show_view name=%s", name)
        self.switch_screen(name)
