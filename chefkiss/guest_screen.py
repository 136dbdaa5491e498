"""Guest menu: filter by category and add dishes to the order."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from chefkiss.constant import CATEGORIES
from chefkiss.derived import filter_by_category
from chefkiss.models import MenuItem
from chefkiss.rendering import badge_style, format_price, format_selectable_rows, visible_rows
from chefkiss.state import CartStore, MenuStore


class GuestFilterScreen(Screen[None]):
    """Shows one category at a time; Enter adds the highlighted dish to the cart."""

    CSS = """
    #guest-categories {
        height: 1;
        margin-bottom: 1;
    }

    #guest-results {
        height: 1fr;
        border: round $primary;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("right", "cycle_category(1)", "Next category"),
        ("left", "cycle_category(-1)", "Previous category"),
        ("j", "move_selection(1)", "Next"),
        ("k", "move_selection(-1)", "Previous"),
        ("down", "move_selection(1)", "Next"),
        ("up", "move_selection(-1)", "Previous"),
        ("enter", "add_selected", "Add to order"),
    ]

    category = reactive(CATEGORIES[0])
    selected_index = reactive(0)

    def __init__(self, menu: MenuStore, cart: CartStore) -> None:
        super().__init__()
        self.menu = menu
        self.cart = cart

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical():
            yield Static("Guest Menu", classes="pane-title")
            yield Static(id="guest-categories")
            yield Static(id="guest-results")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_all()

    def on_screen_resume(self) -> None:
        self._refresh_all()

    def filtered_results(self) -> list[MenuItem]:
        return filter_by_category(self.menu.items, self.category)

    def action_cycle_category(self, delta: int) -> None:
        idx = CATEGORIES.index(self.category)
        self.category = CATEGORIES[(idx + delta) % len(CATEGORIES)]
        self.selected_index = 0
        self._refresh_all()

    def action_move_selection(self, delta: int) -> None:
        results = self.filtered_results()
        if not results:
            self.selected_index = 0
            return
        self.selected_index = (self.selected_index + delta) % len(results)
        self._refresh_results(results)

    def action_add_selected(self) -> None:
        results = self.filtered_results()
        if not results:
            return
        if self.selected_index >= len(results):
            self.selected_index = 0
        item = results[self.selected_index]
        self.cart.add(item)
        self.notify(f"{item.name} added to your cart", title="Added to Order")

    def _refresh_all(self) -> None:
        self._refresh_categories()
        self._refresh_results(self.filtered_results())

    def _refresh_categories(self) -> None:
        try:
            bar = self.query_one("#guest-categories", Static)
        except NoMatches:
            return
        text = Text()
        for category in CATEGORIES:
            style = badge_style(category) if category == self.category else "dim"
            text.append(f" {category} ", style=style)
            text.append(" ")
        bar.update(text)

    def _refresh_results(self, results: list[MenuItem]) -> None:
        try:
            results_widget = self.query_one("#guest-results", Static)
        except NoMatches:
            return
        if not results:
            results_widget.update("No dishes in this category")
            return

        if self.selected_index >= len(results):
            self.selected_index = 0

        rows = []
        for item in results:
            row = Text(item.name)
            row.append(f"  + Add ({format_price(item.price)})", style="bold #00aaff")
            rows.append(row)
        results_widget.update(format_selectable_rows(rows, self.selected_index, visible_rows(results_widget)))
