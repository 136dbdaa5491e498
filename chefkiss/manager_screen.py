"""Chef menu manager: list, add and remove menu items."""

from __future__ import annotations

from typing import Callable

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from chefkiss.add_item_modal import AddItemModal
from chefkiss.models import MenuItem, MenuItemForm
from chefkiss.rendering import format_menu_row, format_selectable_rows, visible_rows
from chefkiss.state import MenuStore


class ChefManagerScreen(Screen[None]):
    """Lists every dish with its details and lets the chef add or remove dishes."""

    CSS = """
    #manager-list {
        height: 1fr;
        border: round $primary;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("a", "add_item", "Add item"),
        ("d", "remove_selected", "Remove"),
        ("j", "move_selection(1)", "Next"),
        ("k", "move_selection(-1)", "Previous"),
        ("down", "move_selection(1)", "Next"),
        ("up", "move_selection(-1)", "Previous"),
    ]

    selected_index = reactive(None)

    def __init__(self, menu: MenuStore, add_item: Callable[[MenuItemForm], MenuItem]) -> None:
        super().__init__()
        self.menu = menu
        self.add_item = add_item

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical():
            yield Static("Chef Menu Manager", classes="pane-title")
            yield Static(id="manager-list")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_list()

    def on_screen_resume(self) -> None:
        self._refresh_list()

    def action_add_item(self) -> None:
        self.app.push_screen(AddItemModal(on_submit=self.add_item), self._on_item_added)

    def action_remove_selected(self) -> None:
        item = self.selected_item()
        if item is None:
            return
        self.menu.remove(item.item_id)
        self.notify(f"{item.name} removed from the menu", title="Removed")
        self._refresh_list()

    def action_move_selection(self, delta: int) -> None:
        total = len(self.menu)
        if not total:
            return
        if self.selected_index is None:
            self.selected_index = 0 if delta > 0 else total - 1
        else:
            self.selected_index = (self.selected_index + delta) % total
        self._refresh_list()

    def selected_item(self) -> MenuItem | None:
        items = self.menu.items
        if self.selected_index is None:
            return None
        if not (0 <= self.selected_index < len(items)):
            return None
        return items[self.selected_index]

    def _on_item_added(self, item: MenuItem | None) -> None:
        if item is None:
            return
        self.selected_index = len(self.menu) - 1
        self.notify("Meal added successfully!", title="Success")
        self._refresh_list()

    def _refresh_list(self) -> None:
        try:
            list_widget = self.query_one("#manager-list", Static)
        except NoMatches:
            return
        items = self.menu.items
        if not items:
            self.selected_index = None
            list_widget.update("(no menu items)")
            return

        if self.selected_index is not None and self.selected_index >= len(items):
            self.selected_index = len(items) - 1

        rows = [format_menu_row(item, show_category=True, show_description=True) for item in items]
        # Each row spans two lines.
        max_rows = max(1, visible_rows(list_widget) // 2)
        list_widget.update(format_selectable_rows(rows, self.selected_index, max_rows))
