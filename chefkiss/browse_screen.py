"""Menu overview: per-category averages and the grouped menu."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from chefkiss.derived import category_averages, group_by_category
from chefkiss.rendering import format_category_tag, format_menu_row, format_price
from chefkiss.state import MenuStore


def format_averages(menu: MenuStore) -> Text:
    text = Text()
    for idx, (category, average) in enumerate(category_averages(menu.items).items()):
        if idx > 0:
            text.append("\n")
        text.append(f"{category}: {format_price(average)}")
    return text


def format_grouped_menu(menu: MenuStore) -> Text:
    text = Text()
    for idx, (category, items) in enumerate(group_by_category(menu.items).items()):
        if idx > 0:
            text.append("\n\n")
        text.append_text(format_category_tag(category))
        if not items:
            text.append("\n  (none)", style="dim")
        for item in items:
            text.append("\n  ")
            text.append_text(format_menu_row(item))
    return text


class BrowseScreen(Screen[None]):
    """Read-only view of the current menu."""

    CSS = """
    #browse-averages {
        border: round $secondary;
        padding: 0 1;
        height: auto;
        margin-bottom: 1;
    }

    #browse-menu {
        border: round $primary;
        padding: 0 1;
    }
    """

    def __init__(self, menu: MenuStore) -> None:
        super().__init__()
        self.menu = menu

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical():
            yield Static("Chef Kiss Menu", classes="pane-title")
            yield Static(id="browse-averages")
            with VerticalScroll(id="browse-menu"):
                yield Static(id="browse-groups")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_all()

    def on_screen_resume(self) -> None:
        self._refresh_all()

    def _refresh_all(self) -> None:
        try:
            averages = self.query_one("#browse-averages", Static)
            groups = self.query_one("#browse-groups", Static)
        except NoMatches:
            return
        averages.update(format_averages(self.menu))
        groups.update(format_grouped_menu(self.menu))
