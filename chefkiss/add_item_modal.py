"""Add-menu-item form modal screen."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from chefkiss.constant import CATEGORIES
from chefkiss.models import MenuItem, MenuItemForm
from chefkiss.rendering import badge_style
from chefkiss.state import MenuItemRejected


class AddItemModal(ModalScreen[MenuItem | None]):
    """Collect a new dish and hand it to ``on_submit``.

    ``on_submit`` raises ``MenuItemRejected`` to keep the modal open with an
    error; otherwise the modal dismisses with the created item.
    """

    CSS = """
    AddItemModal {
        align: center middle;
        background: $background 60%;
    }

    #add-item-dialog {
        width: 72;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #add-item-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #add-item-fields {
        color: white;
        margin-bottom: 1;
    }

    #add-item-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #add-item-help {
        color: #dddddd;
    }
    """

    TEXT_FIELDS = ("name", "description", "price_text")
    FIELD_LABELS = {
        "name": "Dish Name",
        "description": "Description",
        "price_text": "Price (e.g. 120)",
        "category": "Category",
    }
    FIELD_ORDER = ("name", "description", "price_text", "category")

    def __init__(self, on_submit: Callable[[MenuItemForm], MenuItem]) -> None:
        super().__init__()
        self.on_submit = on_submit
        self.values: dict[str, str] = {field: "" for field in self.TEXT_FIELDS}
        self.category_index = 0
        self.field_index = 0
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="add-item-dialog"):
            yield Static("Add Menu Item", id="add-item-title")
            yield Static(id="add-item-fields")
            yield Static(id="add-item-error")
            yield Static(
                "Tab/Shift+Tab field. ←/→ category. Enter add. Backspace delete. Esc cancel.",
                id="add-item-help",
            )

    def on_mount(self) -> None:
        self._refresh_content()

    @property
    def current_field(self) -> str:
        return self.FIELD_ORDER[self.field_index]

    @property
    def category(self) -> str:
        return CATEGORIES[self.category_index]

    def current_form(self) -> MenuItemForm:
        return MenuItemForm(
            name=self.values["name"],
            description=self.values["description"],
            price_text=self.values["price_text"],
            category=self.category,
        )

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self._confirm()
            event.stop()
            return

        if event.key in {"tab", "down"}:
            self._move_field(1)
            event.stop()
            return

        if event.key in {"shift+tab", "up"}:
            self._move_field(-1)
            event.stop()
            return

        if self.current_field == "category":
            if event.key in {"left", "right"}:
                delta = 1 if event.key == "right" else -1
                self.category_index = (self.category_index + delta) % len(CATEGORIES)
                self._refresh_content()
            # Text input does not apply to the category selector.
            event.stop()
            return

        if event.key == "backspace":
            value = self.values[self.current_field]
            if value:
                self.values[self.current_field] = value[:-1]
                self.error = ""
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            self.values[self.current_field] += event.character
            self.error = ""
            self._refresh_content()
            event.stop()

    def _move_field(self, delta: int) -> None:
        self.field_index = (self.field_index + delta) % len(self.FIELD_ORDER)
        self._refresh_content()

    def _confirm(self) -> None:
        try:
            item = self.on_submit(self.current_form())
        except MenuItemRejected as exc:
            self.error = str(exc)
            self._refresh_content()
            return

        self.dismiss(item)

    def _refresh_content(self) -> None:
        fields_widget = self.query_one("#add-item-fields", Static)
        error_widget = self.query_one("#add-item-error", Static)

        content = Text()
        for idx, field in enumerate(self.FIELD_ORDER):
            if idx > 0:
                content.append("\n")
            active = field == self.current_field
            pointer = "➤ " if active else "  "
            content.append(f"{pointer}{self.FIELD_LABELS[field]}: ", style="bold white" if active else "white")
            if field == "category":
                for cat_idx, category in enumerate(CATEGORIES):
                    style = badge_style(category) if cat_idx == self.category_index else "dim"
                    content.append(f" {category} ", style=style)
                    content.append(" ")
                continue
            content.append(self.values[field])
            if active:
                content.append("|", style="bold white")

        fields_widget.update(content)
        error_widget.update(self.error or "")
