"""Rendering helpers shared by the screens."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text
from textual.widget import Widget

from chefkiss.config import DEFAULT_VISIBLE_ROWS
from chefkiss.constant import CATEGORY_BADGE_STYLES, CURRENCY_SYMBOL
from chefkiss.models import MenuItem, OrderEntry


def format_price(amount: Decimal | int) -> str:
    """Render an amount as ``R`` plus two decimals."""
    return f"{CURRENCY_SYMBOL}{Decimal(amount):.2f}"


def badge_style(category: str) -> str:
    """Return a consistent badge style for category tags."""
    return CATEGORY_BADGE_STYLES.get(category, "bold")


def format_category_tag(category: str) -> Text:
    text = Text()
    text.append(f" {category} ", style=badge_style(category))
    return text


def format_menu_row(item: MenuItem, *, show_category: bool = False, show_description: bool = False) -> Text:
    """Render one menu line: name, optional category tag, price, optional description below."""
    text = Text()
    text.append(item.name, style="bold")
    if show_category:
        text.append(" ")
        text.append_text(format_category_tag(item.category))
    text.append(f"  {format_price(item.price)}", style="#00aaff")
    if show_description:
        text.append(f"\n      {item.description}", style="dim")
    return text


def format_order_row(entry: OrderEntry) -> Text:
    text = Text()
    text.append(entry.name)
    text.append(f"  {format_price(entry.price)}", style="#626161")
    return text


def visible_rows(widget: Widget) -> int:
    """Lines available in a list widget, with a fallback before first layout."""
    height = widget.size.height
    if height <= 0:
        return DEFAULT_VISIBLE_ROWS
    return max(1, height)


def window_bounds(total: int, rows: int, selected: int | None) -> tuple[int, int]:
    """Return the ``[start, end)`` slice of a list that fits ``rows`` lines around ``selected``."""
    if total <= 0:
        return (0, 0)

    rows = max(1, rows)
    if total <= rows:
        return (0, total)

    if selected is None:
        start = 0
    else:
        half = rows // 2
        start = selected - half
        start = max(0, start)
        start = min(start, total - rows)

    return (start, start + rows)


def format_selectable_rows(rows: list[Text], selected: int | None, max_rows: int) -> Text:
    """Render rows with a pointer on ``selected``, windowed to ``max_rows`` lines."""
    start, end = window_bounds(len(rows), max_rows, selected)

    lines = Text()
    if start > 0:
        lines.append("⋮\n", style="dim")

    for idx in range(start, end):
        if idx > start:
            lines.append("\n")
        pointer = "➤ " if idx == selected else "  "
        lines.append(pointer)
        lines.append_text(rows[idx])

    if end < len(rows):
        lines.append("\n⋮", style="dim")

    return lines
