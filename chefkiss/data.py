"""Seed menu data."""

from __future__ import annotations

from decimal import Decimal

from chefkiss.constant import SEED_MENU
from chefkiss.models import MenuItem


def seed_menu_items() -> list[MenuItem]:
    """Build fresh seed items, each with a newly generated id."""
    return [
        MenuItem(
            name=str(record["name"]),
            price=Decimal(str(record["price"])),
            category=str(record["category"]),
            description=str(record["description"]),
        )
        for record in SEED_MENU
    ]

