"""Editable static menu configuration."""

from __future__ import annotations

CATEGORIES: tuple[str, ...] = ("Starters", "Mains", "Desserts")

CURRENCY_SYMBOL = "R"

# Largest accepted dish price.
MAX_PRICE = 1_000_000_000

# Raw seed records consumed by chefkiss.data (which wraps these into MenuItem instances).
SEED_MENU: list[dict[str, str | int]] = [
    {
        "name": "Garlic Bread",
        "price": 45,
        "category": "Starters",
        "description": "Crispy oven-baked bread topped with garlic butter and herbs.",
    },
    {
        "name": "Bruschetta",
        "price": 55,
        "category": "Starters",
        "description": "Toasted bread topped with fresh tomatoes, basil, and olive oil.",
    },
    {
        "name": "Creamy mushroom soup",
        "price": 75,
        "category": "Starters",
        "description": "Use porcini and wild mushrooms to make this rich and creamy soup. Serve with croutons and chives",
    },
    {
        "name": "Buffalo Wings and Ribs",
        "price": 250,
        "category": "Mains",
        "description": "A hearty platter of BBQ ribs and spicy buffalo wings.",
    },
    {
        "name": "BBQ Wrap",
        "price": 150,
        "category": "Mains",
        "description": "Grilled chicken with smoky BBQ sauce wrapped in a soft tortilla.",
    },
    {
        "name": "Rib Burger",
        "price": 125,
        "category": "Mains",
        "description": "Tender rib meat served in a toasted bun with our special sauce.",
    },
    {
        "name": "Chocolate Lava Cake",
        "price": 90,
        "category": "Desserts",
        "description": "Warm chocolate cake with a molten chocolate center.",
    },
    {
        "name": "Cheesecake",
        "price": 85,
        "category": "Desserts",
        "description": "Creamy vanilla cheesecake with a crunchy biscuit base.",
    },
    {
        "name": "Ice Cream Sundae",
        "price": 70,
        "category": "Desserts",
        "description": "Vanilla ice cream topped with chocolate sauce and nuts.",
    },
]

CATEGORY_BADGE_STYLES: dict[str, str] = {
    "Starters": "bold #0b1f0f on #5fbf72",
    "Mains": "bold #ffffff on #b23a48",
    "Desserts": "bold #ffffff on #2f6db5",
}
