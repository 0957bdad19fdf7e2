"""Default menu used to populate an empty catalog."""

from __future__ import annotations

import logging

from rms.application.add_dish import AddDishHandler
from rms.domain.repository.dish_repository import DishRepository

logger = logging.getLogger(__name__)

DEFAULT_DISHES: list[dict] = [
    {
        "name": "Grilled Salmon",
        "description": "Fresh grilled salmon with seasonal vegetables and house sauce.",
        "price": "55.00",
        "category": "MAIN_COURSE",
        "image": "https://images.unsplash.com/photo-1467003909585-2f8a72700288?w=400&h=400&fit=crop",
    },
    {
        "name": "Mushroom Risotto",
        "description": "Creamy risotto with a variety of fresh mushrooms and parmesan.",
        "price": "48.00",
        "category": "MAIN_COURSE",
        "image": "https://images.unsplash.com/photo-1476124369491-e7addf5db371?w=400&h=400&fit=crop",
    },
    {
        "name": "Caesar Salad",
        "description": "Fresh lettuce, croutons, parmesan and caesar dressing.",
        "price": "28.00",
        "category": "APPETIZER",
    },
    {
        "name": "Tiramisu",
        "description": "Classic Italian dessert layered with ladyfingers and mascarpone.",
        "price": "25.00",
        "category": "DESSERT",
        "image": "https://images.unsplash.com/photo-1571877227200-a0d98ea607e9?w=400&h=400&fit=crop",
    },
    {
        "name": "Fresh Orange Juice",
        "description": "Freshly squeezed orange juice with no preservatives.",
        "price": "12.00",
        "category": "DRINK",
    },
]


def seed_dishes(dish_repo: DishRepository) -> int:
    """Add every default dish whose name is not on the menu yet.

    Returns the number of dishes added.
    """
    handler = AddDishHandler(dish_repo)
    added = 0
    for payload in DEFAULT_DISHES:
        if dish_repo.get_by_name(payload["name"]) is not None:
            continue
        handler.handle(payload)
        added += 1
    logger.info(f"Seeded {added} dishes")
    return added
