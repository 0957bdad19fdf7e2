"""Application service: Add Dish use case."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from rms.application.dto import DishDTO
from rms.application.mapping import dish_to_dto
from rms.domain.exceptions import ConflictError, ValidationError
from rms.domain.model.dish import Category, Dish
from rms.domain.model.value_objects import Money
from rms.domain.repository.dish_repository import DishRepository
from rms.domain.validation import DISH_RULES, validate

logger = logging.getLogger(__name__)


def normalize_image(raw: Any) -> str | None:
    """Trim an image URL; blank or missing means no image."""
    if raw is None:
        return None
    return raw.strip() or None


class AddDishHandler:

    def __init__(self, dish_repo: DishRepository) -> None:
        self._dish_repo = dish_repo

    def handle(self, payload: Mapping[str, Any]) -> DishDTO:
        """Add a new dish to the menu.

        Text fields are stored trimmed and the price with two decimals.
        The name must not match any existing dish, ignoring case.
        """
        errors = validate(payload, DISH_RULES)
        if errors:
            raise ValidationError.from_fields(errors)

        name = payload["name"].strip()
        if self._dish_repo.get_by_name(name) is not None:
            logger.warning(f"Rejected duplicate dish name '{name}'")
            raise ConflictError(f"A dish named '{name}' already exists")

        dish = Dish(
            id=Dish.new_id(),
            name=name,
            description=payload["description"].strip(),
            price=Money.of(payload["price"]),
            category=Category(payload["category"]),
            active=payload.get("active", True),
            image_url=normalize_image(payload.get("image")),
        )
        self._dish_repo.save(dish)
        logger.info(f"Dish {dish.id} '{dish.name}' added at {dish.price}")
        return dish_to_dto(dish)
