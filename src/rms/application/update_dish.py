"""Application service: Update Dish use case.

Only the supplied fields change, and each of them is validated again.
Price changes do NOT affect existing orders; they captured a price
snapshot at creation time.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from rms.application.add_dish import normalize_image
from rms.application.dto import DishDTO
from rms.application.mapping import dish_to_dto
from rms.domain.exceptions import ConflictError, EntityNotFoundError, ValidationError
from rms.domain.model.dish import Category
from rms.domain.model.value_objects import Money
from rms.domain.repository.dish_repository import DishRepository
from rms.domain.validation import DISH_RULES, validate

logger = logging.getLogger(__name__)


class UpdateDishHandler:

    def __init__(self, dish_repo: DishRepository) -> None:
        self._dish_repo = dish_repo

    def handle(self, dish_id: str, payload: Mapping[str, Any]) -> DishDTO:
        errors = validate(payload, DISH_RULES, partial=True)
        if errors:
            raise ValidationError.from_fields(errors)

        dish = self._dish_repo.get_by_id(dish_id)
        if dish is None:
            raise EntityNotFoundError(f"Dish {dish_id} not found")

        if payload.get("name") is not None:
            name = payload["name"].strip()
            if not dish.same_name_as(name):
                clash = self._dish_repo.get_by_name(name, exclude_id=dish.id)
                if clash is not None:
                    logger.warning(f"Rejected rename of dish {dish_id} to '{name}'")
                    raise ConflictError(f"A dish named '{name}' already exists")
            dish.name = name
        if payload.get("description") is not None:
            dish.description = payload["description"].strip()
        if payload.get("price") is not None:
            dish.price = Money.of(payload["price"])
        if payload.get("category") is not None:
            dish.category = Category(payload["category"])
        if payload.get("active") is not None:
            dish.active = payload["active"]
        if "image" in payload:
            dish.image_url = normalize_image(payload["image"])

        dish.touch()
        self._dish_repo.save(dish)
        logger.info(f"Dish {dish.id} updated")
        return dish_to_dto(dish)
