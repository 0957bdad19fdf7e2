"""Application service: Show Dish / List Dishes use cases (queries)."""

from __future__ import annotations

from rms.application.dto import DishDTO
from rms.application.mapping import dish_to_dto
from rms.domain.exceptions import EntityNotFoundError, ValidationError
from rms.domain.model.dish import Category
from rms.domain.repository.dish_repository import DishRepository
from rms.domain.validation import one_of


class ShowDishHandler:

    def __init__(self, dish_repo: DishRepository) -> None:
        self._dish_repo = dish_repo

    def handle(self, dish_id: str) -> DishDTO:
        dish = self._dish_repo.get_by_id(dish_id)
        if dish is None:
            raise EntityNotFoundError(f"Dish {dish_id} not found")
        return dish_to_dto(dish)


class ListDishesHandler:

    def __init__(self, dish_repo: DishRepository) -> None:
        self._dish_repo = dish_repo

    def handle(
        self,
        category: str | None = None,
        active: bool | None = None,
    ) -> list[DishDTO]:
        """Return the menu sorted by name, optionally filtered."""
        if category is not None and not one_of(Category.values())(category):
            raise ValidationError(
                f"Category must be one of {', '.join(Category.values())}"
            )
        dishes = sorted(self._dish_repo.list_all(), key=lambda d: d.name.casefold())
        return [
            dish_to_dto(dish)
            for dish in dishes
            if (category is None or dish.category.value == category)
            and (active is None or dish.active == active)
        ]
