"""Application service: Delete Dish use case.

A dish referenced by any order line stays on the menu; switch it off
with ``active=False`` instead.
"""

from __future__ import annotations

import logging

from rms.domain.exceptions import ConflictError, EntityNotFoundError
from rms.domain.repository.dish_repository import DishRepository
from rms.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class DeleteDishHandler:

    def __init__(self, dish_repo: DishRepository, order_repo: OrderRepository) -> None:
        self._dish_repo = dish_repo
        self._order_repo = order_repo

    def handle(self, dish_id: str) -> None:
        dish = self._dish_repo.get_by_id(dish_id)
        if dish is None:
            raise EntityNotFoundError(f"Dish {dish_id} not found")

        if self._order_repo.has_lines_for_dish(dish_id):
            logger.warning(f"Refused to delete dish {dish_id}: referenced by orders")
            raise ConflictError(
                f"Dish '{dish.name}' cannot be deleted because it has associated orders"
            )

        self._dish_repo.delete(dish_id)
        logger.info(f"Dish {dish_id} '{dish.name}' deleted")
