"""Application service: Show Order / List Orders use cases (queries)."""

from __future__ import annotations

from typing import Any

from rms.application.dto import OrderDTO
from rms.application.mapping import load_order_dto, order_to_dto
from rms.domain.exceptions import EntityNotFoundError
from rms.domain.model.order import OrderStatus
from rms.domain.repository.dish_repository import DishRepository
from rms.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository, dish_repo: DishRepository) -> None:
        self._order_repo = order_repo
        self._dish_repo = dish_repo

    def handle(self, order_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")
        return load_order_dto(order, self._dish_repo)


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository, dish_repo: DishRepository) -> None:
        self._order_repo = order_repo
        self._dish_repo = dish_repo

    def handle(self, status: Any = None) -> list[OrderDTO]:
        """Return orders newest first, optionally only those in *status*."""
        wanted = OrderStatus.parse(status) if status is not None else None
        orders = self._order_repo.list_all(wanted)

        dish_ids = {line.dish_id for order in orders for line in order.lines}
        dishes = {dish.id: dish for dish in self._dish_repo.find_by_ids(dish_ids)}
        return [order_to_dto(order, dishes) for order in orders]
