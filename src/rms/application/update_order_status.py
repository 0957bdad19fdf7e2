"""Application service: Update Order Status use case.

Guards the order lifecycle RECEIVED -> PREPARING -> READY -> DELIVERED.
Under the strict policy only the next status is accepted; the permissive
policy lets any lifecycle value overwrite the current one. Re-sending the
current status is accepted and changes nothing.
"""

from __future__ import annotations

import logging
from typing import Any

from rms.application.dto import OrderDTO
from rms.application.mapping import load_order_dto
from rms.domain.exceptions import EntityNotFoundError
from rms.domain.model.order import OrderStatus, StatusPolicy
from rms.domain.repository.dish_repository import DishRepository
from rms.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        dish_repo: DishRepository,
        policy: StatusPolicy = StatusPolicy.STRICT,
    ) -> None:
        self._order_repo = order_repo
        self._dish_repo = dish_repo
        self._policy = policy

    def handle(self, order_id: str, new_status: Any) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")

        status = OrderStatus.parse(new_status)
        previous = order.status

        if order.change_status(status, self._policy):
            self._order_repo.save(order)
            logger.info(
                f"Order {order_id} status changed from {previous.value} to {status.value}"
            )

        return load_order_dto(order, self._dish_repo)
