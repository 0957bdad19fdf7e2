"""Application service: Delete Order use case.

Orders carry no dependents, so deletion is unconditional once the order
exists. The repository removes the lines and the header together.
"""

from __future__ import annotations

import logging

from rms.domain.exceptions import EntityNotFoundError
from rms.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")

        self._order_repo.delete(order_id)
        logger.info(f"Order {order_id} deleted with {len(order.lines)} lines")
