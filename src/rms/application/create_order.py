"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
This is the only place that coordinates multiple aggregates (Dish
admission + Order creation).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from rms.application.dto import OrderDTO, OrderItemSpec
from rms.application.mapping import order_to_dto
from rms.domain.exceptions import PersistenceError, ValidationError
from rms.domain.model.order import Order, OrderLine, OrderStatus
from rms.domain.model.value_objects import Quantity
from rms.domain.repository.dish_repository import DishRepository
from rms.domain.repository.order_repository import OrderRepository
from rms.domain.service.catalog_gate import CatalogGate
from rms.domain.validation import ORDER_RULES, validate, validate_order_lines

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        dish_repo: DishRepository,
    ) -> None:
        self._order_repo = order_repo
        self._dish_repo = dish_repo
        self._catalog_gate = CatalogGate(dish_repo)

    def handle(
        self,
        item_specs: Sequence[OrderItemSpec],
        notes: Any = None,
        status: Any = None,
    ) -> OrderDTO:
        """Create a new restaurant order.

        Steps:
        1. Validate the lines, notes and status, reporting every bad field.
        2. Admit the dishes through the catalog gate (all or nothing).
        3. Build OrderLines with *current* prices (snapshot).
        4. Let the Order aggregate check the total.
        5. Persist header and lines in one atomic write and return a DTO.
        """
        errors = validate_order_lines(item_specs)
        errors += validate({"notes": notes, "status": status}, ORDER_RULES)
        if errors:
            raise ValidationError.from_fields(errors)

        initial_status = OrderStatus(status) if status is not None else OrderStatus.RECEIVED
        if notes is not None:
            notes = notes.strip() or None

        dishes = {
            dish.id: dish
            for dish in self._catalog_gate.resolve_active_entries(item_specs)
        }

        lines = [
            OrderLine(
                dish_id=spec.dish_id,
                dish_name=dishes[spec.dish_id].name,
                quantity=Quantity(spec.quantity),
                unit_price=dishes[spec.dish_id].price,  # <-- price snapshot
            )
            for spec in item_specs
        ]

        order = Order.create(lines=lines, notes=notes, status=initial_status)

        try:
            self._order_repo.add(order)
        except PersistenceError as exc:
            logger.error(f"Failed to persist order {order.id}: {exc}")
            raise

        logger.info(
            f"Order {order.id} created with {len(lines)} lines, "
            f"total {order.total_value}"
        )
        return order_to_dto(order, dishes)
