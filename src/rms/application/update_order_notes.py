"""Application service: Update Order Notes use case.

Notes are independent of the status and the lines; blank notes clear them.
"""

from __future__ import annotations

from typing import Any

from rms.application.dto import OrderDTO
from rms.application.mapping import load_order_dto
from rms.domain.exceptions import EntityNotFoundError, ValidationError
from rms.domain.repository.dish_repository import DishRepository
from rms.domain.repository.order_repository import OrderRepository
from rms.domain.validation import ORDER_RULES, validate


class UpdateOrderNotesHandler:

    def __init__(self, order_repo: OrderRepository, dish_repo: DishRepository) -> None:
        self._order_repo = order_repo
        self._dish_repo = dish_repo

    def handle(self, order_id: str, notes: Any) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")

        errors = validate({"notes": notes}, ORDER_RULES, partial=True)
        if errors:
            raise ValidationError.from_fields(errors)

        if notes is not None:
            notes = notes.strip() or None
        order.update_notes(notes)
        self._order_repo.save(order)
        return load_order_dto(order, self._dish_repo)
