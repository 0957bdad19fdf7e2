"""Domain -> DTO mapping shared by the handlers."""

from __future__ import annotations

from rms.application.dto import DishDTO, DishSummaryDTO, OrderDTO, OrderLineDTO
from rms.domain.model.dish import Dish
from rms.domain.model.order import Order
from rms.domain.repository.dish_repository import DishRepository


def dish_to_dto(dish: Dish) -> DishDTO:
    return DishDTO(
        id=dish.id,
        name=dish.name,
        description=dish.description,
        price=str(dish.price),
        category=dish.category.value,
        active=dish.active,
        image=dish.image_url,
        created_at=dish.created_at.isoformat(),
        updated_at=dish.updated_at.isoformat(),
    )


def order_to_dto(order: Order, dishes: dict[str, Dish]) -> OrderDTO:
    """Build the order DTO; each line is annotated with its dish summary.

    The summary shows the dish as it is now. Lines whose dish can no
    longer be found fall back to the name captured at creation time.
    """
    items = []
    for line in order.lines:
        dish = dishes.get(line.dish_id)
        if dish is not None:
            summary = DishSummaryDTO(
                id=dish.id,
                name=dish.name,
                price=str(dish.price),
                category=dish.category.value,
            )
        else:
            summary = DishSummaryDTO(
                id=line.dish_id,
                name=line.dish_name,
                price=str(line.unit_price),
                category=None,
            )
        items.append(
            OrderLineDTO(
                id=line.id,
                dish_id=line.dish_id,
                quantity=line.quantity.value,
                unit_price=str(line.unit_price),
                subtotal=str(line.subtotal),
                dish=summary,
            )
        )
    return OrderDTO(
        id=order.id,
        status=order.status.value,
        notes=order.notes,
        items=items,
        total_value=str(order.total_value),
        created_at=order.created_at.isoformat(),
        updated_at=order.updated_at.isoformat(),
    )


def load_order_dto(order: Order, dish_repo: DishRepository) -> OrderDTO:
    dishes = {dish.id: dish for dish in dish_repo.find_by_ids(order.dish_ids)}
    return order_to_dto(order, dishes)
