"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. ``to_dict()`` renders the
camelCase wire shape; money is rendered as a string with two decimals.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from rms.domain.exceptions import FieldError, ValidationError


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (dish ID + quantity).

    Values are kept as received; the catalog gate validates them.
    """

    dish_id: Any
    quantity: Any


@dataclass(frozen=True)
class CreateOrderRequest:
    """Input: an order-creation request body."""

    items: list[OrderItemSpec]
    notes: Any = None
    status: Any = None

    @staticmethod
    def from_payload(payload: Mapping[str, Any]) -> CreateOrderRequest:
        """Parse ``{items: [{dishId, quantity}], notes?, status?}``.

        Only the container shape is checked here; field values are left to
        the order rule tables.
        """
        if not isinstance(payload, Mapping):
            raise ValidationError.from_fields(
                [FieldError("body", "Request body must be an object")]
            )
        raw_items = payload.get("items")
        if not isinstance(raw_items, list):
            raise ValidationError.from_fields(
                [FieldError("items", "Items are required and must be a list")]
            )
        errors = [
            FieldError(f"items.{i}", "Item must be an object")
            for i, raw in enumerate(raw_items)
            if not isinstance(raw, Mapping)
        ]
        if errors:
            raise ValidationError.from_fields(errors)
        return CreateOrderRequest(
            items=[OrderItemSpec(raw.get("dishId"), raw.get("quantity")) for raw in raw_items],
            notes=payload.get("notes"),
            status=payload.get("status"),
        )


@dataclass(frozen=True)
class DishSummaryDTO:
    id: str
    name: str
    price: str
    category: str | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "category": self.category,
        }


@dataclass(frozen=True)
class DishDTO:
    """Output: a catalog dish."""

    id: str
    name: str
    description: str
    price: str
    category: str
    active: bool
    image: str | None
    created_at: str
    updated_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "category": self.category,
            "active": self.active,
            "image": self.image,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single order line as displayed to the user."""

    id: str
    dish_id: str
    quantity: int
    unit_price: str
    subtotal: str
    dish: DishSummaryDTO

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "dishId": self.dish_id,
            "quantity": self.quantity,
            "unitPrice": self.unit_price,
            "subtotal": self.subtotal,
            "dish": self.dish.to_dict(),
        }


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    status: str
    notes: str | None
    items: list[OrderLineDTO]
    total_value: str
    created_at: str
    updated_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "totalValue": self.total_value,
            "status": self.status,
            "notes": self.notes,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "items": [item.to_dict() for item in self.items],
        }
