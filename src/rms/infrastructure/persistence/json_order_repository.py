"""JSON-file-backed implementation of OrderRepository.

Lines are stored nested under their order, so a single file write commits
or removes the header and all of its lines together.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from rms.domain.exceptions import PersistenceError
from rms.domain.model.order import Order, OrderLine, OrderStatus
from rms.domain.model.value_objects import Money, Quantity
from rms.domain.repository.order_repository import OrderRepository
from rms.infrastructure.persistence.json_file import JsonFile

logger = logging.getLogger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._file.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self, status: OrderStatus | None = None) -> list[Order]:
        orders = [self._to_domain(raw) for raw in self._file.load()]
        if status is not None:
            orders = [o for o in orders if o.status == status]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def add(self, order: Order) -> None:
        records = self._file.load()
        if any(raw["id"] == order.id for raw in records):
            raise PersistenceError(f"Order {order.id} already exists")
        records.append(self._to_raw(order))
        self._file.write(records)
        logger.debug(f"Wrote order {order.id} with {len(order.lines)} lines")

    def save(self, order: Order) -> None:
        records = self._file.load()
        for raw in records:
            if raw["id"] == order.id:
                # Lines are immutable after creation; only the header moves.
                raw.update(
                    status=order.status.value,
                    notes=order.notes,
                    updated_at=order.updated_at.isoformat(),
                )
                self._file.write(records)
                return
        raise PersistenceError(f"Order {order.id} is not stored")

    def delete(self, order_id: str) -> None:
        records = self._file.load()
        self._file.write([raw for raw in records if raw["id"] != order_id])

    def has_lines_for_dish(self, dish_id: str) -> bool:
        return any(
            line["dish_id"] == dish_id
            for raw in self._file.load()
            for line in raw["items"]
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "total_value": str(order.total_value.amount),
            "status": order.status.value,
            "notes": order.notes,
            "created_at": order.created_at.isoformat(),
            "updated_at": order.updated_at.isoformat(),
            "items": [
                {
                    "id": line.id,
                    "order_id": order.id,
                    "dish_id": line.dish_id,
                    "dish_name": line.dish_name,
                    "quantity": line.quantity.value,
                    "unit_price": str(line.unit_price.amount),
                    "subtotal": str(line.subtotal.amount),
                }
                for line in order.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        lines = [
            OrderLine(
                id=i["id"],
                order_id=raw["id"],
                dish_id=i["dish_id"],
                dish_name=i["dish_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"])),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            lines=lines,
            status=OrderStatus(raw["status"]),
            notes=raw.get("notes"),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
