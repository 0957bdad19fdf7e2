"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its lines. Lines are written once,
when the order is created, and never change afterwards; only the status
and the notes move over the order's lifetime.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from rms.domain.exceptions import (
    FieldError,
    InvalidStatusError,
    InvalidTransitionError,
    ValidationError,
)
from rms.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    RECEIVED = "RECEIVED"
    PREPARING = "PREPARING"
    READY = "READY"
    DELIVERED = "DELIVERED"

    @classmethod
    def values(cls) -> list[str]:
        return [s.value for s in cls]

    @classmethod
    def parse(cls, raw: object) -> OrderStatus:
        """Return the member named by *raw* or raise InvalidStatusError."""
        if isinstance(raw, OrderStatus):
            return raw
        try:
            return cls(raw)
        except ValueError:
            raise InvalidStatusError(
                f"Invalid status {raw!r}. Accepted values: {', '.join(cls.values())}",
                details=[
                    FieldError(
                        "status",
                        f"Status must be one of {', '.join(cls.values())}",
                        raw,
                    )
                ],
            ) from None

    @property
    def successor(self) -> OrderStatus | None:
        members = list(OrderStatus)
        index = members.index(self)
        return members[index + 1] if index + 1 < len(members) else None

    @property
    def is_terminal(self) -> bool:
        return self.successor is None


class StatusPolicy(Enum):
    """How far a single status update may move an order."""

    STRICT = "strict"  # only the immediate successor
    PERMISSIVE = "permissive"  # any lifecycle value overwrites the current one


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class OrderLine:
    """Captures the price snapshot of a dish at order-creation time.

    ``unit_price`` never follows later catalog price changes.
    """

    dish_id: str
    dish_name: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time
    id: str = field(default_factory=_new_id)
    order_id: str | None = None

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for restaurant orders.

    Use the ``Order.create()`` factory for new orders, it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: str
    lines: list[OrderLine]
    status: OrderStatus = OrderStatus.RECEIVED
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        lines: list[OrderLine],
        notes: str | None = None,
        status: OrderStatus = OrderStatus.RECEIVED,
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not lines:
            raise ValidationError.from_fields(
                [FieldError("items", "Order must contain at least one item")]
            )

        order = Order(id=_new_id(), lines=list(lines), status=status, notes=notes)
        order.updated_at = order.created_at
        for line in order.lines:
            line.order_id = order.id

        # Prices could be zero from stale catalog data
        if order.total_value <= Money.zero():
            raise ValidationError.from_fields(
                [FieldError("items", "Order total must be greater than zero")]
            )

        return order

    # --- State transitions ----------------------------------------------------

    def change_status(
        self,
        new_status: OrderStatus,
        policy: StatusPolicy = StatusPolicy.STRICT,
    ) -> bool:
        """Move the order to *new_status*.

        Returns False when the order already has that status, in which case
        nothing is modified.
        """
        if new_status == self.status:
            return False
        if policy is StatusPolicy.STRICT and new_status != self.status.successor:
            if self.status.is_terminal:
                detail = f"{self.status.value} is a final status"
            else:
                detail = f"next allowed status is {self.status.successor.value}"
            raise InvalidTransitionError(
                f"Cannot move order from {self.status.value} to "
                f"{new_status.value}: {detail}"
            )
        self.status = new_status
        self._touch()
        return True

    def update_notes(self, notes: str | None) -> None:
        self.notes = notes
        self._touch()

    # --- Computed properties --------------------------------------------------

    @property
    def total_value(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.subtotal
        return result

    @property
    def dish_ids(self) -> list[str]:
        return list(dict.fromkeys(line.dish_id for line in self.lines))

    # --- Internal helpers -----------------------------------------------------

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
