"""Abstract repository for Order aggregate.

The order and its lines are one unit of storage: ``add`` and ``delete``
either apply to the header and every line, or to nothing at all.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from rms.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self, status: OrderStatus | None = None) -> list[Order]:
        """Return orders, newest first, optionally filtered by status."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Atomically persist a new order header together with its lines.

        Raises PersistenceError if nothing could be committed.
        """

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist header changes (status, notes) of an existing order."""

    @abstractmethod
    def delete(self, order_id: str) -> None:
        """Atomically remove the order's lines and then its header."""

    @abstractmethod
    def has_lines_for_dish(self, dish_id: str) -> bool:
        """True if any order line references the dish."""
