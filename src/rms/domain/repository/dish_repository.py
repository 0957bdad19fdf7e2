"""Abstract repository for Dish aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from rms.domain.model.dish import Dish


class DishRepository(ABC):

    @abstractmethod
    def get_by_id(self, dish_id: str) -> Dish | None:
        """Return a dish by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str, exclude_id: str | None = None) -> Dish | None:
        """Return a dish whose name matches case-insensitively, or None.

        ``exclude_id`` skips one dish, so an update can check its new
        name against every *other* dish.
        """

    @abstractmethod
    def find_by_ids(self, dish_ids: Iterable[str]) -> list[Dish]:
        """Return the dishes with the given IDs, active or not."""

    @abstractmethod
    def find_active_by_ids(self, dish_ids: Iterable[str]) -> list[Dish]:
        """Return the *active* dishes among the given IDs in one lookup."""

    @abstractmethod
    def list_all(self) -> list[Dish]:
        """Return every dish in the catalog."""

    @abstractmethod
    def save(self, dish: Dish) -> None:
        """Persist a new or updated dish."""

    @abstractmethod
    def delete(self, dish_id: str) -> None:
        """Remove a dish from the catalog."""
