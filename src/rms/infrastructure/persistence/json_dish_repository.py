"""JSON-file-backed implementation of DishRepository."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from rms.domain.model.dish import Category, Dish
from rms.domain.model.value_objects import Money
from rms.domain.repository.dish_repository import DishRepository
from rms.infrastructure.persistence.json_file import JsonFile


class JsonDishRepository(DishRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- DishRepository interface ---------------------------------------------

    def get_by_id(self, dish_id: str) -> Dish | None:
        return self._load().get(dish_id)

    def get_by_name(self, name: str, exclude_id: str | None = None) -> Dish | None:
        for dish in self._load().values():
            if dish.id != exclude_id and dish.same_name_as(name):
                return dish
        return None

    def find_by_ids(self, dish_ids: Iterable[str]) -> list[Dish]:
        dishes = self._load()
        return [dishes[i] for i in dict.fromkeys(dish_ids) if i in dishes]

    def find_active_by_ids(self, dish_ids: Iterable[str]) -> list[Dish]:
        return [dish for dish in self.find_by_ids(dish_ids) if dish.active]

    def list_all(self) -> list[Dish]:
        return list(self._load().values())

    def save(self, dish: Dish) -> None:
        dishes = self._load()
        dishes[dish.id] = dish
        self._persist(dishes)

    def delete(self, dish_id: str) -> None:
        dishes = self._load()
        dishes.pop(dish_id, None)
        self._persist(dishes)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Dish]:
        return {raw["id"]: self._to_domain(raw) for raw in self._file.load()}

    def _persist(self, dishes: dict[str, Dish]) -> None:
        self._file.write([self._to_raw(d) for d in dishes.values()])

    @staticmethod
    def _to_raw(dish: Dish) -> dict:
        return {
            "id": dish.id,
            "name": dish.name,
            "description": dish.description,
            "price": str(dish.price.amount),
            "category": dish.category.value,
            "active": dish.active,
            "image": dish.image_url,
            "created_at": dish.created_at.isoformat(),
            "updated_at": dish.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Dish:
        return Dish(
            id=raw["id"],
            name=raw["name"],
            description=raw["description"],
            price=Money(Decimal(raw["price"])),
            category=Category(raw["category"]),
            active=raw.get("active", True),
            image_url=raw.get("image"),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
