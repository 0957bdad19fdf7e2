"""Dish aggregate.

Dishes live independently of orders. They have their own lifecycle:
prices change, dishes are switched off and on, and they are removed from
the menu once no order refers to them.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from rms.domain.model.value_objects import Money


class Category(Enum):
    APPETIZER = "APPETIZER"
    MAIN_COURSE = "MAIN_COURSE"
    DESSERT = "DESSERT"
    DRINK = "DRINK"

    @classmethod
    def values(cls) -> list[str]:
        return [c.value for c in cls]


@dataclass
class Dish:
    """A dish on the menu.

    Field values are assumed to be already validated against the dish rule
    table; the repository reconstitutes persisted dishes through the plain
    constructor as well.
    """

    id: str
    name: str
    description: str
    price: Money
    category: Category
    active: bool = True
    image_url: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def new_id() -> str:
        return str(uuid.uuid4())

    def same_name_as(self, name: str) -> bool:
        return self.name.casefold() == name.strip().casefold()

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
