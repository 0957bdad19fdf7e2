"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. Settings are read on each
call so the environment can point a process at another data directory.
"""

from __future__ import annotations

from rms.domain.model.order import StatusPolicy
from rms.infrastructure.config import load_settings
from rms.infrastructure.persistence.json_dish_repository import JsonDishRepository
from rms.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)


def dish_repository() -> JsonDishRepository:
    return JsonDishRepository(load_settings().dishes_file)


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(load_settings().orders_file)


def status_policy() -> StatusPolicy:
    return load_settings().status_policy
