"""Field constraint tables.

Every entity's input constraints are declared once here as data and
evaluated by ``validate()``. Creation checks every rule; partial updates
only check the fields that were supplied. All violations are collected so
the caller can fix a request in one round-trip.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Protocol
from urllib.parse import urlparse

from rms.domain.exceptions import FieldError
from rms.domain.model.dish import Category
from rms.domain.model.order import OrderStatus
from rms.domain.model.value_objects import MAX_QUANTITY, MIN_QUANTITY

MAX_PRICE = Decimal("9999.99")
MAX_NOTES_LENGTH = 500
MAX_ORDER_LINES = 50


@dataclass(frozen=True)
class Check:
    predicate: Callable[[Any], bool]
    message: str


@dataclass(frozen=True)
class FieldRule:
    """Constraints for one input field, evaluated in order.

    Only the first failing check is reported for a field. An optional
    field that is not ``nullable`` treats an explicit null as a value and
    runs its checks against it.
    """

    name: str
    checks: tuple[Check, ...]
    required: bool = True
    required_message: str = ""
    nullable: bool = True


# --- Predicates ---------------------------------------------------------------


def _is_text(value: Any) -> bool:
    return isinstance(value, str)


def _not_blank(value: Any) -> bool:
    return bool(value.strip())


def _length_between(low: int, high: int) -> Callable[[Any], bool]:
    return lambda value: low <= len(value.strip()) <= high


def _as_decimal(value: Any) -> Decimal | None:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal, str)):
        return None
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


def _is_number(value: Any) -> bool:
    return _as_decimal(value) is not None


def _in_cents(value: Any) -> Decimal:
    # Same rounding Money applies when the price is stored
    return _as_decimal(value).quantize(Decimal("0.01"), ROUND_HALF_UP)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_uuid(value: Any) -> bool:
    try:
        uuid.UUID(value)
    except (TypeError, ValueError, AttributeError):
        return False
    return True


def _is_http_url(value: Any) -> bool:
    if not value.strip():
        return True
    parsed = urlparse(value.strip())
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def one_of(choices: Sequence[str]) -> Callable[[Any], bool]:
    return lambda value: isinstance(value, str) and value in choices


# --- Rule tables --------------------------------------------------------------

DISH_RULES: tuple[FieldRule, ...] = (
    FieldRule(
        "name",
        (
            Check(_is_text, "Name must be a string"),
            Check(_not_blank, "Name is required"),
            Check(_length_between(2, 100), "Name must be between 2 and 100 characters"),
        ),
        required_message="Name is required",
    ),
    FieldRule(
        "description",
        (
            Check(_is_text, "Description must be a string"),
            Check(_not_blank, "Description is required"),
            Check(
                _length_between(10, 500),
                "Description must be between 10 and 500 characters",
            ),
        ),
        required_message="Description is required",
    ),
    FieldRule(
        "price",
        (
            Check(_is_number, "Price must be a valid number"),
            Check(lambda v: _in_cents(v) > 0, "Price must be greater than zero"),
            Check(lambda v: _in_cents(v) <= MAX_PRICE, f"Price must not exceed {MAX_PRICE}"),
        ),
        required_message="Price is required",
    ),
    FieldRule(
        "category",
        (
            Check(
                one_of(Category.values()),
                f"Category must be one of {', '.join(Category.values())}",
            ),
        ),
        required_message="Category is required",
    ),
    FieldRule(
        "active",
        (Check(lambda v: isinstance(v, bool), "Active must be a boolean"),),
        required=False,
        nullable=False,
    ),
    FieldRule(
        "image",
        (
            Check(_is_text, "Image URL must be a string"),
            Check(_is_http_url, "Image URL must be a valid http or https URL"),
        ),
        required=False,
    ),
)

ORDER_RULES: tuple[FieldRule, ...] = (
    FieldRule(
        "notes",
        (
            Check(_is_text, "Notes must be a string"),
            Check(
                lambda v: len(v) <= MAX_NOTES_LENGTH,
                f"Notes must be at most {MAX_NOTES_LENGTH} characters",
            ),
        ),
        required=False,
    ),
    FieldRule(
        "status",
        (
            Check(
                one_of(OrderStatus.values()),
                f"Status must be one of {', '.join(OrderStatus.values())}",
            ),
        ),
        required=False,
    ),
)

ORDER_LINE_RULES: tuple[FieldRule, ...] = (
    FieldRule(
        "dishId",
        (
            Check(_is_text, "Dish ID must be a string"),
            Check(_is_uuid, "Dish ID must be a valid UUID"),
        ),
        required_message="Dish ID is required",
    ),
    FieldRule(
        "quantity",
        (
            Check(_is_int, "Quantity must be an integer"),
            Check(lambda v: v >= MIN_QUANTITY, f"Quantity must be at least {MIN_QUANTITY}"),
            Check(lambda v: v <= MAX_QUANTITY, f"Quantity cannot exceed {MAX_QUANTITY}"),
        ),
        required_message="Quantity is required",
    ),
)


# --- Evaluation ---------------------------------------------------------------


def validate(
    data: Mapping[str, Any],
    rules: Sequence[FieldRule],
    partial: bool = False,
    prefix: str = "",
) -> list[FieldError]:
    """Evaluate *rules* over *data* and return every violated field."""
    errors: list[FieldError] = []
    for rule in rules:
        field_name = prefix + rule.name
        value = data.get(rule.name)
        explicit_null = value is None and rule.name in data
        if value is None and not (explicit_null and not rule.nullable):
            if rule.required and (not partial or explicit_null):
                errors.append(FieldError(field_name, rule.required_message))
            continue
        for check in rule.checks:
            if not check.predicate(value):
                errors.append(FieldError(field_name, check.message, value))
                break
    return errors


class RequestedLine(Protocol):
    dish_id: Any
    quantity: Any


def validate_order_lines(lines: Sequence[RequestedLine]) -> list[FieldError]:
    """Check the list of requested lines and each line in it."""
    if not lines:
        return [FieldError("items", "Order must have at least one item")]
    if len(lines) > MAX_ORDER_LINES:
        return [
            FieldError("items", f"Order cannot have more than {MAX_ORDER_LINES} items")
        ]
    errors: list[FieldError] = []
    for index, line in enumerate(lines):
        errors.extend(
            validate(
                {"dishId": line.dish_id, "quantity": line.quantity},
                ORDER_LINE_RULES,
                prefix=f"items.{index}.",
            )
        )
    return errors
