"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each class carries a stable ``code`` so callers can branch on the kind of
failure without inspecting the message text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class DomainException(Exception):
    """Base class for all domain errors."""

    code = "DOMAIN_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class FieldError:
    """A single violated field constraint."""

    field: str
    message: str
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"field": self.field, "message": self.message}
        if self.value is not None:
            data["value"] = self.value
        return data


class ValidationError(DomainException):
    """A business rule or invariant was violated by caller input."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, details: list[FieldError] | None = None) -> None:
        super().__init__(message)
        self.details = list(details or [])

    @classmethod
    def from_fields(cls, errors: list[FieldError]) -> ValidationError:
        summary = "; ".join(f"{e.field}: {e.message}" for e in errors)
        return cls(f"Invalid data: {summary}", details=errors)


class InvalidStatusError(ValidationError):
    """An order status outside the lifecycle enum was supplied."""

    code = "INVALID_STATUS"


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    code = "NOT_FOUND"


class DishUnavailableError(DomainException):
    """One or more requested dishes do not exist or are inactive."""

    code = "DISH_UNAVAILABLE"

    def __init__(self, missing_ids: list[str]) -> None:
        super().__init__(
            f"Dishes not found or inactive: {', '.join(missing_ids)}"
        )
        self.missing_ids = list(missing_ids)


class ConflictError(DomainException):
    """The operation clashes with existing state (duplicate, dependents)."""

    code = "CONFLICT"


class InvalidTransitionError(ConflictError):
    """A status change skips or reverses the order lifecycle."""

    code = "INVALID_STATUS_TRANSITION"


class PersistenceError(DomainException):
    """The underlying storage failed; nothing was committed."""

    code = "PERSISTENCE_ERROR"
