"""Map domain exceptions to transport status codes and error bodies.

The mapping is keyed on exception class, most specific first, so callers
never need to look at message text to classify a failure.
"""

from __future__ import annotations

from typing import Any

from rms.domain.exceptions import (
    ConflictError,
    DishUnavailableError,
    DomainException,
    EntityNotFoundError,
    PersistenceError,
    ValidationError,
)

HTTP_CREATED = 201
HTTP_OK = 200
HTTP_NO_CONTENT = 204

INVALID_DATA = "Dados inválidos"

_STATUS_BY_TYPE: tuple[tuple[type[DomainException], int, str], ...] = (
    (ValidationError, 400, INVALID_DATA),
    (EntityNotFoundError, 404, "Resource not found"),
    (DishUnavailableError, 404, "Resource not found"),
    (ConflictError, 409, "Conflict"),
    (PersistenceError, 500, "Internal server error"),
)


def error_response(exc: Exception) -> tuple[int, dict[str, Any]]:
    """Return ``(status, body)`` for any exception raised by a handler."""
    for exc_type, status, title in _STATUS_BY_TYPE:
        if isinstance(exc, exc_type):
            break
    else:
        return 500, {
            "error": "Internal server error",
            "message": "An unexpected error occurred while processing the request",
        }

    if isinstance(exc, ValidationError) and exc.details:
        return status, {
            "error": INVALID_DATA,
            "details": [d.to_dict() for d in exc.details],
        }

    body: dict[str, Any] = {"error": title, "message": exc.message, "code": exc.code}
    if isinstance(exc, DishUnavailableError):
        body["missingIds"] = exc.missing_ids
    if isinstance(exc, PersistenceError):
        # Storage details stay in the logs.
        body["message"] = "The request could not be stored, it is safe to retry"
    return status, body
