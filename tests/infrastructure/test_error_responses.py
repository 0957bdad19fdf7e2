"""Tests for the exception -> (status, body) mapping."""

import pytest

from rms.domain.exceptions import (
    ConflictError,
    DishUnavailableError,
    EntityNotFoundError,
    FieldError,
    InvalidStatusError,
    InvalidTransitionError,
    PersistenceError,
    ValidationError,
)
from rms.infrastructure.error_responses import error_response


class TestErrorResponse:

    def test_field_errors(self):
        exc = ValidationError.from_fields([
            FieldError("name", "Name is required"),
            FieldError("price", "Price must be greater than zero", 0),
        ])
        status, body = error_response(exc)
        assert status == 400
        assert body == {
            "error": "Dados inválidos",
            "details": [
                {"field": "name", "message": "Name is required"},
                {"field": "price", "message": "Price must be greater than zero", "value": 0},
            ],
        }

    def test_validation_without_details(self):
        status, body = error_response(ValidationError("bad"))
        assert status == 400
        assert body["code"] == "VALIDATION_ERROR"

    def test_invalid_status_is_a_validation_failure(self):
        status, _ = error_response(InvalidStatusError("nope"))
        assert status == 400

    @pytest.mark.parametrize(
        "exc, status, code",
        [
            (EntityNotFoundError("Order x not found"), 404, "NOT_FOUND"),
            (DishUnavailableError(["a", "b"]), 404, "DISH_UNAVAILABLE"),
            (ConflictError("dup"), 409, "CONFLICT"),
            (InvalidTransitionError("skip"), 409, "INVALID_STATUS_TRANSITION"),
            (PersistenceError("disk"), 500, "PERSISTENCE_ERROR"),
        ],
    )
    def test_status_mapping(self, exc, status, code):
        got_status, body = error_response(exc)
        assert got_status == status
        assert body["code"] == code
        assert body["message"]

    def test_unavailable_dishes_listed(self):
        _, body = error_response(DishUnavailableError(["a", "b"]))
        assert body["missingIds"] == ["a", "b"]

    def test_persistence_details_hidden(self):
        _, body = error_response(PersistenceError("/var/data/orders.json: disk full"))
        assert "disk full" not in body["message"]

    def test_unexpected_exception(self):
        status, body = error_response(RuntimeError("boom"))
        assert status == 500
        assert "boom" not in body["message"]
