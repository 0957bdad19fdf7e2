"""Unit tests for the field rule tables."""

import pytest

from rms.application.dto import OrderItemSpec
from rms.domain.validation import (
    DISH_RULES,
    ORDER_RULES,
    validate,
    validate_order_lines,
)
from tests.fakes import PIZZA_ID


def _dish_payload(**overrides):
    payload = {
        "name": "Pizza",
        "description": "Pizza tradicional italiana",
        "price": 35.90,
        "category": "MAIN_COURSE",
    }
    payload.update(overrides)
    return payload


def _fields(errors):
    return [e.field for e in errors]


class TestDishRules:

    def test_valid_payload(self):
        assert validate(_dish_payload(), DISH_RULES) == []

    def test_empty_name_is_required(self):
        errors = validate(_dish_payload(name=""), DISH_RULES)
        assert _fields(errors) == ["name"]
        assert errors[0].message == "Name is required"

    def test_short_name(self):
        errors = validate(_dish_payload(name=" P "), DISH_RULES)
        assert errors[0].message == "Name must be between 2 and 100 characters"

    def test_every_violation_reported(self):
        errors = validate(
            {"name": "", "description": "short", "price": -1, "category": "SNACK"},
            DISH_RULES,
        )
        assert _fields(errors) == ["name", "description", "price", "category"]

    def test_missing_fields_are_required(self):
        errors = validate({}, DISH_RULES)
        assert _fields(errors) == ["name", "description", "price", "category"]

    @pytest.mark.parametrize("price", ["0", 0, "0.001", 0.004, 10000, "9999.995", "abc", True])
    def test_bad_prices(self, price):
        assert _fields(validate(_dish_payload(price=price), DISH_RULES)) == ["price"]

    @pytest.mark.parametrize("price", ["9999.99", 0.01, "0.005", 12])
    def test_good_prices(self, price):
        assert validate(_dish_payload(price=price), DISH_RULES) == []

    def test_active_must_be_boolean(self):
        errors = validate(_dish_payload(active="yes"), DISH_RULES)
        assert _fields(errors) == ["active"]

    def test_active_cannot_be_null(self):
        errors = validate(_dish_payload(active=None), DISH_RULES)
        assert _fields(errors) == ["active"]
        assert errors[0].message == "Active must be a boolean"

    def test_null_image_means_no_image(self):
        assert validate(_dish_payload(image=None), DISH_RULES) == []

    @pytest.mark.parametrize("image", ["", "https://example.com/p.png", "http://x.io/a"])
    def test_accepted_images(self, image):
        assert validate(_dish_payload(image=image), DISH_RULES) == []

    @pytest.mark.parametrize("image", ["ftp://example.com/p.png", "not a url", "https://"])
    def test_rejected_images(self, image):
        assert _fields(validate(_dish_payload(image=image), DISH_RULES)) == ["image"]

    def test_error_carries_offending_value(self):
        errors = validate(_dish_payload(category="SNACK"), DISH_RULES)
        assert errors[0].value == "SNACK"


class TestPartialValidation:

    def test_only_supplied_fields_checked(self):
        assert validate({"price": "12.00"}, DISH_RULES, partial=True) == []

    def test_supplied_field_still_validated(self):
        errors = validate({"description": "tiny"}, DISH_RULES, partial=True)
        assert _fields(errors) == ["description"]

    def test_explicit_null_for_mandatory_field(self):
        errors = validate({"name": None}, DISH_RULES, partial=True)
        assert _fields(errors) == ["name"]

    def test_explicit_null_for_active(self):
        errors = validate({"active": None}, DISH_RULES, partial=True)
        assert _fields(errors) == ["active"]


class TestOrderRules:

    def test_notes_limit(self):
        assert validate({"notes": "x" * 500}, ORDER_RULES) == []
        assert _fields(validate({"notes": "x" * 501}, ORDER_RULES)) == ["notes"]

    def test_status_must_be_lifecycle_value(self):
        errors = validate({"status": "COOKING"}, ORDER_RULES)
        assert _fields(errors) == ["status"]
        assert "RECEIVED, PREPARING, READY, DELIVERED" in errors[0].message


class TestOrderLineRules:

    def test_empty_list(self):
        errors = validate_order_lines([])
        assert _fields(errors) == ["items"]

    def test_too_many_lines(self):
        lines = [OrderItemSpec(PIZZA_ID, 1)] * 51
        assert "more than 50" in validate_order_lines(lines)[0].message

    def test_field_paths_use_line_index(self):
        errors = validate_order_lines([
            OrderItemSpec(PIZZA_ID, 1),
            OrderItemSpec("not-a-uuid", 0),
        ])
        assert _fields(errors) == ["items.1.dishId", "items.1.quantity"]

    @pytest.mark.parametrize("quantity", [0, 100, 2.5, "3", None])
    def test_bad_quantities(self, quantity):
        errors = validate_order_lines([OrderItemSpec(PIZZA_ID, quantity)])
        assert _fields(errors) == ["items.0.quantity"]

    def test_missing_dish_id(self):
        errors = validate_order_lines([OrderItemSpec(None, 1)])
        assert errors[0].message == "Dish ID is required"
