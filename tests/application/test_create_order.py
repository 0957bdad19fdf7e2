"""Integration tests for the CreateOrder use case.

Uses in-memory fake repositories, no file I/O.
"""

from decimal import Decimal

import pytest

from rms.application.create_order import CreateOrderHandler
from rms.application.dto import CreateOrderRequest, OrderItemSpec
from rms.domain.exceptions import DishUnavailableError, PersistenceError, ValidationError
from rms.domain.model.value_objects import Money
from tests.fakes import (
    CAKE_ID,
    MISSING_ID,
    PIZZA_ID,
    SODA_ID,
    FakeDishRepository,
    FakeOrderRepository,
    default_menu,
    make_dish,
)


def _setup(
    dishes=None,
) -> tuple[CreateOrderHandler, FakeOrderRepository, FakeDishRepository]:
    """Build handler with fake repos, pre-loaded with the default menu."""
    order_repo = FakeOrderRepository()
    dish_repo = FakeDishRepository(default_menu() if dishes is None else dishes)
    handler = CreateOrderHandler(order_repo, dish_repo)
    return handler, order_repo, dish_repo


class TestCreateOrderHappyPath:

    def test_two_pizzas(self):
        handler, _, _ = _setup()
        dto = handler.handle([OrderItemSpec(PIZZA_ID, 2)])
        assert dto.total_value == "71.80"
        assert dto.status == "RECEIVED"
        assert len(dto.items) == 1
        assert dto.items[0].subtotal == "71.80"
        assert dto.items[0].unit_price == "35.90"

    def test_total_equals_sum_of_subtotals(self):
        handler, order_repo, _ = _setup()
        dto = handler.handle([OrderItemSpec(PIZZA_ID, 3), OrderItemSpec(SODA_ID, 7)])
        order = order_repo.get_by_id(dto.id)
        assert order.total_value == sum((l.subtotal for l in order.lines), Money.zero())
        for line in order.lines:
            assert line.subtotal == line.unit_price * line.quantity.value
        assert dto.total_value == "153.20"

    def test_no_rounding_drift(self):
        handler, _, _ = _setup([make_dish(PIZZA_ID, "Espresso", "0.33")])
        dto = handler.handle([OrderItemSpec(PIZZA_ID, 99)])
        assert Decimal(dto.total_value) == Decimal("32.67")

    def test_repeated_dish_keeps_separate_lines(self):
        handler, _, _ = _setup()
        dto = handler.handle([OrderItemSpec(PIZZA_ID, 1), OrderItemSpec(PIZZA_ID, 2)])
        assert [i.quantity for i in dto.items] == [1, 2]
        assert dto.total_value == "107.70"

    def test_persists_order_with_lines(self):
        handler, order_repo, _ = _setup()
        dto = handler.handle([OrderItemSpec(PIZZA_ID, 1)], notes="  No onions ")
        saved = order_repo.get_by_id(dto.id)
        assert saved is not None
        assert saved.notes == "No onions"
        assert [line.dish_id for line in saved.lines] == [PIZZA_ID]

    def test_blank_notes_stored_as_none(self):
        handler, _, _ = _setup()
        assert handler.handle([OrderItemSpec(PIZZA_ID, 1)], notes="   ").notes is None

    def test_explicit_initial_status(self):
        handler, _, _ = _setup()
        dto = handler.handle([OrderItemSpec(PIZZA_ID, 1)], status="PREPARING")
        assert dto.status == "PREPARING"

    def test_lines_carry_dish_summary(self):
        handler, _, _ = _setup()
        summary = handler.handle([OrderItemSpec(SODA_ID, 1)]).items[0].dish
        assert summary.to_dict() == {
            "id": SODA_ID,
            "name": "Soda",
            "price": "6.50",
            "category": "DRINK",
        }

    @pytest.mark.parametrize("quantity", [1, 99])
    def test_quantity_bounds_accepted(self, quantity):
        handler, _, _ = _setup()
        assert handler.handle([OrderItemSpec(PIZZA_ID, quantity)]).items[0].quantity == quantity

    def test_wire_payload(self):
        handler, _, _ = _setup()
        request = CreateOrderRequest.from_payload(
            {"items": [{"dishId": PIZZA_ID, "quantity": 2}], "notes": "Table 4"}
        )
        payload = handler.handle(request.items, request.notes, request.status).to_dict()
        assert payload["totalValue"] == "71.80"
        assert payload["notes"] == "Table 4"
        assert payload["items"][0]["dishId"] == PIZZA_ID
        assert payload["items"][0]["dish"]["name"] == "Pizza"


class TestCreateOrderPriceLock:

    def test_price_snapshot_at_creation(self):
        handler, order_repo, dish_repo = _setup()

        dto = handler.handle([OrderItemSpec(PIZZA_ID, 1)])
        assert dto.total_value == "35.90"

        # Change the dish price
        pizza = dish_repo.get_by_id(PIZZA_ID)
        pizza.price = Money.of("99.99")
        dish_repo.save(pizza)

        # Existing order still has original price
        saved = order_repo.get_by_id(dto.id)
        assert str(saved.total_value) == "35.90"
        assert str(saved.lines[0].unit_price) == "35.90"


class TestCreateOrderValidation:

    def test_empty_items_rejected_before_lookup(self):
        handler, order_repo, dish_repo = _setup()
        with pytest.raises(ValidationError, match="at least one item"):
            handler.handle([])
        assert dish_repo.active_lookups == 0
        assert order_repo.list_all() == []

    @pytest.mark.parametrize("quantity", [0, 100])
    def test_quantity_bounds_rejected(self, quantity):
        handler, _, dish_repo = _setup()
        with pytest.raises(ValidationError) as exc_info:
            handler.handle([OrderItemSpec(PIZZA_ID, quantity)])
        assert exc_info.value.details[0].field == "items.0.quantity"
        assert dish_repo.active_lookups == 0

    def test_all_bad_fields_reported_together(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError) as exc_info:
            handler.handle(
                [OrderItemSpec("nope", 1), OrderItemSpec(PIZZA_ID, "2")],
                notes="x" * 501,
                status="COOKING",
            )
        assert [d.field for d in exc_info.value.details] == [
            "items.0.dishId",
            "items.1.quantity",
            "notes",
            "status",
        ]

    def test_zero_priced_dish_rejected(self):
        handler, order_repo, _ = _setup([make_dish(PIZZA_ID, "Water", "0.00")])
        with pytest.raises(ValidationError, match="greater than zero"):
            handler.handle([OrderItemSpec(PIZZA_ID, 1)])
        assert order_repo.list_all() == []


class TestCreateOrderUnavailableDishes:

    def test_unknown_dish_rejected_and_nothing_persisted(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(DishUnavailableError) as exc_info:
            handler.handle([OrderItemSpec(PIZZA_ID, 1), OrderItemSpec(MISSING_ID, 1)])
        assert exc_info.value.missing_ids == [MISSING_ID]
        assert order_repo.list_all() == []

    def test_just_deactivated_dish_rejected(self):
        handler, order_repo, dish_repo = _setup()
        pizza = dish_repo.get_by_id(PIZZA_ID)
        pizza.active = False
        dish_repo.save(pizza)

        with pytest.raises(DishUnavailableError) as exc_info:
            handler.handle([OrderItemSpec(PIZZA_ID, 1)])
        assert exc_info.value.missing_ids == [PIZZA_ID]
        assert order_repo.list_all() == []

    def test_every_unavailable_dish_listed(self):
        handler, _, _ = _setup()
        with pytest.raises(DishUnavailableError) as exc_info:
            handler.handle([OrderItemSpec(CAKE_ID, 1), OrderItemSpec(MISSING_ID, 2)])
        assert exc_info.value.missing_ids == [CAKE_ID, MISSING_ID]


class TestCreateOrderPersistenceFailure:

    def test_failure_propagates_and_leaves_no_order(self):
        handler, order_repo, _ = _setup()
        order_repo.fail_on_add = True
        with pytest.raises(PersistenceError):
            handler.handle([OrderItemSpec(PIZZA_ID, 1)])
        assert order_repo.list_all() == []

    def test_retry_after_failure_succeeds(self):
        handler, order_repo, _ = _setup()
        order_repo.fail_on_add = True
        with pytest.raises(PersistenceError):
            handler.handle([OrderItemSpec(PIZZA_ID, 1)])
        order_repo.fail_on_add = False
        handler.handle([OrderItemSpec(PIZZA_ID, 1)])
        assert len(order_repo.list_all()) == 1
