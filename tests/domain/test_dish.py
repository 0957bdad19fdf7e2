"""Unit tests for the Dish aggregate."""

from rms.domain.model.dish import Category, Dish
from rms.domain.model.value_objects import Money


def _dish(name: str = "Pizza") -> Dish:
    return Dish(
        id=Dish.new_id(),
        name=name,
        description="Traditional Italian pizza",
        price=Money.of("35.90"),
        category=Category.MAIN_COURSE,
    )


class TestDish:

    def test_active_by_default(self):
        assert _dish().active is True

    def test_new_ids_are_unique(self):
        assert Dish.new_id() != Dish.new_id()

    def test_same_name_ignores_case_and_padding(self):
        assert _dish("Pizza").same_name_as("  PIZZA ")
        assert not _dish("Pizza").same_name_as("Pasta")

    def test_touch_moves_updated_at(self):
        dish = _dish()
        before = dish.updated_at
        dish.touch()
        assert dish.updated_at >= before

    def test_category_values(self):
        assert Category.values() == ["APPETIZER", "MAIN_COURSE", "DESSERT", "DRINK"]
