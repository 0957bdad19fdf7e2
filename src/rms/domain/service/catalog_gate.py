"""Domain service: Catalog Gate.

Admits the dishes of a new order. Every requested dish must exist and be
active; if any of them is not, the whole request is refused and the error
lists every offending ID so the caller can correct the cart in one go.

All IDs are resolved in a single repository call, so admission is
all-or-nothing over one consistent read.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rms.domain.exceptions import DishUnavailableError, ValidationError
from rms.domain.model.dish import Dish
from rms.domain.repository.dish_repository import DishRepository
from rms.domain.validation import RequestedLine, validate_order_lines

logger = logging.getLogger(__name__)


class CatalogGate:

    def __init__(self, dish_repo: DishRepository) -> None:
        self._dish_repo = dish_repo

    def resolve_active_entries(self, requested_lines: Sequence[RequestedLine]) -> list[Dish]:
        """Return the active dishes for *requested_lines*, one per distinct ID.

        Raises ValidationError before any lookup if the lines are malformed,
        and DishUnavailableError if any dish is missing or inactive.
        """
        errors = validate_order_lines(requested_lines)
        if errors:
            raise ValidationError.from_fields(errors)

        requested_ids = list(dict.fromkeys(line.dish_id for line in requested_lines))
        dishes = self._dish_repo.find_active_by_ids(requested_ids)

        if len(dishes) < len(requested_ids):
            found = {dish.id for dish in dishes}
            missing = [dish_id for dish_id in requested_ids if dish_id not in found]
            logger.warning(f"Order admission refused, unavailable dishes: {missing}")
            raise DishUnavailableError(missing)

        return dishes
