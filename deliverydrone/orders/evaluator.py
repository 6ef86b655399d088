"""Mini README: Per-order restaurant coverage and pickup ordering.

Structure:
    * OrderEvaluator - decides which restaurants an order needs and in
      which order the drone should visit them.

``coverage`` returns ``None`` for orders that would need more than two
restaurants. ``rank`` asks the geocoder for restaurant coordinates, so a
``GeocodeError`` raised there propagates to the caller, which skips the
order instead of flying to a made-up position.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional

from ..geometry import Position, distance
from ..logging_utils import get_logger
from .models import Order, Restaurant
from .pricing import MAX_RESTAURANTS

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..providers.base import GeocodeProvider

LOGGER = get_logger(__name__)


class OrderEvaluator:
    """Identify and order the restaurants serving an order."""

    def __init__(self, restaurants: Iterable[Restaurant], geocoder: "GeocodeProvider") -> None:
        self.restaurants: List[Restaurant] = list(restaurants)
        self.geocoder = geocoder

    def coverage(self, order: Order) -> Optional[List[Restaurant]]:
        """Unique restaurants selling the order's items, in first-seen order."""

        needed: List[Restaurant] = []
        seen_names = set()
        for item in order.items:
            for restaurant in self.restaurants:
                if restaurant.sells(item) and restaurant.name not in seen_names:
                    needed.append(restaurant)
                    seen_names.add(restaurant.name)
        if len(needed) > MAX_RESTAURANTS:
            LOGGER.info(
                "Order %s needs %s restaurants (limit %s)",
                order.order_id,
                len(needed),
                MAX_RESTAURANTS,
            )
            return None
        return needed

    def rank(self, restaurants: List[Restaurant], origin: Position) -> List[Restaurant]:
        """Order at most two restaurants nearest-first from ``origin``."""

        if len(restaurants) > MAX_RESTAURANTS:
            raise ValueError(f"Cannot rank {len(restaurants)} restaurants")
        if len(restaurants) < 2:
            return list(restaurants)
        first, second = restaurants
        first_distance = distance(origin, self.geocoder.resolve(first.location))
        second_distance = distance(origin, self.geocoder.resolve(second.location))
        if first_distance <= second_distance:
            return [first, second]
        return [second, first]

    def evaluate(self, order: Order, origin: Position) -> Optional[List[Restaurant]]:
        """Coverage followed by ranking; ``None`` when the order is infeasible."""

        restaurants = self.coverage(order)
        if restaurants is None:
            return None
        if not restaurants:
            LOGGER.info("Order %s has no item sold by any restaurant", order.order_id)
            return None
        return self.rank(restaurants, origin)
