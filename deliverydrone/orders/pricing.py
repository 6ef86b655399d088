"""Mini README: Menu catalogue and delivery pricing.

Structure:
    * Menus - restaurant catalogue implementing ``price_of``.

Pricing rules: an order must have between one and four items and draw on
at most two restaurants. Valid orders cost the sum of their item prices
plus a flat 50 pence delivery charge; invalid orders cost 0, which the
scheduler reads as "do not attempt".
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..logging_utils import get_logger
from .models import Order, Restaurant

LOGGER = get_logger(__name__)

DELIVERY_CHARGE = 50
MIN_ITEMS = 1
MAX_ITEMS = 4
MAX_RESTAURANTS = 2


class Menus:
    """Catalogue of restaurants that orders are priced against."""

    def __init__(self, restaurants: Iterable[Restaurant]) -> None:
        self._restaurants: List[Restaurant] = list(restaurants)
        LOGGER.debug("Menus initialised with %s restaurants", len(self._restaurants))

    @property
    def restaurants(self) -> List[Restaurant]:
        return list(self._restaurants)

    def price_of(self, items: Sequence[str]) -> int:
        """Return the delivery cost in pence, or 0 when the order is invalid.

        Every restaurant selling an item contributes its price, mirroring
        how the catalogue has always been billed.
        """

        if not MIN_ITEMS <= len(items) <= MAX_ITEMS:
            return 0
        total = 0
        restaurant_names = set()
        for item in items:
            for restaurant in self._restaurants:
                price = restaurant.prices.get(item)
                if price is not None:
                    total += price
                    restaurant_names.add(restaurant.name)
        if len(restaurant_names) > MAX_RESTAURANTS:
            return 0
        return total + DELIVERY_CHARGE

    def total_value(self, orders: Iterable[Order]) -> int:
        """Sum of ``price_of`` across orders."""

        return sum(self.price_of(order.items) for order in orders)
