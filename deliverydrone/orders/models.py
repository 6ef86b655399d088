"""Mini README: Order and restaurant records.

Structure:
    * MenuItem - a single priced item on a restaurant menu.
    * Restaurant - named pickup location with its menu.
    * Order - customer order referencing items and a delivery location.

Locations are opaque tokens (three-word addresses such as
``"pest.round.peanut"``); turning them into coordinates is the geocoder's
job. Orders hold no pricing state: cost is always computed by ``Menus``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Tuple


@dataclass(frozen=True, slots=True)
class MenuItem:
    """Item name and price in pence."""

    item: str
    pence: int


@dataclass(frozen=True, slots=True)
class Restaurant:
    """Restaurant with a location token and menu."""

    name: str
    location: str
    menu: Tuple[MenuItem, ...] = field(default_factory=tuple)

    @property
    def prices(self) -> Dict[str, int]:
        return {entry.item: entry.pence for entry in self.menu}

    def sells(self, item: str) -> bool:
        return any(entry.item == item for entry in self.menu)

    @classmethod
    def from_dict(cls, payload: Mapping[str, object]) -> "Restaurant":
        """Build a restaurant from the menus JSON layout."""

        try:
            menu = tuple(
                MenuItem(item=str(entry["item"]), pence=int(entry["pence"]))
                for entry in payload.get("menu", [])  # type: ignore[union-attr]
            )
            return cls(name=str(payload["name"]), location=str(payload["location"]), menu=menu)
        except (KeyError, TypeError, ValueError) as error:
            raise ValueError(f"Malformed restaurant entry: {payload!r}") from error


@dataclass(frozen=True, slots=True)
class Order:
    """Customer order for one day."""

    order_id: str
    customer: str
    deliver_to: str
    items: Tuple[str, ...]

    @classmethod
    def create(cls, order_id: str, customer: str, deliver_to: str, items: Iterable[str]) -> "Order":
        return cls(order_id=order_id, customer=customer, deliver_to=deliver_to, items=tuple(items))
