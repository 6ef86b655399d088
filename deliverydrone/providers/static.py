"""Mini README: In-memory provider for offline runs and tests.

Structure:
    * StaticProvider - implements the menu, geocode and map contracts from
      plain Python collections.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from ..geometry import Position
from ..logging_utils import get_logger
from ..orders.models import Restaurant
from .base import GeocodeError, GeocodeProvider, MapProvider, MenuProvider

LOGGER = get_logger(__name__)


class StaticProvider(MenuProvider, GeocodeProvider, MapProvider):
    """Serve fixed restaurants, locations and map data."""

    def __init__(
        self,
        *,
        restaurants: Iterable[Restaurant] = (),
        locations: Optional[Dict[str, Position]] = None,
        landmarks: Iterable[Position] = (),
        no_fly_zones: Iterable[Sequence[Position]] = (),
    ) -> None:
        self._restaurants = list(restaurants)
        self._locations = dict(locations or {})
        self._landmarks = list(landmarks)
        self._no_fly_zones = [list(ring) for ring in no_fly_zones]

    def list_restaurants(self) -> List[Restaurant]:
        return list(self._restaurants)

    def resolve(self, location: str) -> Position:
        try:
            return self._locations[location]
        except KeyError as error:
            LOGGER.warning("Unknown location token '%s'", location)
            raise GeocodeError(f"Unknown location '{location}'") from error

    def landmarks(self) -> List[Position]:
        return list(self._landmarks)

    def no_fly_zones(self) -> List[Sequence[Position]]:
        return [list(ring) for ring in self._no_fly_zones]
