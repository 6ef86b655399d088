"""Mini README: Abstract interfaces for the planner's data sources.

Structure:
    * UpstreamDataError - restaurants, landmarks or no-fly zones unavailable.
    * GeocodeError - a location token could not be resolved.
    * MenuProvider / GeocodeProvider / MapProvider - collaborator contracts.

A run cannot be planned safely without menus and map data, so providers
raise ``UpstreamDataError`` rather than returning empty collections. A
failed geocode only affects the order that needed it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..geometry import Position
from ..orders.models import Restaurant


class UpstreamDataError(RuntimeError):
    """Raised when data required for the whole run cannot be loaded."""


class GeocodeError(LookupError):
    """Raised when a location token cannot be turned into a position."""


class MenuProvider(ABC):
    """Source of restaurants and their menus."""

    @abstractmethod
    def list_restaurants(self) -> List[Restaurant]:
        """Return every restaurant that orders can be placed with."""


class GeocodeProvider(ABC):
    """Resolve opaque location tokens into positions."""

    @abstractmethod
    def resolve(self, location: str) -> Position:
        """Return the position for ``location`` or raise ``GeocodeError``."""


class MapProvider(ABC):
    """Source of landmarks and no-fly-zone polygons."""

    @abstractmethod
    def landmarks(self) -> List[Position]:
        """Return the detour landmarks."""

    @abstractmethod
    def no_fly_zones(self) -> List[Sequence[Position]]:
        """Return no-fly-zone outer rings as position sequences."""
