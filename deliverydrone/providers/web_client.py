"""Mini README: HTTP client for the menus / words / buildings web server.

Structure:
    * WebServerClient - ``requests`` based implementation of the menu,
      geocode and map provider contracts.

Endpoints (relative to ``http://host:port``):
    * ``/menus/menus.json`` - restaurant list with menus.
    * ``/words/<first>/<second>/<third>/details.json`` - location details
      for a three-word address ``first.second.third``.
    * ``/buildings/landmarks.geojson`` and
      ``/buildings/no-fly-zones.geojson`` - map features.

Geocode lookups are cached per token for the lifetime of the client.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import requests

from ..geometry import Position
from ..logging_utils import get_logger
from ..orders.models import Restaurant
from ..utils.geojson import points_from_geojson, polygons_from_geojson
from .base import GeocodeError, GeocodeProvider, MapProvider, MenuProvider, UpstreamDataError

LOGGER = get_logger(__name__)


class WebServerClient(MenuProvider, GeocodeProvider, MapProvider):
    """Fetch planning inputs from the web server."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self._location_cache: Dict[str, Position] = {}
        LOGGER.debug("WebServerClient targeting %s", self.base_url)

    def _get_json(self, path: str) -> Any:
        """GET ``path`` and decode the JSON body; failures raise ``requests`` errors."""

        url = f"{self.base_url}{path}"
        LOGGER.debug("GET %s", url)
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def _get_upstream(self, path: str) -> Any:
        try:
            return self._get_json(path)
        except (requests.RequestException, ValueError) as error:
            LOGGER.error("Unable to load %s: %s", path, error)
            raise UpstreamDataError(f"Unable to load {path} from {self.base_url}") from error

    def list_restaurants(self) -> List[Restaurant]:
        payload = self._get_upstream("/menus/menus.json")
        if not isinstance(payload, list):
            raise UpstreamDataError("Menus payload must be a list of restaurants")
        try:
            return [Restaurant.from_dict(entry) for entry in payload]
        except ValueError as error:
            raise UpstreamDataError(str(error)) from error

    def resolve(self, location: str) -> Position:
        if location in self._location_cache:
            return self._location_cache[location]
        words = location.split(".")
        if len(words) != 3 or not all(words):
            raise GeocodeError(f"Location '{location}' is not a three-word address")
        try:
            details = self._get_json(f"/words/{'/'.join(words)}/details.json")
            coordinates = details["coordinates"]
            position = Position(float(coordinates["lng"]), float(coordinates["lat"]))
        except (requests.RequestException, ValueError, KeyError, TypeError) as error:
            LOGGER.warning("Geocode lookup failed for '%s': %s", location, error)
            raise GeocodeError(f"Unable to resolve '{location}'") from error
        self._location_cache[location] = position
        return position

    def landmarks(self) -> List[Position]:
        payload = self._get_upstream("/buildings/landmarks.geojson")
        try:
            return points_from_geojson(payload)
        except (ValueError, KeyError, TypeError) as error:
            raise UpstreamDataError(f"Invalid landmarks document: {error}") from error

    def no_fly_zones(self) -> List[Sequence[Position]]:
        payload = self._get_upstream("/buildings/no-fly-zones.geojson")
        try:
            return list(polygons_from_geojson(payload))
        except (ValueError, KeyError, TypeError) as error:
            raise UpstreamDataError(f"Invalid no-fly-zone document: {error}") from error
