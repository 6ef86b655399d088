"""Mini README: Export a day's flight path to GeoJSON.

Structure:
    * flightpath_filename - ``drone-DD-MM-YYYY.geojson`` naming rule.
    * FlightPathExporter - writes the trajectory as one LineString.

The LineString starts at the base and then follows the destination of
every move, so hover moves repeat the previous coordinate.
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Sequence

from ..geometry import BASE_POSITION, Position
from ..logging_utils import get_logger
from ..route_planning import Move
from ..utils.geojson import line_string_collection

LOGGER = get_logger(__name__)


def flightpath_filename(day: date) -> str:
    return f"drone-{day.day:02d}-{day.month:02d}-{day.year:04d}.geojson"


class FlightPathExporter:
    """Persist flight paths as GeoJSON FeatureCollections."""

    def __init__(self, *, base: Position = BASE_POSITION) -> None:
        self.base = base

    def to_geojson(self, flightpath: Sequence[Move]) -> dict:
        """Build the FeatureCollection without touching the filesystem."""

        positions = [self.base] + [move.destination for move in flightpath]
        return line_string_collection(positions)

    def export(self, flightpath: Sequence[Move], day: date, output_directory: Path) -> Path:
        """Write the trajectory for ``day`` into ``output_directory``."""

        output_directory.mkdir(parents=True, exist_ok=True)
        destination = output_directory / flightpath_filename(day)
        LOGGER.info("Exporting flight path with %s moves to %s", len(flightpath), destination)
        with destination.open("w", encoding="utf-8") as geojson_file:
            json.dump(self.to_geojson(flightpath), geojson_file)
        return destination
