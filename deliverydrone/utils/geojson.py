"""Mini README: GeoJSON helper utilities for the delivery planner.

This module parses the landmark and no-fly-zone FeatureCollections served
by the web server and builds the LineString document used to export a
day's trajectory. Keeping the logic isolated avoids importing the HTTP
client when running unit tests or reusing the helpers elsewhere.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Sequence

from ..geometry import Position


def _load_features(payload: str | Dict[str, Any]) -> List[Dict[str, Any]]:
    """Return the feature list of a FeatureCollection payload."""

    if isinstance(payload, str):
        try:
            document = json.loads(payload)
        except json.JSONDecodeError as error:
            raise ValueError("GeoJSON payload is invalid JSON") from error
    else:
        document = payload

    if document.get("type") == "Feature":
        return [document]
    if document.get("type") != "FeatureCollection":
        raise ValueError("Only Feature and FeatureCollection payloads are supported")
    features = document.get("features")
    if features is None:
        raise ValueError("FeatureCollection has no features")
    return list(features)


def points_from_geojson(payload: str | Dict[str, Any]) -> List[Position]:
    """Extract every Point geometry as a position; other geometries are ignored."""

    positions: List[Position] = []
    for feature in _load_features(payload):
        geometry = feature.get("geometry") or {}
        if geometry.get("type") == "Point":
            longitude, latitude = geometry["coordinates"][:2]
            positions.append(Position(float(longitude), float(latitude)))
    return positions


def polygons_from_geojson(payload: str | Dict[str, Any]) -> List[List[Position]]:
    """Extract the outer ring of every Polygon geometry."""

    rings: List[List[Position]] = []
    for feature in _load_features(payload):
        geometry = feature.get("geometry") or {}
        if geometry.get("type") != "Polygon":
            continue
        coordinates = geometry.get("coordinates")
        if not coordinates:
            raise ValueError("Polygon coordinates are required")
        outer = coordinates[0]
        rings.append([Position(float(point[0]), float(point[1])) for point in outer])
    return rings


def line_string_collection(positions: Iterable[Position], properties: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """Wrap positions into a FeatureCollection holding a single LineString."""

    coordinates: List[Sequence[float]] = [list(position.as_tuple()) for position in positions]
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": {"type": "LineString", "coordinates": coordinates},
                "properties": dict(properties or {}),
            }
        ],
    }
