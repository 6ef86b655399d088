"""Mini README: Utility helpers for the delivery planner.

Currently exports the GeoJSON parsing and building helpers shared by the
web client and the trajectory exporter.
"""

from .geojson import line_string_collection, points_from_geojson, polygons_from_geojson

__all__ = ["line_string_collection", "points_from_geojson", "polygons_from_geojson"]
