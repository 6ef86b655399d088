"""Mini README: Export utilities for planned flight paths.

Exposes the GeoJSON trajectory exporter consumed by the CLI and the web
interface.
"""

from .flightpath_exporter import FlightPathExporter, flightpath_filename

__all__ = ["FlightPathExporter", "flightpath_filename"]
