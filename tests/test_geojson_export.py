"""Mini README: Tests for GeoJSON parsing helpers and the flight path exporter."""

from __future__ import annotations

import json
from datetime import date

import pytest

from deliverydrone.export import FlightPathExporter, flightpath_filename
from deliverydrone.geometry import HOVER, Position
from deliverydrone.route_planning import Move
from deliverydrone.utils import line_string_collection, points_from_geojson, polygons_from_geojson

BASE = Position(0.0, 0.0)


def _flightpath():
    first = Position(0.00015, 0.0)
    second = Position(0.0003, 0.0)
    return [
        Move("ord00001", BASE, first, 0),
        Move("ord00001", first, second, 0),
        Move("ord00001", second, second, HOVER),
    ]


def test_points_from_geojson_accepts_text_and_skips_other_geometries() -> None:
    document = json.dumps(
        {
            "type": "FeatureCollection",
            "features": [
                {"type": "Feature", "geometry": {"type": "Point", "coordinates": [1.5, 2.5]}},
                {"type": "Feature", "geometry": {"type": "LineString", "coordinates": [[0, 0], [1, 1]]}},
            ],
        }
    )
    assert points_from_geojson(document) == [Position(1.5, 2.5)]


def test_polygons_from_geojson_returns_outer_rings() -> None:
    feature = {
        "type": "Feature",
        "geometry": {
            "type": "Polygon",
            "coordinates": [
                [[0, 0], [1, 0], [1, 1], [0, 0]],
                [[0.2, 0.2], [0.4, 0.2], [0.4, 0.4], [0.2, 0.2]],
            ],
        },
    }
    rings = polygons_from_geojson(feature)
    assert rings == [[Position(0.0, 0.0), Position(1.0, 0.0), Position(1.0, 1.0), Position(0.0, 0.0)]]


@pytest.mark.parametrize(
    "payload",
    ["{not json", {"type": "GeometryCollection"}, {"type": "FeatureCollection"}],
)
def test_invalid_documents_raise_value_error(payload) -> None:
    with pytest.raises(ValueError):
        points_from_geojson(payload)


def test_line_string_collection_layout() -> None:
    document = line_string_collection([BASE, Position(1.0, 2.0)], {"name": "path"})
    feature = document["features"][0]
    assert document["type"] == "FeatureCollection"
    assert feature["geometry"] == {"type": "LineString", "coordinates": [[0.0, 0.0], [1.0, 2.0]]}
    assert feature["properties"] == {"name": "path"}


def test_flightpath_filename_is_zero_padded() -> None:
    assert flightpath_filename(date(2022, 1, 5)) == "drone-05-01-2022.geojson"
    assert flightpath_filename(date(2023, 12, 31)) == "drone-31-12-2023.geojson"


def test_to_geojson_starts_at_base_and_repeats_hovers() -> None:
    exporter = FlightPathExporter(base=BASE)
    coordinates = exporter.to_geojson(_flightpath())["features"][0]["geometry"]["coordinates"]

    assert coordinates[0] == [0.0, 0.0]
    assert len(coordinates) == 4
    assert coordinates[-1] == coordinates[-2]


def test_export_writes_file(tmp_path) -> None:
    exporter = FlightPathExporter(base=BASE)
    destination = exporter.export(_flightpath(), date(2022, 1, 5), tmp_path / "out")

    assert destination == tmp_path / "out" / "drone-05-01-2022.geojson"
    written = json.loads(destination.read_text(encoding="utf-8"))
    assert written == exporter.to_geojson(_flightpath())


def test_export_of_empty_day_is_single_point(tmp_path) -> None:
    exporter = FlightPathExporter(base=BASE)
    destination = exporter.export([], date(2022, 1, 5), tmp_path)
    written = json.loads(destination.read_text(encoding="utf-8"))
    assert written["features"][0]["geometry"]["coordinates"] == [[0.0, 0.0]]
