"""Mini README: No-fly-zone boundaries and landmark waypoints.

Structure:
    * ObstacleMap - immutable boundary segments plus detour landmarks.
    * is_blocked - vectorised segment intersection against every boundary.

Boundaries are stored as an ``(N, 4)`` numpy array of ``x1, y1, x2, y2``
rows so that a single proposed move is tested against all no-fly-zone
edges at once. The array is flagged read-only after construction.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

import numpy as np

from ..logging_utils import get_logger
from .primitives import Position

LOGGER = get_logger(__name__)


def _ring_segments(ring: Sequence[Position]) -> list[tuple[float, float, float, float]]:
    """Split a polygon ring into consecutive edges, closing it if needed."""

    vertices = list(ring)
    if len(vertices) < 2:
        return []
    if vertices[0] != vertices[-1]:
        vertices.append(vertices[0])
    return [
        (start.longitude, start.latitude, end.longitude, end.latitude)
        for start, end in zip(vertices, vertices[1:])
    ]


class ObstacleMap:
    """Read-only view of the no-fly zones and landmarks for one run."""

    def __init__(
        self,
        segments: Iterable[Sequence[float]] = (),
        landmarks: Iterable[Position] = (),
    ) -> None:
        rows = [tuple(float(value) for value in segment) for segment in segments]
        if any(len(row) != 4 for row in rows):
            raise ValueError("Boundary segments must be (x1, y1, x2, y2) tuples")
        self._segments = np.array(rows, dtype=float).reshape(-1, 4)
        self._segments.setflags(write=False)
        self._landmarks: Tuple[Position, ...] = tuple(landmarks)
        LOGGER.debug(
            "ObstacleMap initialised with %s boundary segments and %s landmarks",
            len(self._segments),
            len(self._landmarks),
        )

    @classmethod
    def from_polygons(
        cls,
        polygons: Iterable[Sequence[Position]],
        landmarks: Iterable[Position] = (),
    ) -> "ObstacleMap":
        """Build the map from polygon rings given as position sequences."""

        segments: list[tuple[float, float, float, float]] = []
        for ring in polygons:
            segments.extend(_ring_segments(ring))
        return cls(segments=segments, landmarks=landmarks)

    @property
    def segments(self) -> np.ndarray:
        return self._segments

    @property
    def landmarks(self) -> Tuple[Position, ...]:
        return self._landmarks

    def __len__(self) -> int:
        return len(self._segments)


def _orientation(px, py, qx, qy, rx, ry):
    """Sign of the cross product (q - p) x (r - p), broadcast over arrays."""

    return np.sign((qx - px) * (ry - py) - (qy - py) * (rx - px))


def is_blocked(origin: Position, destination: Position, obstacles: ObstacleMap) -> bool:
    """Return True if the segment ``origin -> destination`` touches any boundary.

    Touching an edge at a single point and collinear overlap both count as
    intersecting, matching the conservative behaviour expected of a geofence.
    """

    if len(obstacles) == 0:
        return False
    ax, ay = origin.longitude, origin.latitude
    bx, by = destination.longitude, destination.latitude
    cx, cy, dx, dy = (obstacles.segments[:, column] for column in range(4))

    d1 = _orientation(cx, cy, dx, dy, ax, ay)
    d2 = _orientation(cx, cy, dx, dy, bx, by)
    d3 = _orientation(ax, ay, bx, by, cx, cy)
    d4 = _orientation(ax, ay, bx, by, dx, dy)

    collinear = (d1 == 0) & (d2 == 0) & (d3 == 0) & (d4 == 0)
    straddles = (d1 * d2 <= 0) & (d3 * d4 <= 0) & ~collinear

    overlaps_x = np.maximum(min(ax, bx), np.minimum(cx, dx)) <= np.minimum(max(ax, bx), np.maximum(cx, dx))
    overlaps_y = np.maximum(min(ay, by), np.minimum(cy, dy)) <= np.minimum(max(ay, by), np.maximum(cy, dy))
    overlapping = collinear & overlaps_x & overlaps_y

    return bool(np.any(straddles | overlapping))
