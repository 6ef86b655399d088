"""Mini README: Planar geo-primitives used by the flight-path planner.

Structure:
    * Position - immutable (longitude, latitude) pair.
    * Confinement - rectangular geofence every reachable position lies in.
    * distance / is_close - Euclidean proximity in coordinate space.
    * heading_to / step - quantised 36-point compass movement.
    * nearest - stable proximity ordering of candidate positions.

All distances are measured in degrees, not metres: the drone flies a fixed
``STEP`` in coordinate space per move and the service area is small enough
for the planar approximation to hold.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List

STEP = 0.00015
TOLERANCE = 0.00015
HOVER = -999
VALID_HEADINGS = frozenset(range(0, 360, 10))


@dataclass(frozen=True, slots=True)
class Position:
    """Point in coordinate space, longitude first."""

    longitude: float
    latitude: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.longitude, self.latitude)


@dataclass(frozen=True, slots=True)
class Confinement:
    """Rectangular geofence with exclusive boundaries."""

    west: float
    east: float
    south: float
    north: float

    def __post_init__(self) -> None:
        if self.west >= self.east or self.south >= self.north:
            raise ValueError("Confinement bounds must satisfy west < east and south < north")

    def contains(self, position: Position) -> bool:
        """Return True when the position lies strictly inside the region."""

        return (
            self.west < position.longitude < self.east
            and self.south < position.latitude < self.north
        )


# Appleton Tower, KFC, Buccleuch St bus stop and Top of the Meadows.
DEFAULT_CONFINEMENT = Confinement(
    west=-3.192473,
    east=-3.184319,
    south=55.942617,
    north=55.946233,
)
BASE_POSITION = Position(-3.186874, 55.944494)


def distance(first: Position, second: Position) -> float:
    """Euclidean distance between two positions."""

    return math.hypot(first.longitude - second.longitude, first.latitude - second.latitude)


def is_close(first: Position, second: Position) -> bool:
    """Arrival predicate: strictly closer than one move."""

    return distance(first, second) < TOLERANCE


def heading_to(origin: Position, target: Position) -> int:
    """Return the compass heading from ``origin`` towards ``target``.

    The angle is rounded half-up to whole degrees and then truncated towards
    zero onto a multiple of ten, so a bearing of 19.4 degrees becomes 10 and
    -15 degrees becomes 350. The result is always one of ``VALID_HEADINGS``.
    """

    radians = math.atan2(target.latitude - origin.latitude, target.longitude - origin.longitude)
    whole_degrees = math.floor(math.degrees(radians) + 0.5)
    heading = int(whole_degrees / 10) * 10
    if heading < 0:
        heading += 360
    return heading


def step(origin: Position, heading: int, confinement: Confinement = DEFAULT_CONFINEMENT) -> Position:
    """Advance one move along ``heading``.

    Hovering, unknown headings and moves that would leave the confinement
    region all return ``origin`` unchanged.
    """

    if heading == HOVER or heading not in VALID_HEADINGS:
        return origin
    radians = math.radians(heading)
    candidate = Position(
        origin.longitude + STEP * math.cos(radians),
        origin.latitude + STEP * math.sin(radians),
    )
    if confinement.contains(candidate):
        return candidate
    return origin


def nearest(point: Position, candidates: Iterable[Position]) -> List[Position]:
    """Sort candidates nearest-first; equal distances keep their input order."""

    return sorted(candidates, key=lambda candidate: distance(point, candidate))
