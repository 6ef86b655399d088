"""Mini README: Geometry subsystem for the flight-path planner.

Re-exports the planar primitives (positions, headings, confinement) and the
obstacle map used by the router to avoid no-fly zones.
"""

from .obstacles import ObstacleMap, is_blocked
from .primitives import (
    BASE_POSITION,
    DEFAULT_CONFINEMENT,
    HOVER,
    STEP,
    TOLERANCE,
    VALID_HEADINGS,
    Confinement,
    Position,
    distance,
    heading_to,
    is_close,
    nearest,
    step,
)

__all__ = [
    "BASE_POSITION",
    "Confinement",
    "DEFAULT_CONFINEMENT",
    "HOVER",
    "ObstacleMap",
    "Position",
    "STEP",
    "TOLERANCE",
    "VALID_HEADINGS",
    "distance",
    "heading_to",
    "is_blocked",
    "is_close",
    "nearest",
    "step",
]
