"""Mini README: Point-to-point router with no-fly-zone avoidance.

Structure:
    * Move - one atomic drone step (or hover) tagged with its order.
    * Router - greedy compass router with a single-landmark detour.

The router flies straight at its goal one quantised step at a time. When a
step would cross a no-fly-zone boundary, or the geofence rejects it, the
partial route is discarded and the drone restarts from the leg's start via
the landmark nearest to that start. The number of restarts is capped by
the number of landmarks, so every call terminates; running out of restarts
or hitting a boundary on the way to the landmark makes the leg infeasible
and ``route`` returns ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..geometry import (
    BASE_POSITION,
    DEFAULT_CONFINEMENT,
    HOVER,
    Confinement,
    ObstacleMap,
    Position,
    heading_to,
    is_blocked,
    is_close,
    nearest,
    step,
)
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Move:
    """Single flight-path entry."""

    order_id: str
    origin: Position
    destination: Position
    heading: int

    @property
    def is_hover(self) -> bool:
        return self.heading == HOVER


class Router:
    """Build move sequences between two positions."""

    def __init__(
        self,
        obstacle_map: ObstacleMap,
        *,
        base: Position = BASE_POSITION,
        confinement: Confinement = DEFAULT_CONFINEMENT,
    ) -> None:
        self.obstacle_map = obstacle_map
        self.base = base
        self.confinement = confinement

    def _advance(self, current: Position, target: Position) -> tuple[int, Position]:
        heading = heading_to(current, target)
        return heading, step(current, heading, self.confinement)

    def _is_obstructed(self, current: Position, proposed: Position) -> bool:
        """A step is unusable if it crosses a boundary or made no progress."""

        return proposed == current or is_blocked(current, proposed, self.obstacle_map)

    def _detour(self, order_id: str, start: Position, landmark: Position) -> Optional[List[Move]]:
        """Fly from ``start`` to ``landmark``; any obstructed step aborts."""

        moves: List[Move] = []
        current = start
        while not is_close(current, landmark):
            heading, proposed = self._advance(current, landmark)
            if self._is_obstructed(current, proposed):
                LOGGER.debug("Detour to landmark %s blocked at %s", landmark, current)
                return None
            moves.append(Move(order_id, current, proposed, heading))
            current = proposed
        return moves

    def route(self, order_id: str, start: Position, goal: Position) -> Optional[List[Move]]:
        """Return the moves from ``start`` to ``goal`` or ``None`` if infeasible.

        Arriving anywhere other than the base adds a hover move for the
        pickup or drop-off.
        """

        landmarks = self.obstacle_map.landmarks
        escapes = 0
        moves: List[Move] = []
        current = start

        while not is_close(current, goal):
            heading, proposed = self._advance(current, goal)
            if self._is_obstructed(current, proposed):
                if escapes >= len(landmarks):
                    LOGGER.info(
                        "Order %s: no route from %s to %s after %s detours",
                        order_id,
                        start,
                        goal,
                        escapes,
                    )
                    return None
                escapes += 1
                landmark = nearest(start, landmarks)[0]
                LOGGER.debug(
                    "Order %s: path blocked at %s, restarting via landmark %s (attempt %s)",
                    order_id,
                    current,
                    landmark,
                    escapes,
                )
                detour = self._detour(order_id, start, landmark)
                if detour is None:
                    return None
                moves = detour
                current = moves[-1].destination if moves else start
                continue
            moves.append(Move(order_id, current, proposed, heading))
            current = proposed

        if goal != self.base:
            moves.append(Move(order_id, current, current, HOVER))
        return moves
