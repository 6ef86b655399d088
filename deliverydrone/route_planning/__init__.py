"""Mini README: Route planning subsystem for delivery flights.

Exports the ``Router`` that turns a start and goal into a sequence of
quantised moves, and the ``Move`` record making up the flight path.
"""

from .router import Move, Router

__all__ = ["Move", "Router"]
