"""Mini README: Core package initializer for the delivery drone planner.

The planner turns a day's food orders into a flight path for a single
drone: geometry primitives, the obstacle-avoiding router, order evaluation
and the greedy scheduler live in subpackages; providers, persistence and
export wrap the external systems. Only logging helpers are imported here
so that importing the package stays cheap.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
