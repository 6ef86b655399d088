"""Mini README: Daily order scheduling.

Exports the greedy ``DeliveryScheduler`` together with the plan and
statistics records it produces.
"""

from .scheduler import (
    DEFAULT_MOVE_BUDGET,
    DeliveryPlan,
    DeliveryScheduler,
    DeliveryStatistics,
    Outcome,
    build_scheduler,
)

__all__ = [
    "DEFAULT_MOVE_BUDGET",
    "DeliveryPlan",
    "DeliveryScheduler",
    "DeliveryStatistics",
    "Outcome",
    "build_scheduler",
]
