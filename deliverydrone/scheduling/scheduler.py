"""Mini README: Greedy, budget-aware daily delivery scheduler.

Structure:
    * Outcome - result of attempting a single order.
    * DeliveryStatistics - delivered counts and monetary value of a day.
    * DeliveryPlan - committed flight path, delivered orders and statistics.
    * DeliveryScheduler - value-greedy loop over the day's orders.
    * build_scheduler - load upstream data and assemble a scheduler.

The scheduler attempts the most valuable orders first. An order is only
committed when its pickup and drop-off legs are feasible and the moves for
pickup, drop-off and a return to base still fit in the remaining budget.
If the return-to-base probe itself is infeasible the order is committed
anyway and the day ends (``Outcome.DAY_EXHAUSTED``). After the loop the
drone always flies back to base, regardless of the remaining budget.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional

from ..geometry import BASE_POSITION, DEFAULT_CONFINEMENT, Confinement, ObstacleMap, Position
from ..logging_utils import get_logger
from ..orders import Menus, Order, OrderEvaluator, Restaurant
from ..providers.base import (
    GeocodeError,
    GeocodeProvider,
    MapProvider,
    MenuProvider,
    UpstreamDataError,
)
from ..route_planning import Move, Router

LOGGER = get_logger(__name__)

DEFAULT_MOVE_BUDGET = 1500


class Outcome(str, Enum):
    """What happened to an attempted order."""

    DELIVERED = "delivered"
    SKIPPED = "skipped"
    DAY_EXHAUSTED = "day_exhausted"


@dataclass(slots=True)
class DeliveryStatistics:
    """Summary figures for a planned day."""

    delivered_orders: int
    total_orders: int
    delivered_value: int
    total_value: int
    moves_flown: int
    remaining_moves: int

    @property
    def value_ratio(self) -> float:
        """Fraction of the day's monetary value that was delivered."""

        if self.total_value == 0:
            return 0.0
        return self.delivered_value / self.total_value

    def as_dict(self) -> Dict[str, float]:
        return {
            "delivered_orders": self.delivered_orders,
            "total_orders": self.total_orders,
            "delivered_value": self.delivered_value,
            "total_value": self.total_value,
            "value_ratio": self.value_ratio,
            "moves_flown": self.moves_flown,
            "remaining_moves": self.remaining_moves,
        }


@dataclass(slots=True)
class DeliveryPlan:
    """Committed output of one planning run."""

    flightpath: List[Move]
    delivered: List[Order]
    costs: Dict[str, int]
    statistics: DeliveryStatistics
    outcomes: Dict[str, Outcome] = field(default_factory=dict)


class DeliveryScheduler:
    """Plan one day of deliveries under a fixed move budget."""

    def __init__(
        self,
        router: Router,
        evaluator: OrderEvaluator,
        menus: Menus,
        geocoder: GeocodeProvider,
        *,
        base: Position = BASE_POSITION,
        move_budget: int = DEFAULT_MOVE_BUDGET,
    ) -> None:
        self.router = router
        self.evaluator = evaluator
        self.menus = menus
        self.geocoder = geocoder
        self.base = base
        self.initial_budget = move_budget
        self.remaining_moves = move_budget
        self.current_position = base
        self.flightpath: List[Move] = []
        self.delivered: List[Order] = []

    def _reset(self) -> None:
        self.remaining_moves = self.initial_budget
        self.current_position = self.base
        self.flightpath = []
        self.delivered = []

    def _pickup_route(self, order: Order, restaurants: List[Restaurant]) -> Optional[List[Move]]:
        """Chain one route per restaurant, starting at the current position."""

        moves: List[Move] = []
        start = self.current_position
        for restaurant in restaurants:
            leg = self.router.route(order.order_id, start, self.geocoder.resolve(restaurant.location))
            if leg is None:
                return None
            moves.extend(leg)
            if moves:
                start = moves[-1].destination
        return moves

    def _commit(self, order: Order, pickup: List[Move], dropoff: List[Move]) -> None:
        self.flightpath.extend(pickup)
        self.flightpath.extend(dropoff)
        self.remaining_moves -= len(pickup) + len(dropoff)
        if dropoff:
            self.current_position = dropoff[-1].destination
        self.delivered.append(order)

    def attempt(self, order: Order, cost: int) -> Outcome:
        """Try to fit ``order`` into the day, mutating state only on commit."""

        if cost == 0:
            LOGGER.info("Skipping order %s: invalid items or restaurants", order.order_id)
            return Outcome.SKIPPED
        try:
            restaurants = self.evaluator.evaluate(order, self.current_position)
            if restaurants is None:
                return Outcome.SKIPPED
            pickup = self._pickup_route(order, restaurants)
            if pickup is None:
                LOGGER.info("Skipping order %s: pickup route infeasible", order.order_id)
                return Outcome.SKIPPED
            delivery_point = self.geocoder.resolve(order.deliver_to)
        except GeocodeError as error:
            LOGGER.warning("Skipping order %s: %s", order.order_id, error)
            return Outcome.SKIPPED

        pickup_end = pickup[-1].destination if pickup else self.current_position
        dropoff = self.router.route(order.order_id, pickup_end, delivery_point)
        if dropoff is None:
            LOGGER.info("Skipping order %s: drop-off route infeasible", order.order_id)
            return Outcome.SKIPPED

        dropoff_end = dropoff[-1].destination if dropoff else pickup_end
        return_probe = self.router.route(order.order_id, dropoff_end, self.base)
        if return_probe is None:
            LOGGER.warning(
                "Order %s committed but no route back to base exists; ending the day",
                order.order_id,
            )
            self._commit(order, pickup, dropoff)
            return Outcome.DAY_EXHAUSTED

        required = len(pickup) + len(dropoff) + len(return_probe)
        if required > self.remaining_moves:
            LOGGER.info(
                "Skipping order %s: needs %s moves, %s remaining",
                order.order_id,
                required,
                self.remaining_moves,
            )
            return Outcome.SKIPPED

        self._commit(order, pickup, dropoff)
        LOGGER.debug(
            "Delivered order %s with %s moves; %s moves remaining",
            order.order_id,
            len(pickup) + len(dropoff),
            self.remaining_moves,
        )
        return Outcome.DELIVERED

    def plan_day(self, orders: Iterable[Order]) -> DeliveryPlan:
        """Run the greedy loop over ``orders`` and return the committed plan."""

        self._reset()
        day_orders = list(orders)
        costs = {order.order_id: self.menus.price_of(order.items) for order in day_orders}
        ranked = sorted(day_orders, key=lambda order: costs[order.order_id], reverse=True)
        LOGGER.info("Planning %s orders with a budget of %s moves", len(ranked), self.initial_budget)

        outcomes: Dict[str, Outcome] = {}
        for order in ranked:
            outcome = self.attempt(order, costs[order.order_id])
            outcomes[order.order_id] = outcome
            if outcome is Outcome.DAY_EXHAUSTED:
                break

        closing_id = self.delivered[-1].order_id if self.delivered else ""
        return_home = self.router.route(closing_id, self.current_position, self.base)
        if return_home is None:
            LOGGER.warning("No route from %s back to base; flight path ends away from base", self.current_position)
        else:
            self.flightpath.extend(return_home)

        statistics = DeliveryStatistics(
            delivered_orders=len(self.delivered),
            total_orders=len(day_orders),
            delivered_value=sum(costs[order.order_id] for order in self.delivered),
            total_value=sum(costs.values()),
            moves_flown=len(self.flightpath),
            remaining_moves=self.remaining_moves,
        )
        LOGGER.info(
            "Delivered %s/%s orders in %s moves",
            statistics.delivered_orders,
            statistics.total_orders,
            statistics.moves_flown,
        )
        LOGGER.info("Monetary value performance of the day is %.2f%%", statistics.value_ratio * 100)
        return DeliveryPlan(
            flightpath=list(self.flightpath),
            delivered=list(self.delivered),
            costs={order.order_id: costs[order.order_id] for order in self.delivered},
            statistics=statistics,
            outcomes=outcomes,
        )


def build_scheduler(
    map_provider: MapProvider,
    menu_provider: MenuProvider,
    geocoder: GeocodeProvider,
    *,
    base: Position = BASE_POSITION,
    confinement: Confinement = DEFAULT_CONFINEMENT,
    move_budget: int = DEFAULT_MOVE_BUDGET,
) -> DeliveryScheduler:
    """Load upstream data once and wire the router, evaluator and scheduler.

    Raises ``UpstreamDataError`` when restaurants, landmarks or no-fly-zone
    boundaries are missing: an empty obstacle set would make every path
    look clear.
    """

    restaurants = menu_provider.list_restaurants()
    if not restaurants:
        raise UpstreamDataError("No restaurants available")
    landmarks = map_provider.landmarks()
    if not landmarks:
        raise UpstreamDataError("No landmarks available")
    obstacle_map = ObstacleMap.from_polygons(map_provider.no_fly_zones(), landmarks)
    if len(obstacle_map) == 0:
        raise UpstreamDataError("No no-fly-zone boundaries available")

    router = Router(obstacle_map, base=base, confinement=confinement)
    evaluator = OrderEvaluator(restaurants, geocoder)
    LOGGER.info(
        "Loaded %s restaurants, %s landmarks and %s boundary segments",
        len(restaurants),
        len(landmarks),
        len(obstacle_map),
    )
    return DeliveryScheduler(
        router,
        evaluator,
        Menus(restaurants),
        geocoder,
        base=base,
        move_budget=move_budget,
    )
