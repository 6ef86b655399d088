"""Mini README: Shared fixtures describing a small synthetic delivery world.

The world is centred on a base at (0, 0) inside a 0.02 x 0.02 geofence.
Coordinates avoid exact multiples of the move length so that move counts
do not depend on floating point rounding at the arrival tolerance.
"""

from __future__ import annotations

from datetime import date

import pytest

from deliverydrone.geometry import Confinement, ObstacleMap, Position
from deliverydrone.orders import MenuItem, Menus, Order, OrderEvaluator, Restaurant
from deliverydrone.providers import StaticProvider
from deliverydrone.route_planning import Router
from deliverydrone.scheduling import DeliveryScheduler

BASE = Position(0.0, 0.0)
CONFINEMENT = Confinement(west=-0.01, east=0.01, south=-0.01, north=0.01)
PLANNING_DAY = date(2022, 1, 5)

ALPHA = Restaurant(
    name="Alpha Pizza",
    location="alpha.pizza.oven",
    menu=(MenuItem("Margherita", 1000), MenuItem("Soda", 200)),
)
BETA = Restaurant(
    name="Beta Greens",
    location="beta.green.leaf",
    menu=(MenuItem("Salad", 500),),
)
GAMMA = Restaurant(
    name="Gamma Curry",
    location="gamma.curry.pot",
    menu=(MenuItem("Curry", 700),),
)

LOCATIONS = {
    ALPHA.location: Position(0.00155, 0.00005),
    BETA.location: Position(0.00005, 0.00155),
    GAMMA.location: Position(-0.00155, 0.00005),
    "first.home.door": Position(0.00155, 0.00155),
    "second.home.door": Position(-0.00155, -0.00155),
}

NO_FLY_ZONE = [
    Position(0.004, 0.004),
    Position(0.005, 0.004),
    Position(0.005, 0.005),
    Position(0.004, 0.005),
]
LANDMARKS = [Position(-0.006, 0.006), Position(0.006, -0.006)]


@pytest.fixture
def provider() -> StaticProvider:
    return StaticProvider(
        restaurants=[ALPHA, BETA, GAMMA],
        locations=LOCATIONS,
        landmarks=LANDMARKS,
        no_fly_zones=[NO_FLY_ZONE],
    )


@pytest.fixture
def router() -> Router:
    return Router(ObstacleMap(), base=BASE, confinement=CONFINEMENT)


@pytest.fixture
def make_scheduler(provider, router):
    """Factory building a scheduler over the synthetic world."""

    def _make(move_budget: int = 1500, scheduler_router: Router | None = None) -> DeliveryScheduler:
        restaurants = provider.list_restaurants()
        return DeliveryScheduler(
            scheduler_router or router,
            OrderEvaluator(restaurants, provider),
            Menus(restaurants),
            provider,
            base=BASE,
            move_budget=move_budget,
        )

    return _make


@pytest.fixture
def pizza_order() -> Order:
    return Order.create("ord00001", "s1234567", "first.home.door", ["Margherita"])


@pytest.fixture
def salad_order() -> Order:
    return Order.create("ord00002", "s7654321", "second.home.door", ["Salad"])
