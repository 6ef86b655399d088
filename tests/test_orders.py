"""Mini README: Tests for pricing and the order evaluator.

Structure:
    * pricing - delivery charge, item-count and restaurant-count rules.
    * coverage - unique restaurants in first-seen order, two at most.
    * rank - nearest-first pickup ordering with stable ties.
"""

from __future__ import annotations

import pytest

from conftest import ALPHA, BETA, GAMMA, LOCATIONS
from deliverydrone.geometry import Position
from deliverydrone.orders import DELIVERY_CHARGE, Menus, Order, OrderEvaluator, Restaurant
from deliverydrone.providers import GeocodeError, StaticProvider


@pytest.fixture
def menus() -> Menus:
    return Menus([ALPHA, BETA, GAMMA])


@pytest.fixture
def evaluator(provider) -> OrderEvaluator:
    return OrderEvaluator([ALPHA, BETA, GAMMA], provider)


def _order(*items: str) -> Order:
    return Order.create("ord00009", "s0000001", "first.home.door", items)


def test_price_of_adds_delivery_charge(menus: Menus) -> None:
    assert menus.price_of(["Margherita", "Soda"]) == 1000 + 200 + DELIVERY_CHARGE
    assert menus.price_of(["Margherita", "Salad"]) == 1000 + 500 + DELIVERY_CHARGE


def test_price_of_rejects_invalid_item_counts(menus: Menus) -> None:
    assert menus.price_of([]) == 0
    assert menus.price_of(["Soda"] * 5) == 0
    assert menus.price_of(["Soda"] * 4) == 4 * 200 + DELIVERY_CHARGE


def test_price_of_rejects_three_restaurants(menus: Menus) -> None:
    assert menus.price_of(["Margherita", "Salad", "Curry"]) == 0


def test_total_value_sums_orders(menus: Menus) -> None:
    orders = [_order("Margherita"), _order("Salad"), _order("Soda")]
    assert menus.total_value(orders) == 1050 + 550 + 250


def test_coverage_is_unique_and_ordered(evaluator: OrderEvaluator) -> None:
    restaurants = evaluator.coverage(_order("Salad", "Margherita", "Soda", "Salad"))
    assert restaurants == [BETA, ALPHA]


def test_coverage_rejects_more_than_two_restaurants(evaluator: OrderEvaluator) -> None:
    assert evaluator.coverage(_order("Curry", "Salad", "Margherita")) is None


def test_rank_orders_nearest_first(evaluator: OrderEvaluator) -> None:
    near_beta = Position(0.0, 0.002)
    assert evaluator.rank([ALPHA, BETA], near_beta) == [BETA, ALPHA]
    near_alpha = Position(0.002, 0.0)
    assert evaluator.rank([ALPHA, BETA], near_alpha) == [ALPHA, BETA]


def test_rank_keeps_original_order_on_ties(evaluator: OrderEvaluator) -> None:
    # Alpha and Beta mirror each other about the diagonal through the origin.
    origin = Position(0.0, 0.0)
    assert evaluator.rank([ALPHA, BETA], origin) == [ALPHA, BETA]
    assert evaluator.rank([BETA, ALPHA], origin) == [BETA, ALPHA]


def test_rank_single_and_too_many(evaluator: OrderEvaluator) -> None:
    assert evaluator.rank([GAMMA], Position(0.0, 0.0)) == [GAMMA]
    with pytest.raises(ValueError):
        evaluator.rank([ALPHA, BETA, GAMMA], Position(0.0, 0.0))


def test_evaluate_skips_orders_nobody_sells(evaluator: OrderEvaluator) -> None:
    assert evaluator.evaluate(_order("Sushi"), Position(0.0, 0.0)) is None


def test_rank_propagates_geocode_errors() -> None:
    lost = Restaurant(name="Lost", location="no.such.place")
    geocoder = StaticProvider(locations=LOCATIONS)
    evaluator = OrderEvaluator([ALPHA, lost], geocoder)
    with pytest.raises(GeocodeError):
        evaluator.rank([ALPHA, lost], Position(0.0, 0.0))


def test_restaurant_from_dict_parses_menu() -> None:
    restaurant = Restaurant.from_dict(
        {
            "name": "Civerinos Slice",
            "location": "looks.clouds.daring",
            "menu": [{"item": "Margherita", "pence": 1000}],
        }
    )
    assert restaurant.prices == {"Margherita": 1000}
    assert restaurant.sells("Margherita")
    with pytest.raises(ValueError):
        Restaurant.from_dict({"name": "No location"})
