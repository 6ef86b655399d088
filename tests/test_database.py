"""Mini README: Tests for the SQLAlchemy order and result store."""

from __future__ import annotations

from datetime import date

import pytest
from sqlalchemy import text

from deliverydrone.geometry import HOVER, Position
from deliverydrone.orders import Order
from deliverydrone.persistence import DeliveryDatabase
from deliverydrone.providers import UpstreamDataError
from deliverydrone.route_planning import Move

DAY = date(2022, 1, 5)


@pytest.fixture
def database(tmp_path) -> DeliveryDatabase:
    store = DeliveryDatabase(f"sqlite:///{tmp_path / 'deliveries.db'}")
    store.create_input_tables()
    return store


def test_orders_for_filters_by_day_and_keeps_item_order(database: DeliveryDatabase) -> None:
    database.add_orders(
        [
            Order.create("ord00002", "s0000002", "b.b.b", ["Salad", "Soda", "Salad"]),
            Order.create("ord00001", "s0000001", "a.a.a", ["Margherita"]),
        ],
        DAY,
    )
    database.add_orders([Order.create("ord00003", "s0000003", "c.c.c", ["Curry"])], date(2022, 1, 6))

    orders = database.orders_for(DAY)

    assert [order.order_id for order in orders] == ["ord00001", "ord00002"]
    assert orders[1].items == ("Salad", "Soda", "Salad")
    assert orders[1].deliver_to == "b.b.b"
    assert database.orders_for(date(2022, 2, 1)) == []


def test_write_flightpath_replaces_previous_rows(database: DeliveryDatabase) -> None:
    start = Position(0.0, 0.0)
    end = Position(0.00015, 0.0)
    database.write_flightpath([Move("ord00001", start, end, 0), Move("ord00001", end, end, HOVER)])
    database.write_flightpath([Move("ord00002", end, start, 180)])

    rows = database.read_flightpath()
    assert len(rows) == 1
    assert rows[0]["orderNo"] == "ord00002"
    assert rows[0]["angle"] == 180
    assert rows[0]["fromLongitude"] == pytest.approx(0.00015)
    assert rows[0]["toLongitude"] == pytest.approx(0.0)


def test_write_deliveries_stores_costs(database: DeliveryDatabase) -> None:
    order = Order.create("ord00001", "s0000001", "a.a.a", ["Margherita"])
    database.write_deliveries([order], {"ord00001": 1050})
    database.write_deliveries([order], {"ord00001": 1050})

    assert database.read_deliveries() == [
        {"orderNo": "ord00001", "deliveredTo": "a.a.a", "costInPence": 1050}
    ]


def test_empty_results_leave_empty_tables(database: DeliveryDatabase) -> None:
    database.write_deliveries([], {})
    database.write_flightpath([])
    assert database.read_deliveries() == []
    assert database.read_flightpath() == []


def test_orders_for_reads_tables_created_by_ordering_system(tmp_path) -> None:
    url = f"sqlite:///{tmp_path / 'external.db'}"
    store = DeliveryDatabase(url)
    with store.engine.begin() as connection:
        connection.execute(
            text(
                "create table orders (orderNo char(8), deliveryDate date, "
                "customer char(8), deliverTo varchar(19))"
            )
        )
        connection.execute(text("create table orderDetails (orderNo char(8), item varchar(58))"))
        connection.execute(text("insert into orders values ('1ad5f1ff', '2022-01-05', 's1234567', 'a.b.c')"))
        connection.execute(text("insert into orderDetails values ('1ad5f1ff', 'Margherita')"))
        connection.execute(text("insert into orderDetails values ('1ad5f1ff', 'Calzone')"))

    orders = store.orders_for(DAY)

    assert [order.order_id for order in orders] == ["1ad5f1ff"]
    assert orders[0].items == ("Margherita", "Calzone")
    assert orders[0].customer == "s1234567"


def test_orders_for_without_input_tables_raises_upstream_error(tmp_path) -> None:
    store = DeliveryDatabase(f"sqlite:///{tmp_path / 'empty.db'}")
    with pytest.raises(UpstreamDataError):
        store.orders_for(DAY)
