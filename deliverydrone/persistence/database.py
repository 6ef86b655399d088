"""Mini README: Relational store for orders, deliveries and flight paths.

Structure:
    * METADATA / table definitions - SQLAlchemy Core schema.
    * DeliveryDatabase - reads a day's orders and writes the results.

Input tables ``orders`` and ``orderDetails`` are owned by the ordering
system; output tables ``deliveries`` and ``flightpath`` are dropped and
recreated on every run so they always describe the latest plan.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

from sqlalchemy import (
    Column,
    Date,
    Float,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
    insert,
    select,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..logging_utils import get_logger
from ..orders import Order
from ..providers.base import UpstreamDataError
from ..route_planning import Move

LOGGER = get_logger(__name__)

METADATA = MetaData()

ORDERS = Table(
    "orders",
    METADATA,
    Column("orderNo", String(8), primary_key=True),
    Column("deliveryDate", Date, nullable=False, index=True),
    Column("customer", String(8), nullable=False),
    Column("deliverTo", String(19), nullable=False),
)

ORDER_DETAILS = Table(
    "orderDetails",
    METADATA,
    Column("orderNo", String(8), nullable=False, index=True),
    Column("item", String(58), nullable=False),
)

DELIVERIES = Table(
    "deliveries",
    METADATA,
    Column("orderNo", String(8), nullable=False),
    Column("deliveredTo", String(19), nullable=False),
    Column("costInPence", Integer, nullable=False),
)

FLIGHTPATH = Table(
    "flightpath",
    METADATA,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("orderNo", String(8), nullable=False),
    Column("fromLongitude", Float, nullable=False),
    Column("fromLatitude", Float, nullable=False),
    Column("angle", Integer, nullable=False),
    Column("toLongitude", Float, nullable=False),
    Column("toLatitude", Float, nullable=False),
)


class DeliveryDatabase:
    """Thin SQLAlchemy Core gateway used by a planning run."""

    def __init__(self, database_url: str, *, engine: Optional[Engine] = None) -> None:
        self.engine = engine or create_engine(database_url)
        LOGGER.debug("DeliveryDatabase bound to %s", self.engine.url)

    def create_input_tables(self) -> None:
        """Create ``orders`` and ``orderDetails`` if absent (tests, demos)."""

        METADATA.create_all(self.engine, tables=[ORDERS, ORDER_DETAILS])

    def add_orders(self, orders: Iterable[Order], day: date) -> None:
        """Insert orders for ``day``; used to seed demo and test stores."""

        with self.engine.begin() as connection:
            for order in orders:
                connection.execute(
                    insert(ORDERS).values(
                        orderNo=order.order_id,
                        deliveryDate=day,
                        customer=order.customer,
                        deliverTo=order.deliver_to,
                    )
                )
                for item in order.items:
                    connection.execute(insert(ORDER_DETAILS).values(orderNo=order.order_id, item=item))

    def orders_for(self, day: date) -> List[Order]:
        """Return the orders to deliver on ``day``.

        Items keep the order in which the store returns their rows. A missing
        or malformed input table raises ``UpstreamDataError``.
        """

        try:
            with self.engine.connect() as connection:
                order_rows = connection.execute(
                    select(ORDERS).where(ORDERS.c.deliveryDate == day).order_by(ORDERS.c.orderNo)
                ).all()
                items: Dict[str, List[str]] = {row.orderNo: [] for row in order_rows}
                if items:
                    detail_rows = connection.execute(
                        select(ORDER_DETAILS).where(ORDER_DETAILS.c.orderNo.in_(list(items)))
                    ).all()
                    for row in detail_rows:
                        items[row.orderNo].append(row.item)
        except SQLAlchemyError as error:
            LOGGER.error("Unable to read orders for %s: %s", day.isoformat(), error)
            raise UpstreamDataError(f"Unable to read orders for {day.isoformat()}") from error
        orders = [
            Order.create(row.orderNo, row.customer, row.deliverTo, items[row.orderNo])
            for row in order_rows
        ]
        LOGGER.info("Loaded %s orders for %s", len(orders), day.isoformat())
        return orders

    def _recreate(self, table: Table) -> None:
        table.drop(self.engine, checkfirst=True)
        table.create(self.engine)

    def write_deliveries(self, delivered: Sequence[Order], costs: Dict[str, int]) -> None:
        """Replace the ``deliveries`` table with the delivered orders."""

        self._recreate(DELIVERIES)
        rows = [
            {"orderNo": order.order_id, "deliveredTo": order.deliver_to, "costInPence": costs[order.order_id]}
            for order in delivered
        ]
        if rows:
            with self.engine.begin() as connection:
                connection.execute(insert(DELIVERIES), rows)
        LOGGER.info("Wrote %s deliveries", len(rows))

    def write_flightpath(self, flightpath: Sequence[Move]) -> None:
        """Replace the ``flightpath`` table with every move of the plan."""

        self._recreate(FLIGHTPATH)
        rows = [
            {
                "orderNo": move.order_id,
                "fromLongitude": move.origin.longitude,
                "fromLatitude": move.origin.latitude,
                "angle": move.heading,
                "toLongitude": move.destination.longitude,
                "toLatitude": move.destination.latitude,
            }
            for move in flightpath
        ]
        if rows:
            with self.engine.begin() as connection:
                connection.execute(insert(FLIGHTPATH), rows)
        LOGGER.info("Wrote %s flightpath moves", len(rows))

    def read_flightpath(self) -> List[Dict[str, object]]:
        """Return stored moves in insertion order."""

        with self.engine.connect() as connection:
            rows = connection.execute(select(FLIGHTPATH).order_by(FLIGHTPATH.c.id)).mappings().all()
        return [dict(row) for row in rows]

    def read_deliveries(self) -> List[Dict[str, object]]:
        with self.engine.connect() as connection:
            rows = connection.execute(select(DELIVERIES)).mappings().all()
        return [dict(row) for row in rows]
