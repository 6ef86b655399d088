"""Mini README: End-to-end planning service for a delivery day.

Structure:
    * PlanningRun - plan plus the exported GeoJSON path.
    * DeliveryService - wires settings, providers, scheduler, exporter and
      database for one date.

Both the CLI and the web interface call ``DeliveryService.run``. Upstream
data errors propagate so each surface can report them in its own way.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

from .configuration import DeliveryDroneSettings, get_settings
from .export import FlightPathExporter
from .logging_utils import get_logger
from .persistence import DeliveryDatabase
from .providers import GeocodeProvider, MapProvider, MenuProvider, WebServerClient
from .scheduling import DeliveryPlan, build_scheduler

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class PlanningRun:
    """Result of planning and persisting one day."""

    day: date
    plan: DeliveryPlan
    geojson_path: Path
    geojson: dict


class DeliveryService:
    """Plan, export and store the deliveries for a date."""

    def __init__(
        self,
        settings: Optional[DeliveryDroneSettings] = None,
        *,
        map_provider: Optional[MapProvider] = None,
        menu_provider: Optional[MenuProvider] = None,
        geocoder: Optional[GeocodeProvider] = None,
        database: Optional[DeliveryDatabase] = None,
    ) -> None:
        self.settings = settings or get_settings()
        client: Optional[WebServerClient] = None
        if map_provider is None or menu_provider is None or geocoder is None:
            client = WebServerClient(
                self.settings.web_server_url,
                timeout=self.settings.request_timeout_seconds,
            )
        self.map_provider = map_provider or client
        self.menu_provider = menu_provider or client
        self.geocoder = geocoder or client
        self.database = database or DeliveryDatabase(self.settings.database_url)
        self.exporter = FlightPathExporter(base=self.settings.base)

    def run(self, day: date) -> PlanningRun:
        """Plan ``day`` and write the GeoJSON file and result tables."""

        LOGGER.info("Starting planning run for %s", day.isoformat())
        scheduler = build_scheduler(
            self.map_provider,
            self.menu_provider,
            self.geocoder,
            base=self.settings.base,
            confinement=self.settings.confinement,
            move_budget=self.settings.move_budget,
        )
        orders = self.database.orders_for(day)
        plan = scheduler.plan_day(orders)
        geojson_path = self.exporter.export(plan.flightpath, day, self.settings.output_directory)
        self.database.write_flightpath(plan.flightpath)
        self.database.write_deliveries(plan.delivered, plan.costs)
        return PlanningRun(
            day=day,
            plan=plan,
            geojson_path=geojson_path,
            geojson=self.exporter.to_geojson(plan.flightpath),
        )
