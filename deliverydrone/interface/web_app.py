"""Mini README: FastAPI-powered planning API.

Structure:
    * create_application - application factory wiring the planning routes.

Routes:
    * ``GET /health`` - configuration summary for operators.
    * ``POST /plan-day`` - plan a date (form fields ``day``, ``month``,
      ``year``) and return statistics, delivered orders and the GeoJSON
      trajectory.

The planning service is created lazily so the application can start
before the menus web server or database are reachable.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import JSONResponse

from ..configuration import get_settings
from ..logging_utils import get_logger
from ..providers import UpstreamDataError
from ..service import DeliveryService

LOGGER = get_logger(__name__)


def create_application(service_factory: Optional[Callable[[], DeliveryService]] = None) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    app = FastAPI(title="Delivery Drone Planner", version="0.1.0")
    settings = get_settings()
    factory = service_factory or DeliveryService
    state: dict = {"service": None}

    def service() -> DeliveryService:
        if state["service"] is None:
            state["service"] = factory()
        return state["service"]

    @app.get("/health")
    async def health() -> JSONResponse:
        """Report the configured upstream endpoints and budget."""

        return JSONResponse(
            {
                "status": "ok",
                "environment": settings.environment,
                "web_server": settings.web_server_url,
                "move_budget": settings.move_budget,
            }
        )

    @app.post("/plan-day")
    def plan_day(
        day: int = Form(...),
        month: int = Form(...),
        year: int = Form(...),
    ) -> JSONResponse:
        """Plan deliveries for the given date."""

        try:
            requested = date(year, month, day)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        try:
            run = service().run(requested)
        except UpstreamDataError as error:
            LOGGER.error("Planning for %s aborted: %s", requested.isoformat(), error)
            raise HTTPException(status_code=503, detail=str(error)) from error
        LOGGER.info("Planned %s with %s moves", requested.isoformat(), len(run.plan.flightpath))
        return JSONResponse(
            {
                "date": requested.isoformat(),
                "statistics": run.plan.statistics.as_dict(),
                "delivered": [
                    {
                        "order_id": order.order_id,
                        "deliver_to": order.deliver_to,
                        "cost_in_pence": run.plan.costs[order.order_id],
                    }
                    for order in run.plan.delivered
                ],
                "geojson_path": str(run.geojson_path),
                "flightpath": run.geojson,
            }
        )

    return app
