"""Mini README: Entry point CLI for planning a day of drone deliveries.

This script exposes a Typer CLI with two commands: ``plan`` runs the
planner for a date and writes the GeoJSON trajectory plus the result
tables, and ``serve`` launches the FastAPI planning API with uvicorn.
Settings come from ``DELIVERYDRONE_*`` environment variables; command-line
options override them.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

import typer
import uvicorn

from deliverydrone.configuration import get_settings
from deliverydrone.logging_utils import configure_root_logger, set_level
from deliverydrone.providers import UpstreamDataError
from deliverydrone.service import DeliveryService

cli = typer.Typer(help="Plan and serve drone delivery flight paths.")


@cli.command()
def plan(
    day: int = typer.Argument(..., help="Day of month (1-31)."),
    month: int = typer.Argument(..., help="Month (1-12)."),
    year: int = typer.Argument(..., help="Four digit year."),
    web_port: int = typer.Option(None, help="Port of the menus / buildings web server."),
    database_url: str = typer.Option(None, help="SQLAlchemy URL of the orders database."),
    output_dir: Path = typer.Option(None, help="Directory for the GeoJSON trajectory."),
    verbose: bool = typer.Option(False, help="Log every routing decision."),
) -> None:
    """Plan the deliveries for DAY MONTH YEAR."""

    configure_root_logger()
    if verbose:
        set_level(logging.DEBUG)
    if not 1 <= day <= 31:
        typer.echo("Invalid day", err=True)
        raise typer.Exit(code=1)
    if not 1 <= month <= 12:
        typer.echo("Invalid month", err=True)
        raise typer.Exit(code=1)
    try:
        requested = date(year, month, day)
    except ValueError as error:
        typer.echo(f"Invalid date: {error}", err=True)
        raise typer.Exit(code=1) from error

    overrides = {}
    if web_port is not None:
        overrides["web_server_port"] = web_port
    if database_url is not None:
        overrides["database_url"] = database_url
    if output_dir is not None:
        overrides["output_directory"] = output_dir.expanduser().resolve()
        overrides["output_directory"].mkdir(parents=True, exist_ok=True)
    settings = get_settings().model_copy(update=overrides)

    try:
        run = DeliveryService(settings).run(requested)
    except UpstreamDataError as error:
        typer.echo(f"Planning aborted: {error}", err=True)
        raise typer.Exit(code=1) from error

    statistics = run.plan.statistics
    typer.echo(
        f"Delivered {statistics.delivered_orders}/{statistics.total_orders} orders "
        f"in {statistics.moves_flown} moves "
        f"({statistics.value_ratio * 100:.2f}% of the day's value).\n"
        f"Flight path written to {run.geojson_path}"
    )


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the planning API using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger()

    # Browsers cannot navigate to the 0.0.0.0 / :: wildcard addresses.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting planner API on {effective_host}:{effective_port}.\n"
        f"Health check: http://{browser_host}:{effective_port}/health"
    )
    uvicorn.run(
        "deliverydrone.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
