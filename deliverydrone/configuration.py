"""Mini README: Centralised configuration for the delivery planner.

Structure:
    * DeliveryDroneSettings - Pydantic settings describing a planning run.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Values are read from ``DELIVERYDRONE_*`` environment variables or a
    local ``.env`` file. The defaults describe the Edinburgh central area
    geofence, the Appleton Tower base and the 1500 move daily budget.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .geometry.primitives import (
    BASE_POSITION,
    DEFAULT_CONFINEMENT,
    Confinement,
    Position,
)


class DeliveryDroneSettings(BaseSettings):
    """Runtime configuration for planning runs and the interfaces."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    output_directory: Path = Field(
        Path("output"),
        description="Directory receiving exported GeoJSON trajectories.",
    )
    web_server_host: str = Field(
        "localhost",
        description="Host of the web server publishing menus, words and buildings.",
    )
    web_server_port: int = Field(9898, ge=1, le=65535)
    database_url: str = Field(
        "sqlite:///deliveries.db",
        description="SQLAlchemy URL of the orders / deliveries / flightpath store.",
    )
    request_timeout_seconds: float = Field(10.0, gt=0)
    move_budget: int = Field(1500, ge=0, description="Moves available for one day.")
    base_longitude: float = BASE_POSITION.longitude
    base_latitude: float = BASE_POSITION.latitude
    confinement_west: float = DEFAULT_CONFINEMENT.west
    confinement_east: float = DEFAULT_CONFINEMENT.east
    confinement_south: float = DEFAULT_CONFINEMENT.south
    confinement_north: float = DEFAULT_CONFINEMENT.north
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the planning API to bind to.",
    )
    interface_port: int = Field(8000, ge=1, le=65535)

    class Config:
        env_prefix = "DELIVERYDRONE_"
        env_file = ".env"
        case_sensitive = False

    @validator("output_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Ensure configured paths expand user directories and exist."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def web_server_url(self) -> str:
        return f"http://{self.web_server_host}:{self.web_server_port}"

    @property
    def base(self) -> Position:
        return Position(self.base_longitude, self.base_latitude)

    @property
    def confinement(self) -> Confinement:
        return Confinement(
            west=self.confinement_west,
            east=self.confinement_east,
            south=self.confinement_south,
            north=self.confinement_north,
        )


@lru_cache()
def get_settings() -> DeliveryDroneSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return DeliveryDroneSettings()
