"""Mini README: Data providers feeding the planner.

``base`` declares the collaborator contracts and errors, ``static`` an
in-memory implementation and ``web_client`` the HTTP implementation used
in production runs.
"""

from .base import (
    GeocodeError,
    GeocodeProvider,
    MapProvider,
    MenuProvider,
    UpstreamDataError,
)
from .static import StaticProvider
from .web_client import WebServerClient

__all__ = [
    "GeocodeError",
    "GeocodeProvider",
    "MapProvider",
    "MenuProvider",
    "StaticProvider",
    "UpstreamDataError",
    "WebServerClient",
]
