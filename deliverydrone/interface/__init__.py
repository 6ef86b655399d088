"""Mini README: Interactive interfaces for the delivery planner.

Exports the FastAPI application factory. The Typer CLI lives in the
top-level ``plan_deliveries.py`` script.
"""

from .web_app import create_application

__all__ = ["create_application"]
