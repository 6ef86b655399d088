"""Mini README: Persistence for orders and planning results.

Exports the SQLAlchemy-backed ``DeliveryDatabase``.
"""

from .database import DeliveryDatabase

__all__ = ["DeliveryDatabase"]
