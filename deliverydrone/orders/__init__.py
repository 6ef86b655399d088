"""Mini README: Orders, restaurants, pricing and order evaluation.

``models`` holds the records, ``pricing`` the delivery cost rules and
``evaluator`` the restaurant coverage / ranking used by the scheduler.
"""

from .models import MenuItem, Order, Restaurant
from .pricing import DELIVERY_CHARGE, MAX_ITEMS, MAX_RESTAURANTS, Menus
from .evaluator import OrderEvaluator

__all__ = [
    "DELIVERY_CHARGE",
    "MAX_ITEMS",
    "MAX_RESTAURANTS",
    "MenuItem",
    "Menus",
    "Order",
    "OrderEvaluator",
    "Restaurant",
]
