"""
flypool - Flyweight Object Pool
===============================

A lookup-or-create pool that shares one instance per key, with the coffee-shop
flyweights it was written around.
"""

from .coffee import CoffeeFlavor, CoffeeFlavorFactory, CoffeeOrderContext
from .errors import FlyweightError, InvalidKeyError
from .orders import Order, OrderBook
from .pool import FlyweightPool, create_pool
from .protocols import Flyweight, TableContext
from .report import build_stats_table, render_stats

__version__ = "0.1.0"

__all__ = [
    # Pool
    "FlyweightPool",
    "create_pool",
    # Interfaces
    "Flyweight",
    "TableContext",
    # Coffee shop
    "CoffeeFlavor",
    "CoffeeFlavorFactory",
    "CoffeeOrderContext",
    "Order",
    "OrderBook",
    # Reporting
    "build_stats_table",
    "render_stats",
    # Exceptions
    "FlyweightError",
    "InvalidKeyError",
]
