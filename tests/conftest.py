"""
Shared pytest fixtures and configuration for flypool tests.
"""

import pytest

from flypool import CoffeeFlavor, CoffeeFlavorFactory, FlyweightPool, OrderBook


@pytest.fixture
def pool():
    """Provide a fresh CoffeeFlavor pool for each test."""
    return FlyweightPool(CoffeeFlavor)


@pytest.fixture
def flavor_factory(pool):
    """Provide a CoffeeFlavorFactory backed by the `pool` fixture."""
    return CoffeeFlavorFactory(pool=pool)


@pytest.fixture
def order_book(flavor_factory):
    """Provide an empty OrderBook."""
    return OrderBook(flavor_factory)
