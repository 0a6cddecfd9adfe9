"""
Coffee-shop Flyweights
======================

CoffeeFlavor is the concrete flyweight: it stores only the flavor name and is
shared by every order of that flavor. The table an order goes to is extrinsic
state, carried by CoffeeOrderContext and passed in at serving time.

Usage:
    flavors = CoffeeFlavorFactory()
    cappuccino = flavors.get_coffee_flavor("Cappuccino")
    cappuccino.serve_coffee(CoffeeOrderContext(2))
    # "Serving Coffee flavor Cappuccino to table number 2"
"""

from dataclasses import dataclass
from typing import Optional

from .pool import FlyweightPool
from .protocols import TableContext


@dataclass(frozen=True)
class CoffeeOrderContext:
    """Extrinsic state of one order."""

    table: int


@dataclass(frozen=True)
class CoffeeFlavor:
    """Shared flyweight for a single coffee flavor."""

    flavor: str

    def describe(self, context: TableContext) -> str:
        return f"Serving Coffee flavor {self.flavor} to table number {context.table}"

    serve_coffee = describe


class CoffeeFlavorFactory:
    """
    Hands out shared CoffeeFlavor instances.

    The factory owns a FlyweightPool rather than extending one. Pass `pool` to
    share an existing pool; otherwise one is built from the keyword settings.
    """

    def __init__(
        self,
        pool: Optional[FlyweightPool[str, CoffeeFlavor]] = None,
        validate_keys: bool = False,
        thread_safe: bool = True,
    ):
        self.pool = (
            pool
            if pool is not None
            else FlyweightPool(
                CoffeeFlavor, validate_keys=validate_keys, thread_safe=thread_safe
            )
        )

    def get_coffee_flavor(self, flavor_name: str) -> CoffeeFlavor:
        """Return the shared flavor, creating it the first time it is ordered."""
        return self.pool.get(flavor_name)

    def total_flavors_made(self) -> int:
        return self.pool.count()
