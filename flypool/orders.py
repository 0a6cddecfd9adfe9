"""
Order Book
==========

Keeps the extrinsic state of a coffee shop. Each order pairs a shared
CoffeeFlavor with its own CoffeeOrderContext, so fifteen orders of three flavors
hold fifteen contexts but only three flavor objects.
"""

from dataclasses import dataclass
from typing import List, Optional

from .coffee import CoffeeFlavor, CoffeeFlavorFactory, CoffeeOrderContext


@dataclass(frozen=True)
class Order:
    flavor: CoffeeFlavor
    context: CoffeeOrderContext

    def serve(self) -> str:
        return self.flavor.serve_coffee(self.context)


class OrderBook:
    """
    Records orders against a CoffeeFlavorFactory.

    Example:
        book = OrderBook()
        book.take_order("Cappuccino", 2)
        book.take_order("Cappuccino", 97)
        book.serve_all()
        # ["Serving Coffee flavor Cappuccino to table number 2",
        #  "Serving Coffee flavor Cappuccino to table number 97"]
        book.flavors_made()  # 1
    """

    def __init__(self, flavors: Optional[CoffeeFlavorFactory] = None):
        self.flavors = flavors if flavors is not None else CoffeeFlavorFactory()
        self._orders: List[Order] = []

    def take_order(self, flavor_name: str, table: int) -> Order:
        """
        Take an order for `flavor_name` at `table`.

        Args:
            flavor_name: Flavor to serve, looked up in the shared pool
            table: Table number, stored with the order only

        Returns:
            The recorded Order
        """
        order = Order(
            flavor=self.flavors.get_coffee_flavor(flavor_name),
            context=CoffeeOrderContext(table),
        )
        self._orders.append(order)
        return order

    def serve_all(self) -> List[str]:
        """Serve every order in the order it was taken."""
        return [order.serve() for order in self._orders]

    def flavors_made(self) -> int:
        return self.flavors.total_flavors_made()

    @property
    def orders(self) -> List[Order]:
        return list(self._orders)

    def __len__(self) -> int:
        return len(self._orders)
