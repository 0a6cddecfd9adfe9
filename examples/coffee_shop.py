import logging

from flypool import CoffeeFlavorFactory, FlyweightPool, OrderBook, render_stats

logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(message)s")

# 15 orders, 3 flavors
ORDERS = [
    ("Cappuccino", 2),
    ("Cappuccino", 2),
    ("Frappe", 1),
    ("Frappe", 1),
    ("Xpresso", 1),
    ("Frappe", 897),
    ("Cappuccino", 97),
    ("Cappuccino", 97),
    ("Frappe", 3),
    ("Xpresso", 3),
    ("Cappuccino", 3),
    ("Xpresso", 96),
    ("Frappe", 552),
    ("Cappuccino", 121),
    ("Xpresso", 121),
]

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Sharing flavors")
print("-" * 100)
print()

# A factory hands out one CoffeeFlavor per flavor name.
flavors = CoffeeFlavorFactory()

first = flavors.get_coffee_flavor("Cappuccino")
second = flavors.get_coffee_flavor("Cappuccino")

# Both requests get the very same object back.
print(f"Same object: {first is second}")
print(f"Flavors made: {flavors.total_flavors_made()}")

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Taking orders")
print("-" * 100)
print()

# The table number is extrinsic: each order keeps its own, the flavor is shared.
book = OrderBook(flavors)

for flavor, table in ORDERS:
    book.take_order(flavor, table)

for line in book.serve_all():
    print(line)

# 15 orders, but only 3 flavor objects.
print()
print(f"Orders taken: {len(book)}")
print(f"Flavors made: {book.flavors_made()}")

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Pooling anything")
print("-" * 100)
print()

# The pool works with any factory and any hashable key.
sizes = FlyweightPool(lambda ounces: {"ounces": ounces, "cup": f"{ounces}oz cup"})
sizes.get(8)
sizes.get(12)
sizes.get(8)

render_stats(flavors.pool, title="Coffee Flavors")
render_stats(sizes, title="Cup Sizes")
