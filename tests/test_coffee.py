"""Tests for the coffee-shop flyweights."""

import dataclasses

import pytest

from flypool import (
    CoffeeFlavor,
    CoffeeFlavorFactory,
    CoffeeOrderContext,
    Flyweight,
    FlyweightPool,
    TableContext,
)


class TestCoffeeFlavor:
    """Test suite for the CoffeeFlavor flyweight."""

    def test_serve_coffee_message(self):
        flavor = CoffeeFlavor("Cappuccino")
        context = CoffeeOrderContext(2)

        assert (
            flavor.serve_coffee(context)
            == "Serving Coffee flavor Cappuccino to table number 2"
        )

    def test_serve_coffee_is_describe(self):
        flavor = CoffeeFlavor("Frappe")
        context = CoffeeOrderContext(897)

        assert flavor.serve_coffee(context) == flavor.describe(context)

    def test_describe_depends_only_on_current_context(self):
        """Earlier calls with other tables leave no trace."""
        flavor = CoffeeFlavor("Xpresso")
        first = flavor.describe(CoffeeOrderContext(1))

        flavor.describe(CoffeeOrderContext(96))
        flavor.describe(CoffeeOrderContext(121))

        assert flavor.describe(CoffeeOrderContext(1)) == first
        assert flavor == CoffeeFlavor("Xpresso")

    def test_flavor_is_immutable(self):
        flavor = CoffeeFlavor("Frappe")

        with pytest.raises(dataclasses.FrozenInstanceError):
            flavor.flavor = "Mocha"

    def test_context_is_immutable(self):
        context = CoffeeOrderContext(3)

        with pytest.raises(dataclasses.FrozenInstanceError):
            context.table = 4

    def test_flavor_stores_no_extrinsic_state(self):
        """Only the flavor name lives on the flyweight."""
        field_names = [f.name for f in dataclasses.fields(CoffeeFlavor)]
        assert field_names == ["flavor"]


class TestCoffeeFlavorFactory:
    """Test suite for CoffeeFlavorFactory."""

    def test_same_flavor_shared(self):
        factory = CoffeeFlavorFactory()

        assert factory.get_coffee_flavor("Frappe") is factory.get_coffee_flavor(
            "Frappe"
        )
        assert factory.total_flavors_made() == 1

    def test_uses_injected_pool(self, pool):
        factory = CoffeeFlavorFactory(pool=pool)
        flavor = factory.get_coffee_flavor("Cappuccino")

        assert factory.pool is pool
        assert pool.get("Cappuccino") is flavor

    def test_factories_sharing_a_pool_share_flavors(self, pool):
        counter = CoffeeFlavorFactory(pool=pool)
        drive_through = CoffeeFlavorFactory(pool=pool)

        assert counter.get_coffee_flavor("Xpresso") is drive_through.get_coffee_flavor(
            "Xpresso"
        )
        assert counter.total_flavors_made() == 1

    def test_separate_factories_are_independent(self):
        """No pool state is shared between independently built factories."""
        first = CoffeeFlavorFactory()
        second = CoffeeFlavorFactory()

        first.get_coffee_flavor("Frappe")

        assert second.total_flavors_made() == 0
        assert first.get_coffee_flavor("Frappe") is not second.get_coffee_flavor(
            "Frappe"
        )

    def test_validate_keys_setting(self):
        factory = CoffeeFlavorFactory(validate_keys=True)

        with pytest.raises(ValueError):
            factory.get_coffee_flavor("")

    def test_builds_coffee_flavor_pool(self):
        factory = CoffeeFlavorFactory(thread_safe=False)

        assert isinstance(factory.pool, FlyweightPool)
        assert isinstance(factory.get_coffee_flavor("Frappe"), CoffeeFlavor)


def test_flavor_accepts_any_table_context():
    """Any object with a `table` attribute can be served to."""

    class Booth:
        table = 14

    flavor: Flyweight[TableContext] = CoffeeFlavor("Mocha")

    assert flavor.describe(Booth()) == "Serving Coffee flavor Mocha to table number 14"
