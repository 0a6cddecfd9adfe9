"""
flypool Memory Benchmarks
"""

import argparse
import gc
import tracemalloc
from dataclasses import dataclass
from typing import Callable, List

import numpy as np
from rich.console import Console
from rich.table import Table

from flypool import CoffeeFlavor, CoffeeFlavorFactory, CoffeeOrderContext

# =============================================================================
# Benchmark Configuration and Metrics
# =============================================================================

# Configuration
ORDER_COUNTS = [1_000, 10_000, 100_000]
FLAVORS = ["Cappuccino", "Frappe", "Xpresso", "Latte", "Mocha"]
NUM_ITERATIONS = 3  # Run multiple times to average out GC variance


@dataclass
class MemoryMetrics:
    """Memory used by one way of holding N orders."""

    strategy: str
    orders: int
    flavor_objects: int
    peak_kb: float


def _pooled_orders(n: int) -> List[tuple]:
    flavors = CoffeeFlavorFactory()
    return [
        (flavors.get_coffee_flavor(FLAVORS[i % len(FLAVORS)]), CoffeeOrderContext(i))
        for i in range(n)
    ]


def _unpooled_orders(n: int) -> List[tuple]:
    return [
        (CoffeeFlavor(FLAVORS[i % len(FLAVORS)]), CoffeeOrderContext(i))
        for i in range(n)
    ]


def measure(
    strategy: str, build: Callable[[int], List[tuple]], n: int
) -> MemoryMetrics:
    """Average peak traced memory over NUM_ITERATIONS builds of n orders."""
    peaks = []
    flavor_objects = 0
    for _ in range(NUM_ITERATIONS):
        gc.collect()
        tracemalloc.start()
        orders = build(n)
        _, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

        peaks.append(peak / 1024)
        flavor_objects = len({id(flavor) for flavor, _ in orders})
        del orders

    return MemoryMetrics(
        strategy=strategy,
        orders=n,
        flavor_objects=flavor_objects,
        peak_kb=float(np.mean(peaks)),
    )


def run(order_counts: List[int], console: Console) -> None:
    table = Table(title="Flyweight Memory Results")
    table.add_column("Strategy", style="cyan")
    table.add_column("Orders", style="yellow", justify="right")
    table.add_column("Flavor objects", style="blue", justify="right")
    table.add_column("Peak Memory", style="green", justify="right")

    for n in order_counts:
        console.print(f"[yellow]Running {n:,} orders...[/yellow]")
        for strategy, build in (
            ("pooled", _pooled_orders),
            ("per-order", _unpooled_orders),
        ):
            metrics = measure(strategy, build, n)
            table.add_row(
                metrics.strategy,
                f"{metrics.orders:,}",
                f"{metrics.flavor_objects:,}",
                f"{metrics.peak_kb:,.1f} KB",
            )

    console.print()
    console.print(table)


def main():
    """Main entry point for the flyweight memory benchmark."""
    parser = argparse.ArgumentParser(description="flypool Memory Benchmarks")
    parser.add_argument(
        "--quick",
        action="store_true",
        help="Run only the smallest order count",
    )

    args = parser.parse_args()
    order_counts = ORDER_COUNTS[:1] if args.quick else ORDER_COUNTS

    run(order_counts, Console())


if __name__ == "__main__":
    main()
