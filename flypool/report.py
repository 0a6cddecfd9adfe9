"""
Pool Report
===========

Renders a FlyweightPool's contents and request statistics as a rich table.
"""

from typing import Optional

from rich.console import Console
from rich.table import Table

from .pool import FlyweightPool


def build_stats_table(pool: FlyweightPool, title: str = "Flyweight Pool") -> Table:
    """Build a table listing pooled keys followed by request statistics."""
    stats = pool.get_stats()

    table = Table(title=title)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")

    for key in pool.keys():
        table.add_row("flyweight", repr(key))

    table.add_section()
    table.add_row("requests", str(stats["requests"]))
    table.add_row("hits", str(stats["hits"]))
    table.add_row("created", str(stats["created"]))
    table.add_row("hit rate", f"{stats['hit_rate']:.1%}")
    return table


def render_stats(
    pool: FlyweightPool,
    title: str = "Flyweight Pool",
    console: Optional[Console] = None,
) -> None:
    """Print the pool's stats table to `console` (stdout by default)."""
    console = console or Console()
    console.print(build_stats_table(pool, title=title))
