"""Tests for the rich pool report."""

from rich.console import Console
from rich.table import Table

from flypool import build_stats_table, render_stats


def test_build_stats_table(pool):
    pool.get("Frappe")
    pool.get("Frappe")

    table = build_stats_table(pool, title="Flavors")

    assert isinstance(table, Table)
    assert table.title == "Flavors"
    assert table.row_count == 5


def test_render_stats_output(pool):
    for name in ["Cappuccino", "Cappuccino", "Frappe", "Xpresso"]:
        pool.get(name)

    console = Console(record=True, width=80)
    render_stats(pool, console=console)
    output = console.export_text()

    assert "Flyweight Pool" in output
    assert "'Cappuccino'" in output
    assert "'Frappe'" in output
    assert "'Xpresso'" in output
    assert "25.0%" in output


def test_render_empty_pool(pool):
    console = Console(record=True, width=80)
    render_stats(pool, title="Empty", console=console)
    output = console.export_text()

    assert "Empty" in output
    assert "0.0%" in output
