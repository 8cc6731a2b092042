#!/usr/bin/env python3
"""
Indexed Map Walkthrough

This example demonstrates the indexed map end to end:
- Filling the primary store
- Registering an index over existing entries (backfill)
- Moving an entry between buckets by overwriting it
- Removing entries and clearing the map
- Strict and non-raising index lookups

Run with: python examples/indexed_map_example.py
"""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule

from indexedmap import IndexedMap, DuplicateIndexError, IndexNotFoundError
from indexedmap.cli import IndexRenderer


console = Console()
renderer = IndexRenderer(console)


def print_header(title: str, subtitle: str = ""):
    """Print a header panel"""
    if subtitle:
        full_title = f"[bold blue]{title}[/bold blue]\n[dim]{subtitle}[/dim]"
    else:
        full_title = f"[bold blue]{title}[/bold blue]"

    console.print(Panel(
        full_title,
        style="bright_blue",
        box=box.DOUBLE,
        padding=(1, 2)
    ))


def print_step(step_num: int, title: str, description: str = ""):
    step_text = f"[bold yellow]Step {step_num}: {title}[/bold yellow]"
    if description:
        step_text += f"\n[dim italic]{description}[/dim italic]"
    console.print(step_text)
    console.print()


def print_success(message: str):
    console.print(f"[bold green]✓[/bold green] {message}")


def print_info(message: str):
    console.print(f"[bold cyan]ℹ[/bold cyan] {message}")


def print_error(message: str):
    console.print(f"[bold red]✗[/bold red] {message}")


def demonstrate_backfill() -> IndexedMap:
    print_step(1, "Backfilling an index",
               "Indexes registered after data exists are populated from the current entries")

    products = IndexedMap()
    products["a"] = {"cat": "X", "owner": "alice"}
    products["b"] = {"cat": "Y", "owner": "bob"}
    products["c"] = {"cat": "X", "owner": "bob"}
    renderer.print_entries(products)

    products.add_index("by_cat", lambda v: v["cat"])
    products.add_index("by_owner", lambda v: v["owner"])
    renderer.print_index(products, "by_cat")
    renderer.print_index(products, "by_owner")
    print_success(f"{products.index_count} indexes registered")
    console.print()
    return products


def demonstrate_mutation(products: IndexedMap):
    print_step(2, "Overwriting and removing",
               "Every write is mirrored into every index")

    print_info("Moving 'b' from category Y to X")
    products["b"] = {"cat": "X", "owner": "bob"}
    renderer.print_index(products, "by_cat")

    print_info("Removing 'a'")
    products.remove("a")
    renderer.print_index(products, "by_cat")
    renderer.print_summary(products)
    console.print()


def demonstrate_lookups(products: IndexedMap):
    print_step(3, "Lookups", "Strict accessors raise; try_* accessors report absence")

    found, bucket = products.try_get_index_values("by_cat", "Z")
    print_info(f"try_get_index_values('by_cat', 'Z') -> found={found}, value={bucket}")

    try:
        products.get_index_keys("by_price")
    except IndexNotFoundError as e:
        print_error(f"get_index_keys('by_price') raised: {e}")

    try:
        products.add_index("by_cat", lambda v: v["owner"])
    except DuplicateIndexError as e:
        print_error(f"add_index('by_cat') raised: {e}")
    console.print()


def main():
    print_header("Indexed Map", "A dictionary with named secondary indexes")

    products = demonstrate_backfill()
    demonstrate_mutation(products)
    demonstrate_lookups(products)

    products.clear()
    print_info(f"After clear(): {products}, indexes kept: {products.list_indexes()}")
    console.print(Rule("[dim]Done[/dim]"))


if __name__ == "__main__":
    main()
