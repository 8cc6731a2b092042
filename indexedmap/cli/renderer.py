"""
Rich table rendering for indexed maps.

Two views:
  - entries: the primary store, one row per (key, value)
  - index:   one row per bucket, listing the primary keys filed under it
"""

from typing import Any, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..indexed_map import IndexedMap


class IndexRenderer:
    """
    Renders the primary store and the indexes of an IndexedMap as tables.
    """

    def __init__(self, console: Optional[Console] = None, max_value_width: int = 60):
        self.console = console or Console()
        self.max_value_width = max_value_width

    # ─── Tables ─────────────────────────────────────────────────────

    def entries_table(self, indexed_map: IndexedMap, title: str = "Entries") -> Table:
        table = Table(title=title, box=box.ROUNDED, show_lines=False)
        table.add_column("Key", style="bold cyan", no_wrap=True)
        table.add_column("Value", style="white")

        for key, value in indexed_map.items():
            table.add_row(self._format(key), self._format(value))

        table.caption = f"{len(indexed_map)} entries"
        return table

    def index_table(self, indexed_map: IndexedMap, index_name: str) -> Table:
        """
        Build a table for one index.

        Raises:
            IndexNotFoundError: If the index is not registered
        """
        info = indexed_map.get_index_info(index_name)

        table = Table(title=f"Index '{index_name}'", box=box.ROUNDED)
        table.add_column("Index Key", style="bold magenta", no_wrap=True)
        table.add_column("Size", justify="right", style="green")
        table.add_column("Primary Keys", style="cyan")

        for index_key in sorted(indexed_map.get_index_keys(index_name)):
            bucket = indexed_map.lookup(index_name, index_key)
            keys = ", ".join(self._format(k) for k in bucket)
            table.add_row(escape(index_key), str(len(bucket)), keys or "[dim]<empty>[/dim]")

        table.caption = (f"{info.bucket_count} buckets, {info.entry_count} entries, "
                         f"largest {info.largest_bucket}")
        return table

    def summary_table(self, indexed_map: IndexedMap) -> Table:
        table = Table(title="Indexes", box=box.SIMPLE_HEAVY)
        table.add_column("Name", style="bold yellow")
        table.add_column("Buckets", justify="right")
        table.add_column("Entries", justify="right")
        table.add_column("Avg Bucket", justify="right")

        for name in indexed_map.list_indexes():
            info = indexed_map.get_index_info(name)
            table.add_row(escape(name), str(info.bucket_count), str(info.entry_count),
                          f"{info.average_bucket_size:.2f}")
        return table

    # ─── Printing ───────────────────────────────────────────────────

    def print_entries(self, indexed_map: IndexedMap) -> None:
        self.console.print(self.entries_table(indexed_map))

    def print_index(self, indexed_map: IndexedMap, index_name: str) -> None:
        self.console.print(self.index_table(indexed_map, index_name))

    def print_summary(self, indexed_map: IndexedMap) -> None:
        self.console.print(self.summary_table(indexed_map))

    def _format(self, value: Any) -> str:
        text = repr(value) if not isinstance(value, str) else value
        if len(text) > self.max_value_width:
            text = text[: self.max_value_width - 3] + "..."
        return escape(text)
