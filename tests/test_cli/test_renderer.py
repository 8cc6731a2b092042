"""
Tests for the rich table renderer.
"""

import pytest
from rich.console import Console

from indexedmap import IndexedMap, IndexNotFoundError
from indexedmap.cli import IndexRenderer


class TestIndexRenderer:

    def setup_method(self):
        self.console = Console(record=True, width=120, color_system=None)
        self.renderer = IndexRenderer(self.console, max_value_width=20)

        self.m = IndexedMap(prune_empty_buckets=False)
        self.m["a"] = {"cat": "X"}
        self.m["b"] = {"cat": "Y"}
        self.m["c"] = {"cat": "X"}
        self.m.add_index("by_cat", lambda v: v["cat"])

    def test_entries_table(self):
        table = self.renderer.entries_table(self.m)
        assert table.row_count == 3
        assert [c.header for c in table.columns] == ["Key", "Value"]
        assert table.caption == "3 entries"

    def test_index_table(self):
        table = self.renderer.index_table(self.m, "by_cat")
        assert table.row_count == 2
        assert table.caption == "2 buckets, 3 entries, largest 2"

    def test_index_table_unknown_index(self):
        with pytest.raises(IndexNotFoundError):
            self.renderer.index_table(self.m, "nope")

    def test_print_index_output(self):
        self.renderer.print_index(self.m, "by_cat")
        text = self.console.export_text()
        assert "Index 'by_cat'" in text
        assert "a, c" in text

    def test_empty_bucket_marked(self):
        self.m.remove("b")
        self.renderer.print_index(self.m, "by_cat")
        assert "<empty>" in self.console.export_text()

    def test_summary(self):
        self.m.add_index("by_key_len", lambda v: str(len(v)))
        table = self.renderer.summary_table(self.m)
        assert table.row_count == 2

        self.renderer.print_summary(self.m)
        text = self.console.export_text()
        assert "by_cat" in text
        assert "1.50" in text

    def test_long_values_truncated(self):
        self.m["long"] = {"cat": "X", "payload": "z" * 100}
        self.renderer.print_entries(self.m)
        text = self.console.export_text()
        assert "..." in text
        assert "z" * 50 not in text

    def test_markup_in_values_escaped(self):
        self.m["[bold]"] = {"cat": "X"}
        self.renderer.print_entries(self.m)
        assert "[bold]" in self.console.export_text()
