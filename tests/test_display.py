"""Tests for text rendering of tables."""

from flat_tables.display import format_fields, format_names, format_rows, format_value
from flat_tables.table import Table


class TestFormatting:
    """Tests for the display helpers."""

    def test_format_names(self):
        assert format_names(["a", "b"]) == "a\nb"
        assert format_names([]) == ""

    def test_format_value_truncates(self):
        assert format_value("abcdef", max_width=5) == "ab..."
        assert format_value("abc", max_width=5) == "abc"

    def test_format_fields(self):
        table = Table.create("t", [("a", "int"), ("b", "bool")])
        assert format_fields(table) == "a: int\nb: bool"

    def test_format_empty_table(self):
        table = Table.create("t", [("a", "int")])
        assert format_rows(table) == "(no rows)"

    def test_long_header_is_elided(self):
        """Test headers are truncated with an ellipsis like cell values."""
        table = Table.create("t", [("description", "string")])
        table.add_row(["ok"])
        header = format_rows(table, max_width=8).split("\n")[0]
        assert header == "# | descr..."

    def test_format_rows(self):
        table = Table.create("t", [("name", "string"), ("n", "int")])
        table.add_row(["Alice", "1"])
        assert format_rows(table) == (
            "# | name  | n\n"
            "-------------\n"
            "1 | Alice | 1\n"
            "\n"
            "(1 row)"
        )
