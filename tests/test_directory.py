"""Tests for name-based table lookup."""

import pytest

from flat_tables import directory
from flat_tables.exceptions import DatabaseNotFound
from flat_tables.table import Table


@pytest.fixture
def tables():
    first = Table.create("a", [("x", "int")])
    first.add_row(["1"])
    second = Table.create("b", [("y", "string")])
    duplicate = Table.create("a", [("z", "bool")])
    duplicate.add_row(["true"])
    return [first, second, duplicate]


class TestDirectory:
    """Tests for find, delete, clear and list."""

    def test_list_names(self, tables):
        assert directory.list_names(tables) == ["a", "b", "a"]

    def test_find_first_match(self, tables):
        assert directory.find_table(tables, "a").field_names() == ["x"]

    def test_find_missing(self, tables):
        with pytest.raises(DatabaseNotFound) as exc_info:
            directory.find_table(tables, "c")
        assert exc_info.value.name == "c"

    def test_delete_first_match(self, tables):
        removed = directory.delete_table(tables, "a")
        assert removed.field_names() == ["x"]
        assert directory.list_names(tables) == ["b", "a"]
        assert directory.find_table(tables, "a").field_names() == ["z"]

    def test_delete_missing(self, tables):
        with pytest.raises(DatabaseNotFound):
            directory.delete_table(tables, "c")
        assert len(tables) == 3

    def test_clear_first_match(self, tables):
        cleared = directory.clear_table(tables, "a")
        assert cleared is tables[0]
        assert tables[0].rows == []
        assert tables[0].field_names() == ["x"]
        assert tables[2].rows == [["true"]]

    def test_clear_missing_is_not_an_error(self, tables):
        assert directory.clear_table(tables, "c") is None
        assert tables[0].rows == [["1"]]

    def test_clear_all(self, tables):
        assert directory.clear_all(tables) == []
        assert tables == []
