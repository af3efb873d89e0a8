"""Tests for file-level database operations."""

import pytest

from flat_tables import DatabaseFile
from flat_tables.exceptions import (
    CannotCompute,
    DatabaseNotFound,
    FieldNotFound,
    InvalidDocument,
    InvalidRow,
    InvalidShape,
    ValNotFound,
    WrongType,
)

PEOPLE_FIELDS = [("name", "string"), ("age", "int"), ("active", "bool")]


@pytest.fixture
def db(tmp_path):
    """An empty database file."""
    db = DatabaseFile(tmp_path / "database.json")
    db.clear_all()
    return db


@pytest.fixture
def people(db):
    """A database file with a five-row people table."""
    db.add_table("people", PEOPLE_FIELDS)
    for row in [
        ["Alice", "30", "true"],
        ["Bob", "25", "false"],
        ["Carol", "35", "true"],
        ["Dave", "25", "true"],
        ["Eve", "40", "false"],
    ]:
        db.add_row("people", row)
    return db


class TestTables:
    """Tests for creating, listing, clearing and deleting tables."""

    def test_path_from_string(self, tmp_path):
        db = DatabaseFile(str(tmp_path / "x.json"))
        assert db.path == tmp_path / "x.json"

    def test_add_then_find(self, db):
        """Test a new table has the given schema and no rows."""
        db.add_table("people", PEOPLE_FIELDS)
        table = db.find_table("people")
        assert table.field_pairs() == PEOPLE_FIELDS
        assert table.rows == []

    def test_add_table_to_missing_file(self, tmp_path):
        db = DatabaseFile(tmp_path / "missing.json")
        with pytest.raises(FileNotFoundError):
            db.add_table("people", PEOPLE_FIELDS)

    def test_add_table_to_corrupt_file(self, tmp_path):
        path = tmp_path / "database.json"
        path.write_text("not json")
        with pytest.raises(InvalidDocument):
            DatabaseFile(path).add_table("people", PEOPLE_FIELDS)

    def test_add_table_json(self, db):
        db.add_table_json(
            "scores",
            {"fields": [{"name": "score", "type": "float"}], "rows": [["1.5"], ["2.5"]]},
        )
        assert db.find_table("scores").rows == [["1.5"], ["2.5"]]
        assert db.mean_field("scores", "score") == "2.0"

    def test_add_table_json_invalid(self, db):
        with pytest.raises(WrongType):
            db.add_table_json("scores", {"fields": [{"name": "score", "type": "int"}], "rows": [["x"]]})
        assert db.list_names() == ""

    def test_list_names(self, db):
        db.add_table("a", [])
        db.add_table("b", [])
        db.add_table("a", [])
        assert db.list_names() == "a\nb\na"

    def test_delete_table(self, people):
        people.add_table("other", [("x", "int")])
        people.delete_table("people")
        assert people.list_names() == "other"

    def test_delete_missing_table(self, people):
        with pytest.raises(DatabaseNotFound):
            people.delete_table("missing")

    def test_clear_table(self, people):
        assert people.clear_table("people") is True
        table = people.find_table("people")
        assert table.rows == []
        assert table.field_pairs() == PEOPLE_FIELDS

    def test_clear_missing_table_leaves_file_unchanged(self, people):
        before = people.path.read_bytes()
        assert people.clear_table("missing") is False
        assert people.path.read_bytes() == before

    def test_clear_all(self, people):
        people.clear_all()
        assert people.list_names() == ""
        assert people.path.read_text() == "[]"

    def test_dumps(self, people):
        assert people.dumps() == people.path.read_text()

    def test_first_match_with_duplicates(self, people):
        people.add_table("people", [("other", "string")])
        people.add_row("people", ["Frank", "50", "false"])
        tables = people.list_names().split("\n")
        assert tables == ["people", "people"]
        assert people.find_table("people").row_count == 6


class TestFields:
    """Tests for schema operations through the file."""

    def test_get_field_type(self, people):
        assert people.get_field_type("people", "age") == "int"
        with pytest.raises(FieldNotFound):
            people.get_field_type("people", "height")

    def test_get_fields_list(self, people):
        assert people.get_fields_list("people") == ["name", "age", "active"]

    def test_describe(self, people):
        assert people.describe("people") == "name: string\nage: int\nactive: bool"

    def test_add_and_delete_field(self, people):
        people.add_field("people", "city", "string", "Paris")
        table = people.find_table("people")
        assert table.column("city") == ["Paris"] * 5
        people.delete_field("people", "age")
        table = people.find_table("people")
        assert table.field_names() == ["name", "active", "city"]
        assert all(len(row) == 3 for row in table.rows)

    def test_add_field_placeholder(self, people):
        people.add_field("people", "score", "int")
        assert people.find_table("people").column("score") == ["0"] * 5

    def test_delete_missing_field_writes_nothing(self, people):
        before = people.path.read_bytes()
        with pytest.raises(FieldNotFound):
            people.delete_field("people", "height")
        assert people.path.read_bytes() == before


class TestRows:
    """Tests for row operations through the file."""

    def test_add_row_persists(self, people):
        assert people.find_table("people").row_count == 5

    def test_add_row_bad_shape(self, people):
        before = people.path.read_bytes()
        with pytest.raises(InvalidShape):
            people.add_row("people", ["Frank"])
        assert people.path.read_bytes() == before

    def test_add_row_wrong_type(self, people):
        before = people.path.read_bytes()
        with pytest.raises(WrongType):
            people.add_row("people", ["Frank", "50", "no"])
        assert people.path.read_bytes() == before

    def test_add_row_missing_table(self, people):
        with pytest.raises(DatabaseNotFound):
            people.add_row("missing", ["a"])

    def test_find_rows(self, people):
        assert people.find_rows("people", "age", "25") == [2, 4]
        assert people.find_rows("people", "age", "99") == []

    def test_find_value(self, people):
        assert people.find_value("people", "Carol") == "name"
        with pytest.raises(ValNotFound):
            people.find_value("people", "Zed")

    def test_update_value(self, people):
        people.update_value("people", "name", 1, "Alicia")
        assert people.find_rows("people", "name", "Alicia") == [1]

    def test_update_value_invalid_row(self, people):
        with pytest.raises(InvalidRow):
            people.update_value("people", "name", 6, "Zed")

    def test_update_all(self, people):
        people.update_all("people", "age", "1")
        assert people.sum_field("people", "age") == "5"

    def test_delete_rows(self, people):
        assert people.delete_rows("people", [2, 4]) == 2
        table = people.find_table("people")
        assert table.column("name") == ["Alice", "Carol", "Eve"]

    def test_sort_rows(self, people):
        people.sort_rows("people", "age")
        assert people.find_table("people").column("age") == ["25", "25", "30", "35", "40"]

    def test_list_rows(self, people):
        text = people.list_rows("people")
        lines = text.split("\n")
        assert lines[0].split(" | ")[1:] == ["name ", "age", "active"]
        assert "Alice" in lines[2]
        assert text.endswith("(5 rows)")


class TestAggregates:
    """Tests for sum and mean through the file."""

    def test_sum_and_mean(self, db):
        db.add_table("nums", [("n", "int")])
        for v in ["1", "2", "3"]:
            db.add_row("nums", [v])
        assert db.sum_field("nums", "n") == "6"
        assert db.mean_field("nums", "n") == "2"

    def test_mean_of_empty(self, db):
        db.add_table("nums", [("n", "int")])
        assert db.sum_field("nums", "n") == "0"
        with pytest.raises(CannotCompute):
            db.mean_field("nums", "n")

    def test_sum_of_text(self, people):
        with pytest.raises(CannotCompute):
            people.sum_field("people", "name")
