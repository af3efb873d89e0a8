"""In-memory table: schema, rows and the operations that mutate them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from flat_tables.exceptions import (
    CannotConvertElement,
    FieldNotFound,
    InvalidRow,
    InvalidShape,
    ValNotFound,
    WrongType,
)
from flat_tables.types import FieldDefinition, FieldType


@dataclass
class Table:
    """A named schema plus its rows.

    Rows are lists of strings aligned with ``fields``. Externally rows are
    numbered from 1; index 0 is the schema itself and never names a row.
    """

    name: str
    fields: list[FieldDefinition] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)

    @classmethod
    def create(cls, name: str, fields: Iterable[tuple[str, str | FieldType]]) -> Table:
        """Create an empty table from (field name, type name) pairs."""
        table = cls(name)
        for field_name, type_name in fields:
            table._append_field(field_name, FieldType.from_name(type_name))
        return table

    @property
    def row_count(self) -> int:
        return len(self.rows)

    # -- schema ---------------------------------------------------------

    def field_names(self) -> list[str]:
        """Return field names in schema order."""
        return [f.name for f in self.fields]

    def field_pairs(self) -> list[tuple[str, str]]:
        """Return (field name, type name) pairs in schema order."""
        return [(f.name, f.field_type.value) for f in self.fields]

    def get_field(self, name: str) -> FieldDefinition | None:
        """Get a field by name."""
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def field_index(self, name: str) -> int:
        """Get the column position of a field."""
        for i, f in enumerate(self.fields):
            if f.name == name:
                return i
        raise FieldNotFound(name)

    def get_field_type(self, name: str) -> FieldType:
        return self.fields[self.field_index(name)].field_type

    def _append_field(self, name: str, field_type: FieldType) -> None:
        if self.get_field(name) is not None:
            raise ValueError(f"Field '{name}' already exists in '{self.name}'")
        self.fields.append(FieldDefinition(name, field_type))

    def add_field(
        self, name: str, field_type: str | FieldType, default: str | None = None
    ) -> None:
        """Append a field and backfill every existing row.

        Args:
            name: Name of the new field.
            field_type: Declared type of the field.
            default: Value written into existing rows. The type's placeholder
                is used when omitted.
        """
        field_type = FieldType.from_name(field_type)
        if default is None:
            default = field_type.default_value
        else:
            _check_value(default, field_type)
        self._append_field(name, field_type)
        for row in self.rows:
            row.append(default)

    def delete_field(self, name: str) -> None:
        """Remove a field from the schema and its value from every row."""
        position = self.field_index(name)
        del self.fields[position]
        for row in self.rows:
            del row[position]

    # -- rows -----------------------------------------------------------

    def check_row_shape(self, values: list[str]) -> None:
        """Validate a candidate row against the schema.

        Raises:
            InvalidShape: If the value count differs from the field count.
            WrongType: On the first value that does not parse as its column type.
        """
        if len(values) != len(self.fields):
            raise InvalidShape(len(self.fields), len(values))
        for value, f in zip(values, self.fields):
            _check_value(value, f.field_type)

    def add_row(self, values: Iterable[str]) -> None:
        if isinstance(values, str):
            raise TypeError("Row values must be a sequence of strings, not a single string")
        values = list(values)
        self.check_row_shape(values)
        self.rows.append(values)

    def find_rows(self, field_name: str, value: str) -> list[int]:
        """Return the 1-based indices of rows whose field equals ``value``."""
        position = self.field_index(field_name)
        return [i for i, row in enumerate(self.rows, start=1) if row[position] == value]

    def find_value(self, value: str) -> str:
        """Return the name of the field holding the first cell equal to ``value``.

        Rows are scanned in order, and each row left to right.
        """
        for row in self.rows:
            for f, cell in zip(self.fields, row):
                if cell == value:
                    return f.name
        raise ValNotFound(value)

    def _check_row_index(self, index: int) -> None:
        if index < 1 or index > len(self.rows):
            raise InvalidRow(index, len(self.rows))

    def update_value(self, field_name: str, index: int, value: str) -> None:
        """Replace the cell of ``field_name`` in row ``index`` (1-based)."""
        position = self.field_index(field_name)
        self._check_row_index(index)
        _check_value(value, self.fields[position].field_type)
        self.rows[index - 1][position] = value

    def update_all(self, field_name: str, value: str) -> None:
        """Set ``field_name`` to ``value`` in every row."""
        position = self.field_index(field_name)
        _check_value(value, self.fields[position].field_type)
        for row in self.rows:
            row[position] = value

    def delete_rows(self, indices: Iterable[int]) -> int:
        """Delete rows by 1-based index, ignoring indices out of range.

        Returns:
            Number of rows removed.
        """
        removed = 0
        # Highest first so pending indices keep pointing at the same rows
        for index in sorted(set(indices), reverse=True):
            if 1 <= index <= len(self.rows):
                del self.rows[index - 1]
                removed += 1
        return removed

    def sort_rows(self, field_name: str) -> None:
        """Stable sort of all rows by one field.

        Numeric fields compare by value, everything else compares as text.
        """
        position = self.field_index(field_name)
        field_type = self.fields[position].field_type
        if field_type.is_numeric:
            self.rows.sort(key=lambda row: field_type.parse(row[position]))
        else:
            self.rows.sort(key=lambda row: row[position])

    def column(self, field_name: str) -> list[str]:
        """Return every value of one field, in row order."""
        position = self.field_index(field_name)
        return [row[position] for row in self.rows]

    def clear(self) -> None:
        """Remove all rows, keeping the schema."""
        self.rows.clear()

    # -- serialization --------------------------------------------------

    def to_json(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "fields": [f.to_json() for f in self.fields],
            "rows": [list(row) for row in self.rows],
        }

    @classmethod
    def from_json(cls, data: Any, name: str | None = None) -> Table:
        """Build a table from its JSON form, checking every invariant.

        Args:
            data: A ``{"name", "fields", "rows"}`` mapping.
            name: Overrides the name stored in ``data`` when given.

        Raises:
            ValueError: If the data is not a well-formed table.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Table entry must be an object, got {type(data).__name__}")
        if name is None:
            name = data.get("name")
        if not isinstance(name, str):
            raise ValueError("Table entry has no name")

        fields_data = data.get("fields", [])
        rows_data = data.get("rows", [])
        if not isinstance(fields_data, list) or not isinstance(rows_data, list):
            raise ValueError(f"Table '{name}' must have list 'fields' and 'rows'")

        table = cls(name)
        for entry in fields_data:
            if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
                raise ValueError(f"Malformed field in table '{name}': {entry!r}")
            table._append_field(entry["name"], FieldType.from_name(entry.get("type")))

        for row in rows_data:
            if not isinstance(row, list):
                raise ValueError(f"Malformed row in table '{name}': {row!r}")
            table.add_row(row)
        return table


def _check_value(value: str, field_type: FieldType) -> None:
    """Raise WrongType if ``value`` does not parse as ``field_type``."""
    try:
        field_type.parse(value)
    except CannotConvertElement:
        raise WrongType(str(value), field_type.value) from None
