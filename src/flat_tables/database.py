"""File-level operations on a database file.

Every public method of :class:`DatabaseFile` is a complete unit of work: the
whole file is loaded, one table is located and changed, and the whole file is
written back. Nothing is cached between calls, and a method that raises has
not written anything.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterable, Iterator

from flat_tables import aggregate, directory, display, document
from flat_tables.table import Table
from flat_tables.types import FieldType

logger = logging.getLogger(__name__)


class DatabaseFile:
    """A JSON file holding an ordered list of tables."""

    def __init__(self, path: Path | str) -> None:
        if isinstance(path, str):
            path = Path(path)
        self.path = path

    def __repr__(self) -> str:
        return f"DatabaseFile({str(self.path)!r})"

    def _load(self) -> list[Table]:
        return document.load(self.path)

    def _find(self, name: str) -> Table:
        return directory.find_table(self._load(), name)

    @contextmanager
    def _editing(self, name: str) -> Iterator[Table]:
        """Yield the first table named ``name`` and save the file afterwards.

        The file is only written if the body completes without raising.
        """
        tables = self._load()
        table = directory.find_table(tables, name)
        yield table
        document.save(self.path, tables)

    # -- whole tables ---------------------------------------------------

    def add_table(self, name: str, fields: Iterable[tuple[str, str | FieldType]]) -> Table:
        """Append a new empty table with the given (field name, type) pairs.

        Raises:
            InvalidDocument: If the current file cannot be parsed.
        """
        table = Table.create(name, fields)
        document.append_table(self.path, table)
        logger.info(f"Created table '{name}' in {self.path}")
        return table

    def add_table_json(self, name: str, value: dict[str, Any]) -> Table:
        """Append a table given in its JSON form, rows included."""
        table = Table.from_json(value, name=name)
        document.append_table(self.path, table)
        logger.info(f"Created table '{name}' with {table.row_count} rows in {self.path}")
        return table

    def clear_all(self) -> None:
        """Replace the file with an empty document."""
        document.save(self.path, directory.clear_all([]))
        logger.info(f"Cleared all tables in {self.path}")

    def delete_table(self, name: str) -> None:
        tables = self._load()
        directory.delete_table(tables, name)
        document.save(self.path, tables)
        logger.info(f"Deleted table '{name}' from {self.path}")

    def clear_table(self, name: str) -> bool:
        """Remove every row of a table, keeping its schema.

        Returns:
            False if no table has that name; the file is then left untouched.
        """
        tables = self._load()
        if directory.clear_table(tables, name) is None:
            logger.debug(f"No table '{name}' to clear in {self.path}")
            return False
        document.save(self.path, tables)
        logger.info(f"Cleared table '{name}' in {self.path}")
        return True

    def find_table(self, name: str) -> Table:
        return self._find(name)

    def dumps(self) -> str:
        """Return the serialized document."""
        return document.encode(self._load())

    def list_names(self) -> str:
        """Return table names in file order, one per line."""
        return display.format_names(directory.list_names(self._load()))

    # -- schema ---------------------------------------------------------

    def get_field_type(self, name: str, field_name: str) -> str:
        return self._find(name).get_field_type(field_name).value

    def get_fields_list(self, name: str) -> list[str]:
        return self._find(name).field_names()

    def describe(self, name: str) -> str:
        """Return the table's schema as ``name: type`` lines."""
        return display.format_fields(self._find(name))

    def add_field(
        self,
        name: str,
        field_name: str,
        field_type: str | FieldType,
        default: str | None = None,
    ) -> None:
        """Add a field, filling existing rows with ``default`` or a placeholder."""
        with self._editing(name) as table:
            table.add_field(field_name, field_type, default)

    def delete_field(self, name: str, field_name: str) -> None:
        with self._editing(name) as table:
            table.delete_field(field_name)

    # -- rows -----------------------------------------------------------

    def list_rows(self, name: str) -> str:
        """Return the table's rows formatted for display."""
        return display.format_rows(self._find(name))

    def find_value(self, name: str, value: str) -> str:
        """Return the field name of the first cell equal to ``value``."""
        return self._find(name).find_value(value)

    def find_rows(self, name: str, field_name: str, value: str) -> list[int]:
        """Return ascending 1-based indices of rows where ``field_name == value``."""
        return self._find(name).find_rows(field_name, value)

    def add_row(self, name: str, values: Iterable[str]) -> None:
        with self._editing(name) as table:
            table.add_row(values)

    def update_value(self, name: str, field_name: str, index: int, value: str) -> None:
        """Set one cell. Row 1 is the first row after the schema."""
        with self._editing(name) as table:
            table.update_value(field_name, index, value)

    def update_all(self, name: str, field_name: str, value: str) -> None:
        with self._editing(name) as table:
            table.update_all(field_name, value)

    def delete_rows(self, name: str, indices: Iterable[int]) -> int:
        """Delete rows by 1-based index; indices out of range are skipped."""
        with self._editing(name) as table:
            removed = table.delete_rows(indices)
        return removed

    def sort_rows(self, name: str, field_name: str) -> None:
        with self._editing(name) as table:
            table.sort_rows(field_name)

    # -- aggregates -----------------------------------------------------

    def sum_field(self, name: str, field_name: str) -> str:
        return aggregate.sum_field(self._find(name), field_name)

    def mean_field(self, name: str, field_name: str) -> str:
        return aggregate.mean_field(self._find(name), field_name)
