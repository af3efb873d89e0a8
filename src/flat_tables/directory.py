"""Name-based lookup over the ordered list of tables in a document.

Table names are not required to be unique. Every lookup resolves to the
first table with a matching name, in document order.
"""

from __future__ import annotations

from flat_tables.exceptions import DatabaseNotFound
from flat_tables.table import Table


def _position(tables: list[Table], name: str) -> int | None:
    for i, table in enumerate(tables):
        if table.name == name:
            return i
    return None


def find_table(tables: list[Table], name: str) -> Table:
    """Return the first table named ``name``."""
    position = _position(tables, name)
    if position is None:
        raise DatabaseNotFound(name)
    return tables[position]


def delete_table(tables: list[Table], name: str) -> Table:
    """Remove and return the first table named ``name``."""
    position = _position(tables, name)
    if position is None:
        raise DatabaseNotFound(name)
    return tables.pop(position)


def clear_table(tables: list[Table], name: str) -> Table | None:
    """Empty the rows of the first table named ``name``.

    Returns:
        The cleared table, or None when no table matches. A missing name
        is not an error and leaves the document unchanged.
    """
    position = _position(tables, name)
    if position is None:
        return None
    table = tables[position]
    table.clear()
    return table


def list_names(tables: list[Table]) -> list[str]:
    return [table.name for table in tables]


def clear_all(tables: list[Table]) -> list[Table]:
    tables.clear()
    return tables
