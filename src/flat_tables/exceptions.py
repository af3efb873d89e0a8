"""Exceptions raised by flat_tables operations."""

from __future__ import annotations

from pathlib import Path


class FlatTablesError(Exception):
    """Base class for every error raised by the table engine."""


class ValNotFound(FlatTablesError, LookupError):
    """A searched value does not appear in a table."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Value '{value}' not found")
        self.value = value


class FieldNotFound(FlatTablesError, LookupError):
    """A referenced field is not part of the table's schema."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Field '{field_name}' not found")
        self.field_name = field_name


class DatabaseNotFound(FlatTablesError, LookupError):
    """No table with the given name exists in the file."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Database '{name}' not found")
        self.name = name


class InvalidRow(FlatTablesError, IndexError):
    """A row index is outside the table's current bounds."""

    def __init__(self, index: int, row_count: int) -> None:
        super().__init__(f"Row {index} out of range [1, {row_count}]")
        self.index = index
        self.row_count = row_count


class CannotConvertElement(FlatTablesError, ValueError):
    """A string could not be parsed as the requested type."""

    def __init__(self, value: str, type_name: str) -> None:
        super().__init__(f"Cannot convert '{value}' to {type_name}")
        self.value = value
        self.type_name = type_name


class CannotCompute(FlatTablesError, ValueError):
    """An aggregate is undefined for the given column."""


class InvalidShape(FlatTablesError, ValueError):
    """A candidate row has the wrong number of values."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Expected {expected} values, got {actual}")
        self.expected = expected
        self.actual = actual


class WrongType(FlatTablesError, ValueError):
    """A value does not match the declared type of its field."""

    def __init__(self, value: str, type_name: str) -> None:
        super().__init__(f"Value '{value}' is not of type {type_name}")
        self.value = value
        self.type_name = type_name


class InvalidDocument(FlatTablesError, ValueError):
    """The database file is not a well-formed document."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Invalid database file {path}: {reason}")
        self.path = path
        self.reason = reason
