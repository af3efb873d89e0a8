"""Flat Tables - typed tables stored in a single JSON file."""

from flat_tables.config import Config
from flat_tables.database import DatabaseFile
from flat_tables.exceptions import (
    CannotCompute,
    CannotConvertElement,
    DatabaseNotFound,
    FieldNotFound,
    FlatTablesError,
    InvalidDocument,
    InvalidRow,
    InvalidShape,
    ValNotFound,
    WrongType,
)
from flat_tables.table import Table
from flat_tables.types import FieldDefinition, FieldType

__all__ = [
    # Main API
    "DatabaseFile",
    "Config",
    "Table",
    # Types
    "FieldType",
    "FieldDefinition",
    # Errors
    "FlatTablesError",
    "ValNotFound",
    "FieldNotFound",
    "DatabaseNotFound",
    "InvalidRow",
    "CannotConvertElement",
    "CannotCompute",
    "InvalidShape",
    "WrongType",
    "InvalidDocument",
]

__version__ = "0.1.0"
