"""Field type definitions for the flat_tables library."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from flat_tables.exceptions import CannotConvertElement

# Canonical literals: ASCII digits only, no whitespace or underscores
INT_PATTERN = re.compile(r"-?[0-9]+")
FLOAT_PATTERN = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][-+]?[0-9]+)?")


class FieldType(Enum):
    """Types a field may be declared with.

    Values are always stored as strings; the type decides which strings are
    legal and how a column is compared and aggregated.
    """

    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"

    @classmethod
    def from_name(cls, name: str | FieldType) -> FieldType:
        """Look up a field type by its persisted name."""
        if isinstance(name, FieldType):
            return name
        if not isinstance(name, str):
            raise CannotConvertElement(repr(name), "field type")
        field_type = FIELD_TYPE_NAMES.get(name)
        if field_type is None:
            raise CannotConvertElement(name, "field type")
        return field_type

    @property
    def is_numeric(self) -> bool:
        """Return whether values of this type can be summed and averaged."""
        return self in (FieldType.INT, FieldType.FLOAT)

    @property
    def default_value(self) -> str:
        """Return the placeholder stored when a column is backfilled."""
        defaults = {
            FieldType.INT: "0",
            FieldType.FLOAT: "0.0",
            FieldType.STRING: "",
            FieldType.BOOL: "false",
        }
        return defaults[self]

    def parse(self, value: str) -> Any:
        """Parse a stored string into a Python value of this type.

        Raises:
            CannotConvertElement: If the string is not a legal value.
        """
        if not isinstance(value, str):
            raise CannotConvertElement(repr(value), self.value)
        if self is FieldType.STRING:
            return value
        if self is FieldType.BOOL:
            if value == "true":
                return True
            if value == "false":
                return False
            raise CannotConvertElement(value, self.value)
        if self is FieldType.INT:
            if INT_PATTERN.fullmatch(value) is None:
                raise CannotConvertElement(value, self.value)
            return int(value)
        if FLOAT_PATTERN.fullmatch(value) is None:
            raise CannotConvertElement(value, self.value)
        number = float(value)
        # Overflowing literals such as 1e999 parse to inf
        if not math.isfinite(number):
            raise CannotConvertElement(value, self.value)
        return number

    def is_valid(self, value: str) -> bool:
        """Check whether a string parses as this type."""
        try:
            self.parse(value)
        except CannotConvertElement:
            return False
        return True

    def format_number(self, number: int | float) -> str:
        """Render a numeric result the way this type is written.

        Integers render without a decimal point, floats always carry one.
        """
        if self is FieldType.INT:
            return str(int(number))
        if self is FieldType.FLOAT:
            number = float(number)
            if not math.isfinite(number):
                raise CannotConvertElement(repr(number), self.value)
            text = repr(number)
            if "e" in text:
                # Positional form of the shortest round-tripping digits
                text = format(Decimal(text), "f")
            if "." not in text:
                text += ".0"
            return text
        raise CannotConvertElement(str(number), self.value)


# Mapping from persisted type names to FieldType enum values
FIELD_TYPE_NAMES: dict[str, FieldType] = {ft.value: ft for ft in FieldType}


@dataclass
class FieldDefinition:
    """A named, typed column of a table."""

    name: str
    field_type: FieldType

    def to_json(self) -> dict[str, str]:
        return {"name": self.name, "type": self.field_type.value}
