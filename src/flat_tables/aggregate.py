"""Numeric aggregates over a table column."""

from __future__ import annotations

import math

from flat_tables.exceptions import CannotCompute
from flat_tables.table import Table
from flat_tables.types import FieldType


def _numeric_column(table: Table, field_name: str) -> tuple[FieldType, list[int | float]]:
    field_type = table.get_field_type(field_name)
    if not field_type.is_numeric:
        raise CannotCompute(
            f"Field '{field_name}' has non-numeric type {field_type.value}"
        )
    return field_type, [field_type.parse(v) for v in table.column(field_name)]


def sum_field(table: Table, field_name: str) -> str:
    """Sum a numeric field, rendered in the field's own format.

    An empty table sums to zero.
    """
    field_type, values = _numeric_column(table, field_name)
    return _render(field_type, sum(values))


def mean_field(table: Table, field_name: str) -> str:
    """Average a numeric field, rendered in the field's own format.

    Integer fields use the integer quotient, truncated toward zero.
    """
    field_type, values = _numeric_column(table, field_name)
    if not values:
        raise CannotCompute(f"Cannot average field '{field_name}' of an empty table")
    total = sum(values)
    if field_type is FieldType.INT:
        quotient = abs(total) // len(values)
        return field_type.format_number(quotient if total >= 0 else -quotient)
    return _render(field_type, total / len(values))


def _render(field_type: FieldType, number: int | float) -> str:
    if isinstance(number, float) and not math.isfinite(number):
        raise CannotCompute(f"Result overflows {field_type.value}")
    return field_type.format_number(number)
