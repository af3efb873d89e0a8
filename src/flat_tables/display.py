"""Plain-text rendering of tables for console front ends."""

from __future__ import annotations

from flat_tables.table import Table

MAX_COLUMN_WIDTH = 40


def format_value(value: str, max_width: int = MAX_COLUMN_WIDTH) -> str:
    """Truncate a value to ``max_width`` characters."""
    if len(value) > max_width:
        return value[: max_width - 3] + "..."
    return value


def format_names(names: list[str]) -> str:
    """Join names one per line."""
    return "\n".join(names)


def format_fields(table: Table) -> str:
    """Render the schema as ``name: type`` lines."""
    return "\n".join(f"{name}: {type_name}" for name, type_name in table.field_pairs())


def format_rows(table: Table, max_width: int = MAX_COLUMN_WIDTH) -> str:
    """Render rows as an aligned text table.

    Each row is prefixed with its 1-based index.
    """
    if not table.rows:
        return "(no rows)"

    columns = [format_value(col, max_width) for col in ["#"] + table.field_names()]
    lines = [[str(i)] + [format_value(v, max_width) for v in row] for i, row in enumerate(table.rows, start=1)]

    widths = [len(col) for col in columns]
    for line in lines:
        for i, val in enumerate(line):
            widths[i] = max(widths[i], len(val))
    widths = [min(w, max_width) for w in widths]

    header = " | ".join(col.ljust(widths[i]) for i, col in enumerate(columns))
    out = [header, "-" * len(header)]
    for line in lines:
        out.append(" | ".join(val.ljust(widths[i]) for i, val in enumerate(line)))

    count = len(table.rows)
    out.append(f"\n({count} row{'s' if count != 1 else ''})")
    return "\n".join(out)
