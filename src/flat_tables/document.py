"""Reading and writing the JSON document that holds every table.

The document is a JSON list of table objects::

    [{"name": "people", "fields": [{"name": "age", "type": "int"}], "rows": [["30"]]}]

It is always written as a single line with ``", "`` and ``": "`` separators.
Because the encoding is fixed, a new table can be appended to the text of an
existing document without decoding and re-encoding the rest of it: strip the
outer brackets, add the encoded table, close the bracket again. The result is
byte-for-byte what encoding the full list would have produced.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from flat_tables.exceptions import InvalidDocument
from flat_tables.table import Table

logger = logging.getLogger(__name__)

ITEM_SEPARATOR = ", "
KEY_SEPARATOR = ": "


def _dumps(value: Any) -> str:
    return json.dumps(value, separators=(ITEM_SEPARATOR, KEY_SEPARATOR))


def encode_table(table: Table) -> str:
    """Serialize a single table object."""
    return _dumps(table.to_json())


def encode(tables: list[Table]) -> str:
    """Serialize a full document."""
    return _dumps([table.to_json() for table in tables])


def decode(text: str, path: Path | str = "<string>") -> list[Table]:
    """Parse document text into tables.

    Raises:
        InvalidDocument: If the text is not JSON or not a list of valid tables.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidDocument(path, f"not valid JSON ({e})") from e
    if not isinstance(data, list):
        raise InvalidDocument(path, f"root must be a list, got {type(data).__name__}")
    try:
        return [Table.from_json(entry) for entry in data]
    except ValueError as e:
        raise InvalidDocument(path, str(e)) from e


def read_text(path: Path) -> str:
    """Return the raw serialized document."""
    if not path.exists():
        raise FileNotFoundError(f"Database file not found: {path}")
    with open(path, encoding="utf-8") as f:
        return f.read()


def load(path: Path) -> list[Table]:
    """Load and validate every table in the file at ``path``."""
    tables = decode(read_text(path), path)
    logger.debug(f"Loaded {len(tables)} tables from {path}")
    return tables


def write_text(path: Path, text: str) -> None:
    """Overwrite the file at ``path`` with ``text``.

    The write is not atomic; a failure part way through can leave a
    truncated file behind.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def save(path: Path, tables: list[Table]) -> None:
    """Serialize ``tables`` and overwrite the file at ``path``."""
    write_text(path, encode(tables))
    logger.debug(f"Saved {len(tables)} tables to {path}")


def splice_outer_brackets(text: str) -> str:
    """Remove the outer brackets of an encoded document.

    If anything remains inside the brackets, it is returned with a trailing
    item separator so another encoded table can be concatenated directly.
    An empty list yields an empty string.

    Raises:
        ValueError: If ``text`` is not a bracketed list.
    """
    text = text.strip()
    if len(text) < 2 or text[0] != "[" or text[-1] != "]":
        raise ValueError(f"Expected a bracketed list, got {text[:20]!r}")
    inner = text[1:-1].strip()
    if not inner:
        return ""
    return inner + ITEM_SEPARATOR


def append_encoded(text: str, table: Table) -> str:
    """Return document text with ``table`` appended as its last entry."""
    return "[" + splice_outer_brackets(text) + encode_table(table) + "]"


def append_table(path: Path, table: Table) -> None:
    """Append ``table`` to the file at ``path`` without re-encoding existing tables.

    The current contents are parsed first so that a corrupt file is reported
    rather than extended.
    """
    text = read_text(path)
    decode(text, path)
    write_text(path, append_encoded(text, table))
    logger.debug(f"Appended table '{table.name}' to {path}")
