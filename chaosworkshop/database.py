"""Small helpers for running parameterised SQLite statements."""

import sqlite3
from collections.abc import Mapping
from typing import Any

_PREFIXES = "@:$"


def _parameters(bindings: Mapping[str, Any] | None) -> dict[str, Any]:
    if not bindings:
        return {}
    return {
        (name[1:] if name[:1] in _PREFIXES else name): value
        for name, value in bindings.items()
    }


def execute(
    connection: sqlite3.Connection,
    query: str,
    bindings: Mapping[str, Any] | None = None,
) -> int:
    """Run a statement and return the number of rows it changed.

    Binding names may be given with or without their ``@``, ``:`` or ``$``
    prefix.
    """
    cursor = connection.execute(query, _parameters(bindings))
    return max(cursor.rowcount, 0)


def fetch_rows(
    connection: sqlite3.Connection,
    query: str,
    bindings: Mapping[str, Any] | None = None,
) -> list[dict[str, Any]]:
    """Run a query and return its rows as dicts keyed by column name, in column order."""
    cursor = connection.execute(query, _parameters(bindings))
    columns = [description[0] for description in cursor.description or ()]
    return [dict(zip(columns, row)) for row in cursor]