"""Materialized query results.

A QueryResult holds every row of an executed statement as a dict and keeps a
read cursor over them, so a cached result can be rewound and read again
without touching the connection.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


def _rows_to_dicts(cursor: Any) -> list[dict[str, Any]]:
    """Convert cursor results to list of dicts.

    Handles both tuple-like rows and dict-like rows from different adapters.
    """
    if cursor.description is None:
        return []
    columns = [desc[0] for desc in cursor.description]
    rows = cursor.fetchall()
    if not rows:
        return []

    # psycopg dict_row and MySQL dictionary cursors already yield dicts
    first_row = rows[0]
    if isinstance(first_row, dict):
        return [dict(row) for row in rows]

    # sqlite3.Row and plain tuples
    return [dict(zip(columns, row, strict=True)) for row in rows]


class QueryResult:
    """Rows of one executed statement plus a read cursor.

    Args:
        rows: Row dicts in the order the database returned them.
        rowcount: Rows affected, as reported by the driver.
        last_insert_id: Auto-increment id produced by an insert, if any.
    """

    def __init__(
        self,
        rows: list[dict[str, Any]] | None = None,
        rowcount: int = -1,
        last_insert_id: Any = None,
    ) -> None:
        self._rows = rows or []
        self._position = 0
        self.rowcount = rowcount
        self.last_insert_id = last_insert_id

    @classmethod
    def from_cursor(cls, cursor: Any, last_insert_id: Any = None) -> QueryResult:
        rows = _rows_to_dicts(cursor)
        return cls(rows, rowcount=int(getattr(cursor, "rowcount", -1)), last_insert_id=last_insert_id)

    @property
    def num_rows(self) -> int:
        return len(self._rows)

    @property
    def position(self) -> int:
        return self._position

    def seek(self, position: int = 0) -> None:
        """Move the read cursor to ``position`` (0 is the first row)."""
        if position < 0 or position > len(self._rows):
            raise IndexError(f"Row position {position} out of range 0..{len(self._rows)}")
        self._position = position

    def fetch_assoc(self) -> dict[str, Any] | None:
        """Return the row under the cursor and advance, or None when exhausted."""
        if self._position >= len(self._rows):
            return None
        row = self._rows[self._position]
        self._position += 1
        return dict(row)

    def __iter__(self) -> Iterator[dict[str, Any]]:
        row = self.fetch_assoc()
        while row is not None:
            yield row
            row = self.fetch_assoc()

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return f"QueryResult(num_rows={self.num_rows}, position={self._position})"
