"""Parameterized statement building for a single table.

Values are never interpolated into SQL text: every value is bound through a
``:name`` placeholder. Only identifiers (table and column names) appear in
the text, and the table name is checked to be a plain identifier.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from table_mapper.core.enums import StatementKind
from table_mapper.core.exceptions import InvalidIdentifierError

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def check_identifier(name: str) -> str:
    """Return *name* if it is a plain SQL identifier, else raise."""
    if not isinstance(name, str) or not _IDENTIFIER.fullmatch(name):
        raise InvalidIdentifierError(str(name))
    return name


@dataclass(frozen=True)
class Statement:
    """SQL text with ``:name`` placeholders and the values bound to them."""

    sql: str
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> StatementKind:
        return StatementKind.of(self.sql)


class StatementBuilder:
    """Builds the find/insert/update/delete statements of one table.

    Args:
        table_name: Table the statements target.
        write_limit: Append ``limit 1`` to single-row update/delete
            (MySQL supports it, SQLite and PostgreSQL do not).
        insert_returning: Append ``returning id`` to inserts so the new id
            comes back as a row (PostgreSQL).
    """

    def __init__(
        self,
        table_name: str,
        *,
        write_limit: bool = False,
        insert_returning: bool = False,
    ) -> None:
        self.table_name = check_identifier(table_name)
        self._write_limit = write_limit
        self._insert_returning = insert_returning

    def select_all(self) -> Statement:
        return Statement(f"select * from {self.table_name}")

    def select_by_id(self, row_id: Any) -> Statement:
        return Statement(
            f"select * from {self.table_name} where id = :id limit 1",
            {"id": row_id},
        )

    def select_where(self, field_name: str, value: Any, *, one: bool = False) -> Statement:
        sql = f"select * from {self.table_name} where {field_name} = :value"
        if one:
            sql += " limit 1"
        return Statement(sql, {"value": value})

    def select_fragment(
        self,
        fragment: str,
        params: Mapping[str, Any] | None = None,
        *,
        one: bool = False,
    ) -> Statement:
        """Select with a caller-written where clause appended verbatim."""
        sql = f"select * from {self.table_name} where {fragment}"
        if one:
            sql += " limit 1"
        return Statement(sql, dict(params or {}))

    def insert(self, fields: Sequence[str], values: Mapping[str, Any]) -> Statement:
        """Insert exactly *fields*; fields missing from *values* are bound as NULL."""
        if not fields:
            sql = f"insert into {self.table_name} default values"
            params: dict[str, Any] = {}
        else:
            columns = ", ".join(fields)
            placeholders = ", ".join(f":p{i}" for i in range(len(fields)))
            sql = f"insert into {self.table_name} ({columns}) values ({placeholders})"
            params = {f"p{i}": values.get(name) for i, name in enumerate(fields)}
        if self._insert_returning:
            sql += " returning id"
        return Statement(sql, params)

    def update(self, fields: Sequence[str], values: Mapping[str, Any], row_id: Any) -> Statement:
        assignments = ", ".join(f"{name} = :p{i}" for i, name in enumerate(fields))
        sql = f"update {self.table_name} set {assignments} where id = :id"
        if self._write_limit:
            sql += " limit 1"
        params = {f"p{i}": values.get(name) for i, name in enumerate(fields)}
        params["id"] = row_id
        return Statement(sql, params)

    def delete_by_id(self, row_id: Any) -> Statement:
        sql = f"delete from {self.table_name} where id = :id"
        if self._write_limit:
            sql += " limit 1"
        return Statement(sql, {"id": row_id})

    def delete_where(self, field_name: str, value: Any) -> Statement:
        return Statement(
            f"delete from {self.table_name} where {field_name} = :value",
            {"value": value},
        )
