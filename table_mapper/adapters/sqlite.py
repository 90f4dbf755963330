"""SQLite adapter using stdlib sqlite3."""

from __future__ import annotations

import sqlite3
from typing import Any

from table_mapper.adapters.escaping import escape_standard
from table_mapper.core.connection import ConnectionConfig
from table_mapper.core.exceptions import ConnectionError  # noqa: A004
from table_mapper.core.result import QueryResult
from table_mapper.core.statement import Statement, check_identifier


class SqliteAdapter:
    """Synchronous SQLite adapter using stdlib sqlite3."""

    @property
    def paramstyle(self) -> str:
        return "named"

    @property
    def error_types(self) -> tuple[type[BaseException], ...]:
        return (sqlite3.Error,)

    @property
    def supports_write_limit(self) -> bool:
        # needs a build with SQLITE_ENABLE_UPDATE_DELETE_LIMIT
        return False

    @property
    def insert_returning(self) -> bool:
        return False

    @property
    def schema_column(self) -> str:
        return "name"

    def connect(self, config: ConnectionConfig) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(config.database, **config.extra)
        except sqlite3.Error as e:
            raise ConnectionError(f"Cannot open SQLite database '{config.database}': {e}") from e
        conn.row_factory = sqlite3.Row
        return conn

    def close(self, connection: sqlite3.Connection) -> None:
        connection.close()

    def execute(
        self,
        connection: sqlite3.Connection,
        sql: str,
        params: dict[str, Any] | None = None,
    ) -> sqlite3.Cursor:
        """Execute SQL and return a cursor."""
        return connection.execute(sql, params or {})

    def commit(self, connection: sqlite3.Connection) -> None:
        connection.commit()

    def schema_statement(self, table_name: str) -> Statement:
        return Statement(f"pragma table_info({check_identifier(table_name)})")

    def last_insert_id(self, cursor: sqlite3.Cursor, result: QueryResult) -> Any:
        return cursor.lastrowid

    def escape_string(self, value: Any) -> str:
        return escape_standard(value)
