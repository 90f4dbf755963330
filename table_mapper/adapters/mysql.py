"""MySQL adapter using mysql-connector-python."""

from __future__ import annotations

from typing import Any

from table_mapper.adapters.escaping import escape_mysql
from table_mapper.core.connection import ConnectionConfig
from table_mapper.core.exceptions import ConnectionError  # noqa: A004
from table_mapper.core.result import QueryResult
from table_mapper.core.statement import Statement, check_identifier


class MysqlAdapter:
    """Synchronous MySQL adapter using mysql-connector-python."""

    @property
    def paramstyle(self) -> str:
        return "pyformat"

    @property
    def error_types(self) -> tuple[type[BaseException], ...]:
        import mysql.connector

        return (mysql.connector.Error,)

    @property
    def supports_write_limit(self) -> bool:
        return True

    @property
    def insert_returning(self) -> bool:
        return False

    @property
    def schema_column(self) -> str:
        return "Field"

    def connect(self, config: ConnectionConfig) -> Any:
        import mysql.connector

        try:
            return mysql.connector.connect(
                host=config.host,
                port=config.port,
                user=config.user,
                password=config.password,
                database=config.database,
                **config.extra,
            )
        except mysql.connector.Error as e:
            raise ConnectionError(f"Cannot connect to MySQL database '{config.database}': {e}") from e

    def close(self, connection: Any) -> None:
        connection.close()

    def execute(
        self,
        connection: Any,
        sql: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Execute SQL and return a cursor with dictionary results."""
        cursor = connection.cursor(dictionary=True)
        cursor.execute(sql, params)
        return cursor

    def commit(self, connection: Any) -> None:
        connection.commit()

    def schema_statement(self, table_name: str) -> Statement:
        return Statement(f"explain {check_identifier(table_name)}")

    def last_insert_id(self, cursor: Any, result: QueryResult) -> Any:
        return cursor.lastrowid

    def escape_string(self, value: Any) -> str:
        return escape_mysql(value)
