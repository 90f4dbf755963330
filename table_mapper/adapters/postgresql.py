"""PostgreSQL adapter using psycopg (v3+)."""

from __future__ import annotations

from typing import Any

from table_mapper.adapters.escaping import escape_standard
from table_mapper.core.connection import ConnectionConfig
from table_mapper.core.exceptions import ConnectionError  # noqa: A004
from table_mapper.core.result import QueryResult
from table_mapper.core.statement import Statement, check_identifier


def _build_conninfo(config: ConnectionConfig) -> str:
    """Build a libpq connection string from config fields."""
    parts: list[str] = []
    if config.host is not None:
        parts.append(f"host={config.host}")
    if config.port is not None:
        parts.append(f"port={config.port}")
    if config.user is not None:
        parts.append(f"user={config.user}")
    if config.password is not None:
        parts.append(f"password={config.password}")
    parts.append(f"dbname={config.database}")
    return " ".join(parts)


class PostgresqlAdapter:
    """Synchronous PostgreSQL adapter using psycopg (v3+)."""

    @property
    def paramstyle(self) -> str:
        return "pyformat"

    @property
    def error_types(self) -> tuple[type[BaseException], ...]:
        import psycopg

        return (psycopg.Error,)

    @property
    def supports_write_limit(self) -> bool:
        return False

    @property
    def insert_returning(self) -> bool:
        return True

    @property
    def schema_column(self) -> str:
        return "Field"

    def connect(self, config: ConnectionConfig) -> Any:
        import psycopg
        import psycopg.rows

        try:
            return psycopg.connect(
                _build_conninfo(config), row_factory=psycopg.rows.dict_row, **config.extra
            )
        except psycopg.Error as e:
            raise ConnectionError(
                f"Cannot connect to PostgreSQL database '{config.database}': {e}"
            ) from e

    def close(self, connection: Any) -> None:
        connection.close()

    def execute(
        self,
        connection: Any,
        sql: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Execute SQL and return a cursor."""
        import psycopg

        try:
            return connection.execute(sql, params)
        except psycopg.Error:
            # a failed statement aborts the implicit transaction
            connection.rollback()
            raise

    def commit(self, connection: Any) -> None:
        connection.commit()

    def schema_statement(self, table_name: str) -> Statement:
        return Statement(
            'select column_name as "Field" from information_schema.columns '
            "where table_schema = current_schema() and table_name = :table_name "
            "order by ordinal_position",
            {"table_name": check_identifier(table_name)},
        )

    def last_insert_id(self, cursor: Any, result: QueryResult) -> Any:
        row = result.fetch_assoc()
        result.seek(0)
        return None if row is None else row.get("id")

    def escape_string(self, value: Any) -> str:
        return escape_standard(value)
