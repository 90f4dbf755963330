"""Statement execution engine.

The Engine is the connection executor behind every Mapper: it normalizes
placeholders for the driver, runs the statement on the managed connection,
commits writes and materializes the cursor into a QueryResult.
"""

from __future__ import annotations

import logging
from typing import Any

from table_mapper.core.connection import ConnectionConfig, ConnectionManager
from table_mapper.core.enums import StatementKind
from table_mapper.core.params import normalize_params
from table_mapper.core.result import QueryResult
from table_mapper.core.statement import Statement

logger = logging.getLogger(__name__)


class Engine:
    """Synchronous statement executor over one connection.

    Driver exceptions (``adapter.error_types``) propagate to the caller;
    ``Mapper.query`` decides how to report them.
    """

    def __init__(self, connection_manager: ConnectionManager) -> None:
        self._connection_manager = connection_manager
        self._adapter = connection_manager.adapter

    @classmethod
    def from_config(cls, config: ConnectionConfig) -> Engine:
        """Create an Engine from a ConnectionConfig."""
        return cls(ConnectionManager(config))

    @property
    def adapter(self) -> Any:
        return self._adapter

    @property
    def error_types(self) -> tuple[type[BaseException], ...]:
        return tuple(self._adapter.error_types)

    def run(self, statement: Statement) -> QueryResult:
        """Execute *statement* and return its materialized result."""
        params = statement.params or None
        sql = normalize_params(statement.sql, self._adapter.paramstyle, has_params=params is not None)
        logger.debug("Executing: %s %s", sql, params or "")

        conn = self._connection_manager.connection
        cursor = self._adapter.execute(conn, sql, params)
        result = QueryResult.from_cursor(cursor)
        if statement.kind is StatementKind.WRITE:
            result.last_insert_id = self._adapter.last_insert_id(cursor, result)
            self._adapter.commit(conn)
        return result

    def execute(self, sql: str, params: dict[str, Any] | None = None) -> QueryResult:
        """Run raw SQL text, for schema setup and other statements outside a Mapper."""
        return self.run(Statement(sql, dict(params or {})))

    def escape_string(self, value: Any) -> str:
        return self._adapter.escape_string(value)

    def close(self) -> None:
        self._connection_manager.close()

    def __enter__(self) -> Engine:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
