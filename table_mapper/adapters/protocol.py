"""Database adapter protocol.

Every adapter module MUST implement this protocol so the Engine and Mapper
stay backend-agnostic.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from table_mapper.core.connection import ConnectionConfig
from table_mapper.core.result import QueryResult
from table_mapper.core.statement import Statement


@runtime_checkable
class SyncAdapter(Protocol):
    """Synchronous database adapter protocol."""

    @property
    def paramstyle(self) -> str:
        """Parameter binding style: 'named' (:name) or 'pyformat' (%(name)s)."""
        ...

    @property
    def error_types(self) -> tuple[type[BaseException], ...]:
        """Driver exception classes that mean a statement failed."""
        ...

    @property
    def supports_write_limit(self) -> bool:
        """Whether ``update``/``delete`` accept a trailing ``limit 1``."""
        ...

    @property
    def insert_returning(self) -> bool:
        """Whether inserts report the new id through ``returning id``."""
        ...

    @property
    def schema_column(self) -> str:
        """Column of the schema statement's rows holding the column name."""
        ...

    def connect(self, config: ConnectionConfig) -> Any:
        """Open a connection."""
        ...

    def close(self, connection: Any) -> None:
        """Close a connection."""
        ...

    def execute(
        self,
        connection: Any,
        sql: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Execute SQL and return a cursor-like object."""
        ...

    def commit(self, connection: Any) -> None:
        """Commit the statement just executed."""
        ...

    def schema_statement(self, table_name: str) -> Statement:
        """Statement listing the columns of *table_name* in table order."""
        ...

    def last_insert_id(self, cursor: Any, result: QueryResult) -> Any:
        """Auto-increment id generated by the insert that produced *cursor*."""
        ...

    def escape_string(self, value: Any) -> str:
        """Escape *value* for use inside a single-quoted SQL literal."""
        ...
