"""Contract tests for adapter protocol compliance."""

from __future__ import annotations

import pytest

from table_mapper.adapters.mysql import MysqlAdapter
from table_mapper.adapters.postgresql import PostgresqlAdapter, _build_conninfo
from table_mapper.adapters.protocol import SyncAdapter
from table_mapper.adapters.sqlite import SqliteAdapter
from table_mapper.core.connection import ConnectionConfig
from table_mapper.core.exceptions import InvalidIdentifierError
from table_mapper.core.result import QueryResult


class TestSqliteAdapterProtocol:
    def test_implements_sync_protocol(self) -> None:
        assert isinstance(SqliteAdapter(), SyncAdapter)

    def test_paramstyle(self) -> None:
        assert SqliteAdapter().paramstyle == "named"

    def test_lifecycle(self, sqlite_config: ConnectionConfig) -> None:
        adapter = SqliteAdapter()
        conn = adapter.connect(sqlite_config)

        adapter.execute(conn, "create table t (id integer primary key autoincrement, v text)")
        cursor = adapter.execute(conn, "insert into t (v) values (:v)", {"v": "a"})
        assert adapter.last_insert_id(cursor, QueryResult()) == 1
        adapter.commit(conn)

        cursor = adapter.execute(conn, "select v from t")
        assert cursor.fetchone()["v"] == "a"
        adapter.close(conn)

    def test_schema_statement(self, sqlite_config: ConnectionConfig) -> None:
        adapter = SqliteAdapter()
        conn = adapter.connect(sqlite_config)
        adapter.execute(conn, "create table t (id integer primary key, a text, b int)")
        stmt = adapter.schema_statement("t")
        rows = adapter.execute(conn, stmt.sql, stmt.params or None).fetchall()
        assert [row[adapter.schema_column] for row in rows] == ["id", "a", "b"]
        adapter.close(conn)

    def test_schema_statement_checks_identifier(self) -> None:
        with pytest.raises(InvalidIdentifierError):
            SqliteAdapter().schema_statement("t)")

    def test_write_features(self) -> None:
        adapter = SqliteAdapter()
        assert adapter.supports_write_limit is False
        assert adapter.insert_returning is False


class TestMysqlAdapterContract:
    def test_paramstyle(self) -> None:
        assert MysqlAdapter().paramstyle == "pyformat"

    def test_schema_statement_is_explain(self) -> None:
        adapter = MysqlAdapter()
        assert adapter.schema_statement("users").sql == "explain users"
        assert adapter.schema_column == "Field"

    def test_write_features(self) -> None:
        adapter = MysqlAdapter()
        assert adapter.supports_write_limit is True
        assert adapter.insert_returning is False

    def test_escape_string(self) -> None:
        assert MysqlAdapter().escape_string("it's") == "it\\'s"


class TestPostgresqlAdapterContract:
    def test_paramstyle(self) -> None:
        assert PostgresqlAdapter().paramstyle == "pyformat"

    def test_schema_statement_binds_table_name(self) -> None:
        stmt = PostgresqlAdapter().schema_statement("users")
        assert "information_schema.columns" in stmt.sql
        assert stmt.params == {"table_name": "users"}

    def test_schema_statement_limited_to_current_schema(self) -> None:
        stmt = PostgresqlAdapter().schema_statement("users")
        assert "table_schema = current_schema()" in stmt.sql

    def test_last_insert_id_from_returning_row(self) -> None:
        result = QueryResult([{"id": 12}])
        assert PostgresqlAdapter().last_insert_id(None, result) == 12
        assert result.position == 0

    def test_last_insert_id_without_row(self) -> None:
        assert PostgresqlAdapter().last_insert_id(None, QueryResult()) is None

    def test_write_features(self) -> None:
        adapter = PostgresqlAdapter()
        assert adapter.supports_write_limit is False
        assert adapter.insert_returning is True

    def test_conninfo(self) -> None:
        config = ConnectionConfig(
            driver="postgresql", host="db", port=5432, user="app", database="main"
        )
        assert _build_conninfo(config) == "host=db port=5432 user=app dbname=main"
