"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from table_mapper.adapters.sqlite import SqliteAdapter
from table_mapper.core.connection import ConnectionConfig, ConnectionManager
from table_mapper.core.engine import Engine

from tests.models import UserMapper


class CountingAdapter:
    """Wraps a real adapter and records every executed statement."""

    def __init__(self, adapter: Any) -> None:
        self._adapter = adapter
        self.executed: list[str] = []

    def __getattr__(self, name: str) -> Any:
        return getattr(self._adapter, name)

    def execute(self, connection: Any, sql: str, params: dict[str, Any] | None = None) -> Any:
        self.executed.append(sql)
        return self._adapter.execute(connection, sql, params)


@pytest.fixture
def sqlite_config() -> ConnectionConfig:
    """SQLite in-memory connection config."""
    return ConnectionConfig(driver="sqlite", database=":memory:")


@pytest.fixture
def engine(sqlite_config: ConnectionConfig) -> Iterator[Engine]:
    """Engine over an in-memory database holding an empty ``users`` table."""
    eng = Engine(ConnectionManager(sqlite_config))
    eng.execute(
        "CREATE TABLE users (id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT, email TEXT)"
    )
    yield eng
    eng.close()


@pytest.fixture
def counting_engine(sqlite_config: ConnectionConfig) -> Iterator[Engine]:
    """Like ``engine`` but the adapter records executed SQL in ``.executed``."""
    eng = Engine(ConnectionManager(sqlite_config, adapter=CountingAdapter(SqliteAdapter())))
    eng.execute(
        "CREATE TABLE users (id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT, email TEXT)"
    )
    eng.adapter.executed.clear()
    yield eng
    eng.close()


@pytest.fixture
def user_mapper(engine: Engine) -> UserMapper:
    return UserMapper(engine)
