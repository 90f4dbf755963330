"""Connection configuration and management.

ConnectionConfig is a Pydantic model for type-safe connection config.
ConnectionManager loads the adapter for the configured driver and owns a
single, lazily opened connection.
"""

from __future__ import annotations

import importlib
import logging
from typing import Any

from pydantic import BaseModel

from table_mapper.core.enums import DatabaseBackend
from table_mapper.core.exceptions import AdapterError

logger = logging.getLogger(__name__)


class ConnectionConfig(BaseModel):
    """Configuration for database connections."""

    driver: str
    host: str | None = None
    port: int | None = None
    user: str | None = None
    password: str | None = None
    database: str
    extra: dict[str, Any] = {}


# Adapter module mapping: backend → (module_path, adapter_class)
_ADAPTER_MAP: dict[DatabaseBackend, tuple[str, str]] = {
    DatabaseBackend.SQLITE: ("table_mapper.adapters.sqlite", "SqliteAdapter"),
    DatabaseBackend.POSTGRESQL: ("table_mapper.adapters.postgresql", "PostgresqlAdapter"),
    DatabaseBackend.MYSQL: ("table_mapper.adapters.mysql", "MysqlAdapter"),
}


def _load_adapter(driver: str) -> Any:
    """Load an adapter by driver name."""
    try:
        backend = DatabaseBackend(driver.lower())
    except ValueError:
        raise AdapterError(f"Unsupported database driver: {driver}") from None

    module_path, cls_name = _ADAPTER_MAP[backend]
    try:
        module = importlib.import_module(module_path)
        return getattr(module, cls_name)()
    except (ImportError, AttributeError) as e:
        raise AdapterError(f"Failed to load adapter for '{driver}': {e}") from e


class ConnectionManager:
    """Owns one connection for the lifetime of a unit of work.

    The connection is opened on first use and closed by ``close()`` or on
    leaving a ``with`` block.
    """

    def __init__(self, config: ConnectionConfig, adapter: Any | None = None) -> None:
        self.config = config
        self._adapter = adapter if adapter is not None else _load_adapter(config.driver)
        self._connection: Any = None

    @property
    def adapter(self) -> Any:
        return self._adapter

    @property
    def connection(self) -> Any:
        """The open connection, connecting on first access."""
        if self._connection is None:
            logger.debug("Opening %s connection to %s", self.config.driver, self.config.database)
            self._connection = self._adapter.connect(self.config)
        return self._connection

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    def close(self) -> None:
        """Close the connection if it was opened."""
        if self._connection is not None:
            self._adapter.close(self._connection)
            self._connection = None

    def __enter__(self) -> ConnectionManager:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
