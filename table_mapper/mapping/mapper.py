"""Table mapper base class.

One Mapper subclass per table. A Mapper discovers the table's columns once,
caches read results for its own lifetime, builds the find/insert/update/
delete statements and turns rows into Model objects.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar, Generic, TypeVar

from table_mapper.core.cache import QueryCache, make_key
from table_mapper.core.connection import ConnectionConfig
from table_mapper.core.engine import Engine
from table_mapper.core.enums import StatementKind
from table_mapper.core.exceptions import InvalidFieldError, SchemaDiscoveryError, WriteError
from table_mapper.core.result import QueryResult
from table_mapper.core.sanitizer import FragmentSanitizer
from table_mapper.core.statement import Statement, StatementBuilder
from table_mapper.mapping.identity import as_target
from table_mapper.mapping.model import Model

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=Model)


class Mapper(Generic[M]):
    """Base class for the data access object of one table.

    Subclasses set ``table_name`` and either ``model_class`` or override
    ``do_create_object``. The primary key column must be named ``id``.

    A Mapper is meant to live for one unit of work: its query cache has no
    eviction and it is not safe to share between threads.

    Args:
        engine: Engine that executes statements on the connection.
        sanitizer: Optional checks applied to where fragments passed to
            ``find_all_by_sql`` and ``find_one_by_sql``.

    Raises:
        SchemaDiscoveryError: If the table's columns cannot be listed.
    """

    table_name: ClassVar[str] = ""
    model_class: ClassVar[type[Model] | None] = None

    def __init__(self, engine: Engine, *, sanitizer: FragmentSanitizer | None = None) -> None:
        if not self.table_name:
            raise TypeError(f"{type(self).__name__} must declare table_name")
        self._engine = engine
        self._adapter = engine.adapter
        self._builder = StatementBuilder(
            self.table_name,
            write_limit=self._adapter.supports_write_limit,
            insert_returning=self._adapter.insert_returning,
        )
        self._sanitizer = sanitizer
        self._cache = QueryCache()
        self._last_insert_id: Any = None
        self._table_fields = self._discover_table_fields()

    @classmethod
    def from_config(cls, config: ConnectionConfig, **kwargs: Any) -> Mapper[M]:
        """Create a Mapper with its own Engine from a ConnectionConfig."""
        return cls(Engine.from_config(config), **kwargs)

    def _discover_table_fields(self) -> list[str]:
        result = self._run(self._adapter.schema_statement(self.table_name))
        if result is None:
            raise SchemaDiscoveryError(self.table_name, "schema query failed")
        if result.num_rows == 0:
            raise SchemaDiscoveryError(self.table_name, "no columns found")
        column = self._adapter.schema_column
        fields = [row[column] for row in result if row[column] != "id"]
        logger.info("Discovered %s fields: %s", self.table_name, fields)
        return fields

    def table_fields(self) -> list[str]:
        """Column names of the table, without ``id``."""
        return list(self._table_fields)

    @property
    def engine(self) -> Engine:
        return self._engine

    # --- row factory ---

    def do_create_object(self, fields: dict[str, Any]) -> M:
        """Build a Model from a row. Override when ``model_class`` is not enough."""
        if self.model_class is None:
            raise NotImplementedError(
                f"{type(self).__name__} must set model_class or override do_create_object"
            )
        return self.model_class(self, fields)  # type: ignore[return-value]

    def create_object(self, fields: Mapping[str, Any]) -> M:
        return self.do_create_object(dict(fields))

    def new(self, **fields: Any) -> M:
        """Create an unsaved Model with the given field values."""
        return self.create_object(fields)

    # --- execution ---

    def _run(self, statement: Statement) -> QueryResult | None:
        """Execute through the cache; None when the driver reports an error.

        Reads are cached by SQL text and params. A successful write clears
        the cache so later reads see the change.
        """
        is_read = statement.kind is StatementKind.READ
        if is_read:
            key = make_key(statement.sql, statement.params)
            cached = self._cache.get(key)
            if cached is not None:
                logger.debug("Cache hit: %s", statement.sql)
                return cached

        try:
            result = self._engine.run(statement)
        except self._engine.error_types as e:
            logger.warning("Query on %s failed: %s [%s]", self.table_name, e, statement.sql)
            return None

        if is_read:
            self._cache.put(key, result)
        else:
            self._cache.clear()
            self._last_insert_id = result.last_insert_id
        return result

    def query(self, sql: str, params: Mapping[str, Any] | None = None) -> QueryResult | None:
        """Run SQL text (with optional ``:name`` params) through the cache.

        Returns:
            The result positioned at its first row, or None if execution failed.
        """
        return self._run(Statement(sql, dict(params or {})))

    def insert_id(self) -> Any:
        """Id generated by the last insert this Mapper ran."""
        return self._last_insert_id

    def escape(self, value: Any) -> Any:
        """Escape a value for use inside a quoted literal of a where fragment.

        Models and mappings are escaped value by value, keeping their keys;
        lists and tuples element by element, keeping their type.
        """
        if isinstance(value, Model):
            value = value.to_array()
        if isinstance(value, Mapping):
            return {key: self.escape(item) for key, item in value.items()}
        if isinstance(value, (list, tuple)):
            return type(value)(self.escape(item) for item in value)
        if value is None:
            return None
        return self._adapter.escape_string(value)

    def resolve_id(self, object_or_id: Any) -> Any:
        """Id of a Model, RowId or ModelRef; any other value is taken as the id."""
        return as_target(object_or_id).value

    def _check_field(self, field_name: str) -> str:
        if field_name != "id" and field_name not in self._table_fields:
            raise InvalidFieldError(self.table_name, [field_name])
        return field_name

    def _fetch_one(self, statement: Statement) -> M | None:
        result = self._run(statement)
        if result is None or result.num_rows == 0:
            return None
        return self.create_object(result.fetch_assoc() or {})

    def _fetch_many(self, statement: Statement) -> list[M] | None:
        result = self._run(statement)
        if result is None or result.num_rows == 0:
            return None
        return [self.create_object(row) for row in result]

    def fetch_one(self, sql: str, params: Mapping[str, Any] | None = None) -> M | None:
        """First row of *sql* as a Model; None if it failed or matched nothing."""
        return self._fetch_one(Statement(sql, dict(params or {})))

    def fetch_many(self, sql: str, params: Mapping[str, Any] | None = None) -> list[M] | None:
        """Every row of *sql* as Models; None if it failed or matched nothing."""
        return self._fetch_many(Statement(sql, dict(params or {})))

    # --- finders ---

    def find(self, row_id: Any) -> M | None:
        return self._fetch_one(self._builder.select_by_id(row_id))

    def find_all(self) -> list[M] | None:
        return self._fetch_many(self._builder.select_all())

    def _fragment(self, fragment: str) -> str:
        if self._sanitizer is not None:
            return self._sanitizer.sanitize(fragment)
        return fragment

    def find_all_by_sql(
        self, fragment: str, params: Mapping[str, Any] | None = None
    ) -> list[M] | None:
        """Rows matching a where clause written by the caller.

        The fragment goes into the SQL verbatim; bind values through
        ``:name`` placeholders and *params* or escape them with ``escape``.
        """
        return self._fetch_many(self._builder.select_fragment(self._fragment(fragment), params))

    def find_one_by_sql(self, fragment: str, params: Mapping[str, Any] | None = None) -> M | None:
        return self._fetch_one(
            self._builder.select_fragment(self._fragment(fragment), params, one=True)
        )

    def find_ids(self, ids: Iterable[Any]) -> M | list[M | None] | None:
        """Find rows by id, keeping the order of *ids*.

        An empty input gives ``[]``, a single id behaves like ``find``.
        """
        ids = list(ids)
        if not ids:
            return []
        if len(ids) < 2:
            return self.find(ids[0])
        return [self.find(row_id) for row_id in ids]

    def find_by(self, field_name: str, value: Any) -> list[M] | None:
        return self._fetch_many(self._builder.select_where(self._check_field(field_name), value))

    def find_one_by(self, field_name: str, value: Any) -> M | None:
        return self._fetch_one(
            self._builder.select_where(self._check_field(field_name), value, one=True)
        )

    # --- writes ---

    def _write(self, statement: Statement, action: str) -> QueryResult:
        result = self._run(statement)
        if result is None:
            raise WriteError(self.table_name, action)
        return result

    def delete(self, object_or_id: Any) -> int:
        """Delete the row of a Model or id. Returns the affected row count."""
        row_id = self.resolve_id(object_or_id)
        return self._write(self._builder.delete_by_id(row_id), "delete").rowcount

    def delete_by(self, field_name: str, value: Any) -> int:
        statement = self._builder.delete_where(self._check_field(field_name), value)
        return self._write(statement, "delete").rowcount

    def save(self, model: M) -> M:
        """Insert a new Model or update a persisted one."""
        if model.is_new():
            return self.insert(model)
        return self.update(model)

    def insert(self, model: M) -> M:
        """Insert the table fields of *model* and store the new id on it.

        Extra fields of the Model are not written.
        """
        self._write(self._builder.insert(self._table_fields, model.to_array()), "insert")
        model.id = self.insert_id()
        return model

    def update(self, model: M) -> M:
        if not self._table_fields:
            return model
        statement = self._builder.update(self._table_fields, model.to_array(), model.id)
        self._write(statement, "update")
        return model

    def __repr__(self) -> str:
        return f"<{type(self).__name__} table={self.table_name!r} fields={self._table_fields}>"
