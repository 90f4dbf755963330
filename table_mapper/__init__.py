"""TableMapper - table data mappers with validated row models."""

from __future__ import annotations

from table_mapper.core.cache import QueryCache
from table_mapper.core.connection import ConnectionConfig, ConnectionManager
from table_mapper.core.engine import Engine
from table_mapper.core.enums import DatabaseBackend, StatementKind
from table_mapper.core.exceptions import (
    AdapterError,
    ConnectionError,  # noqa: A004
    ExecutionError,
    InvalidFieldError,
    InvalidIdentifierError,
    MapperMismatchError,
    SchemaDiscoveryError,
    SchemaError,
    SQLSanitizationError,
    TableMapperError,
    ValidationError,
    WriteError,
)
from table_mapper.core.result import QueryResult
from table_mapper.core.sanitizer import FragmentSanitizer
from table_mapper.core.statement import Statement, StatementBuilder
from table_mapper.mapping.identity import ModelRef, RowId, as_target
from table_mapper.mapping.mapper import Mapper
from table_mapper.mapping.model import Model

__all__ = [
    # Connection
    "ConnectionConfig",
    "ConnectionManager",
    # Engine
    "Engine",
    "QueryResult",
    "QueryCache",
    # Statements
    "Statement",
    "StatementBuilder",
    "FragmentSanitizer",
    # Mapping
    "Mapper",
    "Model",
    "RowId",
    "ModelRef",
    "as_target",
    # Enums
    "DatabaseBackend",
    "StatementKind",
    # Exceptions
    "TableMapperError",
    "ValidationError",
    "InvalidFieldError",
    "InvalidIdentifierError",
    "MapperMismatchError",
    "ExecutionError",
    "WriteError",
    "SQLSanitizationError",
    "SchemaError",
    "SchemaDiscoveryError",
    "AdapterError",
    "ConnectionError",
]
