"""TableMapper exception hierarchy.

All exceptions are TableMapper-specific. Driver exceptions raised while
executing SQL are caught at the Mapper.query boundary and never exposed to
callers of the read operations.
"""

from __future__ import annotations


class TableMapperError(Exception):
    """Base exception for all TableMapper errors."""


# --- Validation ---


class ValidationError(TableMapperError):
    """Base for field and identifier validation errors."""


class InvalidFieldError(ValidationError):
    """Raised when a field name is not known to the model or table."""

    def __init__(self, owner: str, field_names: list[str]) -> None:
        self.owner = owner
        self.field_names = field_names
        super().__init__(f"Invalid field(s) for {owner}: {field_names}")


class InvalidIdentifierError(ValidationError):
    """Raised when a table name is not a plain SQL identifier."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Not a valid SQL identifier: {identifier!r}")


class MapperMismatchError(ValidationError):
    """Raised when a Model is bound to a Mapper of the wrong class."""

    def __init__(self, model_class: str, expected: str, actual: str) -> None:
        self.model_class = model_class
        super().__init__(f"{model_class} requires a {expected} mapper, got {actual}")


# --- Execution ---


class ExecutionError(TableMapperError):
    """Base for query execution errors."""


class WriteError(ExecutionError):
    """Raised when an insert, update or delete statement fails."""

    def __init__(self, table_name: str, action: str) -> None:
        self.table_name = table_name
        self.action = action
        super().__init__(f"Failed to {action} on table '{table_name}'")


class SQLSanitizationError(ExecutionError):
    """Raised when a caller-supplied where fragment fails a sanitization check."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"SQL sanitization failed: {detail}")


# --- Schema ---


class SchemaError(TableMapperError):
    """Base for schema errors."""


class SchemaDiscoveryError(SchemaError):
    """Raised when the columns of a table cannot be discovered."""

    def __init__(self, table_name: str, detail: str) -> None:
        self.table_name = table_name
        super().__init__(f"Cannot discover schema of '{table_name}': {detail}")


# --- Adapter ---


class AdapterError(TableMapperError):
    """Base for adapter errors."""


class ConnectionError(AdapterError):  # noqa: A001
    """Raised on connection failures."""
