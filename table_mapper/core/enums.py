"""Database backend and statement kind enumerations."""

from __future__ import annotations

import re
from enum import Enum

# Whitespace, -- line comments and /* */ block comments before the verb
_LEADING_NOISE = re.compile(r"(?:\s+|--[^\n]*|/\*.*?\*/)*", re.DOTALL)

_WRITE_VERBS = frozenset(
    {"insert", "update", "delete", "replace", "merge", "truncate", "create", "drop", "alter"}
)


class DatabaseBackend(Enum):
    """Supported database backends."""

    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"


class StatementKind(Enum):
    """What a statement does to the table.

    Only READ statements are served from the query cache. WRITE covers
    data changes and DDL; both are committed right after execution.
    """

    READ = "read"
    WRITE = "write"

    @classmethod
    def of(cls, sql: str) -> StatementKind:
        body = sql[_LEADING_NOISE.match(sql).end() :]
        match = re.match(r"[A-Za-z]+", body)
        if match and match.group().lower() in _WRITE_VERBS:
            return cls.WRITE
        return cls.READ
