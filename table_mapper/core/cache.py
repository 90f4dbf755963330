"""Per-Mapper query result cache.

Keys are the exact SQL text plus its bound parameters. Entries live as long
as the owning Mapper: there is no eviction and no size bound, so a Mapper
should be scoped to one unit of work.
"""

from __future__ import annotations

from typing import Any

from table_mapper.core.result import QueryResult

CacheKey = tuple[str, tuple[tuple[str, Any], ...]]


def make_key(sql: str, params: dict[str, Any] | None = None) -> CacheKey:
    """Build a hashable cache key from SQL text and parameters."""
    if not params:
        return (sql, ())
    return (sql, tuple(sorted((name, _freeze(value)) for name, value in params.items())))


def _freeze(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, dict):
        return tuple(sorted((k, _freeze(v)) for k, v in value.items()))
    return value


class QueryCache:
    """Unbounded mapping of statement key to QueryResult.

    ``get`` rewinds a cached result to its first row before returning it.
    """

    def __init__(self) -> None:
        self._entries: dict[CacheKey, QueryResult] = {}
        self.hits = 0
        self.misses = 0

    def get(self, key: CacheKey) -> QueryResult | None:
        result = self._entries.get(key)
        if result is None:
            self.misses += 1
            return None
        self.hits += 1
        result.seek(0)
        return result

    def put(self, key: CacheKey, result: QueryResult) -> None:
        self._entries[key] = result

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
