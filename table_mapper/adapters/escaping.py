"""String literal escaping shared by the adapters."""

from __future__ import annotations

from typing import Any

# Same characters mysqli::real_escape_string escapes
_MYSQL_ESCAPES = {
    "\\": "\\\\",
    "\0": "\\0",
    "\n": "\\n",
    "\r": "\\r",
    "'": "\\'",
    '"': '\\"',
    "\x1a": "\\Z",
}


def _as_text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def escape_standard(value: Any) -> str:
    """ANSI escaping: double every single quote (SQLite, PostgreSQL)."""
    return _as_text(value).replace("'", "''")


def escape_mysql(value: Any) -> str:
    """Backslash escaping as done by the MySQL client library."""
    return "".join(_MYSQL_ESCAPES.get(ch, ch) for ch in _as_text(value))
