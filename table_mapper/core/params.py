"""SQL parameter normalization.

Statements are written with ``:name`` placeholders and converted to the
driver-specific format right before execution. String literals are left
untouched and PostgreSQL ``::typecast`` syntax is not mistaken for a
placeholder.
"""

from __future__ import annotations

import re
from functools import lru_cache

# Matches :name but not ::typecast and not inside words
_PARAM_PATTERN = re.compile(r"(?<![:\w]):([a-zA-Z_]\w*)")

# Matches single-quoted string literals (with escaped quotes handled)
_STRING_LITERAL_PATTERN = re.compile(r"'(?:[^'\\]|\\.)*'")


def normalize_params(sql: str, paramstyle: str, has_params: bool = True) -> str:
    """Convert :name parameters to the target param style.

    Args:
        sql: SQL string with :name parameters.
        paramstyle: Target style - 'named' (no conversion) or 'pyformat' (%(name)s).
        has_params: Whether parameters will be bound. Without parameters the
            drivers do no ``%`` interpolation, so the text is sent unchanged.

    Returns:
        SQL with parameters converted to the target style.
    """
    if paramstyle == "named" or not has_params:
        return sql
    return _convert_to_pyformat(sql)


@lru_cache(maxsize=256)
def _convert_to_pyformat(sql: str) -> str:
    """Convert :name params to %(name)s, doubling literal % signs."""
    parts: list[str] = []
    last_end = 0

    for match in _STRING_LITERAL_PATTERN.finditer(sql):
        start, end = match.span()
        if start > last_end:
            parts.append(_convert_segment(sql[last_end:start]))
        # literal: only % needs escaping
        parts.append(match.group().replace("%", "%%"))
        last_end = end

    if last_end < len(sql):
        parts.append(_convert_segment(sql[last_end:]))

    return "".join(parts)


def _convert_segment(segment: str) -> str:
    return _PARAM_PATTERN.sub(r"%(\1)s", segment.replace("%", "%%"))

