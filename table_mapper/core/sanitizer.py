"""Sanitizer for caller-written where fragments.

Only applied to the fragments passed to ``find_all_by_sql`` and
``find_one_by_sql``. Statements built by the Mapper itself bind every value
and are never sanitized.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from table_mapper.core.exceptions import SQLSanitizationError

_QUOTES = {"'": "string literal", '"': "double-quoted identifier", "`": "backtick-quoted identifier"}

_UNION = re.compile(r"\bunion\b", re.IGNORECASE)


def _tokenize(sql: str) -> list[tuple[str, str]]:
    """Split *sql* into ``('quoted', …)`` and ``('code', …)`` tokens.

    Quoted tokens are single-quoted literals or double-quoted/backtick
    identifiers; a doubled quote character inside them is an escape.

    Raises:
        SQLSanitizationError: On an unterminated literal or identifier.
    """
    tokens: list[tuple[str, str]] = []
    i = 0
    n = len(sql)
    last = 0

    while i < n:
        quote = sql[i]
        if quote not in _QUOTES:
            i += 1
            continue
        if i > last:
            tokens.append(("code", sql[last:i]))
        j = i + 1
        closed = False
        while j < n:
            if sql[j] == quote:
                if j + 1 < n and sql[j + 1] == quote:
                    j += 2
                    continue
                closed = True
                j += 1
                break
            j += 1
        if not closed:
            raise SQLSanitizationError(f"Unterminated {_QUOTES[quote]} detected in SQL")
        tokens.append(("quoted", sql[i:j]))
        last = i = j

    if last < n:
        tokens.append(("code", sql[last:]))
    return tokens


def _strip_comments_in_code(code: str) -> str:
    """Remove ``--`` line comments and ``/* */`` block comments from a code segment."""
    result: list[str] = []
    i = 0
    n = len(code)

    while i < n:
        if code.startswith("--", i):
            j = code.find("\n", i)
            if j == -1:
                break
            result.append("\n")
            i = j + 1
        elif code.startswith("/*", i):
            j = code.find("*/", i + 2)
            if j == -1:
                break
            result.append(" ")
            i = j + 2
        else:
            result.append(code[i])
            i += 1

    return "".join(result)


def _code_segments(sql: str) -> list[str]:
    return [content for kind, content in _tokenize(sql) if kind == "code"]


def _continues_after_semicolon(sql: str) -> bool:
    """True if anything but whitespace follows the first ``;`` outside quotes."""
    ended = False
    for kind, content in _tokenize(sql):
        if not ended and kind == "code" and ";" in content:
            ended = True
            content = content[content.index(";") + 1 :]
        if ended and content.strip():
            return True
    return False


@dataclass
class FragmentSanitizer:
    """Configurable checks for where fragments.

    This does NOT make concatenated user input safe. Put values in the
    fragment as ``:name`` placeholders and pass them as params, or escape
    them with ``Mapper.escape``. The checks only reject fragments that try
    to leave the where clause.

    Attributes:
        strip_comments: Strip ``--`` and ``/* */`` comments.
        block_multiple_statements: Reject a ``;`` followed by more SQL.
        block_union: Reject ``union`` outside quoted text, which would
            splice rows of another query into the result.
    """

    strip_comments: bool = True
    block_multiple_statements: bool = True
    block_union: bool = True

    def sanitize(self, fragment: str) -> str:
        """Apply the configured checks and return the (cleaned) fragment.

        Raises:
            SQLSanitizationError: If any enabled check fails.
        """
        if self.strip_comments:
            fragment = "".join(
                content if kind == "quoted" else _strip_comments_in_code(content)
                for kind, content in _tokenize(fragment)
            )
        if self.block_multiple_statements:
            if _continues_after_semicolon(fragment):
                raise SQLSanitizationError(
                    "Multiple SQL statements are not permitted in a where fragment"
                )
            # a lone trailing ';' would end the statement before "limit 1"
            fragment = fragment.rstrip().removesuffix(";")
        if self.block_union:
            if any(_UNION.search(code) for code in _code_segments(fragment)):
                raise SQLSanitizationError("UNION is not permitted in a where fragment")
        return fragment
