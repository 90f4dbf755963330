"""Unit tests for literal escaping."""

from __future__ import annotations

from table_mapper.adapters.escaping import escape_mysql, escape_standard


class TestEscapeStandard:
    def test_single_quote_doubled(self) -> None:
        assert escape_standard("O'Brien") == "O''Brien"

    def test_backslash_untouched(self) -> None:
        assert escape_standard("a\\b") == "a\\b"

    def test_scalars_become_text(self) -> None:
        assert escape_standard(42) == "42"
        assert escape_standard(True) == "1"
        assert escape_standard(b"x'y") == "x''y"


class TestEscapeMysql:
    def test_quotes_backslashed(self) -> None:
        assert escape_mysql("O'Brien") == "O\\'Brien"
        assert escape_mysql('say "hi"') == 'say \\"hi\\"'

    def test_control_characters(self) -> None:
        assert escape_mysql("a\nb\rc\0d\x1a") == "a\\nb\\rc\\0d\\Z"

    def test_backslash_doubled(self) -> None:
        assert escape_mysql("a\\b") == "a\\\\b"
