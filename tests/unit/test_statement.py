"""Unit tests for Statement and StatementBuilder."""

from __future__ import annotations

import pytest

from table_mapper.core.enums import StatementKind
from table_mapper.core.exceptions import InvalidIdentifierError
from table_mapper.core.statement import Statement, StatementBuilder, check_identifier


class TestCheckIdentifier:
    @pytest.mark.parametrize("name", ["users", "user_roles", "_tmp", "T1"])
    def test_valid(self, name: str) -> None:
        assert check_identifier(name) == name

    @pytest.mark.parametrize("name", ["", "1users", "users; drop", "a-b", "users "])
    def test_invalid(self, name: str) -> None:
        with pytest.raises(InvalidIdentifierError):
            check_identifier(name)


class TestStatementKind:
    def test_select_is_read(self) -> None:
        assert Statement("select * from users").kind is StatementKind.READ

    def test_schema_queries_are_read(self) -> None:
        assert Statement("explain users").kind is StatementKind.READ
        assert Statement("pragma table_info(users)").kind is StatementKind.READ

    @pytest.mark.parametrize(
        "sql",
        ["insert into t values (1)", "  UPDATE t set a = 1", "delete from t", "CREATE TABLE t (a)"],
    )
    def test_writes(self, sql: str) -> None:
        assert Statement(sql).kind is StatementKind.WRITE

    @pytest.mark.parametrize(
        "sql",
        [
            "-- purge\ndelete from t",
            "/* nightly */ update t set a = 1",
            "\n  -- one\n  /* two\n */\n insert into t values (1)",
            "truncate table t",
            "MERGE INTO t USING s ON t.id = s.id WHEN MATCHED THEN DELETE",
        ],
    )
    def test_writes_after_leading_comments(self, sql: str) -> None:
        assert Statement(sql).kind is StatementKind.WRITE

    def test_commented_select_is_read(self) -> None:
        assert Statement("-- delete\nselect 1").kind is StatementKind.READ
        assert Statement("/* drop */ select 1").kind is StatementKind.READ


class TestStatementBuilder:
    def test_rejects_bad_table_name(self) -> None:
        with pytest.raises(InvalidIdentifierError):
            StatementBuilder("users where 1=1")

    def test_select_all(self) -> None:
        assert StatementBuilder("users").select_all() == Statement("select * from users")

    def test_select_by_id_binds_id(self) -> None:
        stmt = StatementBuilder("users").select_by_id("1 or 1=1")
        assert stmt.sql == "select * from users where id = :id limit 1"
        assert stmt.params == {"id": "1 or 1=1"}

    def test_select_where(self) -> None:
        stmt = StatementBuilder("users").select_where("email", "a@x.com")
        assert stmt.sql == "select * from users where email = :value"
        assert stmt.params == {"value": "a@x.com"}

    def test_select_where_one(self) -> None:
        stmt = StatementBuilder("users").select_where("email", "a@x.com", one=True)
        assert stmt.sql.endswith(" limit 1")

    def test_select_fragment_verbatim(self) -> None:
        stmt = StatementBuilder("users").select_fragment("name like :p", {"p": "A%"}, one=True)
        assert stmt.sql == "select * from users where name like :p limit 1"
        assert stmt.params == {"p": "A%"}

    def test_insert_over_given_fields_only(self) -> None:
        values = {"id": None, "name": "Ann", "email": "a@x.com", "nickname": "annie"}
        stmt = StatementBuilder("users").insert(["name", "email"], values)
        assert stmt.sql == "insert into users (name, email) values (:p0, :p1)"
        assert stmt.params == {"p0": "Ann", "p1": "a@x.com"}

    def test_insert_missing_value_is_null(self) -> None:
        stmt = StatementBuilder("users").insert(["name", "email"], {"name": "Ann"})
        assert stmt.params == {"p0": "Ann", "p1": None}

    def test_insert_returning(self) -> None:
        stmt = StatementBuilder("users", insert_returning=True).insert(["name"], {"name": "A"})
        assert stmt.sql.endswith(" returning id")

    def test_insert_without_fields(self) -> None:
        stmt = StatementBuilder("counters").insert([], {})
        assert stmt.sql == "insert into counters default values"

    def test_update(self) -> None:
        stmt = StatementBuilder("users").update(["name", "email"], {"name": "Ann"}, 7)
        assert stmt.sql == "update users set name = :p0, email = :p1 where id = :id"
        assert stmt.params == {"p0": "Ann", "p1": None, "id": 7}

    def test_update_with_write_limit(self) -> None:
        stmt = StatementBuilder("users", write_limit=True).update(["name"], {"name": "A"}, 1)
        assert stmt.sql.endswith("where id = :id limit 1")

    def test_delete_by_id(self) -> None:
        assert StatementBuilder("users").delete_by_id(3) == Statement(
            "delete from users where id = :id", {"id": 3}
        )

    def test_delete_by_id_with_write_limit(self) -> None:
        stmt = StatementBuilder("users", write_limit=True).delete_by_id(3)
        assert stmt.sql == "delete from users where id = :id limit 1"

    def test_delete_where(self) -> None:
        stmt = StatementBuilder("users").delete_where("email", "a@x.com")
        assert stmt.sql == "delete from users where email = :value"
        assert stmt.kind is StatementKind.WRITE
