"""
Unit tests for nativesql.core.sql_utils (statement splitting).
"""

import pytest

from nativesql.core.sql_utils import split_sql_statements
from nativesql.domain.errors import EscapeSyntaxError


class TestSplitSqlStatements:
    """Tests for split_sql_statements."""

    def test_empty_string_returns_empty_list(self) -> None:
        assert split_sql_statements("") == []
        assert split_sql_statements("   \n\n  ") == []
        assert split_sql_statements("; ;") == []

    def test_single_statement_no_semicolon(self) -> None:
        sql = "SELECT {fn NOW()}"
        assert split_sql_statements(sql) == [sql]

    def test_single_statement_with_semicolon(self) -> None:
        assert split_sql_statements("SELECT 1;") == ["SELECT 1"]

    def test_multiple_statements(self) -> None:
        sql = "SELECT 1;\n{call p(?)};\nSELECT {fn NOW()};"
        assert split_sql_statements(sql) == ["SELECT 1", "{call p(?)}", "SELECT {fn NOW()}"]

    def test_semicolon_inside_single_quotes_not_split(self) -> None:
        sql = "INSERT INTO t VALUES ('use; semicolon');"
        result = split_sql_statements(sql)
        assert len(result) == 1
        assert "use; semicolon" in result[0]

    def test_semicolon_inside_double_quotes_not_split(self) -> None:
        sql = 'SELECT "col;name" FROM t;'
        result = split_sql_statements(sql)
        assert len(result) == 1
        assert "col;name" in result[0]

    def test_semicolon_inside_dollar_quotes_not_split(self) -> None:
        sql = "CREATE FUNCTION f() AS $$ SELECT 1; $$;SELECT 2"
        assert split_sql_statements(sql) == ["CREATE FUNCTION f() AS $$ SELECT 1; $$", "SELECT 2"]

    def test_semicolon_inside_comments_not_split(self) -> None:
        assert split_sql_statements("SELECT 1 /* ; */; SELECT 2") == [
            "SELECT 1 /* ; */",
            "SELECT 2",
        ]
        assert split_sql_statements("-- a; b\nSELECT 1") == ["-- a; b\nSELECT 1"]

    def test_semicolon_inside_escape_clause_not_split(self) -> None:
        assert split_sql_statements("{fn f(1; 2)}; SELECT 1") == ["{fn f(1; 2)}", "SELECT 1"]

    def test_comment_only_fragments_dropped(self) -> None:
        sql = "-- comment\nSELECT 1;\n-- another\nSELECT 2;\n-- trailing"
        result = split_sql_statements(sql)
        assert len(result) == 2
        assert result[0].endswith("SELECT 1")
        assert result[1].endswith("SELECT 2")

    def test_blank_lines_skipped_between_statements(self) -> None:
        assert len(split_sql_statements("SELECT 1;\n\n\nSELECT 2;")) == 2

    def test_unterminated_literal_reports_script_offset(self) -> None:
        with pytest.raises(EscapeSyntaxError) as exc_info:
            split_sql_statements("SELECT 1;\nSELECT 'abc")
        assert exc_info.value.position == 17
