"""Unit tests for application services."""

from nativesql.application.services import CheckService, TranslateService


class TestTranslateService:
    def test_single_statement(self) -> None:
        result = TranslateService().run(sql="{call p(?)}")
        assert result.success is True
        assert result.code == "translated"
        assert result.data == {"statements": [" call p(?) "], "rewritten": 1}

    def test_untouched_statement_not_counted(self) -> None:
        result = TranslateService().run(sql="SELECT 1")
        assert result.data == {"statements": ["SELECT 1"], "rewritten": 0}

    def test_escape_processing_disabled(self) -> None:
        result = TranslateService().run(sql="{call p}", escape_processing=False)
        assert result.data["statements"] == ["{call p}"]
        assert result.data["rewritten"] == 0

    def test_split_script(self, sample_script: str) -> None:
        result = TranslateService().run(sql=sample_script, split=True)
        assert result.success is True
        statements = result.data["statements"]
        assert len(statements) == 3
        expected_first = "SELECT" + " " * 5 + "UCASE(name)  FROM users WHERE note = 'a;b'"
        assert statements[0].endswith(expected_first)
        assert statements[1] == " " * 5 + "call refresh_stats(?) "
        assert result.data["rewritten"] == 3

    def test_syntax_error(self) -> None:
        result = TranslateService().run(sql="SELECT 1 {")
        assert result.success is False
        assert result.code == "syntax_error"
        assert result.data["position"] == 10
        assert result.data["expected"] is None
        assert result.data["line"] == "SELECT 1 {"
        assert result.data["column"] == 10


class TestCheckService:
    def test_valid_script(self, sample_script: str) -> None:
        result = CheckService().run(sql=sample_script)
        assert result.success is True
        assert result.code == "valid"

    def test_missing_equals(self) -> None:
        result = CheckService().run(sql="SELECT 1;\n{? call p}")
        assert result.success is False
        assert result.data["position"] == 13
        assert result.data["expected"] == "="
        assert result.data["line"] == "{? call p}"
        assert result.data["column"] == 3

    def test_json_envelope(self) -> None:
        payload = CheckService().run(sql="SELECT 1").as_json_dict()
        assert payload == {
            "success": True,
            "code": "valid",
            "message": "No escape syntax errors found",
            "data": {},
        }
