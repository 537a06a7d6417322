"""Application service layer over the translator.

This module provides a stable orchestration surface for CLI and SDK callers.
Services never print; they return a CommandResult the caller renders.
"""

from __future__ import annotations

from dataclasses import dataclass

from nativesql.core.escape_translator import translate
from nativesql.core.sql_utils import split_sql_statements
from nativesql.domain.errors import EscapeSyntaxError
from nativesql.domain.results import CommandResult


def _syntax_error_result(error: EscapeSyntaxError) -> CommandResult:
    line, column = error.context()
    return CommandResult(
        success=False,
        code=error.code,
        message=error.message,
        data={
            "position": error.position,
            "expected": error.expected,
            "line": line,
            "column": column,
        },
    )


@dataclass(slots=True)
class TranslateService:
    """Translate a statement or a whole script into native SQL."""

    def run(
        self, *, sql: str, escape_processing: bool = True, split: bool = False
    ) -> CommandResult:
        try:
            statements = split_sql_statements(sql) if split else [sql]
            translated = [translate(statement, escape_processing) for statement in statements]
        except EscapeSyntaxError as e:
            return _syntax_error_result(e)

        rewritten = sum(
            1 for before, after in zip(statements, translated) if before is not after
        )
        return CommandResult(
            success=True,
            code="translated",
            message=f"Translated {len(translated)} statement(s)",
            data={"statements": translated, "rewritten": rewritten},
        )


@dataclass(slots=True)
class CheckService:
    """Check that escape clauses, literals and comments are well formed."""

    def run(self, *, sql: str) -> CommandResult:
        try:
            translate(sql)
        except EscapeSyntaxError as e:
            return _syntax_error_result(e)
        return CommandResult(success=True, code="valid", message="No escape syntax errors found")
