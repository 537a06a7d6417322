"""
Connection façade.

Sits in front of a query engine and translates escape clauses before any
statement reaches it. The engine only ever sees native SQL text.
"""

from __future__ import annotations

from typing import Any, Protocol

from nativesql.core.escape_translator import translate
from nativesql.domain.errors import (
    ConnectionClosedError,
    NativeSQLError,
    StatementPreparationError,
)
from nativesql.models import TranslatedStatement, TranslatorSettings


class QueryEngine(Protocol):
    """Backend that prepares already-translated SQL."""

    def prepare(self, sql: str) -> Any: ...


class NativeSQLConnection:
    """Client-facing connection that rewrites escape syntax for a query engine."""

    def __init__(self, engine: QueryEngine, settings: TranslatorSettings | None = None):
        self._engine = engine
        self._settings = settings or TranslatorSettings()
        self._closed = False

    @property
    def settings(self) -> TranslatorSettings:
        return self._settings

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Close the connection. Closing twice is allowed."""
        self._closed = True

    def __enter__(self) -> NativeSQLConnection:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _check_closed(self) -> None:
        if self._closed:
            raise ConnectionClosedError()

    def native_sql(self, sql: str) -> str:
        """
        Translate a statement into the engine dialect without preparing it.

        Escape processing is always applied here, regardless of settings.

        Raises:
            ConnectionClosedError: If the connection is closed
            StatementPreparationError: If the statement cannot be translated
        """
        self._check_closed()
        return self.translate_statement(sql, escape_processing=True).native

    def translate_statement(
        self, sql: str, escape_processing: bool | None = None
    ) -> TranslatedStatement:
        """
        Translate a statement and keep both texts.

        Args:
            sql: Statement as issued by the client
            escape_processing: Overrides the connection setting when not None

        Raises:
            ConnectionClosedError: If the connection is closed
            StatementPreparationError: If the statement cannot be translated
        """
        self._check_closed()
        if escape_processing is None:
            escape_processing = self._settings.escape_processing
        try:
            native = translate(sql, escape_processing)
        except NativeSQLError as e:
            raise StatementPreparationError(e) from e
        return TranslatedStatement(
            original=sql, native=native, escape_processing=escape_processing
        )

    def prepare_statement(self, sql: str, escape_processing: bool | None = None) -> Any:
        """
        Translate a statement and hand the native text to the engine.

        Returns:
            Whatever the engine returns for a prepared statement

        Raises:
            ConnectionClosedError: If the connection is closed
            StatementPreparationError: If the statement cannot be translated
        """
        statement = self.translate_statement(sql, escape_processing)
        return self._engine.prepare(statement.native)
