"""Unified error taxonomy for escape translation and statement preparation."""

from dataclasses import dataclass


@dataclass(slots=True)
class NativeSQLError(Exception):
    """Base class for translation and preparation failures."""

    message: str
    code: str

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(NativeSQLError):
    """Raised when a required argument is absent or has an invalid value."""

    def __init__(self, name: str, value: object = None):
        self.name = name
        self.value = value
        super().__init__(
            message=f'Invalid value "{value}" for parameter "{name}"', code="invalid_argument"
        )


class EscapeSyntaxError(NativeSQLError):
    """Raised when a SQL statement contains a malformed literal, comment or escape clause.

    ``position`` is the zero-based character offset where the problem was
    detected. It may equal ``len(sql)`` when the input ended too early.
    """

    def __init__(self, sql: str, position: int, expected: str | None = None):
        self.sql = sql
        self.position = position
        self.expected = expected
        marked = f"{sql[:position]}[*]{sql[position:]}"
        message = f'Syntax error in SQL statement "{marked}"'
        if expected is not None:
            message += f'; expected "{expected}"'
        super().__init__(message=message, code="syntax_error")

    def context(self) -> tuple[str, int]:
        """Return the line holding the error and the column within it."""
        line_start = self.sql.rfind("\n", 0, self.position) + 1
        line_end = self.sql.find("\n", self.position)
        if line_end < 0:
            line_end = len(self.sql)
        return self.sql[line_start:line_end].rstrip("\r"), self.position - line_start


class StatementPreparationError(NativeSQLError):
    """Raised when a statement cannot be prepared for the query engine."""

    def __init__(self, cause: NativeSQLError):
        self.position: int | None = getattr(cause, "position", None)
        self.expected: str | None = getattr(cause, "expected", None)
        super().__init__(
            message=f"Cannot prepare statement: {cause.message}",
            code="statement_preparation_failed",
        )


class ConnectionClosedError(NativeSQLError):
    """Raised when a closed connection is used."""

    def __init__(self) -> None:
        super().__init__(message="The connection has been closed", code="connection_closed")
