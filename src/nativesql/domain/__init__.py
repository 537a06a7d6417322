"""Domain types for nativesql workflows."""

from .errors import (
    ConnectionClosedError,
    EscapeSyntaxError,
    InvalidArgumentError,
    NativeSQLError,
    StatementPreparationError,
)
from .results import CommandResult

__all__ = [
    "CommandResult",
    "NativeSQLError",
    "InvalidArgumentError",
    "EscapeSyntaxError",
    "StatementPreparationError",
    "ConnectionClosedError",
]
