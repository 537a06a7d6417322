"""
nativesql

Translates standardized escape syntax embedded in client SQL into the
native dialect of the query engine.
"""

__version__ = "0.1.0"

from .connection import NativeSQLConnection, QueryEngine
from .core import split_sql_statements, translate
from .domain import (
    CommandResult,
    ConnectionClosedError,
    EscapeSyntaxError,
    InvalidArgumentError,
    NativeSQLError,
    StatementPreparationError,
)
from .models import TranslatedStatement, TranslatorSettings

__all__ = [
    "__version__",
    "translate",
    "split_sql_statements",
    "NativeSQLConnection",
    "QueryEngine",
    "TranslatorSettings",
    "TranslatedStatement",
    "CommandResult",
    "NativeSQLError",
    "InvalidArgumentError",
    "EscapeSyntaxError",
    "StatementPreparationError",
    "ConnectionClosedError",
]
