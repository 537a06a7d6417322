"""
Core translation logic.

Side-effect-free helpers with no console or CLI dependency:
- Escape translator: rewrites escape clauses into native SQL
- SQL utils: statement splitting for scripts
"""

from .escape_translator import (
    ESCAPE_KEYWORDS,
    blank_width,
    skip_literal_or_comment,
    translate,
)
from .sql_utils import split_sql_statements

__all__ = [
    "ESCAPE_KEYWORDS",
    "blank_width",
    "skip_literal_or_comment",
    "translate",
    "split_sql_statements",
]
