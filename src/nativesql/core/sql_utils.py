"""
SQL utilities - helpers for SQL script handling.

Splits SQL scripts into statements using the same literal and comment rules
as the escape translator, so semicolons inside strings, quoted identifiers,
dollar-quoted blocks, comments or escape clauses never end a statement.
"""

from .escape_translator import skip_literal_or_comment

_SPAN_OPENERS = frozenset("'\"/-$")


def _has_code(fragment: str) -> bool:
    """Return True if the fragment holds anything besides whitespace and comments."""
    index = 0
    length = len(fragment)
    while index < length:
        char = fragment[index]
        if char in ("/", "-"):
            end = skip_literal_or_comment(fragment, index)
            if end != index:
                index = end + 1
                continue
        if not char.isspace():
            return True
        index += 1
    return False


def split_sql_statements(sql_text: str) -> list[str]:
    """Split SQL script into statements while preserving quoted semicolons.

    Semicolons inside single- or double-quoted literals, dollar-quoted blocks,
    line or block comments and ``{...}`` escape clauses are part of the
    statement. Fragments holding only whitespace or comments are dropped.

    Args:
        sql_text: Raw SQL script content (e.g. from a file).

    Returns:
        List of non-empty statement strings, in order.

    Raises:
        EscapeSyntaxError: If a literal or block comment is unterminated. The
            position is an offset into the whole script.
    """
    statements: list[str] = []
    length = len(sql_text)
    depth = 0
    start = 0
    index = 0

    while index < length:
        char = sql_text[index]
        if char in _SPAN_OPENERS:
            index = skip_literal_or_comment(sql_text, index)
        elif char == "{":
            depth += 1
        elif char == "}" and depth > 0:
            depth -= 1
        elif char == ";" and depth == 0:
            statement = sql_text[start:index].strip()
            if _has_code(statement):
                statements.append(statement)
            start = index + 1
        index += 1

    tail = sql_text[start:].strip()
    if _has_code(tail):
        statements.append(tail)

    return statements
