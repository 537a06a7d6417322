"""
Escape Translator

Rewrites the standardized escape syntax embedded in client SQL
(``{fn ...}``, ``{oj ...}``, ``{call ...}``, ``{? = call ...}``, ``{d ...}``,
``{t ...}``, ``{ts ...}``, ``{params ...}`` and native literal escapes such as
``{2024-01-01}``) into the native dialect understood by the query engine.

The translation is a single forward pass. String literals, quoted
identifiers, dollar-quoted blocks and comments are skipped so braces inside
them are never treated as escape delimiters. Recognized escapes are rewritten
by blanking characters in place, so the output always has the same length as
the input. When nothing needs rewriting the input string itself is returned.
"""

from nativesql.domain.errors import EscapeSyntaxError, InvalidArgumentError

BLANK = " "

# Keyword -> number of leading characters blanked. Zero keeps the keyword,
# which the native dialect understands as-is.
ESCAPE_KEYWORDS: dict[str, int] = {
    "fn": 2,
    "escape": 0,
    "call": 0,
    "oj": 2,
    "ts": 0,
    "t": 0,
    "d": 0,
    "params": 6,
}

_SPAN_OPENERS = frozenset("'\"/-$")


def blank_width(token: str) -> int | None:
    """Return how many characters of ``token`` to blank, or None if unknown.

    Matching is case-insensitive and on the whole token, so ``oj`` never
    matches inside a longer identifier such as ``ojx``.
    """
    return ESCAPE_KEYWORDS.get(token.lower())


def _skip_line_comment(sql: str, index: int) -> int:
    length = len(sql)
    while index < length and sql[index] not in "\r\n":
        index += 1
    return index


def skip_literal_or_comment(sql: str, index: int) -> int:
    """
    Skip the literal or comment opened by the character at ``index``.

    Args:
        sql: Complete SQL text
        index: Position of a quote, ``$``, ``/`` or ``-`` character

    Returns:
        Index of the last character consumed by the span. When the character
        does not open a span (a lone ``$``, ``/`` or ``-``) ``index`` itself is
        returned. Callers resume scanning at the following position.

    Raises:
        EscapeSyntaxError: If a quote, dollar-quoted block or block comment is
            not terminated before the end of the input. The error points at
            the opening position.
    """
    length = len(sql)
    char = sql[index]

    if char in ("'", '"'):
        end = sql.find(char, index + 1)
        if end < 0:
            raise EscapeSyntaxError(sql, index)
        return end

    if char == "$":
        opens_block = (
            index + 1 < length
            and sql[index + 1] == "$"
            and (index == 0 or sql[index - 1].isspace())
        )
        if not opens_block:
            return index
        end = sql.find("$$", index + 2)
        if end < 0:
            raise EscapeSyntaxError(sql, index)
        return end + 1

    if index + 1 >= length:
        return index

    follower = sql[index + 1]
    if char == "/" and follower == "*":
        end = sql.find("*/", index + 2)
        if end < 0:
            raise EscapeSyntaxError(sql, index)
        return end + 1
    if char in ("/", "-") and follower == char:
        return _skip_line_comment(sql, index + 2)
    return index


def _skip_whitespace(sql: str, index: int) -> int:
    """Advance past whitespace; running off the end is an unterminated escape."""
    length = len(sql)
    while index < length and sql[index].isspace():
        index += 1
    if index >= length:
        raise EscapeSyntaxError(sql, index)
    return index


def _find_literal_close(sql: str, index: int) -> int:
    """Return the position of the ``}`` closing a native literal escape."""
    length = len(sql)
    while True:
        if index >= length:
            raise EscapeSyntaxError(sql, index)
        char = sql[index]
        if char == "}":
            return index
        if char in _SPAN_OPENERS:
            index = skip_literal_or_comment(sql, index)
        index += 1


def _token_end(sql: str, index: int) -> int:
    length = len(sql)
    while index < length and not sql[index].isspace():
        index += 1
    return index


def translate(sql: str | None, escape_processing: bool = True) -> str:
    """
    Convert escape sequences in a SQL statement to the native dialect.

    Args:
        sql: SQL statement with or without escape sequences
        escape_processing: When False the statement is returned untouched

    Returns:
        The translated statement. If no rewrite was required this is the
        very same ``str`` object that was passed in.

    Raises:
        InvalidArgumentError: If ``sql`` is None
        EscapeSyntaxError: On unterminated literals or comments, a missing
            ``=`` after ``{?``, or unbalanced braces
    """
    if sql is None:
        raise InvalidArgumentError("SQL", None)
    if not escape_processing or "{" not in sql:
        return sql

    length = len(sql)
    chars: list[str] | None = None
    level = 0
    index = 0
    while index < length:
        char = sql[index]

        if char in _SPAN_OPENERS:
            index = skip_literal_or_comment(sql, index)

        elif char == "{":
            level += 1
            if chars is None:
                chars = list(sql)
            brace = index
            chars[brace] = BLANK
            index = _skip_whitespace(sql, index + 1)

            if "0" <= sql[index] <= "9":
                # Native date/time literal, passed through with its braces
                chars[brace] = "{"
                index = _find_literal_close(sql, index)
                level -= 1
            else:
                if sql[index] == "?":
                    chars[index] = BLANK
                    index = _skip_whitespace(sql, index + 1)
                    if sql[index] != "=":
                        raise EscapeSyntaxError(sql, index, expected="=")
                    equals = index
                    index = _skip_whitespace(sql, equals + 1)
                    chars[equals:index] = [BLANK] * (index - equals)

                start = index
                end = _token_end(sql, start)
                width = blank_width(sql[start:end])
                if width is None:
                    # Unknown escape: rescan the token as ordinary SQL
                    index = start - 1
                else:
                    chars[start:start + width] = [BLANK] * width
                    index = end - 1

        elif char == "}":
            level -= 1
            if level < 0 or chars is None:
                raise EscapeSyntaxError(sql, index)
            chars[index] = BLANK

        index += 1

    if level != 0:
        raise EscapeSyntaxError(sql, length - 1)
    if chars is None:
        return sql
    return "".join(chars)
