"""Primitive parsing utilities for the L20n parser.

This module provides low-level parsers for identifiers and quoted
strings, including escape expansion and placeable splitting.

Error Handling:
    Functions raise L20nSyntaxError positioned via Cursor.error(). The
    placeable cap raises L20nLimitError, which carries no position because
    it is resource-fatal rather than entry-fatal.
"""

import re

from l20nlexengine.constants import MAX_PLACEABLES
from l20nlexengine.diagnostics import ErrorTemplate, L20nLimitError
from l20nlexengine.syntax.ast import ComplexString, VariableReference
from l20nlexengine.syntax.cursor import Cursor, ParseResult

__all__ = [
    "PLACEABLE_PATTERN",
    "find_closing_quote",
    "is_identifier_char",
    "is_identifier_start",
    "parse_identifier",
    "parse_quoted_string",
    "split_placeables",
    "unescape_string",
]

# ASCII-only character classes. str.isalpha()/isalnum() accept Unicode
# letters and digits, which the grammar does not.
_IDENTIFIER_START: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
)
_IDENTIFIER_CHARS: frozenset[str] = _IDENTIFIER_START | frozenset("0123456789")

# Backslash followed by "{{", a 4-digit unicode escape, or any other single
# character, line breaks included (the catch-all is rejected unless it is
# "\" or the quote).
_ESCAPE_PATTERN = re.compile(r"\\(\{\{|u[0-9a-fA-F]{4}|.)", re.DOTALL)

# {{ $name }} with optional whitespace and optional "$" sigil.
PLACEABLE_PATTERN = re.compile(r"\{\{\s*\$?([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")

_UNICODE_ESCAPE_LEN: int = 5  # "u" + 4 hex digits


def is_identifier_start(ch: str) -> bool:
    """Check if character can start an identifier: [A-Za-z_]."""
    return ch in _IDENTIFIER_START


def is_identifier_char(ch: str) -> bool:
    """Check if character can continue an identifier: [A-Za-z0-9_]."""
    return ch in _IDENTIFIER_CHARS


def parse_identifier(cursor: Cursor) -> ParseResult[str]:
    """Parse identifier: [A-Za-z_][A-Za-z0-9_]*

    Examples:
        hello → "hello"
        _private → "_private"
        item2 → "item2"

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(identifier, cursor just past it)

    Raises:
        L20nSyntaxError: If the first character cannot start an identifier
    """
    if not is_identifier_start(cursor.current):
        raise cursor.error(ErrorTemplate.invalid_identifier())

    source = cursor.source
    end = cursor.pos + 1
    length = len(source)
    while end < length and source[end] in _IDENTIFIER_CHARS:
        end += 1

    return ParseResult(cursor.slice_to(end), cursor.at(end))


def find_closing_quote(source: str, open_pos: int, quote: str) -> int:
    """Locate the first unescaped ``quote`` after the opening one.

    A candidate is escaped when an odd number of backslashes immediately
    precedes it.

    Args:
        source: Full source text
        open_pos: Position of the opening quote
        quote: Quote character (' or ")

    Returns:
        Position of the closing quote, or -1 if there is none
    """
    pos = source.find(quote, open_pos + 1)
    while pos != -1:
        back = pos - 1
        while back > open_pos and source[back] == "\\":
            back -= 1
        if (pos - 1 - back) % 2 == 0:
            return pos
        pos = source.find(quote, pos + 1)
    return -1


def unescape_string(raw: str, quote: str, cursor: Cursor) -> str:
    """Expand escape sequences in a raw string body.

    Supported escape sequences:
        \\\\ → \\
        \\{{ → {{
        \\<quote> → <quote>
        \\uXXXX → Unicode character (4 hex digits)

    Args:
        raw: String body between the quotes
        quote: The quote character that delimited the string
        cursor: Position used for error reporting (just past the string)

    Returns:
        The unescaped string

    Raises:
        L20nSyntaxError: On any other escape sequence
    """

    def replace(match: re.Match[str]) -> str:
        sequence = match.group(1)
        if sequence in ("\\", "{{", quote):
            return sequence
        if len(sequence) == _UNICODE_ESCAPE_LEN and sequence[0] == "u":
            return chr(int(sequence[1:], 16))
        raise cursor.error(ErrorTemplate.illegal_escape(match.group(0)))

    return _ESCAPE_PATTERN.sub(replace, raw)


def split_placeables(
    text: str, max_placeables: int = MAX_PLACEABLES
) -> str | ComplexString:
    """Split a string on {{ placeables }}.

    Examples:
        "Hello {{ $name }}!" → ComplexString(("Hello ", VariableReference("name"), "!"))
        "{{a}}{{b}}" → ComplexString((VariableReference("a"), VariableReference("b")))
        "no placeables" → "no placeables"

    Args:
        text: Unescaped string value
        max_placeables: Maximum placeables allowed in one string

    Returns:
        ComplexString if at least one placeable matched, else ``text``

    Raises:
        L20nLimitError: If the string has more than ``max_placeables`` placeables
    """
    chunks = PLACEABLE_PATTERN.split(text)
    count = (len(chunks) - 1) // 2
    if count == 0:
        return text
    if count > max_placeables:
        diagnostic = ErrorTemplate.too_many_placeables(count, max_placeables)
        raise L20nLimitError(diagnostic, count=count, limit=max_placeables)

    elements: list[str | VariableReference] = []
    for i, chunk in enumerate(chunks):
        if i % 2 == 1:
            elements.append(VariableReference(chunk))
        elif chunk:
            elements.append(chunk)
    return ComplexString(tuple(elements))


def parse_quoted_string(
    cursor: Cursor,
    *,
    simple: bool = False,
    max_placeables: int = MAX_PLACEABLES,
) -> ParseResult[str | ComplexString]:
    """Parse quoted string: "text" or 'text'

    Escapes are expanded before placeables are split, so an escaped
    ``\\{{`` still opens a placeable when a matching ``}}`` follows.

    Args:
        cursor: Position of the opening quote
        simple: Skip escape expansion and placeable splitting
        max_placeables: Maximum placeables allowed in the string

    Returns:
        ParseResult with a plain str or a ComplexString, cursor past the
        closing quote

    Raises:
        L20nSyntaxError: Unclosed string (at the opening quote) or illegal
            escape (just past the closing quote)
        L20nLimitError: Too many placeables
    """
    quote = cursor.current
    close_pos = find_closing_quote(cursor.source, cursor.pos, quote)
    if close_pos == -1:
        raise cursor.error(ErrorTemplate.unclosed_string())

    text = cursor.source[cursor.pos + 1 : close_pos]
    cursor = cursor.at(close_pos + 1)

    if simple:
        return ParseResult(text, cursor)

    if "\\" in text:
        text = unescape_string(text, quote, cursor)

    if "{{" in text:
        return ParseResult(split_placeables(text, max_placeables), cursor)

    return ParseResult(text, cursor)
