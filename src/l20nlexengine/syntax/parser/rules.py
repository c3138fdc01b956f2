"""Grammar rules for the L20n parser.

This module provides the parsing rules for L20n grammar constructs:
- Values (quoted strings, hashes, index-tagged values)
- Index expressions ([@cldr.plural($n)])
- Entries (entities with value and attributes, comments)

All grammar rules are co-located in a single module to:
1. Eliminate circular imports between interdependent parsing functions
2. Allow direct function calls instead of function-local imports

Grammar:
    entry       ::= entity | comment
    entity      ::= "<" identifier ("[" index)? ws value? (ws attribute)* ws? ">"
    attribute   ::= identifier ("[" index)? ws? ":" ws? value
    value       ::= string | hash
    hash        ::= "{" ws? pair (ws? "," ws? pair)* ws? ","? ws? "}"
    pair        ::= identifier ws? ":" ws? value
    index       ::= ws? "@cldr.plural(" "$"? name ")" ws? "]"
    comment     ::= "/*" .* "*/"

Lookahead:
    - `"` or `'` starts a string value
    - `{` starts a hash value
    - `[` directly after an identifier starts an index
    - `/*` starts a comment at entry level
"""

import re
from dataclasses import dataclass

from l20nlexengine.constants import MAX_PLACEABLES
from l20nlexengine.diagnostics import ErrorTemplate
from l20nlexengine.syntax.ast import Entity, Hash, Index, IndexedValue, Value
from l20nlexengine.syntax.cursor import Cursor, ParseResult
from l20nlexengine.syntax.parser.primitives import parse_identifier, parse_quoted_string
from l20nlexengine.syntax.parser.whitespace import skip_required_whitespace, skip_whitespace

__all__ = [
    "ParseContext",
    "parse_attributes",
    "parse_entity",
    "parse_entry",
    "parse_hash",
    "parse_index",
    "parse_key_value",
    "parse_value",
    "skip_comment",
    "starts_value",
]

# The single supported selector macro. Anchored via Pattern.match(source, pos).
_INDEX_PATTERN = re.compile(r"@cldr\.plural\(\$?(\w+)\)", re.ASCII)

_QUOTES: frozenset[str] = frozenset("\"'")
_VALUE_START: frozenset[str] = _QUOTES | {"{"}


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Explicit per-parse configuration threaded through every rule.

    Replaces shared mutable parser fields with explicit parameter passing:
    - Thread safety without global state
    - Easier testing (no state reset needed)

    Attributes:
        simple_mode: Skip escape expansion and placeable splitting
        max_placeables: Maximum placeables allowed in one string
    """

    simple_mode: bool = False
    max_placeables: int = MAX_PLACEABLES


# =============================================================================
# Values
# =============================================================================


def parse_hash(cursor: Cursor, context: ParseContext) -> ParseResult[Hash]:
    """Parse hash: { key: value, ... }

    A trailing comma before "}" is accepted. A later duplicate key
    overwrites the earlier one.

    Examples:
        { one: "a", two: "b" } → Hash({"one": "a", "two": "b"})
        { one: "a", } → Hash({"one": "a"})

    Args:
        cursor: Position of the opening "{"
        context: Parse configuration

    Returns:
        ParseResult(Hash, cursor past "}")

    Raises:
        L20nSyntaxError: Malformed pair, or neither "," nor "}" after a pair
    """
    cursor = skip_whitespace(cursor.advance())
    entries: dict[str, Value] = {}

    while True:
        pair = parse_key_value(cursor, context)
        key, value = pair.value
        entries[key] = value
        cursor = skip_whitespace(pair.cursor)

        comma = cursor.current == ","
        if comma:
            cursor = skip_whitespace(cursor.advance())
        if cursor.current == "}":
            cursor = cursor.advance()
            break
        if not comma:
            raise cursor.error(ErrorTemplate.expected_token("}"))

    return ParseResult(Hash(entries), cursor)


def starts_value(cursor: Cursor) -> bool:
    """Check whether a string or hash value starts at the cursor."""
    return cursor.current in _VALUE_START


def parse_value(
    cursor: Cursor,
    context: ParseContext,
    *,
    index: Index | None = None,
) -> ParseResult[Value]:
    """Parse a value: quoted string or hash.

    Args:
        cursor: Current position in source
        context: Parse configuration
        index: Wrap the parsed value in IndexedValue with this index

    Returns:
        ParseResult with the value

    Raises:
        L20nSyntaxError: "unknown value type" when no value starts here
    """
    ch = cursor.current
    value: Value
    if ch in _QUOTES:
        string = parse_quoted_string(
            cursor, simple=context.simple_mode, max_placeables=context.max_placeables
        )
        value, cursor = string.value, string.cursor
    elif ch == "{":
        hash_result = parse_hash(cursor, context)
        value, cursor = hash_result.value, hash_result.cursor
    else:
        raise cursor.error(ErrorTemplate.unknown_value_type())

    if index is not None:
        return ParseResult(IndexedValue(value, index), cursor)
    return ParseResult(value, cursor)


def parse_index(cursor: Cursor) -> ParseResult[Index]:
    """Parse index expression after "[": @cldr.plural($name) ]

    Only the plural macro is recognised; this is not a general expression
    parser.

    Examples:
        @cldr.plural($n)] → Index(VariableReference("plural"), "n")
        @cldr.plural(count) ] → Index(VariableReference("plural"), "count")

    Args:
        cursor: Position just past the opening "["

    Returns:
        ParseResult(Index, cursor past "]")

    Raises:
        L20nSyntaxError: Anything other than the plural macro, or missing "]"
    """
    cursor = skip_whitespace(cursor)
    match = _INDEX_PATTERN.match(cursor.source, cursor.pos)
    if match is None:
        raise cursor.error(ErrorTemplate.invalid_index())

    cursor = skip_whitespace(cursor.at(match.end()))
    if cursor.current != "]":
        raise cursor.error(ErrorTemplate.expected_token("]"))

    return ParseResult(Index.plural(match.group(1)), cursor.advance())


def parse_key_value(
    cursor: Cursor, context: ParseContext
) -> ParseResult[tuple[str, Value]]:
    """Parse hash pair: key: value

    Args:
        cursor: Position of the key identifier
        context: Parse configuration

    Returns:
        ParseResult((key, value), cursor past the value)

    Raises:
        L20nSyntaxError: Invalid key, missing ":", or missing value
    """
    key = parse_identifier(cursor)
    cursor = skip_whitespace(key.cursor)
    if cursor.current != ":":
        raise cursor.error(ErrorTemplate.expected_token(":"))
    cursor = skip_whitespace(cursor.advance())

    value = parse_value(cursor, context)
    return ParseResult((key.value, value.value), value.cursor)


def _parse_attribute(
    cursor: Cursor, context: ParseContext
) -> ParseResult[tuple[str, Value]]:
    """Parse attribute pair: key[index]?: value

    The optional index tags the attribute value (IndexedValue).
    """
    key = parse_identifier(cursor)
    cursor = key.cursor
    index: Index | None = None

    if cursor.current == "[":
        index_result = parse_index(cursor.advance())
        index, cursor = index_result.value, index_result.cursor

    cursor = skip_whitespace(cursor)
    if cursor.current != ":":
        raise cursor.error(ErrorTemplate.expected_token(":"))
    cursor = skip_whitespace(cursor.advance())

    value = parse_value(cursor, context, index=index)
    return ParseResult((key.value, value.value), value.cursor)


def parse_attributes(
    cursor: Cursor, context: ParseContext
) -> ParseResult[dict[str, Value]]:
    """Parse attribute list up to (not including) the closing ">".

    Each attribute must be followed by whitespace unless ">" comes next.

    Examples:
        title: "Save" accesskey: "S">  → {"title": "Save", "accesskey": "S"}

    Args:
        cursor: Position of the first attribute key
        context: Parse configuration

    Returns:
        ParseResult(attributes, cursor at ">")

    Raises:
        L20nSyntaxError: Malformed attribute, or 'expected ">"' when an
            attribute is directly followed by something other than ">"
    """
    attributes: dict[str, Value] = {}

    while True:
        attribute = _parse_attribute(cursor, context)
        key, value = attribute.value
        attributes[key] = value
        cursor, had_whitespace = skip_required_whitespace(attribute.cursor)
        if cursor.current == ">":
            break
        if not had_whitespace:
            raise cursor.error(ErrorTemplate.expected_token(">"))

    return ParseResult(attributes, cursor)


# =============================================================================
# Entries
# =============================================================================


def parse_entity(
    cursor: Cursor,
    context: ParseContext,
    entity_id: str,
    index: Index | None,
) -> ParseResult[Entity]:
    """Parse entity body after the identifier (and index, if any).

    Examples:
        <hello "Hello">
        <login title: "Sign in">
        <button "Save" title: "Save file">
        <items[@cldr.plural($n)] {one: "item", other: "items"}>

    Args:
        cursor: Position just past the identifier or index
        context: Parse configuration
        entity_id: The parsed identifier
        index: The parsed index, or None

    Returns:
        ParseResult(Entity, cursor past ">")

    Raises:
        L20nSyntaxError: Missing whitespace, missing value for an indexed
            entity, empty entity, or malformed attributes
    """
    cursor, had_whitespace = skip_required_whitespace(cursor)
    if not had_whitespace:
        raise cursor.error(ErrorTemplate.expected_whitespace())

    value: Value | None = None
    attributes: dict[str, Value] | None = None

    # An indexed entity must have a value; parse_value raises if none starts here.
    if index is None and not starts_value(cursor):
        if cursor.current == ">":
            raise cursor.error(ErrorTemplate.empty_entity())
        attrs_result = parse_attributes(cursor, context)
        attributes, cursor = attrs_result.value, attrs_result.cursor
    else:
        value_result = parse_value(cursor, context)
        value = value_result.value
        cursor, had_whitespace = skip_required_whitespace(value_result.cursor)
        if cursor.current != ">":
            if not had_whitespace:
                raise cursor.error(ErrorTemplate.expected_token(">"))
            attrs_result = parse_attributes(cursor, context)
            attributes, cursor = attrs_result.value, attrs_result.cursor

    # cursor is at ">"
    entity = Entity(id=entity_id, value=value, index=index, attributes=attributes)
    return ParseResult(entity, cursor.advance())


def skip_comment(cursor: Cursor) -> Cursor:
    """Skip comment: /* ... */ (no nesting).

    Args:
        cursor: Position of "/*"

    Returns:
        Cursor just past "*/"

    Raises:
        L20nSyntaxError: "unterminated comment", positioned after "/*"
    """
    cursor = cursor.advance(2)
    end = cursor.find("*/")
    if end == -1:
        raise cursor.error(ErrorTemplate.unterminated_comment())
    return cursor.at(end + 2)


def parse_entry(cursor: Cursor, context: ParseContext) -> ParseResult[Entity | None]:
    """Parse one resource entry: entity or comment.

    Args:
        cursor: Current position (non-whitespace)
        context: Parse configuration

    Returns:
        ParseResult with the Entity, or None for a comment

    Raises:
        L20nSyntaxError: "invalid entry" when neither "<" nor "/*" starts
            here, or any error from the entity/comment rules
    """
    if cursor.current == "<":
        identifier = parse_identifier(cursor.advance())
        cursor = identifier.cursor
        index: Index | None = None
        if cursor.current == "[":
            index_result = parse_index(cursor.advance())
            index, cursor = index_result.value, index_result.cursor
        entity = parse_entity(cursor, context, identifier.value, index)
        return ParseResult(entity.value, entity.cursor)

    if cursor.startswith("/*"):
        return ParseResult(None, skip_comment(cursor))

    raise cursor.error(ErrorTemplate.invalid_entry())
