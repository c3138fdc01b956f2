"""Whitespace handling utilities for the L20n parser.

Whitespace is space, tab, LF and CR everywhere in the grammar. Some
positions require it (after an entity identifier, between attributes);
the requirement is enforced by the caller, which inspects the flag
returned by skip_required_whitespace().
"""

from l20nlexengine.syntax.cursor import Cursor

__all__ = ["WHITESPACE", "skip_required_whitespace", "skip_whitespace"]

WHITESPACE: frozenset[str] = frozenset(" \t\n\r")


def skip_whitespace(cursor: Cursor) -> Cursor:
    """Skip optional whitespace (space, tab, LF, CR).

    Args:
        cursor: Current position in source

    Returns:
        New cursor at first non-whitespace character (or EOF)

    Design:
        Immutable cursor ensures termination: the loop only advances.
    """
    source = cursor.source
    pos = cursor.pos
    length = len(source)
    while pos < length and source[pos] in WHITESPACE:
        pos += 1
    return cursor.at(pos)


def skip_required_whitespace(cursor: Cursor) -> tuple[Cursor, bool]:
    """Skip whitespace and report whether any was consumed.

    Args:
        cursor: Current position in source

    Returns:
        (new_cursor, advanced) where advanced is False when no whitespace
        was present at the cursor
    """
    new_cursor = skip_whitespace(cursor)
    return new_cursor, new_cursor.pos != cursor.pos
