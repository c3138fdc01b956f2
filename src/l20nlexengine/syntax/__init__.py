"""L20n syntax parsing package.

Provides parser, AST definitions, visitor pattern, and serialization.
Separate from validation to enable tooling (linters, formatters, IDE plugins).

Python 3.13+.
"""

from l20nlexengine.diagnostics import ErrorSink

from .ast import (
    ASTNode,
    ComplexString,
    Entity,
    Hash,
    Index,
    IndexedValue,
    Resource,
    Value,
    VariableReference,
)
from .cursor import Cursor, ParseResult
from .parser import L20nParser
from .serializer import SerializationValidationError, serialize
from .visitor import ASTVisitor

# Note: L20nSerializer is intentionally NOT exported.
# Users should use the serialize() function instead of instantiating L20nSerializer directly.

__all__ = [
    "ASTNode",
    "ASTVisitor",
    "ComplexString",
    "Cursor",
    "Entity",
    "Hash",
    "Index",
    "IndexedValue",
    "L20nParser",
    "ParseResult",
    "Resource",
    "SerializationValidationError",
    "Value",
    "VariableReference",
    "parse",
    "serialize",
]


def parse(source: str, error_sink: ErrorSink | None = None, *, simple: bool = False) -> Resource:
    """Parse L20n source into AST.

    Convenience function for L20nParser.parse().

    Args:
        source: L20n resource text
        error_sink: Receiver for per-entry syntax errors; without one the
                    first syntax error is raised
        simple: Keep string bodies verbatim (no escapes, no placeables)

    Returns:
        Resource containing the parsed entities

    Example:
        >>> from l20nlexengine.syntax import parse
        >>> resource = parse('<hello "Hello, world!">')
        >>> resource.entries[0].id
        'hello'
    """
    parser = L20nParser(simple_mode=simple)
    return parser.parse(source, error_sink)
