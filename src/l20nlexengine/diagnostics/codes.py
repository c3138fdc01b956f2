"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3999: Syntax errors (parser failures, entry-fatal)
        4000-4999: Limit errors (resource-fatal, never routed to a sink)
    """

    # Syntax errors (3000-3999)
    EXPECTED_TOKEN = 3001
    INVALID_IDENTIFIER = 3002
    UNCLOSED_STRING = 3003
    UNTERMINATED_COMMENT = 3004
    ILLEGAL_ESCAPE = 3005
    INVALID_INDEX = 3006
    EXPECTED_WHITESPACE = 3007
    INVALID_ENTRY = 3008
    UNKNOWN_VALUE_TYPE = 3009
    EMPTY_ENTITY = 3010

    # Limit errors (4000-4999)
    TOO_MANY_PLACEABLES = 4001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. For multi-byte UTF-8 characters, character offset differs
        from byte offset.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Rendered by DiagnosticFormatter together with the error that carries it.

    Attributes:
        code: Unique error code
        message: Human-readable error description (without position)
        span: Source location (None until the parser attaches one)
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

