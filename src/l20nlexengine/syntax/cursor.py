"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern: the parser state for one parse is
(source, position), and every advance returns a new Cursor. Sub-parsers
return ParseResult values carrying the parsed node and the new cursor, and
raise L20nSyntaxError (via Cursor.error) on failure.

Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column and error context computed on-demand (errors only)

Line Ending Support:
    Line numbers use \\n as the delimiter; CRLF files work because the \\n
    is still present. CR-only files report every position on line 1.
"""

from dataclasses import dataclass

from l20nlexengine.constants import ERROR_CONTEXT_LENGTH
from l20nlexengine.diagnostics import Diagnostic, L20nSyntaxError, SourceSpan

__all__ = ["Cursor", "LineOffsetCache", "ParseResult", "error_context"]


def _context_start(source: str, pos: int) -> int:
    start = source.rfind("<", 0, pos)
    last_close = source.rfind(">", 0, pos)
    if last_close > start:
        start = last_close + 1
    return max(start, 0)


def error_context(source: str, pos: int) -> str:
    """Extract the diagnostic context string for a failure position.

    The context starts at the nearest '<' or '>' before ``pos`` (just after
    a '>', at a '<') and extends ERROR_CONTEXT_LENGTH characters past it.

    Example:
        >>> error_context('<a "x"><bad"y">', 11)
        '<bad"y">'
    """
    return source[_context_start(source, pos) : pos + ERROR_CONTEXT_LENGTH]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (important for large files)
        3. Simple position - Just an integer offset
        4. EOF is a property - Not a return value

    Example:
        >>> cursor = Cursor("<hello>", 0)
        >>> cursor.current
        '<'
        >>> cursor.advance().current
        'h'
        >>> cursor.current  # Original unchanged (immutability)
        '<'
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character, or "" at EOF (never equal to any delimiter)
        """
        if self.is_eof:
            return ""
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def at(self, pos: int) -> "Cursor":
        """Return a cursor over the same source at an absolute position."""
        return Cursor(self.source, min(pos, len(self.source)))

    def startswith(self, text: str) -> bool:
        """Check whether the source continues with ``text`` at this position."""
        return self.source.startswith(text, self.pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def find(self, text: str, offset: int = 0) -> int:
        """Find ``text`` at or after position + offset; -1 if absent."""
        return self.source.find(text, self.pos + offset)

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position. Only call for error reporting.
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def error(self, diagnostic: Diagnostic) -> L20nSyntaxError:
        """Build a syntax error positioned at this cursor.

        Attaches a SourceSpan and the source context to the template
        diagnostic. Callers ``raise cursor.error(...)``.

        Example:
            >>> raise cursor.error(ErrorTemplate.expected_token(">"))
        """
        line, col = self.compute_line_col()
        positioned = Diagnostic(
            code=diagnostic.code,
            message=diagnostic.message,
            span=SourceSpan(start=self.pos, end=self.pos, line=line, column=col),
            hint=diagnostic.hint,
        )
        start = _context_start(self.source, self.pos)
        return L20nSyntaxError(
            positioned,
            position=self.pos,
            context=self.source[start : self.pos + ERROR_CONTEXT_LENGTH],
            context_offset=self.pos - start,
        )


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in O(n) single pass, then provides
    O(log n) lookups using binary search. Use this when you need to
    compute line:column for multiple positions in the same source.

    Example:
        >>> cache = LineOffsetCache("line1\\nline2\\nline3")
        >>> cache.get_line_col(6)   # Start of line 2
        (2, 1)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: str) -> None:
        offsets = [0]
        for i, char in enumerate(source):
            if char == "\n":
                offsets.append(i + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get line and column for position using binary search.

        Args:
            pos: Character position in source (0-indexed, clamped)

        Returns:
            (line, column) tuple (1-indexed)
        """
        if pos < 0:
            pos = 0
        elif pos > self._source_len:
            pos = self._source_len

        left, right = 0, len(self._offsets) - 1
        while left < right:
            mid = (left + right + 1) // 2
            if self._offsets[mid] <= pos:
                left = mid
            else:
                right = mid - 1

        return (left + 1, pos - self._offsets[left] + 1)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
