"""L20n exception hierarchy with structured diagnostics.

All exceptions may store Diagnostic objects for rich error information.
Syntax errors additionally carry the failure offset and a short slice of
surrounding source so tooling can point at the broken entry.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "L20nError",
    "L20nLimitError",
    "L20nSyntaxError",
]


class L20nError(Exception):
    """Base exception for all L20n errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize L20nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class L20nSyntaxError(L20nError):
    """Positioned syntax error raised while parsing one entry.

    Fatal to the entry being parsed. When the parser was given an error
    sink the error is emitted and parsing resumes at ``position``;
    otherwise it propagates to the caller.

    Attributes:
        message: Bare error message (e.g. 'expected ">"')
        position: Character offset of the failure
        context: Source from the nearest preceding '<' or '>' up to
            ERROR_CONTEXT_LENGTH characters past the failure point
        context_offset: Index of the failure point within ``context``

    Example:
        >>> str(error)
        'expected whitespace at pos 6: "<hello"x">"'
    """

    def __init__(
        self,
        diagnostic: Diagnostic,
        *,
        position: int,
        context: str,
        context_offset: int = 0,
    ) -> None:
        """Initialize L20nSyntaxError.

        Args:
            diagnostic: Diagnostic produced by ErrorTemplate
            position: Character offset of the failure
            context: Source slice around the failure
            context_offset: Index of the failure point within context
        """
        super().__init__(diagnostic)
        self.message = diagnostic.message
        self.position = position
        self.context = context
        self.context_offset = context_offset
        # Exception.args[0] is the bare message; __str__ adds the location.

    @property
    def line(self) -> int | None:
        """Line of the failure (1-indexed), when the diagnostic carries a span."""
        if self.diagnostic is not None and self.diagnostic.span is not None:
            return self.diagnostic.span.line
        return None

    @property
    def column(self) -> int | None:
        """Column of the failure (1-indexed), when the diagnostic carries a span."""
        if self.diagnostic is not None and self.diagnostic.span is not None:
            return self.diagnostic.span.column
        return None

    def __str__(self) -> str:
        return f'{self.message} at pos {self.position}: "{self.context}"'


class L20nLimitError(L20nError):
    """Resource-wide limit exceeded (too many placeables in one string).

    Unlike L20nSyntaxError this is never delivered to an error sink:
    it signals an abusive resource rather than one malformed entry and
    always aborts the parse.

    Attributes:
        count: The offending count
        limit: The configured maximum
    """

    def __init__(self, diagnostic: Diagnostic, *, count: int, limit: int) -> None:
        """Initialize L20nLimitError.

        Args:
            diagnostic: Diagnostic produced by ErrorTemplate
            count: The offending count
            limit: The configured maximum
        """
        super().__init__(diagnostic)
        self.count = count
        self.limit = limit
