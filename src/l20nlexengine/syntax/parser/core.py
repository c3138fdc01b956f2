"""Core L20n parser implementation.

This module provides the main L20nParser class that orchestrates parsing
of L20n resources into AST structures defined in :mod:`l20nlexengine.syntax.ast`.

Architecture:
    The parser uses an immutable cursor pattern (:class:`~l20nlexengine.syntax.cursor.Cursor`)
    to traverse source text. Each rule in :mod:`~l20nlexengine.syntax.parser.rules`
    returns a :class:`~l20nlexengine.syntax.cursor.ParseResult` containing the
    parsed node and updated cursor, or raises
    :class:`~l20nlexengine.diagnostics.L20nSyntaxError` positioned where it failed.

Error Recovery:
    With an error sink, a failed entry is emitted as a "parseerror" event and
    dropped; parsing resumes at the position the failing rule reached. There
    is no resynchronisation to the next entry start, so an error in the
    middle of a token may produce follow-up errors. A failure that consumed
    nothing skips one character so the loop always terminates.

    Without an error sink the first syntax error propagates and no partial
    Resource is returned.

    L20nLimitError (too many placeables) is never delivered to the sink.

Security:
    Includes configurable input size limit to prevent DoS attacks via
    unbounded memory allocation from extremely large resources.
"""

import logging

from l20nlexengine.constants import MAX_PLACEABLES, MAX_SOURCE_SIZE
from l20nlexengine.diagnostics import ErrorSink, L20nSyntaxError
from l20nlexengine.enums import ErrorEvent
from l20nlexengine.syntax.ast import Entity, Resource
from l20nlexengine.syntax.cursor import Cursor
from l20nlexengine.syntax.parser.rules import ParseContext, parse_entry
from l20nlexengine.syntax.parser.whitespace import skip_whitespace

__all__ = ["L20nParser"]

logger = logging.getLogger(__name__)


class L20nParser:
    """L20n resource parser using immutable cursor pattern.

    Design:
    - Immutable cursor prevents infinite loops (no manual guards needed)
    - Parser instances hold configuration only; safe to share across threads
    - Error messages include position and source context

    Security:
    - Configurable max_source_size prevents DoS via large inputs
    - Default limit: 10 MB
    - Configurable max_placeables caps placeables per string (default: 100)

    Attributes:
        max_source_size: Maximum allowed source size in characters
        max_placeables: Maximum placeables in a single string value
        simple_mode: Skip escape expansion and placeable splitting
    """

    __slots__ = ("_max_placeables", "_max_source_size", "_simple_mode")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_placeables: int | None = None,
        simple_mode: bool = False,
    ) -> None:
        """Initialize parser with optional limits and mode.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MB).
                            Set to 0 to disable the size limit (not recommended).
            max_placeables: Maximum placeables per string (default: 100).
            simple_mode: Parse strings verbatim, without escape expansion
                         or placeable splitting. Intended for isolated
                         value fragments.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_placeables = (
            max_placeables if max_placeables is not None else MAX_PLACEABLES
        )
        self._simple_mode = simple_mode

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def max_placeables(self) -> int:
        """Maximum placeables allowed in a single string."""
        return self._max_placeables

    @property
    def simple_mode(self) -> bool:
        """Whether escape expansion and placeable splitting are disabled."""
        return self._simple_mode

    def parse(self, source: str, error_sink: ErrorSink | None = None) -> Resource:
        """Parse L20n source into an AST Resource.

        Args:
            source: Resource text
            error_sink: Receiver for per-entry syntax errors. When given,
                        malformed entries are reported and skipped; when
                        None, the first syntax error is raised.

        Returns:
            :class:`~l20nlexengine.syntax.ast.Resource` with the successfully
            parsed entities in source order (comments are not included)

        Raises:
            ValueError: If source exceeds max_source_size (DoS prevention)
            L20nSyntaxError: On the first malformed entry, when no sink is given
            L20nLimitError: When a string has too many placeables (always)

        Example:
            >>> parser = L20nParser()
            >>> resource = parser.parse('<hello "Hello, world!">')
            >>> resource.entries[0].value
            'Hello, world!'
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in L20nParser constructor to increase limit."
            )
            raise ValueError(msg)

        context = ParseContext(
            simple_mode=self._simple_mode, max_placeables=self._max_placeables
        )
        entries: list[Entity] = []
        error_count = 0

        cursor = skip_whitespace(Cursor(source, 0))
        while not cursor.is_eof:
            entry_start = cursor.pos
            try:
                result = parse_entry(cursor, context)
            except L20nSyntaxError as error:
                if error_sink is None:
                    raise
                error_count += 1
                logger.debug("Skipping malformed entry at %d: %s", entry_start, error)
                error_sink.emit(ErrorEvent.PARSE_ERROR, error)
                cursor = cursor.at(error.position)
                if cursor.pos <= entry_start:
                    cursor = cursor.at(entry_start + 1)
            else:
                if result.value is not None:
                    entries.append(result.value)
                cursor = result.cursor

            cursor = skip_whitespace(cursor)

        logger.debug(
            "Parsed resource: %d entities, %d errors", len(entries), error_count
        )
        return Resource(entries=tuple(entries))
