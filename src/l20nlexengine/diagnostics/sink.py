"""Error sink protocol for recoverable parse errors.

The parser reports entry-level syntax errors through an injected sink
instead of raising when one is supplied. Any object with a compatible
``emit(event, error)`` method qualifies.

Python 3.13+. Zero external dependencies.
"""

from typing import Protocol, runtime_checkable

from .errors import L20nError

__all__ = ["ErrorCollector", "ErrorSink"]


@runtime_checkable
class ErrorSink(Protocol):
    """Receiver of named error events.

    The parser calls ``emit(ErrorEvent.PARSE_ERROR, error)`` once per
    malformed entry.
    """

    def emit(self, event: str, error: L20nError) -> None:
        """Receive one error event."""
        ...  # pylint: disable=unnecessary-ellipsis


class ErrorCollector:
    """Error sink that records every emitted error in order.

    Example:
        >>> collector = ErrorCollector()
        >>> resource = parse_l20n('<a "x"> oops <b "y">', collector)
        >>> len(collector.errors)
        4
    """

    __slots__ = ("_events",)

    def __init__(self) -> None:
        self._events: list[tuple[str, L20nError]] = []

    def emit(self, event: str, error: L20nError) -> None:
        """Record an error event."""
        self._events.append((event, error))

    @property
    def events(self) -> tuple[tuple[str, L20nError], ...]:
        """All recorded (event, error) pairs."""
        return tuple(self._events)

    @property
    def errors(self) -> tuple[L20nError, ...]:
        """All recorded errors, in emission order."""
        return tuple(error for _, error in self._events)

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        """Forget all recorded errors."""
        self._events.clear()
