"""Enumerations for L20nLexEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ReferenceKind(StrEnum):
    """Kind of reference node produced by the parser.

    StrEnum provides automatic string conversion: str(ReferenceKind.ID_OR_VAR) == "idOrVar"
    """

    ID_OR_VAR = "idOrVar"
    """Identifier or variable reference: {{ $name }} or the plural macro"""


class ErrorEvent(StrEnum):
    """Event names delivered to error sinks.

    StrEnum provides automatic string conversion: str(ErrorEvent.PARSE_ERROR) == "parseerror"
    """

    PARSE_ERROR = "parseerror"
    """Recoverable syntax error in a single entry"""


class VariableContext(StrEnum):
    """Where a variable name appears within an entity.

    StrEnum provides automatic string conversion: str(VariableContext.PLACEABLE) == "placeable"
    """

    PLACEABLE = "placeable"
    """Inside a string: {{ $name }}"""

    INDEX = "index"
    """As the operand of an index: [@cldr.plural($n)]"""


__all__ = [
    "ErrorEvent",
    "ReferenceKind",
    "VariableContext",
]
