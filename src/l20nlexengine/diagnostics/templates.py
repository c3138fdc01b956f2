"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases

    Templates return position-free diagnostics; the parser attaches the
    span and source context when it raises.
    """

    @staticmethod
    def expected_token(token: str) -> Diagnostic:
        """A required delimiter is missing.

        Args:
            token: The delimiter that was expected (":", ">", "}", "]")

        Returns:
            Diagnostic for EXPECTED_TOKEN
        """
        msg = f'expected "{token}"'
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_TOKEN,
            message=msg,
            hint=f'Insert "{token}" at this position',
        )

    @staticmethod
    def invalid_identifier() -> Diagnostic:
        """Identifier does not start with [A-Za-z_].

        Returns:
            Diagnostic for INVALID_IDENTIFIER
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_IDENTIFIER,
            message="identifier must start with letter or underscore",
            hint="Identifiers match [A-Za-z_][A-Za-z0-9_]*",
        )

    @staticmethod
    def unclosed_string() -> Diagnostic:
        """Quoted string has no unescaped closing quote.

        Returns:
            Diagnostic for UNCLOSED_STRING
        """
        return Diagnostic(
            code=DiagnosticCode.UNCLOSED_STRING,
            message="unclosed string literal",
            hint="Close the string with the same quote character that opened it",
        )

    @staticmethod
    def unterminated_comment() -> Diagnostic:
        """Comment has no closing '*/'.

        Returns:
            Diagnostic for UNTERMINATED_COMMENT
        """
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_COMMENT,
            message="unterminated comment",
            hint='Close the comment with "*/" (comments do not nest)',
        )

    @staticmethod
    def illegal_escape(sequence: str) -> Diagnostic:
        """Unsupported backslash escape inside a quoted string.

        Args:
            sequence: The offending escape, including the backslash

        Returns:
            Diagnostic for ILLEGAL_ESCAPE
        """
        return Diagnostic(
            code=DiagnosticCode.ILLEGAL_ESCAPE,
            message="illegal escape sequence",
            hint=(
                f"Unsupported escape {sequence!r}; "
                "use \\\\, \\{{, \\<quote> or \\uXXXX"
            ),
        )

    @staticmethod
    def invalid_index() -> Diagnostic:
        """Index expression is not the plural macro call.

        Returns:
            Diagnostic for INVALID_INDEX
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_INDEX,
            message="invalid index expression",
            hint="The only supported index is [@cldr.plural($variable)]",
        )

    @staticmethod
    def expected_whitespace() -> Diagnostic:
        """Required whitespace is missing after an identifier or index.

        Returns:
            Diagnostic for EXPECTED_WHITESPACE
        """
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_WHITESPACE,
            message="expected whitespace",
            hint="Separate the entity identifier from its value with whitespace",
        )

    @staticmethod
    def invalid_entry() -> Diagnostic:
        """Resource-level content that is neither an entity nor a comment.

        Returns:
            Diagnostic for INVALID_ENTRY
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_ENTRY,
            message="invalid entry",
            hint='Entries start with "<" (entity) or "/*" (comment)',
        )

    @staticmethod
    def unknown_value_type() -> Diagnostic:
        """A value is required but the next character opens none.

        Returns:
            Diagnostic for UNKNOWN_VALUE_TYPE
        """
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_VALUE_TYPE,
            message="unknown value type",
            hint="Values are quoted strings or {key: value} hashes",
        )

    @staticmethod
    def empty_entity() -> Diagnostic:
        """Entity has neither a value nor attributes.

        Returns:
            Diagnostic for EMPTY_ENTITY
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_ENTITY,
            message="expected value or attributes",
            hint="An entity needs a value, at least one attribute, or both",
        )

    @staticmethod
    def too_many_placeables(count: int, limit: int) -> Diagnostic:
        """String contains more placeables than the configured cap.

        Args:
            count: Number of placeables found in the string
            limit: Maximum allowed placeables

        Returns:
            Diagnostic for TOO_MANY_PLACEABLES
        """
        msg = f"Too many placeables ({count}, max allowed is {limit})"
        return Diagnostic(
            code=DiagnosticCode.TOO_MANY_PLACEABLES,
            message=msg,
            hint="Split the string or reduce the number of {{ placeables }}",
        )
