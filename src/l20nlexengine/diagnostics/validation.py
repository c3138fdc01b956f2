"""Records produced by validate_resource.

Errors come from the syntax pass (one per skipped entry, or a single
critical error when a limit aborts the parse). Warnings come from the
semantic checks that run over the entities that did parse. Rendering is
delegated to DiagnosticFormatter.

Python 3.13+.
"""

from dataclasses import dataclass

from .formatter import DiagnosticFormatter

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]


@dataclass(frozen=True, slots=True)
class ValidationError:
    """A syntax problem found while validating a resource.

    Attributes:
        code: "parse-error" or "critical-parse-error"
        message: Bare error message, without position
        content: Entry source around the failure (may hold resource text;
            pass sanitize=True to format() before logging it)
        line: 1-indexed line of the failure, if known
        column: 1-indexed column of the failure, if known
    """

    code: str
    message: str
    content: str
    line: int | None = None
    column: int | None = None

    def format(self, *, sanitize: bool = False, redact_content: bool = False) -> str:
        """One-line rendering, e.g. ``[parse-error] at line 2, column 7: ...``.

        Args:
            sanitize: Truncate long content
            redact_content: With sanitize, hide content entirely
        """
        formatter = DiagnosticFormatter(sanitize=sanitize, redact_content=redact_content)
        return formatter.format_validation_error(self)


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """A semantic issue in an otherwise well-formed entity.

    Attributes:
        code: "duplicate-id", "index-without-hash" or "unknown-plural-category"
        message: Human-readable description
        context: Entity id, or "id.attribute" for attribute values
    """

    code: str
    message: str
    context: str | None = None

    def format(self) -> str:
        return DiagnosticFormatter().format_validation_warning(self)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validate_resource.

    A result with warnings but no errors is still valid.

    Example:
        >>> ValidationResult.valid().is_valid
        True
    """

    errors: tuple[ValidationError, ...]
    warnings: tuple[ValidationWarning, ...]

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @staticmethod
    def valid() -> "ValidationResult":
        """Result with no errors and no warnings."""
        return ValidationResult(errors=(), warnings=())

    def format(
        self,
        *,
        sanitize: bool = False,
        redact_content: bool = False,
        include_warnings: bool = True,
    ) -> str:
        """Summary line followed by the errors and (optionally) warnings.

        See DiagnosticFormatter.format_validation_result for the layout.
        """
        formatter = DiagnosticFormatter(sanitize=sanitize, redact_content=redact_content)
        return formatter.format_validation_result(self, include_warnings=include_warnings)
