"""Error and validation report rendering.

DiagnosticFormatter is the single place where parse errors and validation
results are turned into text. Syntax errors are shown with their line and
column and the surrounding entry source, a caret marking the failure point:

    error[EXPECTED_TOKEN]: expected ">"
      --> line 2, column 7 (pos 14)
       | <b "y"<d "w">
       |       ^
      = help: Insert ">" at this position

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .errors import L20nError, L20nLimitError, L20nSyntaxError

if TYPE_CHECKING:
    from .validation import ValidationError, ValidationResult, ValidationWarning

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_RED = "\033[1;31m"
_RESET = "\033[0m"


class OutputFormat(StrEnum):
    """Output styles for DiagnosticFormatter.format_error."""

    RUST = "rust"  # Multi-line, with source excerpt and caret
    SIMPLE = "simple"  # One line per error
    JSON = "json"  # One JSON object per error


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Render L20n errors and validation results.

    Attributes:
        output_format: Style used by format_error
        color: Wrap the severity label in ANSI color codes
        sanitize: Truncate source excerpts longer than max_content_length
        redact_content: With sanitize, replace source excerpts entirely
        max_content_length: Excerpt length limit when sanitizing

    Example:
        >>> collector = ErrorCollector()
        >>> _ = parse('<a "x"\\n<b"y">', collector)
        >>> print(DiagnosticFormatter().format_all(collector.errors))
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False
    sanitize: bool = False
    redact_content: bool = False
    max_content_length: int = 100

    def format_error(self, error: L20nError) -> str:
        """Format one parse error in the configured style."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(error)
            case OutputFormat.SIMPLE:
                return self._format_simple(error)
            case OutputFormat.JSON:
                return self._format_json(error)

    def format_all(self, errors: Iterable[L20nError]) -> str:
        """Format several errors; RUST blocks are separated by a blank line."""
        separator = "\n\n" if self.output_format is OutputFormat.RUST else "\n"
        return separator.join(self.format_error(e) for e in errors)

    def format_validation_error(self, error: "ValidationError") -> str:
        """Format one validation error as a single line."""
        location = ""
        if error.line is not None:
            location = f" at line {error.line}"
            if error.column is not None:
                location += f", column {error.column}"
        content = self._excerpt(error.content)
        return f"[{error.code}]{location}: {error.message} (content: {content!r})"

    def format_validation_warning(self, warning: "ValidationWarning") -> str:
        """Format one validation warning as a single line."""
        context = f" ({warning.context})" if warning.context else ""
        return f"[{warning.code}]: {warning.message}{context}"

    def format_validation_result(
        self, result: "ValidationResult", *, include_warnings: bool = True
    ) -> str:
        """Format a ValidationResult: summary line, then errors and warnings.

        Example output:
            Validation failed: 1 error(s), 1 warning(s)
            Errors (1):
              [parse-error] at line 1, column 17: expected ">" (content: '<b')
            Warnings (1):
              [duplicate-id]: Duplicate entity ID 'a' (a)
        """
        warnings = result.warnings if include_warnings else ()
        if not result.errors and not warnings:
            return "Validation passed: no errors or warnings"

        verdict = "passed" if result.is_valid else "failed"
        lines = [
            f"Validation {verdict}: {result.error_count} error(s), "
            f"{len(warnings)} warning(s)"
        ]
        if result.errors:
            lines.append(f"Errors ({len(result.errors)}):")
            lines.extend(f"  {self.format_validation_error(e)}" for e in result.errors)
        if warnings:
            lines.append(f"Warnings ({len(warnings)}):")
            lines.extend(f"  {self.format_validation_warning(w)}" for w in warnings)
        return "\n".join(lines)

    def _format_rust(self, error: L20nError) -> str:
        diagnostic = error.diagnostic
        severity = f"{_RED}error{_RESET}" if self.color else "error"
        if diagnostic is None:
            return f"{severity}: {error}"

        parts = [f"{severity}[{diagnostic.code.name}]: {diagnostic.message}"]

        if isinstance(error, L20nSyntaxError):
            if diagnostic.span is not None:
                span = diagnostic.span
                parts.append(
                    f"  --> line {span.line}, column {span.column} (pos {error.position})"
                )
            else:
                parts.append(f"  --> pos {error.position}")
            parts.extend(self._source_excerpt(error))
        elif isinstance(error, L20nLimitError):
            parts.append(f"  = note: found {error.count}, limit is {error.limit}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)

    def _source_excerpt(self, error: L20nSyntaxError) -> list[str]:
        """Excerpt lines for the source line holding the failure point."""
        if self.sanitize and self.redact_content:
            return ["   | [content redacted]"]

        context, offset = error.context, error.context_offset
        line_start = context.rfind("\n", 0, offset) + 1
        line_end = context.find("\n", offset)
        if line_end == -1:
            line_end = len(context)
        line = self._excerpt(context[line_start:line_end])
        caret = min(offset - line_start, len(line))
        return [f"   | {line}", "   | " + " " * caret + "^"]

    def _format_simple(self, error: L20nError) -> str:
        """Single line, e.g. ``EXPECTED_TOKEN: expected ">" at line 2, column 7``."""
        diagnostic = error.diagnostic
        if diagnostic is None:
            return str(error)

        text = f"{diagnostic.code.name}: {diagnostic.message}"
        if isinstance(error, L20nSyntaxError):
            if error.line is not None:
                text += f" at line {error.line}, column {error.column}"
            else:
                text += f" at pos {error.position}"
            text += f": {self._excerpt(error.context)!r}"
        elif isinstance(error, L20nLimitError):
            text += f" (limit {error.limit})"
        return text

    def _format_json(self, error: L20nError) -> str:
        diagnostic = error.diagnostic
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name if diagnostic else None,
            "code_value": diagnostic.code.value if diagnostic else None,
            "message": diagnostic.message if diagnostic else str(error),
        }

        if isinstance(error, L20nSyntaxError):
            data["position"] = error.position
            data["line"] = error.line
            data["column"] = error.column
            data["context"] = self._excerpt(error.context)
        elif isinstance(error, L20nLimitError):
            data["count"] = error.count
            data["limit"] = error.limit

        if diagnostic is not None and diagnostic.hint:
            data["hint"] = diagnostic.hint

        return json.dumps(data, ensure_ascii=False)

    def _excerpt(self, text: str) -> str:
        """Apply sanitize / redact_content to a source excerpt."""
        if not self.sanitize:
            return text
        if self.redact_content:
            return "[content redacted]"
        if len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
