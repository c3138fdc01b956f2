"""Diagnostic system for L20n errors.

Provides structured error diagnostics with codes, spans and hints, the
exception hierarchy, and the error sink protocol used for recoverable
parse errors.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import L20nError, L20nLimitError, L20nSyntaxError
from .formatter import DiagnosticFormatter, OutputFormat
from .sink import ErrorCollector, ErrorSink
from .templates import ErrorTemplate
from .validation import ValidationError, ValidationResult, ValidationWarning

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCollector",
    "ErrorSink",
    "ErrorTemplate",
    "L20nError",
    "L20nLimitError",
    "L20nSyntaxError",
    "OutputFormat",
    "SourceSpan",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]
