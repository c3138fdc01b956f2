"""L20nLexEngine - L20n resource parser with error recovery.

Parses L20n localization resources (entities, attributes, hashes,
plural indexes and {{ placeables }}) into an immutable AST, with optional
per-entry error recovery through an injected error sink.

Public API:
    parse_l20n - Parse L20n source to AST
    serialize_l20n - Serialize AST to L20n source
    L20nParser - Configurable parser (size and placeable limits, simple mode)
    ErrorCollector - Ready-made error sink
    validate_resource - Syntax and semantic validation of a resource

Exceptions:
    L20nError - Base exception class
    L20nSyntaxError - Positioned, entry-level parse errors
    L20nLimitError - Placeable limit exceeded (always raised)

Submodules:
    l20nlexengine.syntax.ast - AST node types (Resource, Entity, Hash, etc.)
    l20nlexengine.introspection - Variable extraction from entities
    l20nlexengine.diagnostics - Error types, sinks and validation results
    l20nlexengine.locale_utils - Locale normalization and CLDR plural data
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    ErrorCollector,
    ErrorSink,
    L20nError,
    L20nLimitError,
    L20nSyntaxError,
)
from .syntax import L20nParser
from .syntax import parse as parse_l20n
from .syntax import serialize as serialize_l20n
from .validation import validate_resource

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("l20nlexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Resource files are plain text; UTF-8 is expected.
__recommended_encoding__ = "UTF-8"

__all__ = [
    "ErrorCollector",
    "ErrorSink",
    "L20nError",
    "L20nLimitError",
    "L20nParser",
    "L20nSyntaxError",
    "__recommended_encoding__",
    "__version__",
    "parse_l20n",
    "serialize_l20n",
    "validate_resource",
]
