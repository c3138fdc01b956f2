"""Shared constants for L20nLexEngine.

This module provides centralized configuration constants used across
the syntax, validation and serialization packages. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Placeable limits: Resource-wide abuse protection
- Diagnostics: Error context extraction

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # Placeable limits
    "MAX_PLACEABLES",
    # Diagnostics
    "ERROR_CONTEXT_LENGTH",
    # Grammar
    "PLURAL_MACRO",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MB).
# Prevents DoS attacks via unbounded memory allocation from large resources.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# PLACEABLE LIMITS
# ============================================================================

# Maximum number of {{ placeables }} in a single string value.
# A string with exactly this many placeables is accepted; one more raises
# L20nLimitError, which always propagates (never routed to an error sink).
MAX_PLACEABLES: int = 100

# ============================================================================
# DIAGNOSTICS
# ============================================================================

# Number of characters past the failure point included in error context.
ERROR_CONTEXT_LENGTH: int = 10

# ============================================================================
# GRAMMAR
# ============================================================================

# Name of the only selector macro the index syntax supports: @cldr.plural($n)
PLURAL_MACRO: str = "plural"
