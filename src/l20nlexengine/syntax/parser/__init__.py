"""L20n parser module.

This module provides the main L20nParser class and related parsing
utilities organized into focused submodules.

Module Organization:
- core.py: Main L20nParser class, resource loop and error recovery
- primitives.py: Identifiers, quoted strings, escapes, placeables
- whitespace.py: Whitespace skipping
- rules.py: Grammar rules (values, hashes, indexes, entities, comments)

Public API:
    L20nParser: Main parser class
    ParseContext: Per-parse configuration (advanced usage)
"""

from l20nlexengine.syntax.parser.core import L20nParser
from l20nlexengine.syntax.parser.rules import ParseContext

__all__ = ["L20nParser", "ParseContext"]
