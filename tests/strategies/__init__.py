"""Hypothesis strategies for L20nLexEngine property-based testing.

Usage:
    from tests.strategies import l20n_identifiers, l20n_resources
"""

from .l20n import (
    L20N_IDENTIFIER_FIRST_CHARS,
    L20N_IDENTIFIER_REST_CHARS,
    L20N_SAFE_CHARS,
    PLURAL_CATEGORIES,
    l20n_attribute_values,
    l20n_chaos_source,
    l20n_complex_strings,
    l20n_entities,
    l20n_hashes,
    l20n_identifiers,
    l20n_indexes,
    l20n_plural_hashes,
    l20n_resources,
    l20n_safe_text,
    l20n_strings,
    l20n_values,
)

__all__ = [
    "L20N_IDENTIFIER_FIRST_CHARS",
    "L20N_IDENTIFIER_REST_CHARS",
    "L20N_SAFE_CHARS",
    "PLURAL_CATEGORIES",
    "l20n_attribute_values",
    "l20n_chaos_source",
    "l20n_complex_strings",
    "l20n_entities",
    "l20n_hashes",
    "l20n_identifiers",
    "l20n_indexes",
    "l20n_plural_hashes",
    "l20n_resources",
    "l20n_safe_text",
    "l20n_strings",
    "l20n_values",
]
