"""Hypothesis strategies for L20n syntax and AST nodes.

String strategies produce source text for the parser; node strategies
produce ASTs that serialize() can render and parse() reads back
unchanged.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - l20n_chaos_source: emits strategy=chaos_{pattern}
    - l20n_values: emits value={kind}
"""

from __future__ import annotations

import string

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from l20nlexengine.syntax.ast import (
    ComplexString,
    Entity,
    Hash,
    Index,
    IndexedValue,
    Resource,
    Value,
    VariableReference,
)

# =============================================================================
# Constants
# =============================================================================

L20N_IDENTIFIER_FIRST_CHARS = string.ascii_letters + "_"
L20N_IDENTIFIER_REST_CHARS = string.ascii_letters + string.digits + "_"

# Text that needs no escaping and cannot form a placeable: no quotes,
# backslashes or braces.
L20N_SAFE_CHARS = string.ascii_letters + string.digits + " .,!?-:;()<>[]@$#%&*+=/"

PLURAL_CATEGORIES = ("zero", "one", "two", "few", "many", "other")


# =============================================================================
# String Strategies (for parsing)
# =============================================================================


@composite
def l20n_identifiers(draw: st.DrawFn) -> str:
    """Generate valid L20n identifiers: [A-Za-z_][A-Za-z0-9_]*"""
    first = draw(st.sampled_from(L20N_IDENTIFIER_FIRST_CHARS))
    rest = draw(st.text(alphabet=L20N_IDENTIFIER_REST_CHARS, max_size=20))
    return first + rest


def l20n_safe_text(*, min_size: int = 0) -> st.SearchStrategy[str]:
    """Generate literal string content that needs no escaping."""
    return st.text(alphabet=L20N_SAFE_CHARS, min_size=min_size, max_size=30)


@composite
def l20n_chaos_source(draw: st.DrawFn) -> str:
    """Generate arbitrary mixes of valid and broken entries.

    Events emitted:
    - strategy=chaos_{pattern}: Which fragment family was drawn
    """
    fragments = (
        '<a "x">',
        "<b {one: 'x', other: 'y'}>",
        '<c[@cldr.plural($n)] {one: "a", other: "b"}>',
        "/* note */",
        "<",
        ">",
        '"',
        "{{",
        "/*",
        "<d",
        "<e ",
        '<f "unterminated',
        "<g[@x]>",
        '<h "\\q">',
        "stray",
    )
    pattern = draw(st.sampled_from(["fragments", "text", "mixed"]))
    event(f"strategy=chaos_{pattern}")
    if pattern == "fragments":
        parts = draw(st.lists(st.sampled_from(fragments), max_size=10))
        return " ".join(parts)
    if pattern == "text":
        return draw(st.text(max_size=80))
    parts = draw(
        st.lists(st.one_of(st.sampled_from(fragments), st.text(max_size=5)), max_size=10)
    )
    return "".join(parts)


# =============================================================================
# AST Node Strategies (for serializer roundtrips)
# =============================================================================


@composite
def l20n_complex_strings(draw: st.DrawFn) -> ComplexString:
    """Generate a ComplexString with at least one placeable.

    Literal segments are non-empty and never adjacent, matching what the
    parser produces.
    """
    names = draw(st.lists(l20n_identifiers(), min_size=1, max_size=4))
    elements: list[str | VariableReference] = []
    for name in names:
        text = draw(l20n_safe_text())
        if text:
            elements.append(text)
        elements.append(VariableReference(name))
    tail = draw(l20n_safe_text())
    if tail:
        elements.append(tail)
    return ComplexString(tuple(elements))


def l20n_strings() -> st.SearchStrategy[str | ComplexString]:
    """Generate string values, plain or complex."""
    return st.one_of(l20n_safe_text(), l20n_complex_strings())


def l20n_hashes(max_depth: int = 2) -> st.SearchStrategy[Hash]:
    """Generate non-empty hashes, nested up to ``max_depth`` levels."""
    leaf = l20n_strings()
    values = leaf
    if max_depth > 1:
        values = st.one_of(leaf, l20n_hashes(max_depth - 1))
    return st.dictionaries(l20n_identifiers(), values, min_size=1, max_size=4).map(Hash)


@composite
def l20n_plural_hashes(draw: st.DrawFn) -> Hash:
    """Generate a hash keyed by CLDR plural categories."""
    keys = draw(
        st.lists(st.sampled_from(PLURAL_CATEGORIES), min_size=1, max_size=6, unique=True)
    )
    return Hash({key: draw(l20n_strings()) for key in keys})


@composite
def l20n_indexes(draw: st.DrawFn) -> Index:
    """Generate a plural index with an identifier operand."""
    return Index.plural(draw(l20n_identifiers()))


@composite
def l20n_values(draw: st.DrawFn) -> Value:
    """Generate an entity value.

    Events emitted:
    - value={kind}: str, complex or hash
    """
    kind = draw(st.sampled_from(["str", "complex", "hash"]))
    event(f"value={kind}")
    if kind == "str":
        return draw(l20n_safe_text())
    if kind == "complex":
        return draw(l20n_complex_strings())
    return draw(l20n_hashes())


@composite
def l20n_attribute_values(draw: st.DrawFn) -> Value:
    """Generate an attribute value, sometimes index-selected."""
    if draw(st.booleans()):
        return IndexedValue(draw(l20n_plural_hashes()), draw(l20n_indexes()))
    return draw(l20n_values())


@composite
def l20n_entities(draw: st.DrawFn) -> Entity:
    """Generate a serializable Entity.

    An indexed entity always has a value; otherwise an entity has a value,
    attributes, or both.
    """
    entity_id = draw(l20n_identifiers())
    attributes = draw(
        st.dictionaries(l20n_identifiers(), l20n_attribute_values(), max_size=3)
    ) or None

    if draw(st.booleans()):
        return Entity(
            id=entity_id,
            value=draw(l20n_plural_hashes()),
            index=draw(l20n_indexes()),
            attributes=attributes,
        )

    if attributes is None or draw(st.booleans()):
        return Entity(id=entity_id, value=draw(l20n_values()), attributes=attributes)
    return Entity(id=entity_id, attributes=attributes)


def l20n_resources() -> st.SearchStrategy[Resource]:
    """Generate a Resource of serializable entities."""
    return st.lists(l20n_entities(), max_size=5).map(lambda entries: Resource(tuple(entries)))
