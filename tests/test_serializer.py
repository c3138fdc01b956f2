"""Tests for the L20n serializer.

Covers output layout, escaping, rejection of unrepresentable ASTs and
parse → serialize → parse stability.
"""

from __future__ import annotations

import pytest
from hypothesis import given

from l20nlexengine import parse_l20n, serialize_l20n
from l20nlexengine.syntax import SerializationValidationError, parse, serialize
from l20nlexengine.syntax.ast import (
    ComplexString,
    Entity,
    Hash,
    Index,
    IndexedValue,
    Resource,
    VariableReference,
)
from l20nlexengine.syntax.serializer import L20nSerializer
from tests.strategies import l20n_resources


class TestSerializeLayout:
    """Test the rendered text."""

    def test_simple_entity(self) -> None:
        """One entity per line, double-quoted value."""
        resource = Resource((Entity(id="hello", value="Hello, world!"),))

        assert serialize(resource) == '<hello "Hello, world!">\n'

    def test_empty_resource(self) -> None:
        """An empty resource serializes to an empty string."""
        assert serialize(Resource(())) == ""

    def test_attributes_in_order(self) -> None:
        """Attributes follow the value in insertion order."""
        entity = Entity(id="b", value="Save", attributes={"title": "T", "key": "S"})

        assert L20nSerializer().serialize_entity(entity) == '<b "Save" title: "T" key: "S">'

    def test_attributes_only(self) -> None:
        """An entity without a value starts directly with attributes."""
        entity = Entity(id="b", attributes={"title": "T"})

        assert L20nSerializer().serialize_entity(entity) == '<b title: "T">'

    def test_placeables(self) -> None:
        """Placeables render as {{ $name }}."""
        value = ComplexString(("Hi ", VariableReference("name"), "!"))

        assert L20nSerializer().serialize_value(value) == '"Hi {{ $name }}!"'

    def test_indexed_entity_and_hash(self) -> None:
        """Index renders after the id; hashes render inline."""
        entity = Entity(
            id="items",
            value=Hash({"one": "item", "other": "items"}),
            index=Index.plural("n"),
        )

        assert L20nSerializer().serialize_entity(entity) == (
            '<items[@cldr.plural($n)] {one: "item", other: "items"}>'
        )

    def test_indexed_attribute(self) -> None:
        """An attribute's own index renders after its name."""
        entity = Entity(
            id="a",
            attributes={"t": IndexedValue(Hash({"one": "x"}), Index.plural("n"))},
        )

        assert L20nSerializer().serialize_entity(entity) == (
            '<a t[@cldr.plural($n)]: {one: "x"}>'
        )

    def test_escapes(self) -> None:
        """Backslashes and double quotes are escaped."""
        assert L20nSerializer().serialize_value('say "a\\b"') == '"say \\"a\\\\b\\""'


class TestSerializeValidation:
    """Test rejection of ASTs that would not re-parse."""

    def test_invalid_entity_id(self) -> None:
        """Ids outside the identifier grammar are rejected."""
        with pytest.raises(SerializationValidationError, match="Invalid identifier"):
            serialize(Resource((Entity(id="bad-id", value="x"),)))

    def test_empty_entity(self) -> None:
        """An entity needs a value or attributes."""
        with pytest.raises(SerializationValidationError, match="neither value nor attributes"):
            serialize(Resource((Entity(id="a"),)))

    def test_empty_hash(self) -> None:
        """Empty hashes cannot be written."""
        with pytest.raises(SerializationValidationError, match="Empty hash"):
            serialize(Resource((Entity(id="a", value=Hash({})),)))

    def test_literal_placeable(self) -> None:
        """Literal text shaped like a placeable would re-parse as one."""
        with pytest.raises(SerializationValidationError, match="contains a placeable"):
            serialize(Resource((Entity(id="a", value="{{ $x }}"),)))

    def test_literal_placeable_in_hash_value(self) -> None:
        """The placeable check reaches nested hash values."""
        value = Hash({"one": "x", "other": "{{n}}"})
        with pytest.raises(SerializationValidationError, match="contains a placeable"):
            serialize(Resource((Entity(id="a", value=value),)))

    def test_is_value_error(self) -> None:
        """SerializationValidationError is a ValueError."""
        assert issubclass(SerializationValidationError, ValueError)


class TestRoundtrip:
    """Test parse/serialize stability."""

    def test_realistic_resource(self) -> None:
        """parse → serialize → parse yields the same AST."""
        source = """
/* comment */
<hello 'Hello, {{ name }}!'>
<items[@cldr.plural($n)] {one: "{{ $n }} item", other: "{{ $n }} items",}>
<save "Save" title: "Save \\"file\\"" accesskey: 'S'>
"""
        resource = parse_l20n(source)

        assert parse_l20n(serialize_l20n(resource)) == resource

    @pytest.mark.parametrize("text", ["{{ }}", "{{", "a {{ 1 }} b", "{{ $ }}", "x }} {{ y"])
    def test_braces_that_are_not_placeables(self, text: str) -> None:
        """Literal braces that never formed a placeable are written back as-is."""
        resource = parse_l20n(f'<a "{text}">')
        assert resource.entries[0].value == text

        output = serialize_l20n(resource)

        assert output == f'<a "{text}">\n'
        assert parse_l20n(output) == resource

    @given(l20n_resources())
    def test_serialize_then_parse(self, resource: Resource) -> None:
        """Any generated AST survives a serialize → parse cycle."""
        assert parse(serialize(resource)) == resource

    @given(l20n_resources())
    def test_serialize_is_idempotent(self, resource: Resource) -> None:
        """Serializing the re-parsed AST gives identical text."""
        text = serialize(resource)

        assert serialize(parse(text)) == text
