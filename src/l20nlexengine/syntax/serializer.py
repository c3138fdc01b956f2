"""Serialize L20n AST back to L20n syntax.

Converts AST nodes to L20n source code. Useful for:
- Formatters
- Code generators
- Property-based testing (roundtrip: parse → serialize → parse)

Output layout: one entity per line, strings in double quotes, attributes
in insertion order, placeables written as ``{{ $name }}``.

Python 3.13+.
"""

import re

from .ast import ComplexString, Entity, Hash, Index, IndexedValue, Resource, Value
from .parser.primitives import PLACEABLE_PATTERN

__all__ = ["L20nSerializer", "SerializationValidationError", "serialize"]

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_OPERAND = re.compile(r"\w+", re.ASCII)


class SerializationValidationError(ValueError):
    """Raised when an AST cannot be written as L20n that re-parses to it.

    Common causes:
    - Identifiers or hash keys outside [A-Za-z_][A-Za-z0-9_]*
    - Empty Hash, or an Entity with neither value nor attributes
    - Literal text that would be re-read as a {{ placeable }}
    """


def _check_identifier(name: str, context: str) -> None:
    if _IDENTIFIER.fullmatch(name) is None:
        msg = f"Invalid identifier {name!r} in {context}"
        raise SerializationValidationError(msg)


def _escape_text(text: str, context: str) -> str:
    """Escape literal text for a double-quoted string."""
    if PLACEABLE_PATTERN.search(text) is not None:
        msg = f"Literal text in {context} contains a placeable: {text!r}"
        raise SerializationValidationError(msg)
    return text.replace("\\", "\\\\").replace('"', '\\"')


class L20nSerializer:
    """Converts AST back to L20n source string.

    Thread-safe serializer with no mutable instance state.

    Usage:
        >>> from l20nlexengine.syntax import parse, serialize
        >>> serialize(parse('<hello "Hello, world!">'))
        '<hello "Hello, world!">\\n'
    """

    __slots__ = ()

    def serialize(self, resource: Resource) -> str:
        """Serialize a Resource, one entity per line."""
        return "".join(self.serialize_entity(entity) + "\n" for entity in resource.entries)

    def serialize_entity(self, entity: Entity) -> str:
        """Serialize a single Entity.

        Raises:
            SerializationValidationError: If the entity is not representable
        """
        context = f"entity '{entity.id}'"
        _check_identifier(entity.id, context)
        if entity.value is None and not entity.attributes:
            msg = f"{context} has neither value nor attributes"
            raise SerializationValidationError(msg)

        parts = [f"<{entity.id}"]
        if entity.index is not None:
            parts.append(self._serialize_index(entity.index, context))

        if entity.value is not None:
            parts.append(" " + self.serialize_value(entity.value, context))

        for name, value in (entity.attributes or {}).items():
            attr_context = f"{context}.{name}"
            _check_identifier(name, attr_context)
            if isinstance(value, IndexedValue):
                index = self._serialize_index(value.index, attr_context)
                body = self.serialize_value(value.value, attr_context)
                parts.append(f" {name}{index}: {body}")
            else:
                parts.append(f" {name}: {self.serialize_value(value, attr_context)}")

        parts.append(">")
        return "".join(parts)

    def serialize_value(self, value: Value, context: str = "value") -> str:
        """Serialize a value (string, complex string or hash).

        IndexedValue is only valid as an attribute value; its index is
        written by serialize_entity, so here only the wrapped value is emitted.
        """
        match value:
            case str():
                return f'"{_escape_text(value, context)}"'
            case ComplexString(elements=elements):
                body = "".join(
                    _escape_text(element, context)
                    if isinstance(element, str)
                    else self._serialize_placeable(element.value, context)
                    for element in elements
                )
                return f'"{body}"'
            case Hash(entries=entries):
                return self._serialize_hash(entries, context)
            case IndexedValue(value=inner):
                return self.serialize_value(inner, context)

    def _serialize_hash(self, entries: dict[str, Value], context: str) -> str:
        if not entries:
            msg = f"Empty hash in {context}"
            raise SerializationValidationError(msg)
        pairs = []
        for key, value in entries.items():
            _check_identifier(key, context)
            pairs.append(f"{key}: {self.serialize_value(value, f'{context}.{key}')}")
        return "{" + ", ".join(pairs) + "}"

    @staticmethod
    def _serialize_placeable(name: str, context: str) -> str:
        _check_identifier(name, context)
        return "{{ $" + name + " }}"

    @staticmethod
    def _serialize_index(index: Index, context: str) -> str:
        if _OPERAND.fullmatch(index.operand) is None:
            msg = f"Invalid index operand {index.operand!r} in {context}"
            raise SerializationValidationError(msg)
        return f"[@cldr.{index.macro.value}(${index.operand})]"


def serialize(resource: Resource) -> str:
    """Serialize a Resource to L20n source.

    Args:
        resource: Resource AST

    Returns:
        L20n source text, one entity per line

    Raises:
        SerializationValidationError: If the AST is not representable
    """
    return L20nSerializer().serialize(resource)
