"""L20n AST (Abstract Syntax Tree) node definitions.

Values form a closed tagged variant: a plain ``str``, a ComplexString,
a Hash, or an IndexedValue wrapping one of those. Downstream consumers
(resolvers, serializers, linters) can match exhaustively on these cases.

Includes type guards as static methods (eliminates circular imports).

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import NamedTuple, TypeIs

from l20nlexengine.constants import PLURAL_MACRO
from l20nlexengine.enums import ReferenceKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Resource structure
    "Resource",
    "Entity",
    # Values
    "VariableReference",
    "ComplexString",
    "Hash",
    "Index",
    "IndexedValue",
    # Type aliases
    "Value",
    "ASTNode",
]


# ============================================================================
# REFERENCES AND INDEXES
# ============================================================================


@dataclass(frozen=True, slots=True)
class VariableReference:
    """Reference to a runtime-bound name.

    Produced for placeables ({{ $name }} → VariableReference("name")) and as
    the macro half of an Index (VariableReference("plural")).
    """

    value: str
    kind: ReferenceKind = ReferenceKind.ID_OR_VAR

    @staticmethod
    def guard(node: object) -> TypeIs["VariableReference"]:
        """Type guard for VariableReference (used in complex string segments)."""
        return isinstance(node, VariableReference)


class Index(NamedTuple):
    """Selector of an index-selected entity or attribute.

    A two-element sequence: the macro reference and the operand name.
    Only ``@cldr.plural($n)`` exists, so ``macro`` is always
    VariableReference("plural").

    Example:
        [@cldr.plural($count)] → Index(VariableReference("plural"), "count")
    """

    macro: VariableReference
    operand: str

    @classmethod
    def plural(cls, operand: str) -> "Index":
        """Build the index for ``@cldr.plural($operand)``."""
        return cls(VariableReference(PLURAL_MACRO), operand)


# ============================================================================
# VALUES
# ============================================================================


@dataclass(frozen=True, slots=True)
class ComplexString:
    """String value containing at least one placeable.

    Segments alternate between literal text and references in source order.
    Empty literal text between adjacent placeables is not represented.

    Example:
        "Hello {{ $name }}!" → ComplexString(("Hello ", VariableReference("name"), "!"))
    """

    elements: tuple["str | VariableReference", ...]

    @property
    def references(self) -> tuple[VariableReference, ...]:
        """The reference segments, in order."""
        return tuple(e for e in self.elements if isinstance(e, VariableReference))

    @staticmethod
    def guard(value: object) -> TypeIs["ComplexString"]:
        """Type guard for ComplexString."""
        return isinstance(value, ComplexString)


@dataclass(frozen=True, slots=True)
class Hash:
    """Keyed set of value variants.

    Keys keep source order. A duplicated key keeps the later value.

    Example:
        {one: "1 item", other: "{{ $n }} items"}
    """

    entries: dict[str, "Value"]

    def __getitem__(self, key: str) -> "Value":
        return self.entries[key]

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self) -> tuple[str, ...]:
        """Hash keys in source order."""
        return tuple(self.entries)

    @staticmethod
    def guard(value: object) -> TypeIs["Hash"]:
        """Type guard for Hash."""
        return isinstance(value, Hash)


@dataclass(frozen=True, slots=True)
class IndexedValue:
    """Value tagged with its own selector.

    Produced for attributes written as ``key[@cldr.plural($n)]: {...}``.
    """

    value: "Value"
    index: Index

    @staticmethod
    def guard(value: object) -> TypeIs["IndexedValue"]:
        """Type guard for IndexedValue."""
        return isinstance(value, IndexedValue)


# ============================================================================
# TOP-LEVEL ENTRIES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Entity:
    """One localizable unit.

    An entity always has a value, at least one attribute, or both.

    Examples:
        <hello "Hello, world!">
        <button "Save" title: "Save the file">
        <items[@cldr.plural($n)] {one: "1 item", other: "{{ $n }} items"}>
    """

    id: str
    value: "Value | None" = None
    index: Index | None = None
    attributes: dict[str, "Value"] | None = None

    @staticmethod
    def guard(entry: object) -> TypeIs["Entity"]:
        """Type guard for Entity (used in entry filtering)."""
        return isinstance(entry, Entity)


@dataclass(frozen=True, slots=True)
class Resource:
    """Root AST node containing all successfully parsed entities."""

    entries: tuple[Entity, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, entity_id: str) -> Entity | None:
        """Return the last entity with the given id, or None."""
        for entry in reversed(self.entries):
            if entry.id == entity_id:
                return entry
        return None


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Value = str | ComplexString | Hash | IndexedValue

type ASTNode = (
    Resource | Entity | ComplexString | Hash | IndexedValue | VariableReference | Index
)
