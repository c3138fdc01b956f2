"""L20n entity introspection for variable extraction.

Reports which runtime variables an entity needs: names used in
``{{ $name }}`` placeables and as ``@cldr.plural($n)`` index operands,
both in the entity value and in each attribute.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from l20nlexengine.enums import VariableContext
from l20nlexengine.syntax.ast import Entity, Index, Value, VariableReference
from l20nlexengine.syntax.visitor import ASTVisitor

__all__ = [
    # Public API
    "EntityIntrospection",
    "VariableInfo",
    "extract_variables",
    "introspect_entity",
    # Internal (accessible for testing)
    "VariableCollector",
]


@dataclass(frozen=True, slots=True)
class VariableInfo:
    """Immutable metadata about one variable use in an entity."""

    name: str
    """Variable name (without $ prefix)."""

    context: VariableContext
    """Placeable or index operand."""

    attribute: str | None = None
    """Attribute the use belongs to; None for the entity value and index."""


@dataclass(frozen=True, slots=True)
class EntityIntrospection:
    """Complete introspection result for an entity."""

    entity_id: str
    """Entity identifier."""

    variables: frozenset[VariableInfo]
    """All variable uses in the entity."""

    attribute_names: tuple[str, ...]
    """Attribute names in source order."""

    has_index: bool
    """Whether the entity or any attribute is index-selected."""

    def get_variable_names(self) -> frozenset[str]:
        """Get set of variable names (without $ prefix)."""
        return frozenset(v.name for v in self.variables)

    def requires_variable(self, name: str) -> bool:
        """Check if the entity uses a specific variable."""
        return any(v.name == name for v in self.variables)


class VariableCollector(ASTVisitor[None]):
    """AST visitor that collects variable uses from entity values.

    Index macros are VariableReference nodes too ("plural"); visit_Index
    records the operand and does not descend into the macro.
    """

    __slots__ = ("attribute", "has_index", "variables")

    def __init__(self) -> None:
        super().__init__()
        self.variables: set[VariableInfo] = set()
        self.attribute: str | None = None
        self.has_index = False

    def visit_VariableReference(self, node: VariableReference) -> None:
        self.variables.add(
            VariableInfo(node.value, VariableContext.PLACEABLE, self.attribute)
        )

    def visit_Index(self, node: Index) -> None:
        self.has_index = True
        self.variables.add(
            VariableInfo(node.operand, VariableContext.INDEX, self.attribute)
        )

    def collect(self, value: Value, attribute: str | None = None) -> None:
        """Collect variables from one value. Plain strings hold none."""
        if isinstance(value, str):
            return
        self.attribute = attribute
        self.visit(value)
        self.attribute = None


def introspect_entity(entity: Entity) -> EntityIntrospection:
    """Introspect an entity and extract its variable metadata.

    Args:
        entity: Entity AST node

    Returns:
        Introspection result for the value, index and every attribute

    Raises:
        TypeError: If entity is not an Entity AST node

    Example:
        >>> from l20nlexengine import parse_l20n
        >>> entity = parse_l20n('<hi "Hello, {{ $name }}!">').entries[0]
        >>> introspect_entity(entity).get_variable_names()
        frozenset({'name'})
    """
    if not isinstance(entity, Entity):
        msg = f"Expected Entity, got {type(entity).__name__}"  # type: ignore[unreachable]
        raise TypeError(msg)

    collector = VariableCollector()
    if entity.index is not None:
        collector.visit(entity.index)
    if entity.value is not None:
        collector.collect(entity.value)

    attributes = entity.attributes or {}
    for name, value in attributes.items():
        collector.collect(value, name)

    return EntityIntrospection(
        entity_id=entity.id,
        variables=frozenset(collector.variables),
        attribute_names=tuple(attributes),
        has_index=collector.has_index,
    )


def extract_variables(entity: Entity) -> frozenset[str]:
    """Extract variable names from an entity (simplified API).

    Example:
        >>> extract_variables(entity)
        frozenset({'n'})
    """
    return introspect_entity(entity).get_variable_names()
