"""Visitor pattern for AST traversal.

Enables tools to traverse the L20n AST without modifying node classes.

NOTE: This module follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_NodeName (PascalCase) rather than visit_node_name
(snake_case), consistent with Python's AST visitor pattern.

Plain ``str`` values are leaves and are not dispatched.

Python 3.13+.
"""

from collections.abc import Iterator
from typing import ClassVar

from .ast import (
    ASTNode,
    ComplexString,
    Entity,
    Hash,
    Index,
    IndexedValue,
    Resource,
    VariableReference,
)

__all__ = ["ASTVisitor", "iter_child_nodes"]


def iter_child_nodes(node: ASTNode) -> Iterator[ASTNode]:
    """Yield the direct child nodes of ``node`` in source order.

    String leaves are skipped.
    """
    match node:
        case Resource(entries=entries):
            yield from entries
        case Entity(value=value, index=index, attributes=attributes):
            if index is not None:
                yield index
            if value is not None and not isinstance(value, str):
                yield value
            for attr_value in (attributes or {}).values():
                if not isinstance(attr_value, str):
                    yield attr_value
        case ComplexString(elements=elements):
            yield from (e for e in elements if isinstance(e, VariableReference))
        case Hash(entries=entries):
            yield from (v for v in entries.values() if not isinstance(v, str))
        case IndexedValue(value=value, index=index):
            yield index
            if not isinstance(value, str):
                yield value
        case Index(macro=macro):
            yield macro
        case VariableReference():
            return


class ASTVisitor[T = ASTNode]:
    """Base visitor for traversing the L20n AST.

    Follows stdlib ast.NodeVisitor convention: generic_visit() automatically
    traverses all child nodes. Override visit_NodeType methods to add custom
    behavior.

    Uses a class-level dispatch table built once per subclass via
    __init_subclass__.

    Example:
        >>> class CountEntities(ASTVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.count = 0
        ...
        ...     def visit_Entity(self, node: Entity) -> ASTNode:
        ...         self.count += 1
        ...         return self.generic_visit(node)
        ...
        >>> visitor = CountEntities()
        >>> visitor.visit(resource)
        >>> print(visitor.count)
    """

    __slots__ = ()

    # Class-level dispatch table (method names only, not bound methods)
    _class_visit_methods: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {
            name[6:]: name
            for name in dir(cls)
            if name.startswith("visit_") and name != "visit"
        }

    def visit(self, node: ASTNode) -> T:
        """Visit a node, dispatching to visit_<ClassName> when defined."""
        method_name = self._class_visit_methods.get(type(node).__name__)
        if method_name is not None:
            return getattr(self, method_name)(node)  # type: ignore[no-any-return]
        return self.generic_visit(node)

    def generic_visit(self, node: ASTNode) -> T:
        """Visit all children of ``node`` and return the node itself."""
        for child in iter_child_nodes(node):
            self.visit(child)
        return node  # type: ignore[return-value]
