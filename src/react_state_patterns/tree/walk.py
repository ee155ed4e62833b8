"""Navigation over the lowered syntax tree."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterator
from functools import cache

from react_state_patterns.tree.nodes import (
    ArrayPattern,
    AssignmentPattern,
    Function,
    Node,
    PatternProperty,
    RestElement,
    VariableDeclarator,
)

_NON_CHILD_FIELDS = {"line", "column", "end_line", "end_column", "parent"}


@cache
def _child_fields(cls: type) -> tuple[str, ...]:
    return tuple(
        f.name for f in dataclasses.fields(cls) if f.name not in _NON_CHILD_FIELDS
    )


def iter_child_nodes(node: Node) -> Iterator[Node]:
    """Yield the direct children of node in source order."""
    for name in _child_fields(type(node)):
        value = getattr(node, name)
        if isinstance(value, Node):
            yield value
        elif isinstance(value, list):
            for item in value:
                if isinstance(item, Node):
                    yield item


def walk(node: Node) -> Iterator[Node]:
    """Pre-order depth-first walk, node itself included."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(list(iter_child_nodes(current))))


def link_parents(root: Node) -> None:
    for node in walk(root):
        for child in iter_child_nodes(node):
            child.parent = node


def traverse(root: Node, handlers: dict[type, Callable[[Node], None]]) -> None:
    """Call handlers[type] for every node under root whose class (or a base) is a key."""
    for node in walk(root):
        for cls in type(node).__mro__:
            handler = handlers.get(cls)
            if handler is not None:
                handler(node)
                break


def ancestors(node: Node, stop: Node | None = None) -> Iterator[Node]:
    """Yield node's ancestors, nearest first, up to (not including) stop."""
    current = node.parent
    while current is not None and current is not stop:
        yield current
        current = current.parent


def enclosing_function(node: Node) -> Function | None:
    for anc in ancestors(node):
        if isinstance(anc, Function):
            return anc
    return None


def is_within(node: Node, container: Node) -> bool:
    return node is container or any(a is container for a in ancestors(node))


def is_binding_identifier(node: Node) -> bool:
    """True when the identifier declares a name instead of reading one."""
    parent = node.parent
    if isinstance(parent, (ArrayPattern, RestElement)):
        return True
    if isinstance(parent, PatternProperty):
        return parent.value is node
    if isinstance(parent, AssignmentPattern):
        return parent.left is node
    if isinstance(parent, VariableDeclarator):
        return parent.target is node
    if isinstance(parent, Function):
        return any(p is node for p in parent.params)
    return False
