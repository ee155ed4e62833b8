"""Initial state objects nested too deeply to update immutably."""

from __future__ import annotations

from react_state_patterns.analyzer.components import Component, SourceModule
from react_state_patterns.analyzer.models import Issue, ProjectContext
from react_state_patterns.rules import patterns
from react_state_patterns.rules.base import Rule, make_issue, per_component
from react_state_patterns.tree.nodes import (
    ArrayExpression,
    MethodDefinition,
    Node,
    ObjectExpression,
    Property,
)

NAME = "avoid-deeply-nested-state"


def check_component(
    component: Component, module: SourceModule, context: ProjectContext | None = None,
) -> list[Issue]:
    issues: list[Issue] = []
    for state in component.states:
        depth = object_depth(state.initial_value)
        if depth <= patterns.MAX_STATE_DEPTH:
            continue
        # id-indexed lookup tables get one extra level
        if depth <= patterns.MAX_NORMALIZED_DEPTH and is_normalized(state.initial_value):
            continue
        issues.append(make_issue(
            NAME, module, state,
            severity="warning",
            message=f"State '{state.name}' is nested {depth} levels deep, which makes updates complex",
            suggestion="Consider flattening the state structure or normalizing the data",
            fixable=False,
        ))
    return issues


def object_depth(node: Node | None, depth: int = 0) -> int:
    """Object literals add a level; arrays are transparent; anything else is a leaf."""
    if isinstance(node, ObjectExpression):
        deepest = depth + 1
        for prop in node.properties:
            if isinstance(prop, Property):
                deepest = max(deepest, object_depth(prop.value, depth + 1))
            elif isinstance(prop, MethodDefinition):
                deepest = max(deepest, depth + 1)
        return deepest
    if isinstance(node, ArrayExpression):
        deepest = depth
        for element in node.elements:
            deepest = max(deepest, object_depth(element, depth))
        return deepest
    return depth


def is_normalized(node: Node | None) -> bool:
    """``{users: {"1": {...}, "2": {...}}}``: some value is an object keyed by short ids."""
    if not isinstance(node, ObjectExpression):
        return False
    for prop in node.properties:
        if not isinstance(prop, Property) or not isinstance(prop.value, ObjectExpression):
            continue
        keys = [p.key for p in prop.value.properties if isinstance(p, Property)]
        if all(k and patterns.ENTITY_KEY_RE.match(k) for k in keys):
            return True
    return False


RULE = Rule(
    name=NAME,
    description="Deeply nested state objects are difficult to update and prone to bugs",
    severity="warning",
    check=per_component(check_component),
)
