"""Effects that only copy a computation into state.

An effect with no network call, timer, storage access, promise, await or
cleanup that sets ``filteredItems`` from ``items.filter(...)`` is derived
state: compute it during render instead.
"""

from __future__ import annotations

from react_state_patterns.analyzer.components import (
    Component,
    SourceModule,
    setter_state_name,
)
from react_state_patterns.analyzer.models import Issue, ProjectContext
from react_state_patterns.rules import patterns
from react_state_patterns.rules.base import Rule, make_issue, per_component
from react_state_patterns.tree.nodes import (
    BinaryExpression,
    CallExpression,
    ConditionalExpression,
    LogicalExpression,
    MemberExpression,
    Node,
)
from react_state_patterns.tree.walk import walk

NAME = "detect-state-in-useeffect"


def check_component(
    component: Component, module: SourceModule, context: ProjectContext | None = None,
) -> list[Issue]:
    issues: list[Issue] = []
    for effect in component.effects:
        if effect.has_external_operation:
            continue
        for call in effect.setter_calls:
            if not call.arguments:
                continue
            state_name = setter_state_name(call.callee.name)
            if not is_likely_derived(state_name, call.arguments[0]):
                continue
            issues.append(make_issue(
                NAME, module, call,
                severity="warning",
                message=(
                    f"State '{state_name}' appears to be derived from other state/props "
                    "and should be computed during render"
                ),
                suggestion=(
                    "Remove this useState and compute the value during render. "
                    "If expensive, consider useMemo."
                ),
                fixable=True,
            ))
    return issues


def is_likely_derived(state_name: str, argument: Node) -> bool:
    return (
        patterns.contains_any(state_name.lower(), patterns.DERIVED_NAME_WORDS)
        or contains_computation(argument)
    )


def contains_computation(node: Node) -> bool:
    for n in walk(node):
        if isinstance(n, (ConditionalExpression, LogicalExpression)):
            return True
        if isinstance(n, BinaryExpression) and n.operator in patterns.ARITHMETIC_OPERATORS:
            return True
        if isinstance(n, CallExpression) and isinstance(n.callee, MemberExpression):
            method = n.callee.property
            if method in patterns.ARRAY_TRANSFORM_METHODS or method in patterns.STRING_FORMAT_METHODS:
                return True
    return False


RULE = Rule(
    name=NAME,
    description="Derived state should be computed during render, not stored via useEffect",
    severity="warning",
    check=per_component(check_component),
)
