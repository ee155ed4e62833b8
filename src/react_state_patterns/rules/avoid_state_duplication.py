"""State that copies data already held in props or in other state."""

from __future__ import annotations

from react_state_patterns.analyzer.components import (
    Component,
    SourceModule,
    StateEntry,
    callee_identifier,
)
from react_state_patterns.analyzer.models import Issue, ProjectContext
from react_state_patterns.rules.base import Rule, make_issue, per_component
from react_state_patterns.tree.nodes import (
    CallExpression,
    Identifier,
    MemberExpression,
    Node,
    ObjectExpression,
)
from react_state_patterns.tree.walk import traverse, walk

NAME = "avoid-state-duplication"

SINGLE_SOURCE_HINT = "Consider using a single source of truth or computing derived values"


def check_component(
    component: Component, module: SourceModule, context: ProjectContext | None = None,
) -> list[Issue]:
    issues = check_initializers(component, module)
    issues.extend(check_cross_state_updates(component, module))
    issues.extend(check_selective_usage(component, module))
    return issues


# ── Initialised from props / other state ──────────────────────────────────

def check_initializers(component: Component, module: SourceModule) -> list[Issue]:
    props = component.props
    states_by_name = {s.name: s for s in component.states}
    issues: list[Issue] = []

    for state in component.states:
        init = state.initial_value
        prop = prop_reference(init, props.object_name)
        if prop is not None and prop in props.names:
            issues.append(make_issue(
                NAME, module, state,
                severity="warning",
                message=(
                    f"State '{state.name}' is initialized from prop '{prop}', "
                    "which can cause synchronization issues"
                ),
                suggestion="Use the prop directly or derive state from props in an effect if needed",
            ))

        if isinstance(init, MemberExpression) and isinstance(init.object, Identifier):
            source = init.object.name
            if source in states_by_name:
                issues.append(make_issue(
                    NAME, module, state,
                    severity="warning",
                    message=(
                        f"State '{state.name}' is initialized from "
                        f"'{source}.{init.property or 'property'}', creating duplication"
                    ),
                    suggestion=SINGLE_SOURCE_HINT,
                ))
    return issues


def prop_reference(node: Node | None, props_object: str | None) -> str | None:
    """``title`` -> "title"; ``props.title`` -> "title"."""
    if isinstance(node, Identifier):
        return node.name
    if (
        isinstance(node, MemberExpression)
        and isinstance(node.object, Identifier)
        and node.object.name in ("props", props_object)
    ):
        return node.property
    return None


# ── setX(y) where y is another state ───────────────────────────────────────

def check_cross_state_updates(component: Component, module: SourceModule) -> list[Issue]:
    by_setter = {s.setter_name: s for s in component.states}
    by_name = {s.name: s for s in component.states}
    issues: list[Issue] = []

    for node in walk(component.node):
        if not isinstance(node, CallExpression) or len(node.arguments) != 1:
            continue
        target = by_setter.get(callee_identifier(node) or "")
        arg = node.arguments[0]
        if target is None or not isinstance(arg, Identifier):
            continue
        source = by_name.get(arg.name)
        if source is None or source is target:
            continue
        issues.append(make_issue(
            NAME, module, node,
            severity="warning",
            message=(
                f"State '{target.name}' is being set from state '{source.name}', "
                "creating duplication"
            ),
            suggestion=SINGLE_SOURCE_HINT,
        ))
    return issues


# ── Large objects read through a few fields ────────────────────────────────

def check_selective_usage(component: Component, module: SourceModule) -> list[Issue]:
    by_name = {s.name: s for s in component.states}
    used: dict[str, list[str]] = {}

    def record(node: MemberExpression) -> None:
        if isinstance(node.object, Identifier) and node.object.name in by_name and node.property:
            fields = used.setdefault(node.object.name, [])
            if node.property not in fields:
                fields.append(node.property)

    traverse(component.node, {MemberExpression: record})

    issues: list[Issue] = []
    for name, fields in used.items():
        state: StateEntry = by_name[name]
        init = state.initial_value
        if not isinstance(init, ObjectExpression) or len(fields) > 2:
            continue
        total = len(init.properties)
        if total > 3 and len(fields) < total / 2:
            issues.append(make_issue(
                NAME, module, state,
                severity="info",
                message=f"State '{name}' stores {total} properties but only uses {', '.join(fields)}",
                suggestion=(
                    "Consider storing only the needed properties or using a ref "
                    "for non-reactive data"
                ),
            ))
    return issues


RULE = Rule(
    name=NAME,
    description="State should not duplicate data that exists elsewhere",
    severity="warning",
    check=per_component(check_component),
)
