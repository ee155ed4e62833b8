"""Many setters updated together, conditionally, or from previous values.

Past a certain amount of coordination a reducer (or a state machine, when the
project already ships one) makes the transitions explicit.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from react_state_patterns.analyzer.components import Component, SourceModule, callee_identifier
from react_state_patterns.analyzer.models import Issue, ProjectContext
from react_state_patterns.rules.base import Rule, make_issue, per_component
from react_state_patterns.tree.nodes import (
    BlockStatement,
    CallExpression,
    ConditionalExpression,
    Function,
    IfStatement,
    Node,
    SwitchStatement,
)
from react_state_patterns.tree.walk import ancestors, enclosing_function, walk

NAME = "prefer-explicit-transitions"


@dataclass
class SetterProfile:
    setter: str
    call_sites: int = 0
    conditional_updates: int = 0
    depends_on_previous: bool = False
    updated_with: list[str] = field(default_factory=list)


def check_component(
    component: Component, module: SourceModule, context: ProjectContext | None = None,
) -> list[Issue]:
    if component.uses_reducer:
        return []
    profiles = profile_setters(component)
    level = complexity(len(component.states), profiles)
    if level == "simple":
        return []
    return [make_issue(
        NAME, module, component.node,
        severity="info",
        message=f"Component has {len(component.states)} state variables with complex update patterns",
        suggestion=suggestion_for(level, context),
        fixable=False,
    )]


def profile_setters(component: Component) -> dict[str, SetterProfile]:
    profiles = {s.setter_name: SetterProfile(s.setter_name) for s in component.states}
    calls = [
        n for n in walk(component.node)
        if isinstance(n, CallExpression) and callee_identifier(n) in profiles
    ]
    for call in calls:
        profile = profiles[call.callee.name]
        profile.call_sites += 1
        if call.arguments and isinstance(call.arguments[0], Function):
            profile.depends_on_previous = True
        if _is_conditional(call, component.node):
            profile.conditional_updates += 1
        profile.updated_with.extend(_sibling_setters(call, calls))
    return profiles


def _is_conditional(call: CallExpression, component: Node) -> bool:
    return any(
        isinstance(a, (IfStatement, ConditionalExpression, SwitchStatement))
        for a in ancestors(call, stop=component)
    )


def _nearest_block(node: Node) -> Node | None:
    for anc in ancestors(node):
        if isinstance(anc, BlockStatement):
            return anc
    return None


def _sibling_setters(call: CallExpression, calls: list[CallExpression]) -> list[str]:
    """Other setters called in the same function and the same block."""
    fn = enclosing_function(call)
    block = _nearest_block(call)
    names: list[str] = []
    for other in calls:
        if other is call or enclosing_function(other) is not fn:
            continue
        if _nearest_block(other) is block and other.callee.name not in names:
            names.append(other.callee.name)
    return names


def complexity(state_count: int, profiles: dict[str, SetterProfile]) -> str:
    related = sum(1 for p in profiles.values() if len(p.updated_with) >= 2)
    conditional = sum(1 for p in profiles.values() if p.conditional_updates >= 2)
    coupled = sum(
        1 for p in profiles.values()
        if p.depends_on_previous and len(p.updated_with) >= 2
    )

    if state_count >= 8 or coupled >= 3 or (conditional >= 3 and state_count >= 4):
        return "complex"
    if (
        state_count >= 4
        or related >= 2
        or (conditional >= 2 and state_count >= 3)
        or coupled >= 2
    ):
        return "moderate"
    return "simple"


def suggestion_for(level: str, context: ProjectContext | None) -> str:
    has_xstate = bool(context and context.has_xstate)
    has_store = bool(context and context.has_xstate_store)

    if level == "moderate":
        if has_store:
            return (
                "Consider using @xstate/store (already in your project) "
                "for atomic, event-driven state updates"
            )
        if has_xstate:
            return "Consider using useReducer or @xstate/store for better state organization"
        return "Consider using useReducer to make state transitions more explicit and predictable"

    if has_xstate:
        return (
            "Consider using XState (already in your project) for complex state "
            "orchestration and visual modeling"
        )
    if has_store:
        return (
            "Consider using @xstate/store (already in your project) or upgrading "
            "to full XState for complex state machines"
        )
    return "Consider using useReducer or exploring XState for complex state orchestration"


RULE = Rule(
    name=NAME,
    description="Complex state logic with multiple updates should use useReducer",
    severity="info",
    check=per_component(check_component),
)
