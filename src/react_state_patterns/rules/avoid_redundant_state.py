"""State whose name says it is computable from other state.

Deliberately permissive: a ``count``-like name only needs an array-valued
sibling, an ``enabled``-like name a boolean sibling, anything else any sibling.
"""

from __future__ import annotations

from react_state_patterns.analyzer.components import Component, SourceModule, StateEntry
from react_state_patterns.analyzer.models import Issue, ProjectContext
from react_state_patterns.rules import patterns
from react_state_patterns.rules.avoid_state_contradictions import is_boolean_state
from react_state_patterns.rules.base import Rule, make_issue, per_component
from react_state_patterns.tree.nodes import ArrayExpression

NAME = "avoid-redundant-state"


def check_component(
    component: Component, module: SourceModule, context: ProjectContext | None = None,
) -> list[Issue]:
    return [
        make_issue(
            NAME, module, state,
            severity="warning",
            message=f"State '{state.name}' appears to be computable from other state",
            suggestion="Consider computing this value during render instead of storing in state",
            fixable=True,
        )
        for state in component.states
        if is_likely_computed(state, component.states)
    ]


def is_likely_computed(state: StateEntry, siblings: list[StateEntry]) -> bool:
    name = state.name.lower()
    if not patterns.contains_any(name, patterns.COMPUTED_NAME_WORDS):
        return False
    return any(
        is_plausible_source(name, other)
        for other in siblings
        if other is not state
    )


def is_plausible_source(name: str, other: StateEntry) -> bool:
    if patterns.contains_any(name, patterns.COUNT_LIKE_WORDS):
        return (
            isinstance(other.initial_value, ArrayExpression)
            or patterns.contains_any(name, patterns.COLLECTION_NAME_WORDS)
        )
    if patterns.contains_any(name, patterns.TOGGLE_LIKE_WORDS):
        return is_boolean_state(other)
    return True


RULE = Rule(
    name=NAME,
    description="State that can be computed should not be stored separately",
    severity="warning",
    check=per_component(check_component),
)
